"""Define the errors raised while generating grasp candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from block_grasps.grasping.axes import GraspAxis, GraspDirection


class GraspGenerationError(Exception):
    """Base class for errors that abort the generation of a batch of grasp candidates."""


class UnsupportedAxisError(GraspGenerationError):
    """An error raised when grasps are requested for an unsupported (axis, direction) pair."""

    def __init__(self, axis: GraspAxis, direction: GraspDirection) -> None:
        """Initialize the error for the given unsupported sampling pass.

        :param axis: Block axis around which grasps were requested
        :param direction: Direction from which the gripper was to approach
        """
        super().__init__(
            f"Grasp sampling about the {axis.name} axis ({direction.name}) is not supported.",
        )
        self.axis = axis
        self.direction = direction


class InvalidConfigurationError(GraspGenerationError, ValueError):
    """An error raised when a grasp configuration violates its constraints."""


class TransformCompositionError(GraspGenerationError):
    """An error raised when composing poses fails to produce a valid rigid transform."""
