"""Define the block axes about which grasps are sampled and how each axis orients the gripper.

Two tables make the sampling policy explicit:

- AXIS_CAPABILITIES maps each (axis, direction) pair to whether it is supported.
- AXIS_COMPOSITIONS maps each supported axis to a pure function that builds the grasp pose
    (in the block's frame) for a point on the sampling ring.

The two supported axes use different rotation orderings and sign conventions; swapping them
produces mirrored or inverted grasps.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple

import numpy as np

from block_grasps.spatial import Point3D, Pose3D, Quaternion

UNIT_X = (1.0, 0.0, 0.0)
UNIT_Y = (0.0, 1.0, 0.0)
UNIT_Z = (0.0, 0.0, 1.0)


class GraspAxis(Enum):
    """A principal axis of the block around which grasps are sampled."""

    X = "x"
    Y = "y"
    Z = "z"


class GraspDirection(Enum):
    """Side of the block from which the gripper approaches."""

    UP = "up"
    DOWN = "down"

    @property
    def flip_rad(self) -> float:
        """Retrieve the rotation (radians) that flips the gripper for this direction."""
        return np.pi if self is GraspDirection.DOWN else 0.0


SamplingPass = Tuple[GraspAxis, GraspDirection]
"""An (axis, direction) pair defining one pass of the axis sampler."""

AxisComposition = Callable[[float, float, float], Pose3D]
"""Maps (theta, flip angle, radius) to a grasp pose expressed in the block's frame."""


def compose_x_axis_grasp(theta_rad: float, flip_rad: float, radius_m: float) -> Pose3D:
    """Compute the block-frame grasp pose for a point sampled around the block's x-axis."""
    orientation = (
        Quaternion.from_axis_angle(UNIT_X, theta_rad)
        * Quaternion.from_axis_angle(UNIT_Z, -0.5 * np.pi)
        * Quaternion.from_axis_angle(UNIT_X, flip_rad)
    )
    position = Point3D(0.0, radius_m * np.cos(theta_rad), radius_m * np.sin(theta_rad))
    return Pose3D(position, orientation)


def compose_y_axis_grasp(theta_rad: float, flip_rad: float, radius_m: float) -> Pose3D:
    """Compute the block-frame grasp pose for a point sampled around the block's y-axis."""
    lateral = Quaternion.from_axis_angle(UNIT_Y, np.pi - theta_rad)
    orientation = lateral * Quaternion.from_axis_angle(UNIT_X, flip_rad)
    position = Point3D(radius_m * np.cos(theta_rad), 0.0, radius_m * np.sin(theta_rad))
    return Pose3D(position, orientation)


AXIS_COMPOSITIONS: Dict[GraspAxis, AxisComposition] = {
    GraspAxis.X: compose_x_axis_grasp,
    GraspAxis.Y: compose_y_axis_grasp,
}
"""Grasp-pose composition function for each axis that supports sampling."""

AXIS_CAPABILITIES: Dict[SamplingPass, bool] = {
    (GraspAxis.X, GraspDirection.UP): True,
    (GraspAxis.X, GraspDirection.DOWN): True,
    (GraspAxis.Y, GraspDirection.UP): True,
    (GraspAxis.Y, GraspDirection.DOWN): True,
    (GraspAxis.Z, GraspDirection.UP): False,
    (GraspAxis.Z, GraspDirection.DOWN): False,
}
"""Whether grasps can be sampled for each (axis, direction) pair."""

DEFAULT_SAMPLING_PASSES: Tuple[SamplingPass, ...] = ((GraspAxis.Y, GraspDirection.DOWN),)
"""Sampling passes run when the caller doesn't request any (the lateral axis, from below)."""


def is_supported(axis: GraspAxis, direction: GraspDirection) -> bool:
    """Check whether grasps can be sampled about the given axis from the given direction."""
    return AXIS_CAPABILITIES.get((axis, direction), False) and axis in AXIS_COMPOSITIONS


def parse_sampling_pass(axis_name: str, direction_name: str) -> SamplingPass:
    """Parse a sampling pass from case-insensitive names such as ("y", "down").

    :raises ValueError: If either name doesn't match a known axis or direction
    """
    try:
        axis = GraspAxis(axis_name.lower())
        direction = GraspDirection(direction_name.lower())
    except ValueError as err:
        raise ValueError(f"Unrecognized sampling pass: ({axis_name}, {direction_name})") from err

    return (axis, direction)
