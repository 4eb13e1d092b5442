"""Define the sampler that spaces grasp angles evenly around a block axis."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from block_grasps.grasping.axes import AXIS_COMPOSITIONS, GraspAxis, GraspDirection, is_supported
from block_grasps.grasping.errors import InvalidConfigurationError, UnsupportedAxisError
from block_grasps.spatial import Point3D, Pose3D


@dataclass(frozen=True)
class AxisSample:
    """One grasp sampled around a block axis, expressed in the block's frame."""

    index: int
    """Position of the sample within its pass (0 to resolution, inclusive)."""

    theta_rad: float
    """Angle (radians) of the sample around the sampling ring, in [0, pi]."""

    flip_rad: float
    """Rotation (radians) selecting approach from above (0) or below (pi)."""

    local_pose: Pose3D
    """Grasp pose w.r.t. the block, before the end-effector correction is applied."""

    @property
    def local_point(self) -> Point3D:
        """Retrieve the position of the sample on the ring w.r.t. the block."""
        return self.local_pose.position


def sample_angles(resolution: int) -> list[float]:
    """Compute resolution + 1 evenly spaced angles (radians) covering [0, pi].

    :param resolution: Number of angular steps across the half-turn (must be at least 1)
    :raises InvalidConfigurationError: If the resolution is less than one
    """
    if resolution < 1:
        raise InvalidConfigurationError(f"Angle resolution must be at least 1, got {resolution}.")

    step_rad = np.pi / resolution
    return [i * step_rad for i in range(resolution + 1)]


def sample_axis(
    axis: GraspAxis,
    direction: GraspDirection,
    resolution: int,
    radius_m: float,
) -> list[AxisSample]:
    """Sample grasps spanning a half-turn around the given block axis.

    :param axis: Block axis around which grasps are sampled
    :param direction: Side of the block from which the gripper approaches
    :param resolution: Number of angular steps across the half-turn
    :param radius_m: Distance (meters) from the block's center to the sampling ring
    :return: List of resolution + 1 samples in order of increasing angle
    :raises UnsupportedAxisError: If the (axis, direction) pair cannot be sampled
    :raises InvalidConfigurationError: If the resolution is less than one
    """
    if not is_supported(axis, direction):
        raise UnsupportedAxisError(axis, direction)

    compose = AXIS_COMPOSITIONS[axis]
    flip_rad = direction.flip_rad

    return [
        AxisSample(i, theta, flip_rad, compose(theta, flip_rad, radius_m))
        for i, theta in enumerate(sample_angles(resolution))
    ]
