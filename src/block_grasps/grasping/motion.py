"""Define functions to interpolate the straight-line approach and retreat of a grasp."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from block_grasps.grasping.candidates import GraspCandidate, GripperTranslation
    from block_grasps.spatial import Pose3D


def direction_in_pose_frame(pose: Pose3D, translation: GripperTranslation) -> NDArray[np.float64]:
    """Express the direction of a gripper translation in the reference frame of the given pose.

    Directions given in the pose's own reference frame are returned unchanged; any other frame is
    assumed to be attached to the gripper, so the direction is rotated by the pose's orientation.
    """
    direction = np.array(translation.direction, dtype=np.float64)
    if translation.frame == pose.ref_frame:
        return direction
    return pose.orientation.rotate(direction)


def _offset_pose(pose: Pose3D, offset: NDArray[np.float64]) -> Pose3D:
    """Translate a pose by the given offset (expressed in its reference frame)."""
    return replace(pose, position=pose.position.offset(offset))


def approach_waypoints(candidate: GraspCandidate, steps: int = 10) -> list[Pose3D]:
    """Interpolate end-effector poses moving from the pre-grasp pose toward the grasp pose.

    :param candidate: Grasp candidate whose approach is interpolated
    :param steps: Number of waypoints across the approach distance (at least 1)
    :return: List of `steps` poses, beginning at the pre-grasp pose and ending one step short of
        the grasp pose
    """
    if steps < 1:
        raise ValueError(f"Cannot interpolate an approach using {steps} steps.")

    pose = candidate.grasp_pose
    direction = direction_in_pose_frame(pose, candidate.approach)
    distance_m = candidate.approach.desired_distance_m

    waypoints = []
    for i in range(steps):
        remaining = 1.0 - i / steps
        waypoints.append(_offset_pose(pose, -direction * distance_m * remaining))
    return waypoints


def retreat_waypoints(candidate: GraspCandidate, steps: int = 10) -> list[Pose3D]:
    """Interpolate end-effector poses moving away from the grasp pose along the retreat direction.

    :param candidate: Grasp candidate whose retreat is interpolated
    :param steps: Number of waypoints across the retreat distance (at least 1)
    :return: List of `steps` poses, ending at the full retreat distance from the grasp pose
    """
    if steps < 1:
        raise ValueError(f"Cannot interpolate a retreat using {steps} steps.")

    pose = candidate.grasp_pose
    direction = direction_in_pose_frame(pose, candidate.retreat)
    distance_m = candidate.retreat.desired_distance_m

    return [_offset_pose(pose, direction * distance_m * (i / steps)) for i in range(1, steps + 1)]
