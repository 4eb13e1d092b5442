"""Define functions to generate candidate grasps for a block of known pose."""

from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING, Iterator, Sequence

from block_grasps.grasping.axes import (
    DEFAULT_SAMPLING_PASSES,
    GraspAxis,
    GraspDirection,
    SamplingPass,
    is_supported,
)
from block_grasps.grasping.candidates import GraspCandidate, GripperTranslation
from block_grasps.grasping.errors import TransformCompositionError, UnsupportedAxisError
from block_grasps.grasping.sampler import AxisSample, sample_axis
from block_grasps.grasping.scoring import grasp_quality
from block_grasps.io.logging import log_debug, log_info
from block_grasps.spatial import Pose3D, compose_transforms, is_rigid_transform

if TYPE_CHECKING:
    from block_grasps.grasping.config import GraspConfiguration

APPROACH_DIRECTION = (0.0, 0.0, 1.0)
"""Approach direction (+z) w.r.t. the end-effector parent frame; retreat travels along -z."""


def make_approach(config: GraspConfiguration) -> GripperTranslation:
    """Create the approach motion shared by all grasps generated under the given configuration."""
    return GripperTranslation(
        direction=APPROACH_DIRECTION,
        frame=config.ee_parent_frame,
        desired_distance_m=config.approach_retreat_desired_dist_m,
        min_distance_m=config.approach_retreat_min_dist_m,
    )


def assemble_candidate(
    grasp_id: int,
    sample: AxisSample,
    block_pose: Pose3D,
    config: GraspConfiguration,
) -> GraspCandidate:
    """Convert a block-frame grasp sample into a grasp candidate in the robot's base frame.

    The resulting pose is block_pose @ sample.local_pose @ config.grasp_pose_to_eef.

    :param grasp_id: Identifier assigned to the new candidate
    :param sample: Grasp sampled around an axis of the block
    :param block_pose: Pose of the block w.r.t. the robot's base frame
    :param config: Configuration used to generate grasps
    :return: Constructed grasp candidate
    :raises TransformCompositionError: If the composed pose isn't a valid rigid transform
    """
    world_m = compose_transforms(
        block_pose.to_homogeneous_matrix(),
        sample.local_pose.to_homogeneous_matrix(),
        config.grasp_pose_to_eef.to_homogeneous_matrix(),
    )
    if not is_rigid_transform(world_m):
        raise TransformCompositionError(
            f"Grasp {grasp_id} (theta = {sample.theta_rad:.4f} rad) composed with block pose "
            f"{block_pose} is not a valid rigid transform.",
        )

    approach = make_approach(config)

    return GraspCandidate(
        id=grasp_id,
        grasp_pose=Pose3D.from_homogeneous_matrix(world_m, config.base_frame),
        quality=grasp_quality(sample.theta_rad),
        pre_grasp_posture=config.pre_grasp_posture,
        grasp_posture=config.grasp_posture,
        approach=approach,
        retreat=approach.reversed(),
        max_contact_force=0.0,
    )


def _generate_pass(
    block_pose: Pose3D,
    config: GraspConfiguration,
    sampling_pass: SamplingPass,
    grasp_ids: Iterator[int],
) -> list[GraspCandidate]:
    """Generate the grasps for a single (axis, direction) pass, drawing ids from the iterator."""
    axis, direction = sampling_pass
    samples = sample_axis(axis, direction, config.angle_resolution, config.grasp_depth_m)

    candidates = []
    for sample in samples:
        candidate = assemble_candidate(next(grasp_ids), sample, block_pose, config)
        log_debug(f"{candidate.name} ({axis.name}, {direction.name}): {candidate.grasp_pose}")
        candidates.append(candidate)

    return candidates


def generate_grasps(
    block_pose: Pose3D,
    config: GraspConfiguration,
    passes: Sequence[SamplingPass] = DEFAULT_SAMPLING_PASSES,
) -> list[GraspCandidate]:
    """Generate candidate grasps for a block with the given pose.

    Generation is all-or-nothing: any error aborts the whole batch and no candidates are returned.

    :param block_pose: Pose of the block's center w.r.t. the robot's base frame
    :param config: Configuration used to generate grasps (not modified)
    :param passes: Sequence of (axis, direction) sampling passes (defaults to the y-axis from below)
    :return: Ordered list of grasp candidates, with ids starting at 0
    :raises InvalidConfigurationError: If the configuration is invalid
    :raises UnsupportedAxisError: If any requested pass isn't supported
    :raises TransformCompositionError: If any candidate pose fails its rigidity check
    """
    config.validate()

    for axis, direction in passes:
        if not is_supported(axis, direction):
            raise UnsupportedAxisError(axis, direction)

    grasp_ids = count()
    possible_grasps: list[GraspCandidate] = []
    for sampling_pass in passes:
        possible_grasps.extend(_generate_pass(block_pose, config, sampling_pass, grasp_ids))

    log_info(f"Generated {len(possible_grasps)} grasps.")
    return possible_grasps


def generate_axis_grasps(
    block_pose: Pose3D,
    config: GraspConfiguration,
    axis: GraspAxis,
    direction: GraspDirection,
) -> list[GraspCandidate]:
    """Generate angle_resolution + 1 candidate grasps around a single axis of the block."""
    return generate_grasps(block_pose, config, passes=[(axis, direction)])
