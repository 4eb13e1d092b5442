"""Define the robot-specific configuration used to generate block grasps."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING, Any

import numpy as np
from pydantic import BaseModel, ValidationError

from block_grasps.grasping.errors import InvalidConfigurationError
from block_grasps.io.schemata import GraspConfigSchema
from block_grasps.io.yaml_utils import load_yaml_data
from block_grasps.spatial import DEFAULT_FRAME, Pose3D

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class GraspConfiguration:
    """Gripper geometry and approach/retreat kinematics used to generate grasps.

    Hand postures are opaque to grasp generation; they are copied into every candidate as-is.
    """

    angle_resolution: int
    """Number of angular steps across the sampled half-turn (yields resolution + 1 grasps)."""

    grasp_depth_m: float
    """Distance (meters) from the block's center to the gripper's contact point."""

    approach_retreat_desired_dist_m: float
    approach_retreat_min_dist_m: float

    ee_parent_frame: str
    """Frame in which approach and retreat directions are expressed."""

    grasp_pose_to_eef: Pose3D = field(default_factory=Pose3D.identity)
    """Fixed correction from the computed grasp frame to the robot's end-effector frame."""

    base_frame: str = DEFAULT_FRAME
    """Frame in which generated grasp poses are expressed."""

    pre_grasp_posture: Any = None
    grasp_posture: Any = None

    block_size_m: float = 0.04
    """Edge length (meters) of the block, used only for visualization."""

    def __post_init__(self) -> None:
        """Store an integral angle resolution as a plain int, then validate the configuration."""
        resolution = self.angle_resolution
        if isinstance(resolution, Integral) and not isinstance(resolution, bool):
            object.__setattr__(self, "angle_resolution", int(resolution))
        self.validate()

    def validate(self) -> None:
        """Verify that the configuration can be used to generate grasps.

        :raises InvalidConfigurationError: If any field violates its constraints
        """
        resolution = self.angle_resolution
        if isinstance(resolution, bool) or not isinstance(resolution, Integral):
            raise InvalidConfigurationError(
                f"Angle resolution must be an integer, got {resolution!r}.",
            )
        if self.angle_resolution < 1:
            raise InvalidConfigurationError(
                f"Angle resolution must be at least 1, got {self.angle_resolution}.",
            )

        if not np.isfinite(self.grasp_depth_m) or self.grasp_depth_m <= 0:
            raise InvalidConfigurationError(
                f"Grasp depth must be positive, got {self.grasp_depth_m}.",
            )

        desired_m = self.approach_retreat_desired_dist_m
        min_m = self.approach_retreat_min_dist_m
        if not (np.isfinite(desired_m) and np.isfinite(min_m)) or desired_m < 0 or min_m < 0:
            raise InvalidConfigurationError(
                f"Approach/retreat distances must be non-negative, got {desired_m} and {min_m}.",
            )
        if min_m > desired_m:
            raise InvalidConfigurationError(
                f"Minimum approach distance ({min_m}) exceeds the desired distance ({desired_m}).",
            )

        if not self.grasp_pose_to_eef.is_rigid():
            raise InvalidConfigurationError(
                "Grasp-to-end-effector correction is not a rigid transform: "
                f"{self.grasp_pose_to_eef}",
            )

    @classmethod
    def from_schema(cls, schema: GraspConfigSchema) -> GraspConfiguration:
        """Construct a GraspConfiguration from a validated configuration schema."""
        eef_data = schema.grasp_pose_to_eef
        if isinstance(eef_data, BaseModel):
            eef_data = eef_data.model_dump(exclude_none=True)
        grasp_pose_to_eef = Pose3D.from_yaml_data(eef_data, default_frame=schema.ee_parent_frame)

        return GraspConfiguration(
            angle_resolution=schema.angle_resolution,
            grasp_depth_m=schema.grasp_depth_m,
            approach_retreat_desired_dist_m=schema.approach_retreat_desired_dist_m,
            approach_retreat_min_dist_m=schema.approach_retreat_min_dist_m,
            ee_parent_frame=schema.ee_parent_frame,
            grasp_pose_to_eef=grasp_pose_to_eef,
            base_frame=schema.base_frame,
            pre_grasp_posture=schema.pre_grasp_posture,
            grasp_posture=schema.grasp_posture,
            block_size_m=schema.block_size_m,
        )


def load_grasp_configuration(yaml_path: Path, key: str | None = None) -> GraspConfiguration:
    """Load a grasp configuration from the given YAML file.

    :param yaml_path: Path to a YAML file containing grasp configuration data
    :param key: Optional top-level key under which the configuration is nested (e.g., a robot name)
    :return: Validated GraspConfiguration instance
    :raises InvalidConfigurationError: If the YAML data doesn't describe a valid configuration
    """
    yaml_data = load_yaml_data(yaml_path, required_keys=None if key is None else {key})
    if key is not None:
        yaml_data = yaml_data[key]

    try:
        schema = GraspConfigSchema.model_validate(yaml_data)
    except ValidationError as v_err:
        raise InvalidConfigurationError(f"Validation error in {yaml_path}: {v_err}") from v_err

    return GraspConfiguration.from_schema(schema)
