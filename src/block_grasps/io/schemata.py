"""Define Pydantic models for validating grasp-generation YAML configuration files."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from block_grasps.spatial.transforms import is_rigid_transform

# =============================================================================
# Pose Schemata
# =============================================================================

XYZ_RPY = Tuple[float, float, float, float, float, float]
"""A six-tuple of floats representing an SE(3) pose."""


class Pose3DDictSchema(BaseModel):
    """Schema for specifying a Pose3D as a dictionary."""

    xyz_rpy: XYZ_RPY
    frame: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


XYZ_XYZW = Tuple[float, float, float, float, float, float, float]
"""A position followed by an (x, y, z, w) quaternion."""


class Pose3DQuaternionSchema(BaseModel):
    """Schema for a Pose3D given as a position and quaternion, as grasp poses are exported."""

    xyz_xyzw: XYZ_XYZW
    frame: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_quaternion(self) -> Pose3DQuaternionSchema:
        """Verify that the quaternion part is finite and nonzero."""
        quaternion = np.array(self.xyz_xyzw[3:], dtype=np.float64)
        if not np.all(np.isfinite(quaternion)) or not np.any(quaternion):
            raise ValueError(f"Pose quaternion must be finite and nonzero, got {self.xyz_xyzw[3:]}")
        return self


class TransformMatrixSchema(BaseModel):
    """Schema for specifying a rigid transform as a 4x4 homogeneous matrix (row-major)."""

    matrix: List[List[float]]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_rigid(self) -> TransformMatrixSchema:
        """Verify that the matrix is a 4x4 rigid-body transformation."""
        array = np.array(self.matrix, dtype=np.float64)
        if array.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got shape {array.shape}.")
        if not is_rigid_transform(array):
            raise ValueError(f"Transform matrix is not a valid rigid transform: {self.matrix}")
        return self


Pose3DSchema = Union[XYZ_RPY, Pose3DDictSchema, Pose3DQuaternionSchema, TransformMatrixSchema]
"""A Pose3D is an xyz_rpy 6-tuple or a dictionary with `xyz_rpy`, `xyz_xyzw`, or `matrix`."""

# =============================================================================
# Grasp Configuration Schemata
# =============================================================================

PostureSchema = Dict[str, float]
"""A hand posture maps joint names to positions (rad or m)."""


class GraspConfigSchema(BaseModel):
    """Schema for the robot-specific data used to generate block grasps."""

    angle_resolution: int = Field(ge=1, description="Number of samples across a half-turn")
    grasp_depth_m: float = Field(gt=0, description="Radius (meters) of the sampling ring")
    approach_retreat_desired_dist_m: float = Field(ge=0, description="Desired travel (meters)")
    approach_retreat_min_dist_m: float = Field(ge=0, description="Minimum travel (meters)")
    grasp_pose_to_eef: Pose3DSchema = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    base_frame: str = "base_link"
    ee_parent_frame: str
    pre_grasp_posture: Optional[PostureSchema] = None
    grasp_posture: Optional[PostureSchema] = None
    block_size_m: float = Field(default=0.04, gt=0, description="Block edge length (meters)")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_distances(self) -> GraspConfigSchema:
        """Verify that the minimum approach distance doesn't exceed the desired distance."""
        if self.approach_retreat_min_dist_m > self.approach_retreat_desired_dist_m:
            raise ValueError(
                f"Minimum approach distance ({self.approach_retreat_min_dist_m}) exceeds the "
                f"desired distance ({self.approach_retreat_desired_dist_m}).",
            )
        return self
