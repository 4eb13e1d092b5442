"""Define an immutable 6-DOF pose used for blocks, grasps, and end-effector corrections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, Union

import numpy as np

from block_grasps.spatial.frames import DEFAULT_FRAME
from block_grasps.spatial.points import Point3D
from block_grasps.spatial.rotations import Quaternion
from block_grasps.spatial.transforms import is_rigid_transform

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

TransformedT = TypeVar("TransformedT", "Pose3D", Point3D)

PoseYamlData = Union[dict, list, tuple]
"""YAML form of a pose: an xyz_rpy list, or a dict with xyz_xyzw, xyz_rpy, or matrix data."""


@dataclass(frozen=True)
class Pose3D:
    """The position and orientation of a frame w.r.t. a named reference frame."""

    position: Point3D
    orientation: Quaternion
    ref_frame: str = DEFAULT_FRAME

    def __matmul__(self, other: TransformedT) -> TransformedT:
        """Apply this pose's transform to another pose or to a point.

        pose_a_b @ pose_b_c gives pose_a_c, so a composed pose is expressed in the left frame.
        """
        if isinstance(other, Pose3D):
            matrix = self.to_homogeneous_matrix() @ other.to_homogeneous_matrix()
            return Pose3D.from_homogeneous_matrix(matrix, self.ref_frame)
        if isinstance(other, Point3D):
            return self.position.offset(self.orientation.rotate(other.to_array()))
        return NotImplemented

    def __str__(self) -> str:
        x, y, z = self.position
        roll, pitch, yaw = self.orientation.to_rpy()
        values = ", ".join(f"{v:.3f}" for v in (x, y, z, roll, pitch, yaw))
        return f'Pose3D([{values}], ref_frame="{self.ref_frame}")'

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        return cls(Point3D.origin(), Quaternion.identity(), ref_frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a pose from a translation (meters) and fixed-frame RPY angles (radians)."""
        return cls(Point3D(x, y, z), Quaternion.from_rpy(roll_rad, pitch_rad, yaw_rad), ref_frame)

    @classmethod
    def from_sequence(cls, data: Sequence[float], ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a pose from a six-element (x, y, z, roll, pitch, yaw) sequence.

        :raises ValueError: If the sequence doesn't have exactly six elements
        """
        if len(data) != 6:
            raise ValueError(f"Cannot construct Pose3D from sequence of length {len(data)}.")
        return cls.from_xyz_rpy(*data, ref_frame=ref_frame)

    @classmethod
    def from_homogeneous_matrix(
        cls,
        matrix: NDArray[np.float64],
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a pose from a 4x4 homogeneous transformation matrix."""
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix but received shape {matrix.shape}")

        position = Point3D.from_array(matrix[:3, 3])
        return cls(position, Quaternion.from_rotation_matrix(matrix), ref_frame)

    def to_homogeneous_matrix(self) -> NDArray[np.float64]:
        matrix = np.eye(4)
        matrix[:3, :3] = self.orientation.to_rotation_matrix()
        matrix[:3, 3] = self.position.to_array()
        return matrix

    def is_rigid(self, atol: float = 1e-6) -> bool:
        """Check whether the pose is a finite, valid rigid-body transformation."""
        return is_rigid_transform(self.to_homogeneous_matrix(), atol=atol)

    def inverse(self, pose_frame: str) -> Pose3D:
        """Invert the transform, giving the pose of this pose's reference frame w.r.t. itself.

        :param pose_frame: Name of the frame that this pose locates (the inverse's reference frame)
        """
        rotation_t = self.orientation.to_rotation_matrix().T
        matrix = np.eye(4)
        matrix[:3, :3] = rotation_t
        matrix[:3, 3] = -rotation_t @ self.position.to_array()
        return Pose3D.from_homogeneous_matrix(matrix, pose_frame)

    @classmethod
    def from_yaml_data(cls, data: PoseYamlData, default_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a pose from YAML data.

        Accepted forms are a six-element xyz_rpy list or a dictionary holding one of `xyz_xyzw`
        (position and quaternion), `xyz_rpy`, or a 4x4 `matrix`, plus an optional `frame`.

        :param data: YAML data describing the pose
        :param default_frame: Reference frame used when the data doesn't name one
        :return: Constructed Pose3D instance
        :raises TypeError: If the data is neither a list nor a dictionary
        :raises KeyError: If a dictionary holds none of the accepted pose keys
        """
        if isinstance(data, (list, tuple)):
            return cls.from_sequence(data, default_frame)
        if not isinstance(data, dict):
            raise TypeError(f"Cannot load Pose3D from YAML data of type {type(data)}")

        frame = data.get("frame")
        if frame is None:
            frame = default_frame
        if "xyz_xyzw" in data:
            values = data["xyz_xyzw"]
            if len(values) != 7:
                raise ValueError(f"xyz_xyzw pose data needs seven values, got {len(values)}.")
            return cls(Point3D(*values[:3]), Quaternion(*values[3:]), frame)
        if "matrix" in data:
            return cls.from_homogeneous_matrix(np.array(data["matrix"], dtype=np.float64), frame)
        if "xyz_rpy" in data:
            return cls.from_sequence(data["xyz_rpy"], frame)

        raise KeyError(f"Pose data needs one of 'xyz_xyzw', 'matrix', or 'xyz_rpy': {data}")

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the pose into YAML data holding its position and (x, y, z, w) quaternion."""
        return {"xyz_xyzw": [*self.position, *self.orientation.to_tuple()], "frame": self.ref_frame}

    def approx_equal(self, other: Pose3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        return (
            self.ref_frame == other.ref_frame
            and self.position.approx_equal(other.position, rtol=rtol, atol=atol)
            and self.orientation.approx_equal(other.orientation, rtol=rtol, atol=atol)
        )
