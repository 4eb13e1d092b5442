"""Define an immutable unit quaternion for gripper and block orientations.

Hamilton products and vector rotation go through pyquaternion; conversions to and from matrices
and Euler angles go through trimesh.transformations, which stores quaternions as (w, x, y, z).
This module always exposes the (x, y, z, w) ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from pyquaternion import Quaternion as PyQuaternion
from trimesh.transformations import (
    euler_from_quaternion,
    quaternion_about_axis,
    quaternion_from_euler,
    quaternion_from_matrix,
    quaternion_matrix,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

RPY = "sxyz"
"""Euler convention for roll/pitch/yaw: static axes, applied about x, then y, then z."""


@dataclass(frozen=True)
class Quaternion:
    """A unit quaternion (x, y, z, w); any nonzero input is normalized on construction."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        """Normalize the quaternion.

        :raises ValueError: If all four components are zero
        """
        components = np.array([self.x, self.y, self.z, self.w], dtype=np.float64)
        norm = float(np.linalg.norm(components))
        if norm == 0.0:
            raise ValueError(f"Cannot normalize a zero quaternion: {tuple(components)}")

        for name, value in zip(("x", "y", "z", "w"), components / norm):
            object.__setattr__(self, name, float(value))

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Compute the Hamilton product, i.e., apply `other` first and then this rotation."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        product = self._as_pyquaternion() * other._as_pyquaternion()
        return Quaternion(product.x, product.y, product.z, product.w)

    def _as_pyquaternion(self) -> PyQuaternion:
        return PyQuaternion(self.w, self.x, self.y, self.z)

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float], angle_rad: float) -> Quaternion:
        """Construct the rotation by the given angle (radians) about the given axis."""
        w, x, y, z = quaternion_about_axis(angle_rad, axis)
        return cls(x, y, z, w)

    @classmethod
    def from_rpy(cls, roll_rad: float, pitch_rad: float, yaw_rad: float) -> Quaternion:
        """Construct the rotation given by fixed-frame roll, pitch, and yaw angles (radians)."""
        w, x, y, z = quaternion_from_euler(roll_rad, pitch_rad, yaw_rad, axes=RPY)
        return cls(x, y, z, w)

    def to_rpy(self) -> tuple[float, float, float]:
        """Convert into fixed-frame (roll, pitch, yaw) angles.

        The angles are degenerate at pitch = +/- pi/2, so they are only suited for display.
        """
        roll, pitch, yaw = euler_from_quaternion([self.w, self.x, self.y, self.z], axes=RPY)
        return (float(roll), float(pitch), float(yaw))

    @classmethod
    def from_rotation_matrix(cls, rotation: NDArray[np.float64]) -> Quaternion:
        """Construct a quaternion from a 3x3 rotation matrix (or the rotation block of a 4x4)."""
        rotation = np.asarray(rotation, dtype=np.float64)
        if rotation.shape not in {(3, 3), (4, 4)}:
            raise ValueError(f"Expected a 3x3 or 4x4 matrix, got shape {rotation.shape}.")

        homogeneous = np.eye(4)
        homogeneous[:3, :3] = rotation[:3, :3]
        w, x, y, z = quaternion_from_matrix(homogeneous)
        return cls(x, y, z, w)

    def to_rotation_matrix(self) -> NDArray[np.float64]:
        return quaternion_matrix([self.w, self.x, self.y, self.z])[:3, :3]

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def rotate(self, vector: Sequence[float]) -> NDArray[np.float64]:
        """Rotate a 3-vector by this quaternion."""
        return np.asarray(self._as_pyquaternion().rotate(list(vector)), dtype=np.float64)

    def approx_equal(self, other: Quaternion, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Check whether two quaternions express the same rotation (q and -q are equivalent)."""
        a = np.array(self.to_tuple())
        b = np.array(other.to_tuple())
        same = np.allclose(a, b, rtol=rtol, atol=atol)
        return bool(same or np.allclose(-a, b, rtol=rtol, atol=atol))
