"""Define an immutable 3D point used for block, grasp, and waypoint positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class Point3D:
    """Cartesian (x,y,z) coordinates in meters."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Store the coordinates as plain Python floats."""
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    @classmethod
    def origin(cls) -> Point3D:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: ArrayLike) -> Point3D:
        """Construct a point from any array-like of three coordinates.

        :raises ValueError: If the array doesn't hold exactly three values
        """
        values = np.asarray(arr, dtype=np.float64)
        if values.shape != (3,):
            raise ValueError(f"Point3D expects three coordinates, got shape {values.shape}.")
        return cls(*values)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def offset(self, delta: ArrayLike) -> Point3D:
        """Return the point displaced by the given (dx, dy, dz) vector."""
        return Point3D.from_array(self.to_array() + np.asarray(delta, dtype=np.float64))

    def approx_equal(self, other: Point3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))
