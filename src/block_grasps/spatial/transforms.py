"""Define utility functions for validating and composing homogeneous transformation matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


def is_rigid_transform(matrix: NDArray[np.float64], atol: float = 1e-6) -> bool:
    """Evaluate whether the given matrix is a valid 4x4 rigid-body transformation.

    :param matrix: Candidate homogeneous transformation matrix
    :param atol: Absolute tolerance used for the orthonormality and determinant checks
    :return: True if the matrix is finite, has an orthonormal rotation block with determinant +1,
        and has a bottom row of [0, 0, 0, 1], else False
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (4, 4) or not np.all(np.isfinite(matrix)):
        return False

    rotation = matrix[:3, :3]
    if not np.allclose(rotation.T @ rotation, np.eye(3), atol=atol):
        return False
    if not np.isclose(np.linalg.det(rotation), 1.0, atol=atol):
        return False

    return bool(np.allclose(matrix[3], [0.0, 0.0, 0.0, 1.0], atol=atol))


def compose_transforms(*matrices: NDArray[np.float64]) -> NDArray[np.float64]:
    """Compose homogeneous transformation matrices from left to right.

    For example, compose_transforms(T_a_b, T_b_c, T_c_d) returns T_a_d.
    """
    result = np.eye(4)
    for m in matrices:
        result = result @ m
    return result
