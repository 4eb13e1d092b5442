"""Define the heuristic used to score sampled grasps."""

import numpy as np

MIN_GRASP_QUALITY = 0.1
"""Lowest quality reported for any grasp; all sampled grasps remain usable."""


def grasp_quality(theta_rad: float) -> float:
    """Score a grasp by how far the wrist stays from the block's supporting surface.

    Grasps sampled near the middle of the half-ring (theta = pi/2) keep the wrist farthest from
    the table and score highest; grasps near either end are floored at MIN_GRASP_QUALITY.

    :param theta_rad: Angle (radians) of the grasp around the sampling ring, in [0, pi]
    :return: Quality score in [MIN_GRASP_QUALITY, 1.0]
    """
    return max(float(np.sin(theta_rad)), MIN_GRASP_QUALITY)
