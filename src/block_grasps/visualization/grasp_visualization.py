"""Define functions that drive the presentation and animation of generated grasps."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Sequence

from block_grasps.grasping.motion import approach_waypoints
from block_grasps.io.logging import log_debug

if TYPE_CHECKING:
    from block_grasps.grasping.candidates import GraspCandidate
    from block_grasps.grasping.config import GraspConfiguration
    from block_grasps.spatial import Pose3D
    from block_grasps.visualization.presenters import GraspPresenter


def quality_label(candidate: GraspCandidate) -> str:
    """Format the quality of a grasp as a percentage label (e.g., "Grasp Quality: 70%")."""
    return f"Grasp Quality: {int(candidate.quality * 100)}%"


def animate_grasp(
    candidate: GraspCandidate,
    presenter: GraspPresenter,
    steps: int = 10,
    step_delay_s: float = 0.001,
) -> None:
    """Show a grasp and animate the gripper's straight-line approach toward it.

    :param candidate: Grasp candidate to be animated
    :param presenter: Scene in which the animation is displayed
    :param steps: Number of animation steps across the approach distance
    :param step_delay_s: Pause (seconds) between consecutive animation steps
    """
    presenter.present_grasp(candidate, quality_label(candidate))

    for waypoint in approach_waypoints(candidate, steps):
        if presenter.muted:
            break
        presenter.present_waypoint(waypoint)
        time.sleep(step_delay_s)


def visualize_grasps(
    candidates: Sequence[GraspCandidate],
    block_pose: Pose3D,
    config: GraspConfiguration,
    presenter: GraspPresenter,
    *,
    animate: bool = True,
    animation_steps: int = 10,
    step_delay_s: float = 0.001,
) -> None:
    """Present every grasp candidate, optionally animating its approach.

    Does nothing if the presenter is muted. Candidates are never modified.

    Approach directions are expressed in the end-effector parent frame, so each animation moves
    the gripper along its own approach axis (rotated by the grasp orientation). This differs from
    animating along the raw direction vector in base-frame coordinates, which only coincides with
    the gripper axis for grasps whose orientation is the identity.

    :param candidates: Grasp candidates produced by grasp generation
    :param block_pose: Pose of the block for which the grasps were generated
    :param config: Configuration used to generate the grasps (provides the block size)
    :param presenter: Scene in which grasps are displayed
    :param animate: Whether to animate each approach or only show final poses (defaults to True)
    :param animation_steps: Number of animation steps across each approach distance
    :param step_delay_s: Pause (seconds) after each animation step and each grasp
    """
    if presenter.muted:
        log_debug("Not visualizing grasps - muted.")
        return

    log_debug(f"Visualizing {len(candidates)} grasps")

    for candidate in candidates:
        if presenter.muted:  # Presenter may be muted partway through (e.g., by the user)
            break

        presenter.present_block(block_pose, config.block_size_m)  # Keep the block visible

        if animate:
            animate_grasp(candidate, presenter, animation_steps, step_delay_s)
        else:
            presenter.present_grasp(candidate, quality_label(candidate))

        time.sleep(step_delay_s)
