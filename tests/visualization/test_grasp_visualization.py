"""Unit tests for presenting and animating generated grasps."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from block_grasps.grasping import GraspCandidate, GraspConfiguration, generate_grasps
from block_grasps.spatial import Pose3D
from block_grasps.visualization import (
    ConsoleGraspPresenter,
    MutablePresenter,
    quality_label,
    visualize_grasps,
)


class RecordingPresenter(MutablePresenter):
    """Records every presentation call it receives."""

    def __init__(self) -> None:
        """Initialize an empty record of calls."""
        super().__init__()
        self.calls: list[tuple[str, object]] = []

    def present_block(self, pose: Pose3D, size_m: float) -> None:
        """Record that the block was presented."""
        if not self.muted:
            self.calls.append(("block", size_m))

    def present_grasp(self, candidate: GraspCandidate, label: str) -> None:
        """Record that a grasp was presented."""
        if not self.muted:
            self.calls.append(("grasp", label))

    def present_waypoint(self, pose: Pose3D) -> None:
        """Record that an animation waypoint was presented."""
        if not self.muted:
            self.calls.append(("waypoint", pose))


@pytest.fixture
def config() -> GraspConfiguration:
    """Create a grasp configuration with a quarter-turn resolution."""
    return GraspConfiguration(
        angle_resolution=4,
        grasp_depth_m=0.12,
        approach_retreat_desired_dist_m=0.1,
        approach_retreat_min_dist_m=0.05,
        ee_parent_frame="gripper_roll_link",
        block_size_m=0.05,
    )


def test_muted_presenter_receives_no_calls(config: GraspConfiguration) -> None:
    """Verify that visualizing with a muted presenter silently skips all presentation."""
    # Arrange - Generate grasps and mute the presenter
    candidates = generate_grasps(Pose3D.identity(), config)
    presenter = RecordingPresenter()
    presenter.mute()

    # Act - Visualize the grasps
    visualize_grasps(candidates, Pose3D.identity(), config, presenter, step_delay_s=0.0)

    # Assert - Expect no presentation calls
    assert presenter.muted
    assert presenter.calls == []


def test_animation_presents_block_grasp_and_waypoints(config: GraspConfiguration) -> None:
    """Verify that each animated grasp re-presents the block, then the grasp and its approach."""
    # Arrange - Generate grasps and create an unmuted presenter
    candidates = generate_grasps(Pose3D.identity(), config)
    presenter = RecordingPresenter()

    # Act - Animate the grasps with four steps each
    visualize_grasps(
        candidates,
        Pose3D.identity(),
        config,
        presenter,
        animation_steps=4,
        step_delay_s=0.0,
    )

    # Assert - Expect (block, grasp, 4 waypoints) for each of the five grasps
    kinds = [kind for kind, _ in presenter.calls]
    assert kinds == (["block", "grasp"] + ["waypoint"] * 4) * 5
    assert presenter.calls[0] == ("block", 0.05)
    assert presenter.calls[1] == ("grasp", "Grasp Quality: 10%")


def test_static_visualization_skips_waypoints(config: GraspConfiguration) -> None:
    """Verify that disabling animation shows only the block and final grasp poses."""
    # Arrange - Generate grasps and create an unmuted presenter
    block_pose = Pose3D.identity()
    candidates = generate_grasps(block_pose, config)
    presenter = RecordingPresenter()

    # Act - Visualize without animation
    visualize_grasps(candidates, block_pose, config, presenter, animate=False, step_delay_s=0.0)

    # Assert - Expect only block and grasp calls
    assert [kind for kind, _ in presenter.calls] == ["block", "grasp"] * len(candidates)


def test_generation_is_independent_of_presentation(config: GraspConfiguration) -> None:
    """Verify that presenting grasps neither requires nor changes the generated candidates."""
    # Arrange - Generate grasps twice
    block_pose = Pose3D.from_xyz_rpy(x=0.4, z=0.02)
    candidates = generate_grasps(block_pose, config)
    reference = generate_grasps(block_pose, config)

    # Act - Present one batch of candidates
    visualize_grasps(candidates, block_pose, config, RecordingPresenter(), step_delay_s=0.0)

    # Assert - Expect both batches to remain identical
    assert candidates == reference


@pytest.mark.parametrize(
    ("resolution", "expected"),
    [(2, "Grasp Quality: 100%"), (1, "Grasp Quality: 10%")],
)
def test_quality_label(config: GraspConfiguration, resolution: int, expected: str) -> None:
    """Verify that quality labels are formatted as truncated percentages."""
    # Arrange - Generate grasps at the given resolution
    low_res = GraspConfiguration(
        angle_resolution=resolution,
        grasp_depth_m=config.grasp_depth_m,
        approach_retreat_desired_dist_m=config.approach_retreat_desired_dist_m,
        approach_retreat_min_dist_m=config.approach_retreat_min_dist_m,
        ee_parent_frame=config.ee_parent_frame,
    )
    candidate = generate_grasps(Pose3D.identity(), low_res)[1]

    # Act/Assert - Expect the label of the second grasp
    assert quality_label(candidate) == expected


def test_console_presenter_prints_grasps(config: GraspConfiguration) -> None:
    """Verify that the console presenter prints each grasp until it is muted."""
    # Arrange - Direct a console presenter to an in-memory buffer
    buffer = io.StringIO()
    presenter = ConsoleGraspPresenter(Console(file=buffer, width=200))
    block_pose = Pose3D.identity()
    candidates = generate_grasps(block_pose, config)

    # Act - Present the grasps, then mute the presenter and present them again
    visualize_grasps(candidates, block_pose, config, presenter, animate=False, step_delay_s=0.0)
    printed = buffer.getvalue()

    presenter.mute()
    visualize_grasps(candidates, block_pose, config, presenter, animate=False, step_delay_s=0.0)

    # Assert - Expect every grasp in the first printout and nothing more afterward
    for c in candidates:
        assert c.name in printed
    assert "Grasp Quality: 100%" in printed
    assert buffer.getvalue() == printed

    presenter.unmute()
    assert not presenter.muted
