"""Define the interface through which grasp candidates are presented to a user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rich.console import Console

from block_grasps.io.logging import console as default_console

if TYPE_CHECKING:
    from block_grasps.grasping.candidates import GraspCandidate
    from block_grasps.spatial import Pose3D


class GraspPresenter(Protocol):
    """A scene (e.g., a 3D viewer) that can display a block and the grasps generated for it."""

    @property
    def muted(self) -> bool:
        """Check whether the presenter currently skips all presentation calls."""
        ...

    def mute(self) -> None:
        """Stop presenting until unmuted."""
        ...

    def unmute(self) -> None:
        """Resume presenting."""
        ...

    def present_block(self, pose: Pose3D, size_m: float) -> None:
        """Display a cubic block of the given edge length (meters) at the given pose."""
        ...

    def present_grasp(self, candidate: GraspCandidate, label: str) -> None:
        """Display the final pose of a grasp candidate alongside a text label."""
        ...

    def present_waypoint(self, pose: Pose3D) -> None:
        """Display the end-effector at an intermediate pose of an animated motion."""
        ...


class MutablePresenter:
    """Provides the mute/unmute switch shared by concrete presenters."""

    def __init__(self) -> None:
        """Initialize the presenter in its unmuted state."""
        self._muted = False

    @property
    def muted(self) -> bool:
        """Check whether the presenter currently skips all presentation calls."""
        return self._muted

    def mute(self) -> None:
        """Stop presenting until unmuted."""
        self._muted = True

    def unmute(self) -> None:
        """Resume presenting."""
        self._muted = False


class ConsoleGraspPresenter(MutablePresenter):
    """Presents grasps as colored text printed to a rich console."""

    def __init__(self, console: Console | None = None, *, show_waypoints: bool = False) -> None:
        """Initialize the presenter.

        :param console: Console to print to (defaults to the package-wide console)
        :param show_waypoints: Whether to print every animation waypoint (defaults to False)
        """
        super().__init__()
        self.console = default_console if console is None else console
        self.show_waypoints = show_waypoints

    def present_block(self, pose: Pose3D, size_m: float) -> None:
        """Print the pose and size of the block."""
        if self.muted:
            return
        self.console.print(f"[cyan]Block ({size_m:.3f} m):[/] {pose}")

    def present_grasp(self, candidate: GraspCandidate, label: str) -> None:
        """Print the grasp's name, label, and pose."""
        if self.muted:
            return
        color = "green" if candidate.quality >= 0.5 else "yellow"
        self.console.print(f"[{color}]{candidate.name}[/] {label}: {candidate.grasp_pose}")

    def present_waypoint(self, pose: Pose3D) -> None:
        """Print an animation waypoint if requested."""
        if self.muted or not self.show_waypoints:
            return
        self.console.print(f"  [dim]waypoint[/] {pose}")
