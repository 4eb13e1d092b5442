"""Define classes to visualize blocks and grasp candidates using Open3D."""

from __future__ import annotations

from typing import TYPE_CHECKING

import open3d as o3d

from block_grasps.io.logging import console
from block_grasps.visualization.presenters import MutablePresenter

if TYPE_CHECKING:
    from types import TracebackType

    from typing_extensions import Self

    from block_grasps.grasping.candidates import GraspCandidate
    from block_grasps.spatial import Pose3D


class Open3DVisualizer:
    """A manager context for live visualization of 3D geometries using Open3D."""

    def __init__(self, window_name: str = "Open3D Visualization") -> None:
        """Initialize an Open3D visualizer.

        :param window_name: Name for the visualization window
        """
        self.vis = o3d.visualization.Visualizer()
        self.window_name = window_name

        self.geometries: dict[str, o3d.geometry.Geometry] = {}
        """A map from geometry names to the corresponding Open3D geometries."""

        self.active: bool = False

    def __enter__(self) -> Self:
        """Enter a managed context for live visualization."""
        self.vis.create_window(window_name=self.window_name)
        self.active = True

        options = self.vis.get_render_option()
        options.mesh_show_back_face = True

        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool | None:
        """Exit a managed context for live visualization.

        :param exc_type: Type of exception raised in the context (None if no exception)
        :param exc_value: Value of the exception raised in the context (None if no exception)
        :param traceback: Traceback of the exception raised in the context (None if no exception)
        :return: True if exception is suppressed, False if exception should propagate, else None
        """
        self.vis.destroy_window()
        self.active = False
        self.geometries.clear()
        return None

    def add_geometry(
        self,
        name: str,
        geometry: o3d.geometry.Geometry,
        *,
        update_display: bool = True,
    ) -> None:
        """Add or replace a named geometry in the visualization (if it's active).

        :param name: Unique identifier for the geometry
        :param geometry: Open3D geometry to add or update
        :param update_display: Whether to update the display after adding (defaults to True)
        """
        if not self.active:
            return

        if name in self.geometries:
            self.vis.remove_geometry(self.geometries[name], reset_bounding_box=False)

        self.geometries[name] = geometry
        self.vis.add_geometry(geometry, reset_bounding_box=(len(self.geometries) == 1))

        if update_display:
            self._update_display()

    def add_box(
        self,
        name: str,
        pose: Pose3D,
        size_m: float,
        color: tuple[float, float, float] = (0.8, 0.1, 0.1),
        *,
        update_display: bool = True,
    ) -> None:
        """Add a cube centered at the given pose to the visualization.

        :param name: Unique identifier for the cube
        :param pose: Pose of the cube's center
        :param size_m: Edge length (meters) of the cube
        :param color: RGB color tuple with values in the range [0, 1] (defaults to red)
        :param update_display: Whether to update the display after adding (defaults to True)
        """
        box = o3d.geometry.TriangleMesh.create_box(width=size_m, height=size_m, depth=size_m)
        box.translate((-size_m / 2, -size_m / 2, -size_m / 2))  # Center the box on its origin
        box.transform(pose.to_homogeneous_matrix())
        box.paint_uniform_color(color)
        box.compute_vertex_normals()
        self.add_geometry(name, box, update_display=update_display)

    def add_pose_frame(
        self,
        name: str,
        pose: Pose3D,
        size_m: float = 0.05,
        *,
        update_display: bool = True,
    ) -> None:
        """Add a coordinate frame at the given pose to the visualization.

        :param name: Unique identifier for the coordinate frame
        :param pose: Pose at which the frame is drawn
        :param size_m: Size of the coordinate frame axes (in meters)
        :param update_display: Whether to update the display after adding (defaults to True)
        """
        frame = o3d.geometry.TriangleMesh.create_coordinate_frame(size=size_m)
        frame.transform(pose.to_homogeneous_matrix())
        self.add_geometry(name, frame, update_display=update_display)

    def _update_display(self) -> None:
        """Update the visualization display."""
        self.vis.poll_events()
        self.vis.update_renderer()


class Open3DGraspPresenter(MutablePresenter):
    """Presents a block and its grasps as meshes and coordinate frames in an Open3D window."""

    def __init__(self, visualizer: Open3DVisualizer, frame_size_m: float = 0.03) -> None:
        """Initialize the presenter using an active Open3D visualizer.

        :param visualizer: Visualizer (entered as a context) into which geometries are drawn
        :param frame_size_m: Size (meters) of the coordinate frames marking grasp poses
        """
        super().__init__()
        self.visualizer = visualizer
        self.frame_size_m = frame_size_m

    def present_block(self, pose: Pose3D, size_m: float) -> None:
        """Draw the block as a cube."""
        if self.muted:
            return
        self.visualizer.add_box("block", pose, size_m)

    def present_grasp(self, candidate: GraspCandidate, label: str) -> None:
        """Draw a coordinate frame at the grasp pose; the label is printed to the console."""
        if self.muted:
            return
        self.visualizer.add_pose_frame(candidate.name, candidate.grasp_pose, self.frame_size_m)
        console.print(f"{candidate.name}: {label}")

    def present_waypoint(self, pose: Pose3D) -> None:
        """Move the animated end-effector marker to the given pose."""
        if self.muted:
            return
        self.visualizer.add_pose_frame("end_effector", pose, self.frame_size_m * 1.5)
