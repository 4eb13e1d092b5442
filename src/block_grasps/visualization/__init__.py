"""Import classes and functions for visualizing generated grasps."""

from .grasp_visualization import animate_grasp as animate_grasp
from .grasp_visualization import quality_label as quality_label
from .grasp_visualization import visualize_grasps as visualize_grasps
from .presenters import ConsoleGraspPresenter as ConsoleGraspPresenter
from .presenters import GraspPresenter as GraspPresenter
from .presenters import MutablePresenter as MutablePresenter

# Attempt to import the Open3D presenter, but allow failure if Open3D is unavailable
try:
    import open3d

    OPEN3D_PRESENT = True
except ModuleNotFoundError:
    OPEN3D_PRESENT = False

if OPEN3D_PRESENT:
    from .open3d_visualizer import Open3DGraspPresenter as Open3DGraspPresenter
    from .open3d_visualizer import Open3DVisualizer as Open3DVisualizer
