"""Import classes and functions representing 3D points, rotations, and poses."""

from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .points import Point3D as Point3D
from .poses import Pose3D as Pose3D
from .rotations import Quaternion as Quaternion
from .transforms import compose_transforms as compose_transforms
from .transforms import is_rigid_transform as is_rigid_transform
