"""Import classes and functions used to generate candidate grasps for blocks."""

from .axes import AXIS_CAPABILITIES as AXIS_CAPABILITIES
from .axes import AXIS_COMPOSITIONS as AXIS_COMPOSITIONS
from .axes import DEFAULT_SAMPLING_PASSES as DEFAULT_SAMPLING_PASSES
from .axes import GraspAxis as GraspAxis
from .axes import GraspDirection as GraspDirection
from .axes import SamplingPass as SamplingPass
from .candidates import GraspCandidate as GraspCandidate
from .candidates import GripperTranslation as GripperTranslation
from .candidates import load_grasp_candidates as load_grasp_candidates
from .config import GraspConfiguration as GraspConfiguration
from .config import load_grasp_configuration as load_grasp_configuration
from .errors import GraspGenerationError as GraspGenerationError
from .errors import InvalidConfigurationError as InvalidConfigurationError
from .errors import TransformCompositionError as TransformCompositionError
from .errors import UnsupportedAxisError as UnsupportedAxisError
from .generator import generate_axis_grasps as generate_axis_grasps
from .generator import generate_grasps as generate_grasps
from .motion import approach_waypoints as approach_waypoints
from .motion import retreat_waypoints as retreat_waypoints
from .sampler import AxisSample as AxisSample
from .sampler import sample_axis as sample_axis
from .scoring import MIN_GRASP_QUALITY as MIN_GRASP_QUALITY
from .scoring import grasp_quality as grasp_quality
