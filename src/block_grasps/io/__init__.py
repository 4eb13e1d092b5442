"""Import classes and definitions used for input/output or user interfaces."""

from .logging import console as console
from .logging import log_debug as log_debug
from .logging import log_info as log_info
from .logging import logger as logger
