"""Import classes and definitions used for input/output, configuration, and logging."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_info as log_info
from .logging import logger as logger
from .settings import DEFAULT_SETTINGS as DEFAULT_SETTINGS
from .settings import InterpolationSettings as InterpolationSettings
from .yaml_utils import load_yaml_data as load_yaml_data
