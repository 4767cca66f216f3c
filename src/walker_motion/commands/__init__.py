"""Import classes and definitions for motion commands and their interpolation."""

from .clockness import Clockness as Clockness
from .commands import Command as Command
from .commands import LinearCMMD as LinearCMMD
from .commands import RotationalCMMD as RotationalCMMD
from .commands import get_destination as get_destination
from .errors import CenterCoincidentError as CenterCoincidentError
from .errors import CommandParseError as CommandParseError
from .errors import ExtentOverflowError as ExtentOverflowError
from .errors import InterpolationError as InterpolationError
from .errors import InvalidCommandError as InvalidCommandError
from .errors import RadiusMismatchError as RadiusMismatchError
from .interpolation import get_count as get_count
from .interpolation import get_nth_point as get_nth_point
from .parser import parse_command as parse_command
from .waypoint_sequence import WaypointSequence as WaypointSequence
