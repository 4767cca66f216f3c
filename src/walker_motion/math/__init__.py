"""Import definitions relating to general mathematical operations."""

from .angles import FULL_TURN_RAD as FULL_TURN_RAD
from .angles import angle_difference_rad as angle_difference_rad
from .angles import normalize_angle as normalize_angle
from .angles import normalize_angle_positive as normalize_angle_positive
