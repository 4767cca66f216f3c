"""Import classes and definitions representing pure geometric primitives."""

from .points import Point2D as Point2D
from .points import Point3D as Point3D
from .spherical import QUARTER_TURN_RAD as QUARTER_TURN_RAD
from .spherical import SphericalCoordinates as SphericalCoordinates
