"""Define a class to represent 3D vectors in spherical coordinates.

Convention (ISO 80000-2): the polar angle is measured from the +z axis and the
azimuth is measured in the x-y plane from the +x axis, counter-clockwise when
viewed from above. Any vector in the horizontal plane has a polar angle of pi/2.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from walker_motion.geometry.points import Point3D

QUARTER_TURN_RAD = math.pi / 2
"""Polar angle (radians) of every vector lying in the horizontal plane."""


@dataclass(frozen=True)
class SphericalCoordinates:
    """A 3D vector expressed as (radius, polar angle, azimuth)."""

    radius: float
    polar_rad: float
    azimuth_rad: float

    @classmethod
    def from_cartesian(cls, vector: Point3D) -> SphericalCoordinates:
        """Convert a Cartesian vector into spherical coordinates.

        The zero vector maps to a zero radius with both angles set to zero.
        """
        radius = vector.length()
        if radius == 0.0:
            return cls(0.0, 0.0, 0.0)

        polar_rad = math.atan2(math.hypot(vector.x, vector.y), vector.z)
        azimuth_rad = math.atan2(vector.y, vector.x)
        return cls(radius, polar_rad, azimuth_rad)

    def to_cartesian(self) -> Point3D:
        """Convert the spherical coordinates back into a Cartesian vector."""
        sin_polar = math.sin(self.polar_rad)
        return Point3D(
            self.radius * sin_polar * math.cos(self.azimuth_rad),
            self.radius * sin_polar * math.sin(self.azimuth_rad),
            self.radius * math.cos(self.polar_rad),
        )

    def rotated_azimuth(self, delta_rad: float) -> SphericalCoordinates:
        """Return a copy with the azimuth advanced by the given angle (radians)."""
        return replace(self, azimuth_rad=self.azimuth_rad + delta_rad)
