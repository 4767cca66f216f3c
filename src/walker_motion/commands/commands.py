"""Define classes to represent the motion commands a walker can execute.

A command is one of two kinds of move:

    LinearCMMD - A straight-line move to a destination point.

    RotationalCMMD - A circular-arc move, swept clockwise or counter-clockwise around a
        center on the horizontal plane, ending at a destination on that same plane.

Both kinds are immutable and validated once, at construction; any command that exists
has finite coordinates and (for arcs) a destination on the arc's plane.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from typing_extensions import assert_never

from walker_motion.commands.clockness import Clockness
from walker_motion.commands.errors import InvalidCommandError
from walker_motion.geometry import Point2D, Point3D


def _fmt(value: float) -> str:
    """Format a coordinate as a plain decimal number without exponent notation."""
    return np.format_float_positional(value, trim="-")


def _require_finite(**coordinates: float) -> None:
    """Raise an InvalidCommandError naming any coordinate that is NaN or infinite."""
    bad = {name: value for name, value in coordinates.items() if not math.isfinite(value)}
    if bad:
        raise InvalidCommandError(f"Command coordinates must be finite, got: {bad}")


@dataclass(frozen=True)
class LinearCMMD:
    """A straight-line move to a destination point."""

    destination: Point3D

    def __post_init__(self) -> None:
        """Verify that the destination has finite coordinates."""
        _require_finite(x=self.destination.x, y=self.destination.y, z=self.destination.z)

    def __str__(self) -> str:
        """Render the command in its textual form (e.g., 'LIN X5 Y0 Z0')."""
        d = self.destination
        return f"LIN X{_fmt(d.x)} Y{_fmt(d.y)} Z{_fmt(d.z)}"

    @classmethod
    def new(cls, x: float, y: float, z: float) -> LinearCMMD:
        """Construct a linear command moving to (x,y,z).

        :raises InvalidCommandError: If any coordinate is non-finite
        """
        _require_finite(x=x, y=y, z=z)
        return cls(Point3D(float(x), float(y), float(z)))


@dataclass(frozen=True)
class RotationalCMMD:
    """A circular-arc move on the horizontal plane at the destination's height."""

    spin: Clockness
    destination: Point3D
    center: Point2D
    """Arc center projected onto the horizontal plane."""

    def __post_init__(self) -> None:
        """Verify that the destination and center have finite coordinates."""
        _require_finite(
            x=self.destination.x,
            y=self.destination.y,
            z=self.destination.z,
            i=self.center.x,
            j=self.center.y,
        )

    def __str__(self) -> str:
        """Render the command in its textual form (e.g., 'CW X7.5 Y7.5 Z5 I1.25 J1.25 K5')."""
        keyword = "CCW" if self.spin is Clockness.CCW else "CW"
        d, c = self.destination, self.center
        xyz = f"X{_fmt(d.x)} Y{_fmt(d.y)} Z{_fmt(d.z)}"
        return f"{keyword} {xyz} I{_fmt(c.x)} J{_fmt(c.y)} K{_fmt(d.z)}"

    @property
    def height(self) -> float:
        """Retrieve the constant height (z) of the arc's plane."""
        return self.destination.z

    @classmethod
    def new(
        cls,
        ccw: bool,
        x: float,
        y: float,
        z: float,
        i: float,
        j: float,
        k: float,
    ) -> RotationalCMMD:
        """Construct an arc command from its destination (x,y,z) and center (i,j,k).

        :param ccw: True for a counter-clockwise arc, False for clockwise
        :raises InvalidCommandError: If any value is non-finite or the destination height z
            differs from the arc height k
        """
        _require_finite(x=x, y=y, z=z, i=i, j=j, k=k)
        if z != k:
            raise InvalidCommandError(
                f"Arc destination height Z{z:g} must equal the arc height K{k:g}.",
            )

        return cls(
            spin=Clockness.from_ccw(ccw),
            destination=Point3D(float(x), float(y), float(z)),
            center=Point2D(float(i), float(j)),
        )


Command = Union[LinearCMMD, RotationalCMMD]
"""A single motion command: either a linear or a rotational move."""


def get_destination(command: Command) -> Point3D:
    """Retrieve the point where the walker ends up after executing the command."""
    if isinstance(command, LinearCMMD):
        return command.destination
    if isinstance(command, RotationalCMMD):
        return command.destination  # The arc center is internal geometry
    assert_never(command)
