"""Define an enumeration of the rotational directions of an arc."""

from __future__ import annotations

from enum import Enum


class Clockness(Enum):
    """Direction in which an arc is swept, viewed from above the arc plane."""

    CW = "clockwise"
    CCW = "counter-clockwise"

    @classmethod
    def from_ccw(cls, ccw: bool) -> Clockness:
        """Construct a Clockness from a flag that is True for counter-clockwise arcs."""
        return cls.CCW if ccw else cls.CW

    @property
    def factor(self) -> float:
        """Retrieve the sign applied to angular sweeps (-1 clockwise, +1 counter-clockwise)."""
        return 1.0 if self is Clockness.CCW else -1.0
