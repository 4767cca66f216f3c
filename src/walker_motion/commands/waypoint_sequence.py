"""Define a lazy, bidirectional sequence over the waypoints of a single command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from walker_motion.commands.commands import Command, get_destination
from walker_motion.commands.interpolation import get_count, get_nth_point
from walker_motion.io.logging import logger
from walker_motion.io.settings import DEFAULT_SETTINGS, InterpolationSettings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from walker_motion.geometry import Point3D


class WaypointSequence:
    """Waypoints 1..count of a command, computed one at a time as they are pulled.

    Points may be pulled from the front (next()) and from the back (next_back()); both
    ends consume the same remaining interval of indices. Once the interval is empty the
    sequence stays exhausted. Points are recomputed on demand and never cached.
    """

    def __init__(
        self,
        command: Command,
        start: Point3D,
        settings: InterpolationSettings = DEFAULT_SETTINGS,
    ) -> None:
        """Initialize the sequence by counting the command's waypoints from the start point.

        :param command: Command whose waypoints are enumerated
        :param start: Finite point where the move begins
        :param settings: Interpolation settings used for every waypoint
        :raises InterpolationError: If the command cannot be interpolated from start
        """
        self.command = command
        self.start = start
        self.settings = settings

        self.count = get_count(command, start, settings)
        """Total number of waypoints in the sequence, fixed at construction."""

        self._front = 1  # Next index pulled from the front
        self._back = self.count  # Next index pulled from the back

        logger.debug("Interpolating '%s' from %s in %d waypoints.", command, start, self.count)

    def __repr__(self) -> str:
        """Return a readable representation of the sequence and its remaining interval."""
        return (
            f"WaypointSequence(command='{self.command}', start={self.start}, "
            f"remaining=[{self._front}, {self._back}])"
        )

    def __len__(self) -> int:
        """Retrieve the number of waypoints not yet pulled from either end."""
        return max(0, self._back - self._front + 1)

    def __iter__(self) -> Iterator[Point3D]:
        """Return the sequence itself, which is its own front iterator."""
        return self

    def __next__(self) -> Point3D:
        """Pull the next waypoint from the front of the sequence."""
        if self._front > self._back:
            raise StopIteration

        point = get_nth_point(self.command, self.start, self._front, self.settings)
        self._front += 1
        return point

    def next_back(self) -> Point3D:
        """Pull the next waypoint from the back of the sequence.

        :raises StopIteration: If the sequence is exhausted
        """
        if self._front > self._back:
            raise StopIteration

        point = get_nth_point(self.command, self.start, self._back, self.settings)
        self._back -= 1
        return point

    def __reversed__(self) -> Iterator[Point3D]:
        """Yield the remaining waypoints from the back, consuming them from this sequence."""
        while len(self) > 0:
            yield self.next_back()

    @property
    def destination(self) -> Point3D:
        """Retrieve the final waypoint of the sequence (the command's destination)."""
        return get_destination(self.command)
