"""Define functions that discretize motion commands into sequences of waypoints.

Every command kind answers two questions for a given start point:

    get_count - How many waypoints lie between the start and the command's destination,
        counting the destination but not the start? Always at least one.

    get_nth_point - Where does waypoint n lie, for n in [1, count]? Waypoint `count` is
        always the command's destination itself, never an approximation of it.

Linear moves are sampled at a fixed distance (one unit by default) along the segment.
Arcs are sampled at a fixed angular resolution (5 degrees by default) around the center.
Each call recomputes from scratch; nothing is cached between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import assert_never

from walker_motion.commands.commands import Command, LinearCMMD, RotationalCMMD
from walker_motion.commands.errors import (
    CenterCoincidentError,
    ExtentOverflowError,
    RadiusMismatchError,
)
from walker_motion.geometry import QUARTER_TURN_RAD, Point2D, SphericalCoordinates
from walker_motion.io.settings import DEFAULT_SETTINGS, InterpolationSettings
from walker_motion.math import normalize_angle_positive

if TYPE_CHECKING:
    from walker_motion.geometry import Point3D

ARC_STEP_DECIMALS = 9
"""Arc sweep ratios are rounded to this many decimals before taking the ceiling."""


def _check_index(n: int, count: int) -> None:
    """Raise an IndexError unless 1 <= n <= count."""
    if not 1 <= n <= count:
        raise IndexError(f"Waypoint index {n} is outside the valid range [1, {count}].")


def _check_finite_extent(extent: float, description: str) -> None:
    """Raise an ExtentOverflowError if a distance overflowed to infinity."""
    if not math.isfinite(extent):
        raise ExtentOverflowError(
            f"The {description} overflows a float; the move cannot be divided into steps.",
        )


# =============================================================================
# Linear Moves
# =============================================================================


def linear_count(
    command: LinearCMMD,
    start: Point3D,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> int:
    """Count the waypoints needed to travel in a straight line from start to the destination.

    :param command: Linear command being interpolated
    :param start: Finite point where the move begins
    :param settings: Interpolation settings providing the linear step size
    :return: max(1, ceil(distance / step))
    :raises ExtentOverflowError: If the distance is too large to represent as a float
    """
    distance = (command.destination - start).length()
    _check_finite_extent(distance, "distance from the start to the destination")
    return max(1, math.ceil(distance / settings.linear_step))


def linear_nth_point(
    command: LinearCMMD,
    start: Point3D,
    n: int,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> Point3D:
    """Compute the n-th waypoint along a straight line from start to the destination.

    :raises ExtentOverflowError: If the distance is too large to represent as a float
    :raises IndexError: If n is outside [1, count]
    """
    count = linear_count(command, start, settings)
    _check_index(n, count)

    displacement = command.destination - start
    travelled = n * settings.linear_step
    if n == count or travelled**2 >= displacement.length_squared():
        return command.destination

    return start + displacement.normalized() * travelled


# =============================================================================
# Rotational Moves
# =============================================================================


@dataclass(frozen=True)
class ArcSweep:
    """Geometry of an arc from a particular start point, projected onto the arc's plane."""

    start_offset: Point2D
    """Vector from the arc center to the projected start point."""

    sweep_rad: float
    """Angle (radians) swept in the command's direction, in [0, 2*pi)."""


def arc_sweep(
    command: RotationalCMMD,
    start: Point3D,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> ArcSweep:
    """Validate the arc from the given start point and measure its angular sweep.

    :param command: Rotational command being interpolated
    :param start: Finite point where the arc begins (its height is ignored)
    :param settings: Interpolation settings providing the radius tolerances
    :return: Arc geometry relative to the start point
    :raises ExtentOverflowError: If either radius is too large to represent as a float
    :raises CenterCoincidentError: If the projected start point coincides with the center
    :raises RadiusMismatchError: If the start and destination radii differ beyond tolerance
    """
    start_offset = start.to_2d() - command.center
    dest_offset = command.destination.to_2d() - command.center

    start_radius = start_offset.length()
    _check_finite_extent(start_radius, "arc radius at the start")
    if start_radius <= settings.radius_abs_tolerance:
        raise CenterCoincidentError(
            f"Arc start ({start.x}, {start.y}) coincides with the arc center "
            f"({command.center.x}, {command.center.y}); the arc radius is undefined.",
        )

    dest_radius = dest_offset.length()
    _check_finite_extent(dest_radius, "arc radius at the destination")
    if not math.isclose(
        start_radius,
        dest_radius,
        rel_tol=settings.radius_rel_tolerance,
        abs_tol=settings.radius_abs_tolerance,
    ):
        raise RadiusMismatchError(
            f"Arc start radius {start_radius} differs from destination radius {dest_radius} "
            f"around center ({command.center.x}, {command.center.y}).",
        )

    signed_sweep_rad = (dest_offset.angle_rad() - start_offset.angle_rad()) * command.spin.factor
    return ArcSweep(start_offset, normalize_angle_positive(signed_sweep_rad))


def _arc_steps(sweep: ArcSweep, settings: InterpolationSettings) -> int:
    """Round the sweep up to a whole number of angular steps, at least one.

    The ratio is rounded first so that a nominal multiple of the resolution (e.g., a
    quarter turn at 5 degrees) is not pushed up a step by atan2 rounding noise.
    """
    ratio = sweep.sweep_rad / settings.angular_resolution_rad
    return max(1, math.ceil(round(ratio, ARC_STEP_DECIMALS)))


def rotational_count(
    command: RotationalCMMD,
    start: Point3D,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> int:
    """Count the waypoints needed to sweep the arc from start to the destination.

    A zero sweep (start and destination at the same angle) is a single step onto the
    destination, not a full revolution.

    :return: max(1, ceil(sweep / angular resolution))
    :raises InterpolationError: If the arc is degenerate from this start point
    """
    return _arc_steps(arc_sweep(command, start, settings), settings)


def rotational_nth_point(
    command: RotationalCMMD,
    start: Point3D,
    n: int,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> Point3D:
    """Compute the n-th waypoint along the arc from start to the destination.

    :raises InterpolationError: If the arc is degenerate from this start point
    :raises IndexError: If n is outside [1, count]
    """
    sweep = arc_sweep(command, start, settings)
    count = _arc_steps(sweep, settings)
    _check_index(n, count)

    if n == count:
        return command.destination

    offset = SphericalCoordinates.from_cartesian(sweep.start_offset.to_3d(0.0))
    assert offset.polar_rad == QUARTER_TURN_RAD, "Arc offsets must lie in the horizontal plane"

    delta_rad = settings.angular_resolution_rad * command.spin.factor * n
    waypoint_offset = offset.rotated_azimuth(delta_rad).to_cartesian()
    return command.center.to_3d(command.height) + waypoint_offset.to_2d().to_3d(0.0)


# =============================================================================
# Dispatch Over Command Kinds
# =============================================================================


def get_count(
    command: Command,
    start: Point3D,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> int:
    """Count the waypoints from start to the command's destination (destination included).

    :param command: Linear or rotational command to be interpolated
    :param start: Finite point where the move begins (e.g., the previous destination)
    :param settings: Interpolation settings (defaults to unit steps and 5-degree arcs)
    :return: Number of waypoints, at least one
    :raises InterpolationError: If a rotational command is degenerate from this start point
    """
    if isinstance(command, LinearCMMD):
        return linear_count(command, start, settings)
    if isinstance(command, RotationalCMMD):
        return rotational_count(command, start, settings)
    assert_never(command)


def get_nth_point(
    command: Command,
    start: Point3D,
    n: int,
    settings: InterpolationSettings = DEFAULT_SETTINGS,
) -> Point3D:
    """Compute the n-th waypoint of the command, for n in [1, get_count(command, start)].

    :raises InterpolationError: If a rotational command is degenerate from this start point
    :raises IndexError: If n is outside [1, count]
    """
    if isinstance(command, LinearCMMD):
        return linear_nth_point(command, start, n, settings)
    if isinstance(command, RotationalCMMD):
        return rotational_nth_point(command, start, n, settings)
    assert_never(command)
