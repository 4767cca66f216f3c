"""Unit tests for interpolating linear and rotational commands into waypoints."""

from __future__ import annotations

import math

import pytest
from hypothesis import given

from walker_motion.commands import (
    CenterCoincidentError,
    ExtentOverflowError,
    InterpolationError,
    LinearCMMD,
    RadiusMismatchError,
    RotationalCMMD,
    get_count,
    get_destination,
    get_nth_point,
)
from walker_motion.geometry import Point3D
from walker_motion.io import InterpolationSettings
from walker_motion.math import angle_difference_rad

from .strategies.command_strategies import arcs_with_starts, linear_commands
from .strategies.geometry_strategies import positions

FIVE_DEG_RAD = math.radians(5.0)

# =============================================================================
# Linear Moves
# =============================================================================


def test_linear_example_scenario() -> None:
    """Verify the waypoints of a linear move from the origin to (0, 5, 1)."""
    # Arrange - Given a linear command and a start at the origin
    command = LinearCMMD.new(0, 5, 1)
    start = Point3D(0.0, 0.0, 0.0)

    # Act - Count the waypoints and compute each of them
    count = get_count(command, start)
    points = [get_nth_point(command, start, n) for n in range(1, count + 1)]

    # Assert - Six waypoints, starting near (0, 0.98, 0.2) and ending exactly at (0, 5, 1)
    assert count == 6
    assert points[0].approx_equal(Point3D(0.0, 0.98, 0.2), atol=0.005)
    assert points[-1] == Point3D(0.0, 5.0, 1.0)
    for a, b in zip(points[:-2], points[1:-1]):
        assert a.distance_to(b) == pytest.approx(1.0, abs=0.005)


def test_linear_zero_length_move() -> None:
    """Verify that a move to the start point is a single step onto the destination."""
    command = LinearCMMD.new(1.5, -2.0, 3.0)
    start = Point3D(1.5, -2.0, 3.0)

    assert get_count(command, start) == 1
    assert get_nth_point(command, start, 1) == get_destination(command)


def test_linear_sub_unit_move() -> None:
    """Verify that a move shorter than one step is a single step onto the destination."""
    command = LinearCMMD.new(0.25, 0.0, 0.0)
    start = Point3D(0.0, 0.0, 0.0)

    assert get_count(command, start) == 1
    assert get_nth_point(command, start, 1) == Point3D(0.25, 0.0, 0.0)


def test_linear_integer_length_move() -> None:
    """Verify that a move of exactly five units takes five unit steps."""
    command = LinearCMMD.new(5.0, 0.0, 0.0)
    start = Point3D(0.0, 0.0, 0.0)

    assert get_count(command, start) == 5
    assert get_nth_point(command, start, 3) == Point3D(3.0, 0.0, 0.0)


@given(linear_commands(), positions())
def test_linear_exact_endpoint(command: LinearCMMD, start: Point3D) -> None:
    """Verify that the last linear waypoint is exactly the destination."""
    # Arrange/Act - Given any linear command and start, compute the final waypoint
    count = get_count(command, start)
    last = get_nth_point(command, start, count)

    # Assert - At least one step, and the last waypoint equals the destination bit-for-bit
    assert count >= 1
    assert last == get_destination(command)


@given(linear_commands(), positions())
def test_linear_unit_spacing(command: LinearCMMD, start: Point3D) -> None:
    """Verify that consecutive linear waypoints are one unit apart, except the final segment."""
    # Arrange/Act - Compute every waypoint, preceded by the start point
    count = get_count(command, start)
    points = [start] + [get_nth_point(command, start, n) for n in range(1, count + 1)]

    # Assert - All segments but the last are unit length; the last is at most one unit
    segment_lengths = [a.distance_to(b) for a, b in zip(points[:-1], points[1:])]
    for length in segment_lengths[:-1]:
        assert length == pytest.approx(1.0, abs=1e-6)
    assert segment_lengths[-1] <= 1.0 + 1e-6


@given(linear_commands(), positions())
def test_linear_count_matches_distance(command: LinearCMMD, start: Point3D) -> None:
    """Verify that the linear count is the travel distance rounded up, at least one."""
    distance = start.distance_to(get_destination(command))
    count = get_count(command, start)

    assert count >= 1
    assert count - 1 <= distance + 1e-6
    assert distance <= count + 1e-6


@pytest.mark.parametrize("whole_units", [1, 5, 37])
@pytest.mark.parametrize("excess", [1e-10, 1e-7, 0.5])
def test_linear_count_rounds_up_past_whole_units(whole_units: int, excess: float) -> None:
    """Verify that a move just past a whole number of units needs one more step."""
    # Arrange - Given a move slightly longer than a whole number of unit steps
    command = LinearCMMD.new(whole_units + excess, 0.0, 0.0)
    start = Point3D(0.0, 0.0, 0.0)

    # Act - Count the waypoints and compute the final two of them
    count = get_count(command, start)
    second_last = get_nth_point(command, start, count - 1)
    last = get_nth_point(command, start, count)

    # Assert - The extra sliver is its own step, ending exactly on the destination
    assert count == whole_units + 1
    assert second_last == Point3D(float(whole_units), 0.0, 0.0)
    assert last == get_destination(command)


@pytest.mark.parametrize("whole_units", [1, 5, 37])
def test_linear_count_at_whole_units(whole_units: int) -> None:
    """Verify that a move of exactly a whole number of units needs no extra step."""
    command = LinearCMMD.new(0.0, -float(whole_units), 0.0)
    start = Point3D(0.0, 0.0, 0.0)

    assert get_count(command, start) == whole_units


def test_chained_moves_end_on_each_destination() -> None:
    """Verify that each move of a chain ends exactly where its command says."""
    # Arrange - Given moves whose lengths are slightly more than whole numbers
    commands = [
        LinearCMMD.new(5.0000000001, 0.0, 0.0),
        LinearCMMD.new(5.0000000001, 3.0000000002, 0.0),
        LinearCMMD.new(0.0, 0.0, 0.0),
    ]
    position = Point3D(0.0, 0.0, 0.0)

    # Act/Assert - The last waypoint of every move is its destination, so no drift builds up
    for command in commands:
        last = get_nth_point(command, position, get_count(command, position))
        assert last == get_destination(command)
        position = last


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_linear_distance_overflow() -> None:
    """Verify that a move too long to measure as a float raises a clear error."""
    command = LinearCMMD.new(1e308, 0.0, 0.0)
    start = Point3D(-1e308, 0.0, 0.0)

    with pytest.raises(ExtentOverflowError, match="overflows"):
        _ = get_count(command, start)
    with pytest.raises(InterpolationError):
        _ = get_nth_point(command, start, 1)


def test_linear_respects_step_setting() -> None:
    """Verify that halving the linear step doubles the number of waypoints."""
    command = LinearCMMD.new(0.0, 0.0, 3.0)
    start = Point3D(0.0, 0.0, 0.0)
    settings = InterpolationSettings(linear_step=0.5)

    assert get_count(command, start, settings) == 6
    assert get_nth_point(command, start, 1, settings) == Point3D(0.0, 0.0, 0.5)


# =============================================================================
# Rotational Moves
# =============================================================================


def test_rotational_example_scenario() -> None:
    """Verify that the clockwise arc around (1.25, 1.25) interpolates from a start on its circle."""
    # Arrange - Given the example arc and a start point at the same radius from its center
    command = RotationalCMMD.new(False, 7.5, 7.5, 5, 1.25, 1.25, 5)
    start = Point3D(-5.0, -5.0, 5.0)

    # Act - Count the waypoints (a half turn at five degrees per step)
    count = get_count(command, start)

    # Assert - Thirty-six steps; the half-way point is a quarter turn clockwise from the start
    assert count == 36
    assert get_nth_point(command, start, 18).approx_equal(Point3D(-5.0, 7.5, 5.0), atol=1e-9)
    assert get_nth_point(command, start, count) == Point3D(7.5, 7.5, 5.0)


def test_rotational_direction() -> None:
    """Verify that counter-clockwise and clockwise arcs sweep in opposite directions."""
    # Arrange - Given arcs in both directions from (1,0) to (0,1) around the origin
    ccw = RotationalCMMD.new(True, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)
    cw = RotationalCMMD.new(False, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(1.0, 0.0, 0.0)

    # Act/Assert - A quarter turn takes 18 steps, three quarters take 54 steps
    assert get_count(ccw, start) == 18
    assert get_count(cw, start) == 54

    expected_ccw = Point3D(math.cos(FIVE_DEG_RAD), math.sin(FIVE_DEG_RAD), 0.0)
    expected_cw = Point3D(math.cos(FIVE_DEG_RAD), -math.sin(FIVE_DEG_RAD), 0.0)
    assert get_nth_point(ccw, start, 1).approx_equal(expected_ccw, atol=1e-12)
    assert get_nth_point(cw, start, 1).approx_equal(expected_cw, atol=1e-12)


def test_rotational_waypoints_use_arc_height() -> None:
    """Verify that arc waypoints lie at the arc's height regardless of the start height."""
    command = RotationalCMMD.new(True, -2.0, 0.0, 4.0, 0.0, 0.0, 4.0)
    start = Point3D(2.0, 0.0, -1.0)

    count = get_count(command, start)
    assert count == 36
    for n in range(1, count + 1):
        assert get_nth_point(command, start, n).z == 4.0


def test_rotational_zero_sweep_is_single_step() -> None:
    """Verify that an arc ending at its start angle is one step, not a full revolution."""
    command = RotationalCMMD.new(True, 3.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(3.0, 0.0, 0.0)

    assert get_count(command, start) == 1
    assert get_nth_point(command, start, 1) == Point3D(3.0, 0.0, 0.0)


def test_rotational_center_coincident() -> None:
    """Verify that a start point projecting onto the arc center is rejected."""
    command = RotationalCMMD.new(True, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(0.0, 0.0, 3.0)  # Height is ignored when projecting onto the arc plane

    with pytest.raises(CenterCoincidentError, match="coincides"):
        _ = get_count(command, start)
    with pytest.raises(InterpolationError):
        _ = get_nth_point(command, start, 1)


def test_rotational_radius_mismatch() -> None:
    """Verify that endpoints at different distances from the center are rejected."""
    command = RotationalCMMD.new(False, 2.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(1.0, 0.0, 0.0)

    with pytest.raises(RadiusMismatchError, match="differs"):
        _ = get_count(command, start)


def test_rotational_radius_within_tolerance() -> None:
    """Verify that radii differing by less than the absolute tolerance are accepted."""
    command = RotationalCMMD.new(True, -1.00005, 0.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(1.0, 0.0, 0.0)

    assert get_count(command, start) == 36


def test_rotational_respects_resolution_setting() -> None:
    """Verify that doubling the angular resolution halves the number of arc waypoints."""
    command = RotationalCMMD.new(True, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(1.0, 0.0, 0.0)
    settings = InterpolationSettings(angular_resolution_deg=10.0)

    assert get_count(command, start, settings) == 9


@pytest.mark.parametrize(
    ("sweep_deg", "expected_count"),
    [
        (90.0, 18),
        (90.001, 19),
        (92.5, 19),
        (95.0, 19),
        (4.999, 1),
        (5.001, 2),
    ],
)
def test_rotational_count_rounds_up_past_whole_steps(
    sweep_deg: float,
    expected_count: int,
) -> None:
    """Verify that an arc sweeping just past a multiple of five degrees needs one more step."""
    # Arrange - Given a counter-clockwise arc of the given sweep on a circle of radius 2
    sweep_rad = math.radians(sweep_deg)
    dest_x, dest_y = 2.0 * math.cos(sweep_rad), 2.0 * math.sin(sweep_rad)
    command = RotationalCMMD.new(True, dest_x, dest_y, 0.0, 0.0, 0.0, 0.0)
    start = Point3D(2.0, 0.0, 0.0)

    # Act/Assert - The count is the sweep divided by five degrees, rounded up
    count = get_count(command, start)
    assert count == expected_count
    assert get_nth_point(command, start, count) == get_destination(command)


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_rotational_radius_overflow() -> None:
    """Verify that an arc too wide to measure as a float raises a clear error."""
    command = RotationalCMMD.new(True, 1e308, 0.0, 0.0, -1e308, 0.0, 0.0)
    start = Point3D(-1e308, 1.0, 0.0)

    with pytest.raises(ExtentOverflowError, match="overflows"):
        _ = get_count(command, start)


@given(arcs_with_starts())
def test_rotational_exact_endpoint(arc: tuple[RotationalCMMD, Point3D]) -> None:
    """Verify that the last arc waypoint is exactly the destination."""
    # Arrange/Act - Given any valid arc and start, compute the final waypoint
    command, start = arc
    count = get_count(command, start)
    last = get_nth_point(command, start, count)

    # Assert - At least one step, and the last waypoint equals the destination bit-for-bit
    assert 1 <= count <= 72
    assert last == get_destination(command)


@given(arcs_with_starts())
def test_rotational_radius_invariance(arc: tuple[RotationalCMMD, Point3D]) -> None:
    """Verify that every arc waypoint lies at the start's distance from the center."""
    # Arrange - Given any valid arc, measure the radius at the start point
    command, start = arc
    radius = start.to_2d().distance_to(command.center)

    # Act/Assert - Every waypoint lies on the circle, at the arc's height
    for n in range(1, get_count(command, start) + 1):
        point = get_nth_point(command, start, n)
        assert point.to_2d().distance_to(command.center) == pytest.approx(radius, abs=1e-6)
        assert point.z == command.height


@given(arcs_with_starts())
def test_rotational_angular_spacing(arc: tuple[RotationalCMMD, Point3D]) -> None:
    """Verify that consecutive arc waypoints are five degrees apart, in the arc's direction."""
    # Arrange - Compute the offset of each waypoint from the arc center
    command, start = arc
    count = get_count(command, start)
    points = [start] + [get_nth_point(command, start, n) for n in range(1, count + 1)]
    offsets = [p.to_2d() - command.center for p in points]

    # Act/Assert - All steps but the last sweep exactly five degrees in the spin direction
    for a, b in zip(offsets[:-2], offsets[1:-1]):
        cross = a.x * b.y - a.y * b.x
        assert cross * command.spin.factor > 0.0
        assert angle_difference_rad(b.angle_rad(), a.angle_rad()) == pytest.approx(
            FIVE_DEG_RAD,
            abs=1e-6,
        )

    last_step_rad = angle_difference_rad(offsets[-1].angle_rad(), offsets[-2].angle_rad())
    assert last_step_rad <= FIVE_DEG_RAD + 1e-6


# =============================================================================
# Index Preconditions
# =============================================================================


@pytest.mark.parametrize(
    "command",
    [LinearCMMD.new(3.0, 0.0, 0.0), RotationalCMMD.new(True, -1.0, 0.0, 0.0, 0.0, 0.0, 0.0)],
)
def test_nth_point_out_of_range(command: LinearCMMD | RotationalCMMD) -> None:
    """Verify that requesting waypoint 0 or a waypoint past the count raises an IndexError."""
    start = Point3D(1.0, 0.0, 0.0)
    count = get_count(command, start)

    with pytest.raises(IndexError, match="outside the valid range"):
        _ = get_nth_point(command, start, 0)
    with pytest.raises(IndexError, match="outside the valid range"):
        _ = get_nth_point(command, start, count + 1)
