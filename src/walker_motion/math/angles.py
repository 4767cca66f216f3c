"""Define utility functions for computations involving angles."""

import math

FULL_TURN_RAD = 2 * math.pi
"""One full revolution (radians)."""


def normalize_angle(angle_rad: float) -> float:
    """Normalize the given angle (in radians) into the range [-pi, pi]."""
    while angle_rad < -math.pi:
        angle_rad += FULL_TURN_RAD
    while angle_rad > math.pi:
        angle_rad -= FULL_TURN_RAD
    return angle_rad


def normalize_angle_positive(angle_rad: float, snap_tolerance_rad: float = 1e-9) -> float:
    """Normalize the given angle (in radians) into the range [0, 2*pi).

    Angles within the snap tolerance of a full turn map to zero, so that rounding noise
    on a coincident pair of angles never reads as a complete revolution.

    :param angle_rad: Angle (radians) to be normalized
    :param snap_tolerance_rad: Distance (radians) below a full turn that is treated as zero
    :return: Equivalent angle (radians) in [0, 2*pi)
    """
    normalized_rad = angle_rad % FULL_TURN_RAD
    if FULL_TURN_RAD - normalized_rad <= snap_tolerance_rad:
        return 0.0
    return normalized_rad


def angle_difference_rad(a_rad: float, b_rad: float) -> float:
    """Compute the absolute difference (in normalized radians) between two angles.

    :param a_rad: First angle (radians) in the difference
    :param b_rad: Second angle (radians) in the difference
    :return: Absolute angle difference (radians, between 0 and pi)
    """
    return abs(normalize_angle(a_rad - b_rad))
