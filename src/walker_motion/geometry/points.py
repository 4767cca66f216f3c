"""Define classes to represent positions and displacements in 2D and 3D space."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from numpy.typing import NDArray


@dataclass(frozen=True)
class Point2D:
    """An (x,y) position on the 2D plane."""

    x: float
    y: float

    def __sub__(self, other: Point2D) -> Point2D:
        """Compute the displacement from another 2D point to this one."""
        return Point2D.from_array(self.to_array() - other.to_array())

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Point2D:
        """Construct a Point2D from a NumPy array."""
        if arr.shape != (2,):
            raise ValueError(f"Cannot construct Point2D from an array of shape {arr.shape}.")

        return cls(float(arr[0]), float(arr[1]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the 2D point into a NumPy array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def to_3d(self, z: float) -> Point3D:
        """Lift the 2D point onto the horizontal plane at height z."""
        return Point3D(self.x, self.y, z)

    def length(self) -> float:
        """Compute the Euclidean norm of the point treated as a vector."""
        return float(np.linalg.norm(self.to_array()))

    def distance_to(self, other: Point2D) -> float:
        """Compute the Euclidean distance to another 2D point."""
        return (self - other).length()

    def angle_rad(self) -> float:
        """Compute the angle (radians) of the vector from the x-axis, in [-pi, pi]."""
        return math.atan2(self.y, self.x)


@dataclass(frozen=True)
class Point3D:
    """An (x,y,z) position in 3D space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the point's (x,y,z) coordinates."""
        yield from astuple(self)

    def __add__(self, other: Point3D) -> Point3D:
        """Translate this point by another point treated as a displacement."""
        return Point3D.from_array(self.to_array() + other.to_array())

    def __sub__(self, other: Point3D) -> Point3D:
        """Compute the displacement from another 3D point to this one."""
        return Point3D.from_array(self.to_array() - other.to_array())

    def __mul__(self, factor: float) -> Point3D:
        """Scale the point (as a vector) by a scalar factor."""
        return Point3D.from_array(self.to_array() * factor)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Point3D:
        """Construct a Point3D from a NumPy array."""
        if arr.shape == (3, 1):
            arr = arr.reshape(3)

        if arr.shape != (3,):
            raise ValueError(f"Cannot construct Point3D from an array of shape {arr.shape}.")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the 3D point to a NumPy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point3D:
        """Construct a Point3D instance from a sequence (e.g., list or tuple) of values."""
        if len(values) != 3:
            raise ValueError(f"Point3D expects 3 values, got {len(values)}")
        return Point3D(float(values[0]), float(values[1]), float(values[2]))

    def to_2d(self) -> Point2D:
        """Project the point onto the horizontal (x,y) plane."""
        return Point2D(self.x, self.y)

    def is_finite(self) -> bool:
        """Evaluate whether all three coordinates are finite (neither NaN nor infinite)."""
        return bool(np.all(np.isfinite(self.to_array())))

    def length_squared(self) -> float:
        """Compute the squared Euclidean norm of the point treated as a vector."""
        arr = self.to_array()
        return float(np.dot(arr, arr))

    def length(self) -> float:
        """Compute the Euclidean norm of the point treated as a vector."""
        return float(np.linalg.norm(self.to_array()))

    def normalized(self) -> Point3D:
        """Scale the vector to unit length.

        :return: Unit vector pointing in the same direction
        :raises ValueError: If the vector has zero length
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return Point3D.from_array(self.to_array() / length)

    def distance_to(self, other: Point3D) -> float:
        """Compute the Euclidean distance to another 3D point."""
        return (self - other).length()

    def approx_equal(self, other: Point3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Point3D is approximately equal to this one."""
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))
