"""Homogeneous 4-component tuples for points and vectors.

This module provides the Tuple value type used throughout the ray tracer,
along with constructors and vector utility functions. A tuple stores
``(x, y, z, w)`` where the ``w`` component distinguishes the two kinds of
value a renderer works with:

- ``w == 0``: a vector (a direction or displacement)
- ``w == 1``: a point (a location in space)

The classification is always derived from ``w``, so it stays correct after
arithmetic: subtracting two points yields a vector, subtracting a vector
from a point yields a point, and so on.

Example:
    >>> from raytracer.core.tuples import point, vector
    >>> p = point(3.0, 2.0, 1.0)
    >>> v = vector(5.0, 6.0, 7.0)
    >>> (p - v).is_point()
    True
    >>> print(vector(1.0, 2.0, 3.0).cross_product(vector(2.0, 3.0, 4.0)))
    (-1.0, 2.0, -1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real

# Tolerance used when comparing floating point components
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Check whether two floats are equal within EPSILON.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if ``|a - b| < EPSILON``.
    """
    return abs(a - b) < EPSILON


class TupleKind(IntEnum):
    """Classification of a tuple by its ``w`` component.

    The enum values match the ``w`` component of the tuple they describe.
    """

    VECTOR = 0
    POINT = 1


@dataclass(frozen=True, eq=False)
class Tuple:
    """An immutable homogeneous coordinate ``(x, y, z, w)``.

    Prefer the ``point()`` and ``vector()`` constructors, which guarantee a
    ``w`` of exactly 1 or 0. The raw constructor accepts any ``w`` for
    intermediate or interpolated values.

    Equality compares every component within EPSILON, so tuples are not
    hashable.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1 for points, 0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    # =========================================================================
    # Classification
    # =========================================================================

    def is_point(self) -> bool:
        """Return True if this tuple is a point (``w == 1``)."""
        return approx_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        """Return True if this tuple is a vector (``w == 0``)."""
        return approx_equal(self.w, 0.0)

    @property
    def kind(self) -> TupleKind | None:
        """Get the kind of this tuple.

        Returns:
            TupleKind.POINT or TupleKind.VECTOR, or None when ``w`` is
            neither 0 nor 1 (for example the sum of two points).
        """
        if self.is_vector():
            return TupleKind.VECTOR
        if self.is_point():
            return TupleKind.POINT
        return None

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Tuple) -> Tuple:
        # point + point is allowed and yields w == 2
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return zero_vector() - self

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        """Divide every component, including ``w``, by a scalar.

        Division by zero is not guarded; ZeroDivisionError propagates.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    # =========================================================================
    # Vector operations
    # =========================================================================

    def magnitude(self) -> float:
        """Compute the Euclidean length over ``(x, y, z)``.

        The ``w`` component does not contribute.

        Returns:
            ``sqrt(x^2 + y^2 + z^2)``.
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalise(self) -> Tuple:
        """Scale the tuple to unit length.

        Returns:
            This tuple divided by its own magnitude.

        Raises:
            ZeroDivisionError: If the tuple has zero magnitude.
        """
        return self / self.magnitude()

    def dot_product(self, other: Tuple) -> float:
        """Compute the dot product of two tuples.

        All four components participate. For two vectors the ``w`` term is
        zero, so the result is the usual 3D dot product.

        Args:
            other: The other tuple.

        Returns:
            ``x*x' + y*y' + z*z' + w*w'``.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross_product(self, other: Tuple) -> Tuple:
        """Compute the 3D cross product ``self x other``.

        Only ``(x, y, z)`` are used and the result is always a vector.

        Args:
            other: The right-hand operand.

        Returns:
            A vector perpendicular to both operands.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


# =============================================================================
# Constructors
# =============================================================================


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (``w == 1``)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (``w == 0``)."""
    return Tuple(x, y, z, 0.0)


def zero_vector() -> Tuple:
    """Create the zero vector ``(0, 0, 0, 0)``."""
    return Tuple(0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Vector Utility Functions
# =============================================================================


def magnitude(v: Tuple) -> float:
    """Compute the length of a vector. See Tuple.magnitude."""
    return v.magnitude()


def normalise(v: Tuple) -> Tuple:
    """Normalise a vector to unit length. See Tuple.normalise."""
    return v.normalise()


def dot(a: Tuple, b: Tuple) -> float:
    """Compute the dot product of two tuples. See Tuple.dot_product."""
    return a.dot_product(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Compute the cross product of two vectors. See Tuple.cross_product."""
    return a.cross_product(b)
