"""Vector and rectangle value types.

This module defines the small geometric collaborators of a path:
- Vector2: A 2D point or vector with a cross product
- Rect: An axis-aligned rectangle built from a min and a max corner
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Vector2:
    """A point in 2D space.

    Immutable and hashable. Coordinates may be any real number type;
    a path keeps one scalar type for all of its points.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def cross(self, other: "Vector2") -> float:
        """Return the 2D cross product (z of the 3D cross product).

        Args:
            other: Right-hand operand

        Returns:
            Signed area of the parallelogram spanned by both vectors

        Examples:
            >>> Vector2(1, 0).cross(Vector2(0, 1))
            1
            >>> Vector2(0, 1).cross(Vector2(1, 0))
            -1
        """
        return self.x * other.y - self.y * other.x

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def coerce(cls, value: "PointLike") -> "Vector2":
        """Return value as a Vector2.

        Args:
            value: A Vector2 or an (x, y) pair

        Returns:
            Vector2 instance (value itself when it already is one)

        Raises:
            TypeError: If value is not a point or a pair of numbers
        """
        if isinstance(value, Vector2):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"Expected a Vector2 or an (x, y) pair, got {value!r}")


PointLike = Union[Vector2, tuple[float, float]]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        minimum: Corner with the smallest coordinates
        maximum: Corner with the largest coordinates
    """

    minimum: Vector2
    maximum: Vector2

    @classmethod
    def from_points(cls, a: PointLike, b: PointLike) -> "Rect":
        """Create the rectangle spanned by two opposite corners in any order."""
        a = Vector2.coerce(a)
        b = Vector2.coerce(b)
        return cls(
            Vector2(min(a.x, b.x), min(a.y, b.y)),
            Vector2(max(a.x, b.x), max(a.y, b.y)),
        )

    @property
    def min_x(self) -> float:
        return self.minimum.x

    @property
    def min_y(self) -> float:
        return self.minimum.y

    @property
    def max_x(self) -> float:
        return self.maximum.x

    @property
    def max_y(self) -> float:
        return self.maximum.y

    @property
    def x(self) -> float:
        """Left edge (alias of min_x)."""
        return self.minimum.x

    @property
    def y(self) -> float:
        """Top edge in a y-down convention (alias of min_y)."""
        return self.minimum.y

    @property
    def width(self) -> float:
        return self.maximum.x - self.minimum.x

    @property
    def height(self) -> float:
        return self.maximum.y - self.minimum.y

    def is_empty(self) -> bool:
        """Check if the rectangle has zero width or zero height."""
        return self.width == 0 or self.height == 0

    def contains(self, point: PointLike) -> bool:
        """Check if point lies inside the rectangle or on its edge."""
        point = Vector2.coerce(point)
        return (
            self.minimum.x <= point.x <= self.maximum.x
            and self.minimum.y <= point.y <= self.maximum.y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.minimum.x, self.minimum.y, self.maximum.x, self.maximum.y)
