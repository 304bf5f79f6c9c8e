"""Two-dimensional vectors, rectangles, circles and small math helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

__all__ = [
    "Vec2",
    "Rect",
    "RectOffset",
    "Circle",
    "polar_to_cartesian",
    "cartesian_to_polar",
    "clamp",
]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: float | Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: float | Vec2) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        return iter((self.x, self.y))

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()


@dataclass
class Rect:
    """A rectangle defined by its top-left corner, width and height."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def point(self) -> Vec2:
        """Top-left corner."""
        return Vec2(self.x, self.y)

    def size(self) -> Vec2:
        """Width and height."""
        return Vec2(self.w, self.h)

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.w

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.h

    def move_to(self, destination: Vec2) -> None:
        """Move the origin to ``destination``."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sx: float, sy: float) -> None:
        """Scale width and height by (sx, sy), keeping the origin."""
        self.w *= sx
        self.h *= sy

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside (right and bottom edges excluded)."""
        return (
            self.left() <= point.x < self.right()
            and self.top() <= point.y < self.bottom()
        )

    def overlaps(self, other: Rect) -> bool:
        """Whether this rectangle touches or overlaps ``other``."""
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.top() <= other.bottom()
            and self.bottom() >= other.top()
        )

    def combine_with(self, other: Rect) -> Rect:
        """Smallest rectangle holding every point of both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right(), other.right()) - x
        h = max(self.bottom(), other.bottom()) - y
        return Rect(x, y, w, h)

    def intersect(self, other: Rect) -> Rect | None:
        """The intersection rectangle, or None if there is none."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def offset(self, offset: Vec2) -> Rect:
        """A copy translated by ``offset``."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)


@dataclass
class RectOffset:
    """Per-side offsets of a rectangle."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Circle:
    """A circle given by its centre and radius."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    def point(self) -> Vec2:
        """Centre of the circle."""
        return Vec2(self.x, self.y)

    def radius(self) -> float:
        return self.r

    def move_to(self, destination: Vec2) -> None:
        """Move the centre to ``destination``."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sr: float) -> None:
        """Scale the radius by ``sr``."""
        self.r *= sr

    def contains(self, pos: Vec2) -> bool:
        """Whether ``pos`` lies strictly inside the circle."""
        return pos.distance(self.point()) < self.r

    def overlaps(self, other: Circle) -> bool:
        """Whether this circle overlaps ``other``."""
        return self.point().distance(other.point()) < self.r + other.r

    def overlaps_rect(self, rect: Rect) -> bool:
        """Whether this circle overlaps ``rect``, measured from the rect's origin."""
        dist_x = abs(self.x - rect.x)
        dist_y = abs(self.y - rect.y)
        if dist_x > rect.w / 2.0 + self.r or dist_y > rect.h / 2.0 + self.r:
            return False
        if dist_x <= rect.w / 2.0 or dist_y <= rect.h / 2.0:
            return True
        lhs = dist_x - rect.w / 2.0
        rhs = dist_y - rect.h / 2.0
        return lhs * lhs + rhs * rhs <= self.r * self.r

    def offset(self, offset: Vec2) -> Circle:
        """A copy translated by ``offset``."""
        return Circle(self.x + offset.x, self.y + offset.y, self.r)


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates to a cartesian vector."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


def cartesian_to_polar(cartesian: Vec2) -> Vec2:
    """Convert a cartesian vector to (rho, theta)."""
    return Vec2(
        math.sqrt(cartesian.x**2 + cartesian.y**2),
        math.atan2(cartesian.y, cartesian.x),
    )


T = TypeVar("T")


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Return ``value`` bounded to [minimum, maximum]."""
    if value < minimum:  # type: ignore[operator]
        return minimum
    if value > maximum:  # type: ignore[operator]
        return maximum
    return value