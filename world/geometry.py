"""
neatpond module: world/geometry.py

2D vector arithmetic plus the point/segment vs. circle tests used by sensing
and feeding.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

TAU = math.pi * 2


@dataclass
class Vector2D:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> "Vector2D":
        return Vector2D(math.cos(angle) * length, math.sin(angle) * length)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_to(self, other: "Vector2D") -> float:
        return (self - other).length()

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def mod_angle(angle: float) -> float:
    """Map an angle into [0, 2*pi)."""
    return angle - TAU * math.floor(angle / TAU)


def point_circle_collision(point: Vector2D, center: Vector2D, radius: float) -> bool:
    if radius == 0:
        return False
    return (center - point).length_squared() <= radius * radius


def line_circle_collide(start: Vector2D, end: Vector2D, center: Vector2D, radius: float) -> bool:
    """
    Segment vs. circle.

    Hits when either endpoint lies inside the circle, or when the projection of
    the circle center onto the segment is inside the circle and falls between
    the endpoints.
    """
    if point_circle_collision(start, center, radius):
        return True
    if point_circle_collision(end, center, radius):
        return True

    d = end - start
    d_len2 = d.length_squared()
    projection = d.copy()
    if d_len2 > 0:
        projection = d * ((center - start).dot(d) / d_len2)

    nearest = start + projection
    if not point_circle_collision(nearest, center, radius):
        return False
    return projection.length_squared() <= d_len2 and projection.dot(d) >= 0
