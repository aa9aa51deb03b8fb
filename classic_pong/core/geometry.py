"""
Vector and collision geometry helpers
"""

import math
from dataclasses import dataclass


@dataclass
class Vector2D:
    """Simple 2D vector for positions and directions"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


def squared_distance(dx: float, dy: float) -> float:
    """Squared length of the offset (dx, dy)"""
    return dx**2 + dy**2


def circle_overlaps_rect(
    cx: float,
    cy: float,
    radius: float,
    rect_cx: float,
    rect_cy: float,
    width: float,
    height: float,
) -> bool:
    """
    Detects overlap between a circle and a centre-anchored, axis-aligned rectangle.

    The circle is rejected early when it is further than half-extent + radius
    on either axis, accepted early when its centre lies within the rectangle's
    half-extent on either axis, and otherwise tested against the nearest corner.
    """
    # NaN compares False everywhere, which would otherwise pass the band tests
    if math.isnan(cx) or math.isnan(cy):
        return False

    half_width = width / 2
    half_height = height / 2
    x_distance = abs(cx - rect_cx)
    y_distance = abs(cy - rect_cy)

    if x_distance > half_width + radius:
        return False
    if y_distance > half_height + radius:
        return False

    if x_distance <= half_width:
        return True
    if y_distance <= half_height:
        return True

    corner_distance_squared = squared_distance(x_distance - half_width, y_distance - half_height)
    return corner_distance_squared <= radius**2
