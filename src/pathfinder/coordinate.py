"""
Coordinate geometry for node placement.

Provides the 16-bit integer Coordinate value type and radius-bounded random
point generation used to scatter nodes around a group center.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import INT16_MAX, INT16_MIN
from .util import roll


def _saturate(value: float) -> int:
    """Truncate toward zero and clamp into the int16 range."""
    return max(INT16_MIN, min(INT16_MAX, int(value)))


@dataclass(frozen=True)
class Coordinate:
    """
    A position on the layout plane.

    Equality is component-wise. Ordering compares ``x + y`` and is only meant
    for coarse comparisons, not spatial sorting.

    Attributes:
        x: Horizontal position (int16).
        y: Vertical position (int16).
    """

    x: int
    y: int

    def __post_init__(self):
        for axis, value in (("x", self.x), ("y", self.y)):
            if not INT16_MIN <= value <= INT16_MAX:
                raise ValueError(f"{axis}={value} is outside the int16 range")

    def __lt__(self, other: "Coordinate") -> bool:
        return self.x + self.y < other.x + other.y

    def __le__(self, other: "Coordinate") -> bool:
        return self.x + self.y <= other.x + other.y

    def __gt__(self, other: "Coordinate") -> bool:
        return self.x + self.y > other.x + other.y

    def __ge__(self, other: "Coordinate") -> bool:
        return self.x + self.y >= other.x + other.y

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y)

    def diff(self, other: "Coordinate") -> Tuple[int, int]:
        """Absolute difference in x and y to another coordinate."""
        return difference(self, other)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Coordinate":
        """Return a coordinate anywhere in the int16 plane."""
        return cls(
            roll(INT16_MIN, INT16_MAX + 1, rng),
            roll(INT16_MIN, INT16_MAX + 1, rng),
        )


def difference(a: Coordinate, b: Coordinate) -> Tuple[int, int]:
    """Return ``(|a.x - b.x|, |a.y - b.y|)``."""
    return abs(a.x - b.x), abs(a.y - b.y)


def generate_within_radius(
    center: Coordinate,
    minimum: int,
    maximum: int,
    rng: Optional[random.Random] = None,
) -> Coordinate:
    """
    Randomly place a coordinate around ``center``.

    A distance and an angle are drawn to find a point on a circle. A second,
    independent distance from the same range is then subtracted from ``y``,
    which pulls generated layouts upward on screen. That vertical bias is part
    of the look of the generator.

    Args:
        center: Point to place around.
        minimum: Smallest distance (inclusive).
        maximum: Largest distance (exclusive).
        rng: Optional random source.

    Returns:
        The generated coordinate, saturated to the int16 range.

    Raises:
        ValueError: If ``minimum >= maximum``.
    """
    r = roll(minimum, maximum, rng)
    angle = math.radians(roll(0, 360, rng))
    r2 = roll(minimum, maximum, rng)

    x = _saturate(center.x + r * math.cos(angle))
    y = _saturate(_saturate(center.y + r * math.sin(angle)) - r2)
    return Coordinate(x, y)


def generate_around(
    center: Coordinate, radius: int, rng: Optional[random.Random] = None
) -> Coordinate:
    """Randomly place a coordinate up to ``radius`` away from ``center``."""
    return generate_within_radius(center, 0, radius, rng)
