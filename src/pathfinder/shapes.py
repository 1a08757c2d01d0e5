"""
Shapes a node can be drawn as.

The set of shapes is closed, so it is modelled as an Enum whose members
enumerate the pixel offsets they cover for a given size.
"""

import math
from enum import Enum
from typing import List

from .coordinate import Coordinate


class Shape(Enum):
    """Pixel footprint of a node."""

    SQUARE = "square"
    CIRCLE = "circle"

    def area(self, size: int) -> List[Coordinate]:
        """
        Return every offset the shape occupies at ``size``.

        Offsets are relative to an origin of ``(0, 0)``. A size of zero or
        less gives an empty list.
        """
        if size <= 0:
            return []
        if self is Shape.SQUARE:
            return _square(size)
        return _circle(size)


def _square(size: int) -> List[Coordinate]:
    return [Coordinate(i, j) for i in range(size) for j in range(size)]


def _ring(size: int) -> List[Coordinate]:
    # Mirrored column samples, so points repeat and small rings look jagged.
    points = []
    half = size // 2
    for x in range(size + 1):
        y = int(math.sqrt(size * size - x * x) + 0.1)
        points.append(Coordinate(half + x, half + y))
        points.append(Coordinate(half + x, half - y))
        points.append(Coordinate(half - x, half + y))
        points.append(Coordinate(half - x, half - y))
    return points


def _circle(size: int) -> List[Coordinate]:
    points = []
    for ring in range(size + 1):
        points.extend(_ring(ring))
    return points
