"""
Node data model.

A Node is a positioned, colored, optionally-sized shape with a stable identity
derived from its name. Nodes are the only things that end up on a surface;
groups and links are drawn through them.
"""

from typing import Iterable, List, Optional, Tuple

from PIL import Image

from .color import Rgba, parse_color
from .constants import DEFAULT_COLOR
from .coordinate import Coordinate
from .shapes import Shape
from .util import calculate_hash, check_bounds


class Node:
    """
    A drawable point in a layout.

    Attributes:
        hash: Identity computed from the name at construction. Two nodes with
            the same name share an identity and cannot be told apart in a
            saved edge file.
        position: Location of the node's top-left pixel.
        color: RGBA fill color. Assigned color strings and RGB tuples are
            normalized to RGBA.
        radius: Own draw size, or None to use the caller's fallback.
        shape: Pixel footprint.
    """

    def __init__(
        self,
        name: str,
        position: Coordinate,
        color: Rgba = DEFAULT_COLOR,
        radius: Optional[int] = None,
        shape: Shape = Shape.SQUARE,
    ):
        self.hash = calculate_hash(name)
        self.position = position
        self.color = color
        self.radius = radius
        self.shape = shape

    @property
    def color(self) -> Rgba:
        return self._color

    @color.setter
    def color(self, value) -> None:
        self._color = parse_color(value)

    def __repr__(self) -> str:
        return (
            f"Node(hash={self.hash}, position=({self.position.x}, "
            f"{self.position.y}), color={self.color}, radius={self.radius}, "
            f"shape={self.shape.value})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.hash == other.hash
            and self.position == other.position
            and self.color == other.color
            and self.radius == other.radius
            and self.shape is other.shape
        )

    def __hash__(self) -> int:
        return self.hash

    def gen_id(self) -> str:
        """Identity as written to edge files."""
        return str(self.hash)

    def effective_radius(self, fallback: int) -> int:
        return self.radius if self.radius is not None else fallback

    def draw(
        self, surface: Image.Image, x_offset: int, y_offset: int, size: int
    ) -> None:
        """
        Paint the node's shape onto ``surface``.

        The surface must be large enough to hold every pixel once the offsets
        are applied. Nothing is clipped: a pixel off any edge of the surface
        raises IndexError, and pixels before it have already been painted.

        Args:
            surface: RGBA image to draw on.
            x_offset: Added to every x coordinate.
            y_offset: Added to every y coordinate.
            size: Size used when the node has no radius of its own.
        """
        pixels = surface.load()
        bounds = surface.size
        x = self.position.x + x_offset
        y = self.position.y + y_offset
        for offset in self.shape.area(self.effective_radius(size)):
            px, py = x + offset.x, y + offset.y
            check_bounds(bounds, px, py)
            pixels[px, py] = self.color

    @classmethod
    def from_list(cls, coordinates: Iterable[Tuple[int, int]]) -> List["Node"]:
        """Build unnamed nodes at each ``(x, y)`` pair."""
        return [cls("", Coordinate(x, y)) for x, y in coordinates]
