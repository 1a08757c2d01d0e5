"""
Pixel surfaces.

A surface is a Pillow image in ``RGBA`` mode. Fresh surfaces are fully
transparent, which the link rasterizer relies on to tell empty pixels from
drawn ones.
"""

from typing import Iterable, Tuple

from PIL import Image

from .constants import TRANSPARENT
from .group import Group, bounding_box


def new_surface(width: int, height: int) -> Image.Image:
    """Return a transparent RGBA surface of ``width`` x ``height`` pixels."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface size must be positive, got {width}x{height}")
    return Image.new("RGBA", (width, height), TRANSPARENT)


def largest_node_size(groups: Iterable[Group], size: int) -> int:
    """Largest draw size of any node, using ``size`` for nodes without a radius."""
    largest = size
    for group in groups:
        for node in group.nodes:
            largest = max(largest, node.effective_radius(size))
    return largest


def fit_to_groups(
    groups: Iterable[Group], padding: int, size: int
) -> Tuple[int, int, int, int]:
    """
    Size a surface so every node of ``groups`` can be drawn on it.

    A circle of size ``s`` reaches ``s // 2`` left of and above its node
    position and ``s + s // 2`` right of and below it. That reach for the
    largest node, plus ``padding``, is kept as a margin on every side.

    Returns:
        ``(width, height, x_offset, y_offset)``.
    """
    groups = list(groups)
    low, high = bounding_box(groups)
    largest = largest_node_size(groups, size)
    margin = padding + largest + largest // 2
    width = high.x - low.x + 2 * margin + 1
    height = high.y - low.y + 2 * margin + 1
    return width, height, margin - low.x, margin - low.y
