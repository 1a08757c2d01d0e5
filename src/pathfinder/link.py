"""
Links between nodes.

A NodeLink stores the positions of its two endpoints in a node list rather
than the nodes themselves. The list is treated as append-only, so an index
stays valid for as long as the list does.

This module also contains the random link generator and the stair-step line
rasterizer used to draw links.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from .constants import LINK_PROBABILITY
from .node import Node
from .util import check_bounds, roll


@dataclass(frozen=True)
class NodeLink:
    """
    An edge between two nodes of a node list.

    Attributes:
        from_index: Index of the source node.
        to_index: Index of the target node.
        omnidirectional: Whether the edge can be travelled both ways.
    """

    from_index: int
    to_index: int
    omnidirectional: bool = True

    def source(self, nodes: Sequence[Node]) -> Node:
        return nodes[self.from_index]

    def target(self, nodes: Sequence[Node]) -> Node:
        return nodes[self.to_index]

    def ids(self, nodes: Sequence[Node]) -> Tuple[str, str, bool]:
        """Return ``(from_id, to_id, omnidirectional)`` for this link."""
        return (
            self.source(nodes).gen_id(),
            self.target(nodes).gen_id(),
            self.omnidirectional,
        )

    def to_line(self, nodes: Sequence[Node]) -> str:
        """Serialize as one edge-file line, newline included."""
        from_id, to_id, omni = self.ids(nodes)
        return f"{from_id},{to_id},{'true' if omni else 'false'}\n"

    def draw(
        self,
        surface: Image.Image,
        nodes: Sequence[Node],
        x_offset: int,
        y_offset: int,
        size: int,
    ) -> None:
        """
        Draw the link as a stair-step line between the two node centers.

        Each step moves one pixel on both axes until the remaining axis lines
        up, so lines are diagonal first and straight after. Only pixels that
        are fully transparent are painted, all in the source node's color,
        which keeps nodes on top of the links that touch them. The endpoint
        pixel itself is not painted.

        Both ends must lie on the surface, otherwise IndexError is raised
        before anything is painted.

        Args:
            surface: RGBA image to draw on.
            nodes: Node list the link indexes into.
            x_offset: Added to every x coordinate.
            y_offset: Added to every y coordinate.
            size: Node size; lines run between points ``size // 2`` inside
                each node.
        """
        source = self.source(nodes)
        target = self.target(nodes)
        inset = size // 2

        x = source.position.x + x_offset + inset
        y = source.position.y + y_offset + inset
        to_x = target.position.x + x_offset + inset
        to_y = target.position.y + y_offset + inset

        check_bounds(surface.size, x, y)
        check_bounds(surface.size, to_x, to_y)

        pixels = surface.load()
        free = []
        while x != to_x or y != to_y:
            if pixels[x, y][3] == 0:
                free.append((x, y))

            if x < to_x:
                x += 1
            elif x > to_x:
                x -= 1

            if y < to_y:
                y += 1
            elif y > to_y:
                y -= 1

        for position in free:
            pixels[position] = source.color


def _link_offset(index: int, length: int, rng: Optional[random.Random]) -> int:
    """Roll a forward offset from ``index`` that stays inside the list."""
    offset = roll(0, length // 2, rng)
    if index + offset >= length:
        offset = length - 1 - index
    return offset


def generate_links(
    nodes: Sequence[Node],
    rng: Optional[random.Random] = None,
    probability: int = LINK_PROBABILITY,
) -> List[NodeLink]:
    """
    Randomly connect nodes of a list.

    The first pass links every even-indexed node from the first half of the
    list to a node a random distance ahead. The second pass visits every node
    and links it the same way with a ``probability`` percent chance. The last
    node never gets an outgoing link, and all generated links are
    omnidirectional.

    Args:
        nodes: Node list to connect.
        rng: Optional random source.
        probability: Percent chance of an extra link per node in pass two.

    Returns:
        The generated links, first pass first.
    """
    length = len(nodes)
    links: List[NodeLink] = []
    if length < 2:
        return links

    last = length - 1

    for i in range(length // 2):
        if i == last:
            break
        offset = _link_offset(i, length, rng)
        links.append(NodeLink(i * 2, i + offset, True))

    for i in range(length):
        if roll(0, 100, rng) >= probability:
            continue
        if i == last:
            break
        offset = _link_offset(i, length, rng)
        links.append(NodeLink(i, i + offset, True))

    return links


def draw_links(
    surface: Image.Image,
    links: Sequence[NodeLink],
    nodes: Sequence[Node],
    x_offset: int,
    y_offset: int,
    size: int,
) -> None:
    """Draw every link in ``links`` onto ``surface``."""
    for link in links:
        link.draw(surface, nodes, x_offset, y_offset, size)
