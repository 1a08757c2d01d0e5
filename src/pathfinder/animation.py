"""
Frame composition.

Renders groups onto fresh surfaces and produces frame sequences. Every frame
regenerates its groups from scratch, so frames share no state. Encoding the
frames into an image or animation file is up to the sink they are handed to.
"""

import logging
import random
from typing import Callable, Iterator, List, Optional, Sequence

from PIL import Image

from .constants import DEFAULT_NODE_SIZE
from .group import Group
from .link import draw_links, generate_links
from .node import Node
from .surface import fit_to_groups, new_surface

logger = logging.getLogger(__name__)

GroupFactory = Callable[[Optional[random.Random]], Sequence[Group]]
FrameSink = Callable[[Image.Image], None]


def _all_nodes(groups: Sequence[Group]) -> List[Node]:
    return [node for group in groups for node in group.nodes]


def draw_groups(
    surface: Image.Image,
    groups: Sequence[Group],
    x_offset: int,
    y_offset: int,
    node_size: int = DEFAULT_NODE_SIZE,
    links: bool = False,
    rng: Optional[random.Random] = None,
) -> Image.Image:
    """
    Draw ``groups`` onto an existing surface.

    Nodes are drawn first. With ``links`` set, random links over all nodes are
    generated and drawn afterwards; they only fill transparent pixels.
    """
    for group in groups:
        group.draw(surface, x_offset, y_offset, node_size)

    if links:
        nodes = _all_nodes(groups)
        draw_links(
            surface, generate_links(nodes, rng), nodes, x_offset, y_offset, node_size
        )
    return surface


def render_groups(
    groups: Sequence[Group],
    width: int,
    height: int,
    x_offset: int = 0,
    y_offset: int = 0,
    node_size: int = DEFAULT_NODE_SIZE,
    links: bool = False,
    rng: Optional[random.Random] = None,
) -> Image.Image:
    """
    Render ``groups`` onto a new transparent surface of a fixed size.

    The caller chooses a size and offsets that keep every node on the
    surface.
    """
    surface = new_surface(width, height)
    return draw_groups(surface, groups, x_offset, y_offset, node_size, links, rng)


def render_map(
    groups: Sequence[Group],
    padding: int = 0,
    node_size: int = DEFAULT_NODE_SIZE,
    links: bool = False,
    rng: Optional[random.Random] = None,
) -> Image.Image:
    """Render ``groups`` onto a surface sized to fit all of their nodes."""
    width, height, x_offset, y_offset = fit_to_groups(groups, padding, node_size)
    return render_groups(
        groups, width, height, x_offset, y_offset, node_size, links, rng
    )


class FrameCollector:
    """Frame sink that keeps every frame in memory."""

    def __init__(self):
        self.frames: List[Image.Image] = []

    def __call__(self, frame: Image.Image) -> None:
        self.frames.append(frame)

    def __len__(self) -> int:
        return len(self.frames)


class FrameComposer:
    """
    Produces animation frames by repeated generation and rendering.

    Example:
        >>> def factory(rng):
        ...     groups = Group.from_list([(0, 0), (45, 40)])
        ...     for group in groups:
        ...         add_children(group, 50, rng)
        ...     return groups
        >>> composer = FrameComposer(200, 200, 10, factory, x_offset=60, y_offset=60)
        >>> collector = FrameCollector()
        >>> composer.compose(collector)
        10
    """

    def __init__(
        self,
        width: int,
        height: int,
        frame_count: int,
        group_factory: GroupFactory,
        x_offset: int = 0,
        y_offset: int = 0,
        node_size: int = DEFAULT_NODE_SIZE,
        links: bool = False,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            width: Canvas width of every frame.
            height: Canvas height of every frame.
            frame_count: Number of frames to produce.
            group_factory: Called with ``rng`` once per frame to build the
                groups for that frame.
            x_offset: Horizontal offset applied to all nodes.
            y_offset: Vertical offset applied to all nodes.
            node_size: Fallback size for nodes without a radius.
            links: Whether to draw random links between nodes.
            rng: Random source passed to the factory and link generator.
        """
        if frame_count < 0:
            raise ValueError(f"frame_count must not be negative, got {frame_count}")
        self.width = width
        self.height = height
        self.frame_count = frame_count
        self.group_factory = group_factory
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.node_size = node_size
        self.links = links
        self.rng = rng

    def render_frame(self) -> Image.Image:
        """Generate fresh groups and render them onto a new surface."""
        groups = self.group_factory(self.rng)
        return render_groups(
            groups,
            self.width,
            self.height,
            self.x_offset,
            self.y_offset,
            self.node_size,
            self.links,
            self.rng,
        )

    def frames(self) -> Iterator[Image.Image]:
        for i in range(self.frame_count):
            frame = self.render_frame()
            logger.debug("Rendered frame %d/%d", i + 1, self.frame_count)
            yield frame

    def compose(self, sink: FrameSink) -> int:
        """
        Hand every frame to ``sink`` in order.

        Returns:
            Number of frames produced.
        """
        produced = 0
        for frame in self.frames():
            sink(frame)
            produced += 1
        return produced
