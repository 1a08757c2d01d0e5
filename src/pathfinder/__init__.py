"""
Pathfinder - Procedural node-graph art

A Python library for scattering nodes around group centers, shading them by
distance, linking them at random and rendering the result to RGBA images.

Example:
    >>> import random
    >>> from pathfinder import Group, add_children, render_map
    >>> rng = random.Random(7)
    >>> groups = Group.from_list([(0, 0), (45, 40), (110, 20)])
    >>> for group in groups:
    ...     group.settings.color = (250, 20, 20, 255)
    ...     add_children(group, 100, rng)
    >>> image = render_map(groups, padding=5, links=True, rng=rng)
    >>> image.save("map.png")
"""

from .animation import (
    FrameCollector,
    FrameComposer,
    draw_groups,
    render_groups,
    render_map,
)
from .color import border, parse_color, shade
from .coordinate import (
    Coordinate,
    difference,
    generate_around,
    generate_within_radius,
)
from .group import Group, add_children, add_node, bounding_box, count
from .link import NodeLink, draw_links, generate_links
from .network import Network
from .node import Node
from .shapes import Shape
from .storage import (
    FileStorage,
    LinkError,
    LinkFormatError,
    LinkLookupError,
    LinkStorage,
    LinkStore,
    MemoryStorage,
    parse_link,
)
from .surface import fit_to_groups, new_surface
from .util import get_random_item, roll

__version__ = "0.3.0"

__all__ = [
    # Geometry
    "Coordinate",
    "difference",
    "generate_within_radius",
    "generate_around",
    # Shapes and color
    "Shape",
    "border",
    "shade",
    "parse_color",
    # Model
    "Node",
    "Group",
    "add_node",
    "add_children",
    "count",
    "bounding_box",
    # Links
    "NodeLink",
    "generate_links",
    "draw_links",
    "Network",
    # Persistence
    "LinkStore",
    "LinkStorage",
    "FileStorage",
    "MemoryStorage",
    "parse_link",
    "LinkError",
    "LinkFormatError",
    "LinkLookupError",
    # Rendering
    "new_surface",
    "fit_to_groups",
    "draw_groups",
    "render_groups",
    "render_map",
    "FrameComposer",
    "FrameCollector",
    # Random helpers
    "roll",
    "get_random_item",
]
