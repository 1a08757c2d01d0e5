"""
Groups of nodes and procedural placement.

A Group owns an ordered list of nodes and a ``settings`` node that acts as
the template for them: its position is the center new nodes are scattered
around, and its color, radius and shape are the defaults they are shaded and
sized from. The group itself draws nothing.
"""

import random
from typing import Iterable, List, Optional, Tuple

from PIL import Image

from .color import Rgba, shade
from .constants import BASE_DYNAMIC_RADIUS, MIN_AUTO_PADDING
from .coordinate import Coordinate, generate_within_radius
from .node import Node


class Group:
    """
    An ordered, append-only collection of nodes sharing a template.

    Attributes:
        settings: Template node (center, color, radius, shape).
        nodes: Member nodes in insertion order.
    """

    def __init__(self, name: str, position: Coordinate):
        self.settings = Node(name, position)
        self.nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self.nodes)

    @classmethod
    def at(cls, x: int, y: int) -> "Group":
        """Build an unnamed, empty group centered at ``(x, y)``."""
        return cls("", Coordinate(x, y))

    @classmethod
    def from_list(cls, coordinates: Iterable[Tuple[int, int]]) -> List["Group"]:
        """Build unnamed, empty groups centered at each ``(x, y)`` pair."""
        return [cls.at(x, y) for x, y in coordinates]

    def get_nodes(self) -> List[Node]:
        return self.nodes

    def draw(
        self, surface: Image.Image, x_offset: int, y_offset: int, size: int
    ) -> None:
        """Draw every member node in order; later nodes paint over earlier ones."""
        for node in self.nodes:
            node.draw(surface, x_offset, y_offset, size)

    def push(self, node: Node) -> None:
        self.nodes.append(node)

    def dynamic_radius(self) -> int:
        """
        Radius used for placement and shading.

        Returns the settings radius when set, otherwise a radius that grows by
        one for every two member nodes.
        """
        if self.settings.radius is not None:
            return self.settings.radius
        return BASE_DYNAMIC_RADIUS + len(self.nodes) // 2

    def new_node(self, name: str, rng: Optional[random.Random] = None) -> Node:
        """Add a node anywhere within the dynamic radius."""
        position = generate_within_radius(
            self.settings.position, 0, self.dynamic_radius(), rng
        )
        return self._new_node_at(position, name)

    def new_node_min_auto(
        self, name: str, minimum: int, rng: Optional[random.Random] = None
    ) -> Node:
        """Add a node within a fixed distance of ``minimum`` plus padding."""
        position = generate_within_radius(
            self.settings.position, 0, minimum + MIN_AUTO_PADDING, rng
        )
        return self._new_node_at(position, name)

    def new_node_min_max(
        self,
        name: str,
        minimum: int,
        maximum: int,
        rng: Optional[random.Random] = None,
    ) -> Node:
        """Add a node between ``minimum`` and ``maximum`` from the center."""
        position = generate_within_radius(
            self.settings.position, minimum, maximum, rng
        )
        return self._new_node_at(position, name)

    def _new_node_at(self, position: Coordinate, name: str) -> Node:
        node = Node(
            name, position, color=self.gen_color(position), shape=self.settings.shape
        )
        self.push(node)
        return node

    def gen_color(self, coordinate: Coordinate) -> Rgba:
        """
        Shade the group color by the distance of ``coordinate`` from the center.

        Nodes near the center keep the group color; nodes further out are
        darkened in proportion to the group's mean channel brightness.
        """
        radius = self.dynamic_radius()
        x_dif, y_dif = self.settings.position.diff(coordinate)
        # No spread for a zero radius.
        x_scale = x_dif / radius if radius else 0.0
        y_scale = y_dif / radius if radius else 0.0

        r, g, b, _ = self.settings.color
        mean = (r + g + b) // 3
        modifier = int(-mean * (x_scale + y_scale) / 2.0)
        return shade(self.settings.color, modifier)


def count(groups: Iterable[Group]) -> int:
    """Total number of member nodes across ``groups``."""
    return sum(len(group.nodes) for group in groups)


def bounding_box(groups: Iterable[Group]) -> Tuple[Coordinate, Coordinate]:
    """
    Smallest and largest node x and y across ``groups``.

    Bounds start at zero, so the origin is always inside the returned box.

    Returns:
        ``(min, max)`` coordinates.
    """
    min_x = min_y = max_x = max_y = 0
    for group in groups:
        for node in group.nodes:
            min_x = min(min_x, node.position.x)
            min_y = min(min_y, node.position.y)
            max_x = max(max_x, node.position.x)
            max_y = max(max_y, node.position.y)
    return Coordinate(min_x, min_y), Coordinate(max_x, max_y)


def add_node(
    group: Group,
    name: Optional[str] = None,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Node:
    """
    Add a generated node with every parameter optional.

    ``minimum`` defaults to 0 and ``maximum`` to the group's dynamic radius.
    The bounds are swapped when given in the wrong order, and the settings
    radius is copied onto the new node.
    """
    name = name if name is not None else ""
    minimum = minimum if minimum is not None else 0
    maximum = maximum if maximum is not None else group.dynamic_radius()
    low, high = min(minimum, maximum), max(minimum, maximum)

    node = group.new_node_min_max(name, low, high, rng)
    node.radius = group.settings.radius
    return node


def add_children(
    group: Group, amount: int, rng: Optional[random.Random] = None
) -> List[Node]:
    """Populate ``group`` with ``amount`` generated nodes."""
    return [add_node(group, rng=rng) for _ in range(amount)]
