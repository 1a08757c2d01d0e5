"""Integration tests for generation, persistence and rendering together."""

import random

import networkx as nx

from pathfinder import (
    Coordinate,
    FileStorage,
    FrameCollector,
    FrameComposer,
    Group,
    LinkStore,
    Network,
    add_children,
    count,
    generate_links,
    render_map,
)


def populated_group(rng, n=12):
    group = Group("center", Coordinate(40, 40))
    group.settings.color = (250, 20, 20, 255)
    for i in range(n):
        group.new_node(f"node-{i}", rng)
    return group


class TestLinkRoundTrip:
    """Saving generated links and loading them back."""

    def test_round_trip_through_file(self, tmp_path, rng):
        """Loaded links carry the same identity triples as the saved ones."""
        nodes = populated_group(rng).nodes
        links = generate_links(nodes, rng)
        store = LinkStore(FileStorage(tmp_path / "links.txt"))
        for link in links:
            store.save(link, nodes)

        loaded = store.load(nodes)

        assert sorted(link.ids(nodes) for link in loaded) == sorted(
            link.ids(nodes) for link in links
        )

    def test_round_trip_appends_across_stores(self, tmp_path, rng):
        """A second store on the same file appends to the first one's lines."""
        nodes = populated_group(rng, 6).nodes
        path = tmp_path / "links.txt"
        first = generate_links(nodes, rng)
        second = generate_links(nodes, rng)
        LinkStore(FileStorage(path)).save_all(first, nodes)
        LinkStore(FileStorage(path)).save_all(second, nodes)

        loaded = LinkStore(FileStorage(path)).load(nodes)
        assert len(loaded) == len(first) + len(second)


class TestPipeline:
    """Generation through rendering and path finding."""

    def test_generate_render_and_route(self, rng):
        """A populated group renders and its links form a searchable graph."""
        group = populated_group(rng)
        image = render_map([group], padding=2, links=True, rng=rng)
        assert image.getbbox() is not None

        nodes = group.nodes
        links = generate_links(nodes, rng, probability=100)
        graph = Network(nodes, links).to_graph()
        assert nx.number_weakly_connected_components(graph) < len(nodes)

        link = next(link for link in links if link.from_index != link.to_index)
        start = link.source(nodes).gen_id()
        end = link.target(nodes).gen_id()
        path = nx.dijkstra_path(graph, end, start)
        assert path[0] == end and path[-1] == start

    def test_animation(self):
        """Colored groups with explicit radii animate on a fixed canvas."""
        radius = [30, 20, 40]
        color = [(250, 20, 20, 255), (20, 20, 250, 255), (20, 250, 20, 255)]

        def factory(rng):
            groups = Group.from_list([(0, 0), (45, 40), (110, 20)])
            for j, group in enumerate(groups):
                group.settings.radius = radius[j]
                group.settings.color = color[j]
                add_children(group, 15, rng)
            return groups

        collector = FrameCollector()
        composer = FrameComposer(250, 200, 2, factory, 50, 70, rng=random.Random(3))
        assert composer.compose(collector) == 2
        assert count(factory(random.Random(3))) == 45
        assert all(frame.getbbox() is not None for frame in collector.frames)
