"""
Visualization adapter tests.
"""

import networkx as nx

from graphdash.edges import Edge, revalidate
from graphdash.render import (
    GraphDescription, RenderEdge, RenderNode, layout_positions,
    to_cytoscape_elements, to_dot, to_render_graph,
)


def edges_for(node_count, *triples):
    return [revalidate(Edge(source=s, destination=d, weight=w), node_count) for s, d, w in triples]


class TestDescription:

    def test_nodes_are_one_based(self):
        description = to_render_graph(3, [])
        assert [n.label for n in description.nodes] == ["1", "2", "3"]
        assert description.directed and description.strict

    def test_only_valid_edges_are_drawn(self):
        edges = edges_for(3, (0, 2, 5), (0, 5, 1)) + [Edge.unassigned()]
        description = to_render_graph(3, edges)
        assert description.edges == (RenderEdge(tail="1", head="3", label="5"),)

    def test_parallel_edges_are_kept(self):
        description = to_render_graph(2, edges_for(2, (0, 1, 1), (0, 1, 2)))
        assert len(description.edges) == 2
        assert description.to_networkx().number_of_edges("1", "2") == 2

    def test_no_nodes(self):
        description = to_render_graph(0, [])
        assert description.nodes == ()
        assert to_cytoscape_elements(description) == []

    def test_networkx_graph(self):
        G = to_render_graph(3, edges_for(3, (0, 2, 5), (2, 2, 1))).to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert sorted(G.nodes()) == ["1", "2", "3"]
        assert G.nodes["2"]["label"] == "2"
        assert G.has_edge("3", "3")


class TestCytoscape:

    def test_elements(self):
        elements = to_cytoscape_elements(to_render_graph(3, edges_for(3, (0, 2, 5))))
        nodes = [e for e in elements if "position" in e]
        links = [e for e in elements if "source" in e["data"]]
        assert [n["data"]["id"] for n in nodes] == ["1", "2", "3"]
        assert links == [{
            "data": {"id": "e0", "source": "1", "target": "3", "label": "5"},
            "classes": "directed",
        }]

    def test_layout_is_deterministic(self):
        description = to_render_graph(5, [])
        assert layout_positions(description) == layout_positions(description)
        assert set(layout_positions(description)) == {"1", "2", "3", "4", "5"}

    def test_single_node_layout(self):
        pos = layout_positions(to_render_graph(1, []))
        assert pos == {"1": (0.0, 0.0)}


class TestDot:

    def test_strict_digraph(self):
        dot = to_dot(to_render_graph(2, edges_for(2, (0, 1, 7))))
        assert dot.splitlines() == [
            'strict digraph {',
            '    "1" [label="1"];',
            '    "2" [label="2"];',
            '    "1" -> "2" [label="7"];',
            '}',
        ]

    def test_undirected_non_strict(self):
        description = GraphDescription(
            nodes=(RenderNode("a", 'say "hi"'),),
            edges=(RenderEdge("a", "a", "1"),),
            directed=False, strict=False,
        )
        dot = to_dot(description)
        assert dot.startswith("graph {")
        assert '"a" -- "a"' in dot
        assert 'label="say \\"hi\\""' in dot
