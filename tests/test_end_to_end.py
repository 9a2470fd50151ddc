"""
End-to-end scenarios: store actions -> text -> visualization description.
"""

from graphdash.codec import decode
from graphdash.render import to_render_graph
from graphdash.state import GraphStateStore


def test_build_edge_then_render():
    store = GraphStateStore()
    for _ in range(3):
        store.increment_nodes()
    store.add_edge()
    store.update_edge_field(0, "source", 0)
    store.update_edge_field(0, "destination", 2)
    store.update_edge_field(0, "weight", 5)

    assert store.edges[0].valid
    assert store.text == "(1, 3, 5)"

    description = to_render_graph(store.node_count, store.edges)
    assert [n.label for n in description.nodes] == ["1", "2", "3"]
    assert [(e.tail, e.head, e.label) for e in description.edges] == [("1", "3", "5")]


def test_out_of_range_edge_stays_invalid():
    store = GraphStateStore()
    for _ in range(3):
        store.increment_nodes()
    store.add_edge()
    store.update_edge_field(0, "source", 0)
    store.update_edge_field(0, "destination", 5)

    assert not store.edges[0].valid
    assert store.text == ""
    assert to_render_graph(store.node_count, store.edges).edges == ()


def test_decode_two_edges():
    edges = decode("(1, 2, 4)\n(2, 3, 1)", node_count=3)
    assert [e.triple() for e in edges] == [(0, 1, 4), (1, 2, 1)]
    assert all(e.valid for e in edges)


def test_parse_then_edit_then_render():
    store = GraphStateStore()
    for _ in range(4):
        store.increment_nodes()
    store.import_text("(1, 2, 4)\n(2, 3, 1)\n(4, 4, 2)")
    store.delete_edge(1)
    store.update_edge_field(0, "weight", 10)

    assert store.text == "(1, 2, 10)\n(4, 4, 2)"
    description = to_render_graph(store.node_count, store.edges)
    assert [(e.tail, e.head) for e in description.edges] == [("1", "2"), ("4", "4")]
