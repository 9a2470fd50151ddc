"""Hypothesis strategies shared by the graph tests."""

from hypothesis import strategies as st
from hypothesis.strategies import composite

from graphdash.edges import Edge, revalidate

MAX_NODES = 12


def endpoints(max_index=MAX_NODES):
    return st.one_of(st.none(), st.integers(min_value=0, max_value=max_index))


@composite
def edges(draw, max_index=MAX_NODES):
    return Edge(
        source=draw(endpoints(max_index)),
        destination=draw(endpoints(max_index)),
        weight=draw(st.integers(min_value=0)),
        directed=draw(st.booleans()),
    )


@composite
def valid_edge_lists(draw):
    """(node_count, edges) where every edge is valid for node_count."""
    node_count = draw(st.integers(min_value=1, max_value=MAX_NODES))
    index = st.integers(min_value=0, max_value=node_count - 1)
    result = []
    for _ in range(draw(st.integers(min_value=0, max_value=15))):
        edge = Edge(
            source=draw(index),
            destination=draw(index),
            weight=draw(st.integers(min_value=0)),
            directed=draw(st.booleans()),
        )
        result.append(revalidate(edge, node_count))
    return node_count, result


@composite
def float_edge_lists(draw):
    """Like valid_edge_lists, with non-negative float weights."""
    node_count = draw(st.integers(min_value=1, max_value=MAX_NODES))
    index = st.integers(min_value=0, max_value=node_count - 1)
    weight = st.floats(min_value=0, allow_nan=False, allow_infinity=False)
    result = [
        revalidate(Edge(source=draw(index), destination=draw(index), weight=draw(weight)), node_count)
        for _ in range(draw(st.integers(min_value=0, max_value=15)))
    ]
    return node_count, result
