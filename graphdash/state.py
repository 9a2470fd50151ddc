"""
Graph state store.

The editor state (node count + ordered edge list) is a single immutable value.
Every user action is a small tagged record, and `reduce` turns
(state, action) into the next state in one step. The encoded text is
recomputed on every step, so it can never drift from the edge list.

`GraphStateStore` wraps one current state for callers that prefer method
calls (increment_nodes(), add_edge(), ...). The Dash callbacks use it on a
state loaded from the browser-side dcc.Store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

from .codec import decode, encode
from .edges import EDGE_FIELDS, Edge, parse_directed, parse_endpoint, parse_number, revalidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphState:
    node_count: int = 0
    edges: Tuple[Edge, ...] = ()
    text: str = ""

    @classmethod
    def create(cls, node_count: int = 0, edges=()) -> "GraphState":
        """Build a state, validating every edge and encoding the text."""
        node_count = max(int(node_count), 0)
        edges = tuple(revalidate(edge, node_count) for edge in edges)
        return cls(node_count=node_count, edges=edges, text=encode(edges))

    @property
    def valid_edges(self) -> Tuple[Edge, ...]:
        return tuple(edge for edge in self.edges if edge.valid)

    # ---------- dcc.Store payload ----------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_count": self.node_count,
            "edges": [
                {
                    "source": edge.source,
                    "destination": edge.destination,
                    "weight": edge.weight,
                    "directed": edge.directed,
                }
                for edge in self.edges
            ],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GraphState":
        """
        Rebuild a state from a store payload.

        Validity and text are recomputed, never read from the payload. A
        payload that cannot be read yields the empty state.
        """
        if not data:
            return cls()
        try:
            node_count = int(data.get("node_count", 0))
            edges = []
            for raw in data.get("edges", []):
                weight = parse_number(raw.get("weight", 0))
                edges.append(Edge(
                    source=parse_endpoint(raw.get("source")),
                    destination=parse_endpoint(raw.get("destination")),
                    weight=0 if weight is None else weight,
                    directed=parse_directed(raw.get("directed", True)),
                ))
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Discarding unreadable graph state %r: %s", data, exc)
            return cls()
        return cls.create(node_count, edges)


# ---------- actions ----------

@dataclass(frozen=True)
class SetNodeCount:
    count: int


@dataclass(frozen=True)
class AddEdge:
    pass


@dataclass(frozen=True)
class DeleteEdge:
    index: int


@dataclass(frozen=True)
class UpdateField:
    index: int
    field: str
    value: Any = None


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ImportText:
    text: str


Action = Union[SetNodeCount, AddEdge, DeleteEdge, UpdateField, Reset, ImportText]


def _in_range(state: GraphState, index) -> bool:
    return isinstance(index, int) and 0 <= index < len(state.edges)


def reduce(state: GraphState, action: Action) -> GraphState:
    """Apply one action. Invalid requests return `state` itself."""
    if isinstance(action, SetNodeCount):
        if action.count < 0:
            logger.debug("Ignoring node count %d", action.count)
            return state
        # a new bound can flip any edge either way
        return GraphState.create(action.count, state.edges)

    if isinstance(action, AddEdge):
        if state.node_count == 0:
            logger.debug("Cannot add edge: no nodes in graph!")
            return state
        logger.debug("Adding edge #%d", len(state.edges) + 1)
        edges = state.edges + (Edge.unassigned(),)
        return replace(state, edges=edges, text=encode(edges))

    if isinstance(action, DeleteEdge):
        if not _in_range(state, action.index):
            logger.debug("Ignoring delete of edge #%s", action.index)
            return state
        edges = state.edges[:action.index] + state.edges[action.index + 1:]
        return replace(state, edges=edges, text=encode(edges))

    if isinstance(action, UpdateField):
        if not _in_range(state, action.index):
            logger.debug("Ignoring change of edge #%s", action.index)
            return state
        try:
            edge = state.edges[action.index].with_field(action.field, action.value)
        except KeyError:
            logger.warning("Unknown edge field %r (expected one of %s)", action.field, EDGE_FIELDS)
            return state
        logger.debug("Edge #%d: change %s to %r", action.index + 1, action.field, action.value)
        edges = list(state.edges)
        edges[action.index] = revalidate(edge, state.node_count)
        edges = tuple(edges)
        return replace(state, edges=edges, text=encode(edges))

    if isinstance(action, Reset):
        return replace(state, edges=(), text="")

    if isinstance(action, ImportText):
        edges = decode(action.text, state.node_count)
        logger.debug("Parsed %d edge definitions", len(edges))
        return GraphState.create(state.node_count, edges)

    raise TypeError(f"Unknown action: {action!r}")


class GraphStateStore:
    """Owns the current GraphState and applies actions to it."""

    def __init__(self, state: Optional[GraphState] = None):
        self._state = state or GraphState()

    @property
    def state(self) -> GraphState:
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def node_count(self) -> int:
        return self._state.node_count

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._state.edges

    def dispatch(self, action: Action) -> GraphState:
        self._state = reduce(self._state, action)
        return self._state

    def increment_nodes(self):
        return self.dispatch(SetNodeCount(self._state.node_count + 1))

    def decrement_nodes(self):
        if self._state.node_count == 0:
            return self._state
        return self.dispatch(SetNodeCount(self._state.node_count - 1))

    def add_edge(self):
        return self.dispatch(AddEdge())

    def delete_edge(self, index: int):
        return self.dispatch(DeleteEdge(index))

    def update_edge_field(self, index: int, field: str, value):
        return self.dispatch(UpdateField(index, field, value))

    def reset(self):
        return self.dispatch(Reset())

    def import_text(self, text: str):
        return self.dispatch(ImportText(text))
