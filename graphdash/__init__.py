"""Graph-definition editor and system telemetry dashboard."""

from .edges import Edge, validate, revalidate
from .codec import encode, decode
from .state import (
    GraphState, GraphStateStore, reduce,
    SetNodeCount, AddEdge, DeleteEdge, UpdateField, Reset, ImportText,
)
from .render import GraphDescription, to_render_graph

__version__ = "0.1.0"

__all__ = [
    "Edge", "validate", "revalidate",
    "encode", "decode",
    "GraphState", "GraphStateStore", "reduce",
    "SetNodeCount", "AddEdge", "DeleteEdge", "UpdateField", "Reset", "ImportText",
    "GraphDescription", "to_render_graph",
]
