"""
Visualization adapter.

Turns the editor state into a renderer-neutral graph description, and that
description into what the renderers eat: cytoscape elements for the page,
DOT text for export. Only valid edges are drawn. Nothing is cached; every
render rebuilds from the current state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import networkx as nx
import numpy as np

from .codec import format_weight
from .edges import Edge

LAYOUT_SCALE = 250


@dataclass(frozen=True)
class RenderNode:
    id: str
    label: str


@dataclass(frozen=True)
class RenderEdge:
    tail: str
    head: str
    label: str


@dataclass(frozen=True)
class GraphDescription:
    nodes: Tuple[RenderNode, ...]
    edges: Tuple[RenderEdge, ...]
    directed: bool = True
    # Only affects how the renderer draws; the adapter keeps parallel edges.
    strict: bool = True

    def to_networkx(self) -> nx.MultiDiGraph:
        G = nx.MultiDiGraph()
        for node in self.nodes:
            G.add_node(node.id, label=node.label)
        for i, edge in enumerate(self.edges):
            G.add_edge(edge.tail, edge.head, key=i, label=edge.label)
        return G


def to_render_graph(node_count: int, edges: Iterable[Edge]) -> GraphDescription:
    nodes = tuple(RenderNode(id=str(i), label=str(i)) for i in range(1, node_count + 1))
    render_edges = tuple(
        RenderEdge(
            tail=str(edge.source + 1),
            head=str(edge.destination + 1),
            label=format_weight(edge.weight),
        )
        for edge in edges
        if edge.valid
    )
    return GraphDescription(nodes=nodes, edges=render_edges)


def layout_positions(description: GraphDescription, scale=LAYOUT_SCALE) -> Dict[str, Tuple[float, float]]:
    """Deterministic node positions: nodes on a circle, in label order."""
    pos = nx.circular_layout(description.to_networkx())
    return {
        node: tuple(float(c) for c in np.round(np.asarray(coord) * scale, 2))
        for node, coord in pos.items()
    }


def to_cytoscape_elements(description: GraphDescription) -> List[dict]:
    pos = layout_positions(description)

    cy_nodes = [{
        'data': {'id': node.id, 'label': node.label},
        'position': {'x': pos[node.id][0], 'y': pos[node.id][1]},
    } for node in description.nodes]

    # positional ids keep parallel edges apart
    cy_edges = [{
        'data': {
            'id': f"e{i}",
            'source': edge.tail,
            'target': edge.head,
            'label': edge.label,
        },
        'classes': 'directed' if description.directed else '',
    } for i, edge in enumerate(description.edges)]

    return cy_nodes + cy_edges


def _dot_id(value: str) -> str:
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


def to_dot(description: GraphDescription) -> str:
    kind = "digraph" if description.directed else "graph"
    arrow = "->" if description.directed else "--"
    header = f"strict {kind}" if description.strict else kind

    lines = [header + " {"]
    for node in description.nodes:
        lines.append(f"    {_dot_id(node.id)} [label={_dot_id(node.label)}];")
    for edge in description.edges:
        lines.append(f"    {_dot_id(edge.tail)} {arrow} {_dot_id(edge.head)} [label={_dot_id(edge.label)}];")
    lines.append("}")
    return "\n".join(lines) + "\n"
