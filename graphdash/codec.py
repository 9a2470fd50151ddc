"""
Text codec for edge definitions.

One edge per line, 1-based node numbers:

    (1, 3, 5)
    (2, 3, 1)

Only valid edges are encoded, so the text is a lossy projection of the edge
list: directedness and unfinished rows do not survive a round trip.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .edges import Edge, parse_number, revalidate

logger = logging.getLogger(__name__)


def format_weight(weight) -> str:
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def encode_edge(edge: Edge) -> str:
    return f"({edge.source + 1}, {edge.destination + 1}, {format_weight(edge.weight)})"


def encode(edges: Iterable[Edge]) -> str:
    return "\n".join(encode_edge(edge) for edge in edges if edge.valid)


def _index(number: int) -> Optional[int]:
    # 1-based in text; nothing below 1 names a node
    return number - 1 if number >= 1 else None


def parse_line(line: str) -> Optional[Edge]:
    """
    Example line:
      (2, 3, 4.5)
    Returns: Edge with 0-based endpoints, or None if the line is malformed
    """
    line = line.strip()
    if not line:
        return None
    parts = line.split(",")
    if len(parts) != 3:
        return None
    try:
        src = int(parts[0].strip().lstrip("(").strip())
        dst = int(parts[1].strip())
    except ValueError:
        return None
    weight = parse_number(parts[2].strip().rstrip(")").strip())
    if weight is None:
        return None
    return Edge(source=_index(src), destination=_index(dst), weight=weight, directed=True)


def decode(text: str, node_count: Optional[int] = None) -> List[Edge]:
    """
    Best-effort parse of edge lines. Malformed lines are skipped one by one.

    With `node_count` the returned edges carry their validity; without it
    they stay invalid until someone validates them against a graph.
    """
    edges = []
    for lineno, raw in enumerate((text or "").splitlines(), start=1):
        edge = parse_line(raw)
        if edge is None:
            if raw.strip():
                logger.debug("Skipping malformed edge line %d: %r", lineno, raw)
            continue
        if node_count is not None:
            edge = revalidate(edge, node_count)
        edges.append(edge)
    return edges
