"""
Edge model and validator.

An edge is a plain value: endpoints are 0-based node indices, or None while
the user has not picked one yet. Validity is derived from the node count and
written only by `revalidate`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

Number = Union[int, float]

EDGE_FIELDS = ("source", "destination", "weight", "directed")


@dataclass(frozen=True)
class Edge:
    source: Optional[int]
    destination: Optional[int]
    weight: Number = 0
    directed: bool = True
    valid: bool = False

    @classmethod
    def unassigned(cls):
        """The edge appended by the add action: no endpoints yet."""
        return cls(source=None, destination=None, weight=0, directed=True, valid=False)

    def with_field(self, field: str, value) -> "Edge":
        """
        Copy of this edge with one user-editable field changed.

        `valid` is left untouched; callers re-run the validator afterwards.
        Raises KeyError for a field that is not user-editable.
        """
        if field in ("source", "destination"):
            return replace(self, **{field: parse_endpoint(value)})
        if field == "weight":
            weight = parse_number(value)
            if weight is None:
                return self
            return replace(self, weight=weight)
        if field == "directed":
            return replace(self, directed=parse_directed(value))
        raise KeyError(field)

    def triple(self):
        return (self.source, self.destination, self.weight)


def parse_endpoint(value) -> Optional[int]:
    """Integer node index, or None for "unassigned" (None, "", -1, garbage)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        # JSON numbers can arrive as 2.0
        if not value.is_integer():
            return None
        index = int(value)
    else:
        try:
            index = int(str(value).strip())
        except ValueError:
            return None
    if index == -1:
        return None
    return index


def parse_number(value) -> Optional[Number]:
    """int when the value is integral, float otherwise, None if not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def parse_directed(value) -> bool:
    # dcc.Checklist reports its selection as a list
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return bool(value)


def validate(edge: Edge, node_count: int) -> bool:
    """True iff both endpoints are assigned and inside [0, node_count)."""
    if edge.source is None or edge.destination is None:
        return False
    return (
        edge.source >= 0
        and edge.destination >= 0
        and edge.source < node_count
        and edge.destination < node_count
    )


def revalidate(edge: Edge, node_count: int) -> Edge:
    valid = validate(edge, node_count)
    if valid == edge.valid:
        return edge
    return replace(edge, valid=valid)
