"""
Algorithm catalog for the graph-algorithms backend.

Requests look like

    {"request_type": "list" | "execution", "content": {...}}

and every reply is the pair ["Ok" | "Error", message]. Execution requests are
acknowledged only; running the algorithms is the backend's job.
"""

from __future__ import annotations

import json
import logging
from enum import Enum

from .codec import decode

logger = logging.getLogger(__name__)

OK = "Ok"
ERROR = "Error"


class AlgorithmRequestError(ValueError):
    """A request body that cannot be handled."""


class AlgorithmType(Enum):
    GRAPH = "graph"
    APPROXIMATION = "approximation"


class Algorithm(Enum):
    DIJKSTRA = ("dijkstra", "Dijkstra", AlgorithmType.GRAPH)
    JOHNSON = ("johnson", "Johnson", AlgorithmType.GRAPH)
    PRIM = ("prim", "Prim", AlgorithmType.GRAPH)
    RUCKSACK_PTAS = ("rucksackptas", "Rucksack-PTAS", AlgorithmType.APPROXIMATION)
    RUCKSACK_FPTAS = ("rucksackfptas", "Rucksack-FPTAS", AlgorithmType.APPROXIMATION)

    def __init__(self, key, display_name, kind):
        self.key = key
        self.display_name = display_name
        self.kind = kind

    @classmethod
    def lookup(cls, name):
        """Find an algorithm by wire key or display name (case-insensitive)."""
        wanted = str(name).strip().lower()
        for alg in cls:
            if wanted in (alg.key, alg.display_name.lower()):
                return alg
        raise AlgorithmRequestError(f"Unknown algorithm: {name!r}")


def list_algorithms(kind=None):
    return [alg.display_name for alg in Algorithm if kind is None or alg.kind == kind]


def build_execution_request(algorithm: Algorithm, data: str):
    return {
        "request_type": "execution",
        "content": {"algorithm": algorithm.key, "data": data},
    }


def _parse_list_type(content):
    list_type = content.get("list_type")
    if list_type is None:
        return None
    try:
        return AlgorithmType(str(list_type).lower())
    except ValueError:
        raise AlgorithmRequestError(f"Unknown list type: {list_type!r}") from None


def _handle_list(content):
    algs = list_algorithms(_parse_list_type(content))
    return [OK, json.dumps(algs)]


def _handle_execution(content):
    if "algorithm" not in content or "data" not in content:
        raise AlgorithmRequestError("Execution request needs 'algorithm' and 'data'")
    alg = Algorithm.lookup(content["algorithm"])
    edges = decode(str(content["data"]))
    logger.info("Execution request for %s with %d edge definitions", alg.display_name, len(edges))
    return [OK, f"{alg.display_name}: received {len(edges)} edge definitions"]


def parse_request(body):
    """Top-level request (JSON text or an already decoded dict) -> (type, content)."""
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except ValueError as exc:
            raise AlgorithmRequestError(f"Error parsing toplevel request: {exc}") from exc
    if not isinstance(body, dict):
        raise AlgorithmRequestError("Error parsing toplevel request: expected an object")

    request_type = body.get("request_type")
    content = body.get("content") or {}
    if request_type not in ("list", "execution"):
        raise AlgorithmRequestError(f"Unknown request type: {request_type!r}")
    if not isinstance(content, dict):
        raise AlgorithmRequestError(f"Error parsing {request_type} request: content must be an object")
    return request_type, content


def handle_request(body):
    try:
        request_type, content = parse_request(body)
        if request_type == "list":
            return _handle_list(content)
        return _handle_execution(content)
    except AlgorithmRequestError as exc:
        logger.warning("%s", exc)
        return [ERROR, str(exc)]
