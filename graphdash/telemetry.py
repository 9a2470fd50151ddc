"""
System telemetry for the HTOP view.

A snapshot is what the /api/cpus endpoint serves and what the view renders:

    {"system_name": ..., "host_name": ..., "used_memory": bytes,
     "total_memory": bytes, "cpus": n, "cpu_usage": [percent per core]}
"""

from __future__ import annotations

import json
import logging
import math
import platform
import socket
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

import psutil
import requests

from . import config

logger = logging.getLogger(__name__)

GIB = 1024 ** 3
REQUIRED_KEYS = ("system_name", "host_name", "used_memory", "total_memory", "cpu_usage")


class TelemetryError(ValueError):
    """A snapshot payload that cannot be decoded."""


@dataclass
class TelemetrySnapshot:
    system_name: str
    host_name: str
    used_memory: int
    total_memory: int
    cpu_usage: List[float] = field(default_factory=list)

    @property
    def cpus(self) -> int:
        return len(self.cpu_usage)

    def to_dict(self):
        return {
            "system_name": self.system_name,
            "host_name": self.host_name,
            "used_memory": self.used_memory,
            "total_memory": self.total_memory,
            "cpus": self.cpus,
            "cpu_usage": list(self.cpu_usage),
        }

    @classmethod
    def from_dict(cls, data) -> "TelemetrySnapshot":
        if not isinstance(data, dict):
            raise TelemetryError(f"snapshot must be an object, got {type(data).__name__}")
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise TelemetryError(f"snapshot is missing {', '.join(missing)}")
        try:
            return cls(
                system_name=str(data["system_name"]),
                host_name=str(data["host_name"]),
                used_memory=int(data["used_memory"]),
                total_memory=int(data["total_memory"]),
                cpu_usage=[float(cpu) for cpu in data["cpu_usage"]],
            )
        except (TypeError, ValueError) as exc:
            raise TelemetryError(f"bad snapshot value: {exc}") from exc

    @classmethod
    def from_json(cls, payload) -> "TelemetrySnapshot":
        try:
            data = json.loads(payload)
        except (TypeError, json.JSONDecodeError) as exc:
            raise TelemetryError(f"snapshot is not JSON: {exc}") from exc
        return cls.from_dict(data)


def collect_snapshot() -> TelemetrySnapshot:
    """Sample the local machine."""
    memory = psutil.virtual_memory()
    # interval=None compares against the previous call (first call reads 0.0)
    cpu_usage = psutil.cpu_percent(interval=None, percpu=True)
    return TelemetrySnapshot(
        system_name=platform.system() or "Unknown",
        host_name=socket.gethostname() or "Unknown",
        used_memory=int(memory.used),
        total_memory=int(memory.total),
        cpu_usage=[float(cpu) for cpu in cpu_usage],
    )


# ---------- formatting ----------

def _gib(amount: int, places: str) -> Decimal:
    # half-up, like the browser's toFixed
    return (Decimal(amount) / GIB).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def memory_summary(snapshot: TelemetrySnapshot) -> str:
    used = _gib(snapshot.used_memory, "0.1")
    total = _gib(snapshot.total_memory, "1")
    percent = math.floor(100 * snapshot.used_memory / snapshot.total_memory) if snapshot.total_memory else 0
    return f"RAM Usage: {used}GB ({percent}% of {total}GB)"


def cpu_label(index: int, percent: float) -> str:
    return f"CPU{index + 1:>2}: {percent:>6.1f}"


def cpu_bar_width(percent: float, width=config.CPU_BAR_WIDTH) -> float:
    return max(0.0, min(percent, 100.0)) / 100 * width


def cpu_grid(cpu_usage, rows=config.CPUS_PER_COLUMN) -> List[List[Optional[int]]]:
    """
    Core indices laid out column-major in a fixed number of rows.

    With 6 cores and 4 rows:
        [[0, 4], [1, 5], [2, None], [3, None]]
    """
    columns = math.ceil(len(cpu_usage) / rows) if rows > 0 else 0
    grid = []
    for row in range(rows):
        cells = []
        for col in range(columns):
            i = col * rows + row
            cells.append(i if i < len(cpu_usage) else None)
        grid.append(cells)
    return grid


# ---------- sources ----------

class TelemetryClient:
    """
    Where the HTOP view gets its snapshots from.

    With a URL the snapshot is polled from a remote /api/cpus endpoint;
    without one the local machine is sampled in-process.
    """

    def __init__(self, url: str = config.TELEMETRY_URL, timeout: float = config.REQUEST_TIMEOUT, session=None):
        self.url = url
        self.timeout = timeout
        self._session = session

    @property
    def session(self):
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def fetch(self) -> TelemetrySnapshot:
        if not self.url:
            return collect_snapshot()
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return TelemetrySnapshot.from_dict(response.json())
