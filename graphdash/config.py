# config.py

import os


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _env_float(name, default):
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


def _env_bool(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# SERVER
# ============================================================

HOST = os.environ.get("GRAPHDASH_HOST", "127.0.0.1")
PORT = _env_int("GRAPHDASH_PORT", 8050)
DEBUG = _env_bool("GRAPHDASH_DEBUG")
LOG_LEVEL = os.environ.get("GRAPHDASH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# ============================================================
# TELEMETRY (HTOP view)
# ============================================================

# "poll" -> dcc.Interval, "push" -> server-sent events
TELEMETRY_MODE = os.environ.get("GRAPHDASH_TELEMETRY_MODE", "poll").strip().lower()
if TELEMETRY_MODE not in ("poll", "push"):
    TELEMETRY_MODE = "poll"

# Empty means the in-process psutil sampler is read directly
TELEMETRY_URL = os.environ.get("GRAPHDASH_TELEMETRY_URL", "").strip()
TELEMETRY_POLL_MS = _env_int("GRAPHDASH_TELEMETRY_POLL_MS", 1000)
TELEMETRY_PUSH_SECONDS = _env_float("GRAPHDASH_TELEMETRY_PUSH_SECONDS", 1.0)
REQUEST_TIMEOUT = _env_float("GRAPHDASH_REQUEST_TIMEOUT", 2.0)

CPUS_PER_COLUMN = 4
CPU_BAR_WIDTH = 300
