"""
HTTP API on the Dash Flask server.

Endpoints:
- GET  /api/cpus         -> current telemetry snapshot
- GET  /api/cpus/stream  -> snapshots as server-sent events
- POST /api/algorithms   -> algorithm catalog requests
"""

import json
import logging
import time

from flask import Response, jsonify, request, stream_with_context

from . import config
from .algorithms import handle_request
from .telemetry import collect_snapshot

logger = logging.getLogger(__name__)


def event_stream(interval=config.TELEMETRY_PUSH_SECONDS, sample=collect_snapshot, limit=None):
    """One `data:` event per sample, forever unless `limit` is given."""
    sent = 0
    while limit is None or sent < limit:
        if sent:
            time.sleep(interval)
        yield f"data: {json.dumps(sample().to_dict())}\n\n"
        sent += 1


def register_routes(server):

    @server.route("/api/cpus", methods=["GET"])
    def cpus_get():
        return jsonify(collect_snapshot().to_dict())

    @server.route("/api/cpus/stream", methods=["GET"])
    def cpus_stream():
        logger.info("New cpus stream connection from %s", request.remote_addr)
        return Response(
            stream_with_context(event_stream()),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )

    @server.route("/api/algorithms", methods=["POST"])
    def algorithms_post():
        return jsonify(handle_request(request.get_data(as_text=True)))
