"""
HTTP routes on the Dash Flask server.
"""

import json

import pytest

from graphdash.api import event_stream
from graphdash.app import create_app, page_for
from graphdash.telemetry import TelemetrySnapshot


@pytest.fixture
def client():
    app = create_app(telemetry_mode="poll")
    return app.server.test_client()


def test_cpus_get(client):
    response = client.get("/api/cpus")
    assert response.status_code == 200
    snapshot = TelemetrySnapshot.from_dict(response.get_json())
    assert snapshot.cpus == response.get_json()["cpus"]


def test_algorithms_list(client):
    response = client.post("/api/algorithms", data=json.dumps({"request_type": "list", "content": {"list_type": "graph"}}))
    assert response.status_code == 200
    status, body = response.get_json()
    assert status == "Ok"
    assert json.loads(body) == ["Dijkstra", "Johnson", "Prim"]


def test_algorithms_bad_request(client):
    response = client.post("/api/algorithms", data="not json")
    assert response.get_json()[0] == "Error"


def test_event_stream_frames():
    snapshot = TelemetrySnapshot("Linux", "box", 1, 2, [1.0])
    frames = list(event_stream(interval=0, sample=lambda: snapshot, limit=2))
    assert len(frames) == 2
    for frame in frames:
        assert frame.startswith("data: ") and frame.endswith("\n\n")
        assert TelemetrySnapshot.from_json(frame[len("data: "):]) == snapshot


def test_routing():
    assert "Algorithms" in repr(page_for("/algorithms"))
    assert "htop" in repr(page_for("/"))
    assert "404" in repr(page_for("/nowhere"))
