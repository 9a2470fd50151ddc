"""HTOP view: live CPU and memory usage."""

import logging

import dash
import requests
from dash import dcc, html
from dash_extensions import EventSource
from dash_extensions.enrich import Input, Output

from . import config, styles
from .telemetry import (
    TelemetryClient, TelemetryError, TelemetrySnapshot,
    cpu_bar_width, cpu_grid, cpu_label, memory_summary,
)

logger = logging.getLogger(__name__)

STREAM_URL = "/api/cpus/stream"


def cpu_cell(index, percent):
    return html.Td([
        html.P(cpu_label(index, percent), style=styles.cpu_text_style),
        html.Div(
            html.Div(style={**styles.cpu_percentage_style, "width": f"{cpu_bar_width(percent)}px"}),
            style=styles.cpu_fullbar_style,
        ),
    ], id=f"cpu-{index}", className="cpu", style=styles.cpu_cell_style)


def cpu_table(cpu_usage):
    rows = []
    for r, cells in enumerate(cpu_grid(cpu_usage)):
        rows.append(html.Tr(
            [cpu_cell(i, cpu_usage[i]) if i is not None else html.Td() for i in cells],
            id=f"cpu-row-{r}",
        ))
    return html.Table(rows, id="cpu-table")


def render_snapshot(snapshot: TelemetrySnapshot):
    return [
        html.H1(f"System name: {snapshot.system_name}", id="systemname"),
        html.H2(f"Hostname: {snapshot.host_name}", id="hostname"),
        html.P(memory_summary(snapshot), id="ramusage"),
        cpu_table(snapshot.cpu_usage),
    ]


def layout(mode=config.TELEMETRY_MODE):
    if mode == "push":
        feed = EventSource(id="telemetry-events", url=STREAM_URL)
    else:
        feed = dcc.Interval(id="telemetry-interval", interval=config.TELEMETRY_POLL_MS, n_intervals=0)
    return html.Div([
        html.Div(html.P("Waiting for telemetry..."), id="htop", className="htop"),
        feed,
    ], style={"padding": "20px", "fontFamily": "Roboto, sans-serif"})


def register_callbacks(app, mode=config.TELEMETRY_MODE, client=None):
    client = client or TelemetryClient()

    if mode == "push":
        @app.callback(
            Output("htop", "children"),
            Input("telemetry-events", "message"),
            prevent_initial_call=True
        )
        def on_telemetry_message(message):
            try:
                snapshot = TelemetrySnapshot.from_json(message)
            except TelemetryError as exc:
                logger.warning("Dropping telemetry message: %s", exc)
                return dash.no_update
            return render_snapshot(snapshot)
        return

    @app.callback(
        Output("htop", "children"),
        Input("telemetry-interval", "n_intervals")
    )
    def poll_telemetry(n_intervals):
        try:
            snapshot = client.fetch()
        except (requests.RequestException, TelemetryError) as exc:
            logger.warning("Telemetry poll failed: %s", exc)
            return dash.no_update
        return render_snapshot(snapshot)
