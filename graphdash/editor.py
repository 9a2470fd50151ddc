"""
Algorithms view: the graph-definition editor.

The graph lives in a memory dcc.Store ("graph-store") holding
GraphState.to_dict(). One callback turns every editor control into a store
action; a second one redraws the edge table and the text pane from the
store. The text pane is inert until "Parse" is pressed, and the graph is
only drawn on "Render".
"""

import logging
from datetime import datetime

import dash
import dash_cytoscape as cyto
from dash import dcc, html, ALL
from dash_extensions.enrich import Input, Output, State, Trigger

from . import styles
from .algorithms import Algorithm, AlgorithmType, build_execution_request, handle_request
from .render import to_cytoscape_elements, to_dot, to_render_graph
from .state import GraphState, GraphStateStore

logger = logging.getLogger(__name__)

CONSOLE_LINES = 50

EDGE_FIELD_IDS = {
    "edge-source": "source",
    "edge-destination": "destination",
    "edge-weight": "weight",
    "edge-directed": "directed",
}


# ----------- Pure handlers -----------

def handle_editor_event(trigger, value, store_data, text=""):
    """
    Apply the control that fired to the stored graph.

    `trigger` is the component id (a string, or a dict for per-row
    controls), `value` the property value that fired. Returns the new store
    payload, or None when nothing changed.
    """
    store = GraphStateStore(GraphState.from_dict(store_data))
    before = store.state

    if trigger == "node-add-btn":
        store.increment_nodes()
    elif trigger == "node-remove-btn":
        store.decrement_nodes()
    elif trigger == "edge-add-btn":
        store.add_edge()
    elif trigger == "edge-reset-btn":
        store.reset()
    elif trigger == "parse-btn":
        store.import_text(text or "")
    elif isinstance(trigger, dict):
        kind, index = trigger.get("type"), trigger.get("index")
        if kind == "edge-delete":
            # freshly drawn buttons report n_clicks 0/None
            if value:
                store.delete_edge(index)
        elif kind in EDGE_FIELD_IDS:
            store.update_edge_field(index, EDGE_FIELD_IDS[kind], value)

    if store.state == before:
        return None
    return store.state.to_dict()


def node_options(node_count, current=None):
    options = [{"label": str(i + 1), "value": i} for i in range(node_count)]
    if current is not None and not 0 <= current < node_count:
        options.append({"label": f"{current + 1} (no such node)", "value": current, "disabled": True})
    return options


def edge_row(index, edge, node_count):
    marker = (
        html.Span("✔", title="valid", style=styles.valid_marker_style)
        if edge.valid else
        html.Span("✘", title="not a valid edge yet", style=styles.invalid_marker_style)
    )
    return html.Tr([
        html.Td(f"#{index + 1}:"),
        html.Td(dcc.Dropdown(
            id={"type": "edge-source", "index": index},
            options=node_options(node_count, edge.source),
            value=edge.source, placeholder="src", style={"width": "110px"},
        )),
        html.Td(dcc.Dropdown(
            id={"type": "edge-destination", "index": index},
            options=node_options(node_count, edge.destination),
            value=edge.destination, placeholder="dst", style={"width": "110px"},
        )),
        html.Td(dcc.Input(
            id={"type": "edge-weight", "index": index},
            type="number", value=edge.weight, debounce=True, style={"width": "60px"},
        )),
        html.Td(dcc.Checklist(
            id={"type": "edge-directed", "index": index},
            options=[{"label": "", "value": "directed"}],
            value=["directed"] if edge.directed else [],
        )),
        html.Td(marker),
        html.Td(html.Button(
            "✕", id={"type": "edge-delete", "index": index}, n_clicks=0,
            style=styles.delete_button_style,
        )),
    ], className="algorithms-edge")


def edge_table(state: GraphState):
    if not state.edges:
        return html.P("No edges yet.")
    header = html.Tr([html.Th(h) for h in ("Edge", "Source", "Destination", "Distance", "Directed", "", "")])
    rows = [edge_row(i, edge, state.node_count) for i, edge in enumerate(state.edges)]
    return html.Table([header] + rows, id="algorithms-edges")


def render_elements(store_data):
    state = GraphState.from_dict(store_data)
    description = to_render_graph(state.node_count, state.edges)
    return to_cytoscape_elements(description), description


def render_update(store_data):
    """(elements, status) for the Render button. A failure keeps the current drawing."""
    try:
        elements, description = render_elements(store_data)
    except Exception:
        logger.exception("Rendering failed, keeping the previous drawing")
        return dash.no_update, "Render failed."
    return elements, f"{len(description.nodes)} nodes, {len(description.edges)} edges"


def console_line(message):
    return html.Div(f"[{datetime.now():%Y-%m-%d %H:%M:%S}] {message}")


# ----------- Layout -----------

def layout():
    graph_algorithms = [alg for alg in Algorithm if alg.kind == AlgorithmType.GRAPH]
    return html.Div([
        html.H1("Algorithms"),
        dcc.Store(id="graph-store", storage_type="memory", data=GraphState().to_dict()),
        html.Div([
            html.Div([
                html.Div([
                    html.Span("Nodes: ", style={"paddingRight": "6px"}),
                    html.Span("0", id="node-count", style={"paddingRight": "10px"}),
                    html.Button("+", id="node-add-btn", n_clicks=0, style=styles.small_button_style),
                    html.Button("-", id="node-remove-btn", n_clicks=0, style=styles.small_button_style),
                ], style={"marginBottom": "10px"}),
                html.Div([
                    html.Button("Add Edge", id="edge-add-btn", n_clicks=0, style=styles.button_style),
                    html.Button("Reset", id="edge-reset-btn", n_clicks=0, style=styles.reset_button_style),
                ], style={"marginBottom": "10px"}),
                html.Div(id="edge-rows"),
            ], style={**styles.box_style, "minWidth": "560px"}),
            html.Div([
                dcc.Textarea(id="graph-text", value="", style=styles.textarea_style),
                html.Div("Edge-Definitions: (src, dst, dist)", style={"fontSize": "12px", "color": "#666"}),
                html.Button("Parse", id="parse-btn", n_clicks=0,
                            style={**styles.button_style, "marginTop": "10px"}),
            ], style=styles.box_style),
        ], style=styles.editor_style),
        html.Div([
            html.Button("Render", id="render-btn", n_clicks=0, style=styles.button_style),
            html.Button("Export DOT", id="export-dot-btn", n_clicks=0, style=styles.reset_button_style),
            html.Span(id="render-status", style={"marginLeft": "10px", "color": "#666"}),
            dcc.Download(id="dot-download"),
            cyto.Cytoscape(
                id="cytoscape-graph",
                elements=[],
                layout={"name": "preset"},
                style=styles.graph_mount_style,
                stylesheet=styles.cytoscape_stylesheet,
                userZoomingEnabled=True,
                userPanningEnabled=True,
                minZoom=0.2,
                maxZoom=3,
            ),
        ], style={"padding": "0 20px"}),
        html.Div([
            dcc.Dropdown(
                id="algorithm-select",
                options=[{"label": alg.display_name, "value": alg.key} for alg in graph_algorithms],
                value=graph_algorithms[0].key,
                clearable=False,
                style={"width": "200px", "display": "inline-block", "verticalAlign": "middle"},
            ),
            html.Button("Send", id="send-btn", n_clicks=0,
                        style={**styles.button_style, "marginLeft": "10px"}),
            html.Div(id="algorithm-console", children=[], style={**styles.console_style, "marginTop": "10px"}),
        ], style={"padding": "20px"}),
    ], id="algorithms-outer")


# ----------- Callbacks -----------

def register_callbacks(app):

    @app.callback(
        Output("graph-store", "data"),
        Input("node-add-btn", "n_clicks"),
        Input("node-remove-btn", "n_clicks"),
        Input("edge-add-btn", "n_clicks"),
        Input("edge-reset-btn", "n_clicks"),
        Input("parse-btn", "n_clicks"),
        Input({"type": "edge-source", "index": ALL}, "value"),
        Input({"type": "edge-destination", "index": ALL}, "value"),
        Input({"type": "edge-weight", "index": ALL}, "value"),
        Input({"type": "edge-directed", "index": ALL}, "value"),
        Input({"type": "edge-delete", "index": ALL}, "n_clicks"),
        State("graph-store", "data"),
        State("graph-text", "value"),
        prevent_initial_call=True
    )
    def unified_editor_callback(add_node, remove_node, add_edge, reset, parse,
                                sources, destinations, weights, directed, deletes,
                                store_data, text):
        ctx = dash.callback_context
        if not ctx.triggered or ctx.triggered_id is None:
            return dash.no_update
        new_data = handle_editor_event(ctx.triggered_id, ctx.triggered[0]["value"], store_data, text)
        return dash.no_update if new_data is None else new_data

    @app.callback(
        Output("edge-rows", "children"),
        Output("node-count", "children"),
        Output("graph-text", "value"),
        Input("graph-store", "data")
    )
    def redraw_editor(store_data):
        state = GraphState.from_dict(store_data)
        return edge_table(state), str(state.node_count), state.text

    @app.callback(
        Output("cytoscape-graph", "elements"),
        Output("render-status", "children"),
        Trigger("render-btn", "n_clicks"),
        State("graph-store", "data"),
        prevent_initial_call=True
    )
    def render_graph(store_data):
        return render_update(store_data)

    @app.callback(
        Output("dot-download", "data"),
        Trigger("export-dot-btn", "n_clicks"),
        State("graph-store", "data"),
        prevent_initial_call=True
    )
    def export_dot(store_data):
        state = GraphState.from_dict(store_data)
        return dict(content=to_dot(to_render_graph(state.node_count, state.edges)), filename="graph.dot")

    @app.callback(
        Output("algorithm-console", "children"),
        Trigger("send-btn", "n_clicks"),
        State("algorithm-select", "value"),
        State("graph-store", "data"),
        State("algorithm-console", "children"),
        prevent_initial_call=True
    )
    def send_to_backend(algorithm_key, store_data, console):
        state = GraphState.from_dict(store_data)
        status, message = handle_request(build_execution_request(Algorithm.lookup(algorithm_key), state.text))
        lines = list(console or []) + [console_line(f"{status}: {message}")]
        return lines[-CONSOLE_LINES:]
