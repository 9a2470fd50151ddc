from . import config

button_style = {
    "backgroundColor": "#007BFF",
    "color": "white",
    "border": "none",
    "padding": "8px 14px",
    "marginRight": "6px",
    "borderRadius": "6px",
    "cursor": "pointer",
    "fontWeight": "bold",
    "fontFamily": "Roboto, sans-serif",
    "fontSize": "14px",
    "boxShadow": "0 2px 4px rgba(0,0,0,0.2)",
}

small_button_style = {
    **button_style,
    "padding": "2px 10px",
    "minWidth": "32px",
}

reset_button_style = {
    **button_style,
    "backgroundColor": "#6c757d",
}

delete_button_style = {
    **small_button_style,
    "backgroundColor": "#dc3545",
}

box_style = {
    "padding": "15px",
    "borderRadius": "8px",
    "boxShadow": "0 2px 8px rgba(0,0,0,0.1)",
    "backgroundColor": "#FFFFFF",
    "border": "1px solid #E0E0E0",
    "fontFamily": "Roboto, sans-serif",
}

header_style = {
    "display": "flex",
    "gap": "20px",
    "padding": "10px 20px",
    "backgroundColor": "#343a40",
    "fontFamily": "Roboto, sans-serif",
}

header_link_style = {"color": "white", "textDecoration": "none", "fontWeight": "bold"}

editor_style = {
    "display": "flex",
    "gap": "20px",
    "alignItems": "flex-start",
    "padding": "20px",
    "fontFamily": "Roboto, sans-serif",
}

textarea_style = {"width": "320px", "height": "500px", "fontFamily": "monospace"}

console_style = {
    **box_style,
    "height": "120px",
    "overflowY": "auto",
    "fontFamily": "monospace",
    "fontSize": "12px",
    "whiteSpace": "pre-wrap",
}

graph_mount_style = {
    "width": "100%",
    "height": "60vh",
    "border": "1px solid #E0E0E0",
    "borderRadius": "8px",
}

valid_marker_style = {"color": "green", "fontWeight": "bold"}
invalid_marker_style = {"color": "#dc3545", "fontWeight": "bold"}

cpu_cell_style = {"width": f"{config.CPU_BAR_WIDTH}px", "padding": "4px", "verticalAlign": "top"}
cpu_text_style = {"fontFamily": "monospace", "whiteSpace": "pre", "margin": "0 0 2px 0"}
cpu_fullbar_style = {
    "width": f"{config.CPU_BAR_WIDTH}px",
    "height": "8px",
    "backgroundColor": "#e9ecef",
    "borderRadius": "4px",
    "overflow": "hidden",
}
cpu_percentage_style = {"height": "8px", "backgroundColor": "#28a745"}

cytoscape_stylesheet = [
    {'selector': 'node', 'style': {
        'label': 'data(label)', 'background-color': '#9370DB', 'color': '#222',
        'text-valign': 'center', 'width': 30, 'height': 30}},
    {'selector': 'edge', 'style': {
        'curve-style': 'bezier', 'label': 'data(label)', 'font-size': 12,
        'line-color': '#999', 'text-background-color': '#fff', 'text-background-opacity': 1}},
    {'selector': 'edge.directed', 'style': {
        'target-arrow-shape': 'triangle', 'target-arrow-color': '#999', 'arrow-scale': 1.2}},
    {'selector': ':selected', 'style': {
        'background-color': '#FF1493', 'line-color': '#FF1493', 'target-arrow-color': '#FF1493'}},
]
