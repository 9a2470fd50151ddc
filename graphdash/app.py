import logging

from dash import dcc, html
from dash_extensions.enrich import DashProxy, Input, Output, TriggerTransform

from . import api, config, editor, htop, styles

logger = logging.getLogger(__name__)

external_stylesheets = [
    "https://fonts.googleapis.com/css2?family=Roboto:wght@400;700&display=swap"
]


def header():
    return html.Div([
        dcc.Link("HTOP", href="/htop", style=styles.header_link_style),
        dcc.Link("Algorithms", href="/algorithms", style=styles.header_link_style),
    ], style=styles.header_style)


def page_for(pathname, telemetry_mode=config.TELEMETRY_MODE):
    if pathname in (None, "", "/", "/htop"):
        return htop.layout(telemetry_mode)
    if pathname == "/algorithms":
        return editor.layout()
    return html.Div([html.H1("404"), html.P(f"No page at {pathname}")], style={"padding": "20px"})


def create_app(telemetry_mode=config.TELEMETRY_MODE, telemetry_client=None):
    app = DashProxy(
        __name__,
        title="graphdash",
        external_stylesheets=external_stylesheets,
        transforms=[TriggerTransform()],
        suppress_callback_exceptions=True,
    )

    app.layout = html.Div([
        dcc.Location(id="url"),
        header(),
        html.Div(id="page-content"),
    ])

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname")
    )
    def display_page(pathname):
        return page_for(pathname, telemetry_mode)

    editor.register_callbacks(app)
    htop.register_callbacks(app, telemetry_mode, telemetry_client)
    api.register_routes(app.server)
    return app


app = create_app()
server = app.server


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info("Listening on http://%s:%d (telemetry: %s)", config.HOST, config.PORT, config.TELEMETRY_MODE)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == '__main__':
    main()
