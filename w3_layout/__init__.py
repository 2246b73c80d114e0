import logging
import posixpath
from pathlib import Path
from urllib.parse import urlsplit

from dash import Dash, html
from flask import send_from_directory

from .config import Settings
from .layout_helpers import (
    AutoColumn,
    AutoRow,
    Container,
    Content,
    GridContainer,
    Panel,
    Row,
    add_class,
    class_list,
    create_auto_column,
    create_auto_row,
    create_content,
    create_grid_container,
    create_panel,
    create_row,
    hide_on_large,
    hide_on_medium,
    hide_on_small,
    set_maximum_page_width_in_pixels,
    set_maximum_width,
    set_mobile,
    set_visible,
)
from .mapper import (
    ColumnSize,
    ColumnSizeError,
    LayoutKind,
    VerticalAlign,
    column_size_classes,
    layout_classes,
)

log = logging.getLogger(__name__)

DEFAULT_STYLESHEET_URL = "/css/w3.css"

# Default for stylesheet_url, None skips loading
UNSET = object()


class W3Context:
    """
    Per app state for the W3.CSS layout helpers.

    Created once by `initialize` and passed to every container builder.
    """

    def __init__(self, app, *, body, stylesheet_url, settings):
        self.app = app
        self.body = body
        self.stylesheet_url = stylesheet_url
        self.settings = settings

    def classes_for(self, kind, **options):
        return layout_classes(
            kind,
            column_size_mode=self.settings.COLUMN_SIZE_MODE,
            strict=self.settings.STRICT_COLUMN_SIZES,
            **options,
        )

    def load_stylesheet(self, url):
        stylesheets = self.app.config.external_stylesheets
        if url in stylesheets:
            log.debug("Stylesheet %s already loaded", url)
            return
        stylesheets.append(url)
        log.debug("Loading stylesheet %s", url)

    def serve_stylesheets(self, directory, url_prefix=None):
        """
        Serve the files in `directory` from the stylesheet's URL path so the
        default "/css/w3.css" resolves without a CDN.
        """
        directory = Path(directory).resolve()
        if url_prefix is None:
            path = urlsplit(self.stylesheet_url or DEFAULT_STYLESHEET_URL).path
            url_prefix = posixpath.dirname(path)
        if not url_prefix.startswith("/"):
            raise ValueError(f"Cannot serve stylesheets from {url_prefix!r}")
        url_prefix = url_prefix.rstrip("/")

        endpoint = "w3_layout_stylesheets" + url_prefix.replace("/", "_")
        if endpoint in self.app.server.view_functions:
            log.debug("Stylesheets already served from %s", url_prefix or "/")
            return

        def send_stylesheet(filename):
            return send_from_directory(directory, filename)

        self.app.server.add_url_rule(
            f"{url_prefix}/<path:filename>",
            endpoint=endpoint,
            view_func=send_stylesheet,
        )
        log.debug("Serving %s from %s", url_prefix, directory)


def initialize(app: Dash, stylesheet_url=UNSET, *, body=None, settings=None):
    """
    Prepare a Dash app for the layout helpers.

    Loads the stylesheet (pass None to skip) and returns the context the
    builders need. When the app has no layout yet `body` (a fresh Div by
    default) becomes it.
    """
    settings = settings or Settings()
    if stylesheet_url is UNSET:
        stylesheet_url = settings.STYLESHEET_URL

    if body is None:
        body = html.Div(id="w3-body")

    if app.layout is None:
        app.layout = body

    ctx = W3Context(app, body=body, stylesheet_url=stylesheet_url, settings=settings)
    if stylesheet_url:
        ctx.load_stylesheet(stylesheet_url)

    return ctx


def run_demo(stylesheet_url=UNSET, css_dir=None, page_width=None, debug=True):
    """
    Run a Dash server showing every container kind.
    """
    from .example import build_demo

    app = Dash(__name__, title="W3 Layout")
    ctx = initialize(app, stylesheet_url)
    if css_dir:
        ctx.serve_stylesheets(css_dir)
    build_demo(ctx, page_width=page_width)
    app.run(debug=debug)
