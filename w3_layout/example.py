"""A page showing each of the containers side by side."""
import logging

from dash import html

from .layout_helpers import (
    create_auto_column,
    create_auto_row,
    create_content,
    create_grid_container,
    create_panel,
    create_row,
    hide_on_large,
    hide_on_small,
    set_maximum_page_width_in_pixels,
    set_mobile,
)
from .mapper import ColumnSize, VerticalAlign

log = logging.getLogger(__name__)


def build_demo(ctx, page_width=None):
    body = ctx.body
    set_maximum_page_width_in_pixels(ctx, body, page_width)

    create_panel(ctx, body, html.H2("W3 Layout"), class_name="w3-blue")

    create_content(
        ctx,
        body,
        html.P("Content boxes are centered and can be capped in width."),
        maximum_width=640,
    )

    auto_row = create_auto_row(ctx, body)
    for align in VerticalAlign:
        create_auto_column(
            ctx,
            auto_row,
            align.value.capitalize(),
            vertical_align=align,
            class_name="w3-light-grey",
        )

    row = create_row(ctx, body, padding=True)
    for size in (ColumnSize.HALF, ColumnSize.QUARTER, ColumnSize.QUARTER):
        create_grid_container(ctx, row, size.value, column_size=size)

    responsive = create_row(ctx, body)
    for label in ("One", "Two", "Three"):
        create_grid_container(ctx, responsive, label, column_size="s12 m6 l4")

    narrow_only = create_panel(ctx, body, "Hidden on large screens")
    hide_on_large(narrow_only)

    wide_only = create_panel(ctx, body, "Hidden on small screens")
    hide_on_small(wide_only)

    set_mobile(create_panel(ctx, body, "Full width on mobile"))

    log.debug("Built demo layout")
    return body
