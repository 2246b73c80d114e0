import logging

from dash import html

from .mapper import LayoutKind

log = logging.getLogger(__name__)


def class_list(component):
    return (getattr(component, "className", None) or "").split()


def add_class(component, token):
    classes = class_list(component)
    missing = [t for t in token.split() if t not in classes]
    if missing:
        component.className = " ".join([*classes, *missing])
    return component


def set_visible(component, visible):
    component.hidden = not visible
    return component


def set_maximum_width(component, pixels):
    style = getattr(component, "style", None) or {}
    component.style = {**style, "maxWidth": f"{pixels}px"}
    return component


def append_child(parent, child):
    children = getattr(parent, "children", None)

    if children is None:
        parent.children = [child]
    elif isinstance(children, list):
        children.append(child)
    elif isinstance(children, tuple):
        parent.children = [*children, child]
    else:
        parent.children = [children, child]

    return child


class Container(html.Div):
    """
    A generic block container.

    Containers always start hidden so nothing is shown before their
    classes are in place.
    """

    kind = None

    def __init__(self, children=None, *, class_name=None, html_id=None):
        attrs = dict(className=class_name or "", hidden=True)
        if html_id is not None:
            attrs["id"] = html_id
        super().__init__(children, **attrs)

    @property
    def classes(self):
        return class_list(self)

    def add_class(self, token):
        return add_class(self, token)


class Panel(Container):
    kind = LayoutKind.PANEL


class Content(Container):
    kind = LayoutKind.CONTENT


class AutoRow(Container):
    kind = LayoutKind.AUTO_ROW


class AutoColumn(Container):
    kind = LayoutKind.AUTO_COLUMN


class Row(Container):
    kind = LayoutKind.ROW


class GridContainer(Container):
    kind = LayoutKind.GRID_CONTAINER


def _build(cls, ctx, parent, content, class_name, html_id, **options):
    container = cls(content, class_name=class_name, html_id=html_id)
    append_child(parent, container)

    for token in ctx.classes_for(cls.kind, **options):
        container.add_class(token)

    log.debug("Created %s with classes %r", cls.__name__, container.className)
    return container


def _reveal(container, hidden):
    if not hidden:
        set_visible(container, True)
    return container


def create_panel(
    ctx, parent, content=None, *, hidden=False, class_name=None, html_id=None
):
    panel = _build(Panel, ctx, parent, content, class_name, html_id)
    return _reveal(panel, hidden)


def create_content(
    ctx,
    parent,
    content=None,
    *,
    maximum_width=None,
    hidden=False,
    class_name=None,
    html_id=None,
):
    """
    Content box centered in its parent, optionally capped at
    ``maximum_width`` pixels.
    """
    box = _build(Content, ctx, parent, content, class_name, html_id)
    if maximum_width is not None:
        set_maximum_width(box, maximum_width)
    return _reveal(box, hidden)


def create_auto_row(
    ctx, parent, content=None, *, hidden=False, class_name=None, html_id=None
):
    row = _build(AutoRow, ctx, parent, content, class_name, html_id)
    return _reveal(row, hidden)


def create_auto_column(
    ctx,
    parent,
    content=None,
    *,
    vertical_align=None,
    hidden=False,
    class_name=None,
    html_id=None,
):
    column = _build(
        AutoColumn,
        ctx,
        parent,
        content,
        class_name,
        html_id,
        vertical_align=vertical_align,
    )
    return _reveal(column, hidden)


def create_row(
    ctx,
    parent,
    content=None,
    *,
    padding=False,
    hidden=False,
    class_name=None,
    html_id=None,
):
    row = _build(Row, ctx, parent, content, class_name, html_id, padding=padding)
    return _reveal(row, hidden)


def create_grid_container(
    ctx,
    parent,
    content=None,
    *,
    column_size=None,
    hidden=False,
    class_name=None,
    html_id=None,
):
    """
    Container in the 12 column grid.

    ``column_size`` is either a ColumnSize (or its name, e.g. "half") or a
    responsive size such as "s12 m6 l4".
    """
    container = _build(
        GridContainer,
        ctx,
        parent,
        content,
        class_name,
        html_id,
        column_size=column_size,
    )
    return _reveal(container, hidden)


def set_maximum_page_width_in_pixels(ctx, root, width=None):
    if width is None:
        width = ctx.settings.PAGE_WIDTH
    add_class(root, "w3-content")
    return set_maximum_width(root, width)


# Responsive visibility, applied through the stylesheet's media queries
def set_mobile(component):
    return add_class(component, "w3-mobile")


def hide_on_small(component):
    return add_class(component, "w3-hide-small")


def hide_on_medium(component):
    return add_class(component, "w3-hide-medium")


def hide_on_large(component):
    return add_class(component, "w3-hide-large")
