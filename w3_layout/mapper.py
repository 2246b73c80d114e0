import logging
import re
from enum import Enum

log = logging.getLogger(__name__)


class LayoutKind(Enum):
    PANEL = "panel"
    CONTENT = "content"
    AUTO_ROW = "auto-row"
    AUTO_COLUMN = "auto-column"
    ROW = "row"
    GRID_CONTAINER = "grid-container"


class VerticalAlign(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class ColumnSize(Enum):
    HALF = "half"
    THIRD = "third"
    TWO_THIRD = "twothird"
    QUARTER = "quarter"
    THREE_QUARTER = "threequarter"
    REST = "rest"
    COL = "col"


class ColumnSizeError(ValueError):
    pass


COLUMN_SIZE_MODES = ("framework", "literal")

# One breakpoint column count, e.g. s12, m6 or l4
BREAKPOINT_TOKEN = re.compile(r"^[sml](1[0-2]|[1-9])$")


def _coerce(enum_type, value):
    if isinstance(value, enum_type):
        return value
    return enum_type(str(value).strip().lower())


def is_responsive_size(size):
    tokens = str(size).split()
    return bool(tokens) and all(BREAKPOINT_TOKEN.match(t) for t in tokens)


def column_size_classes(size, mode="framework", strict=False):
    """
    Class tokens for a grid container's column size.

    Enumerated sizes map to ``w3-<size>``. Responsive strings such as
    ``"s12 m6 l4"`` map to ``w3-col s12 m6 l4`` in "framework" mode and to
    the single token ``w3-s12 m6 l4`` in "literal" mode.
    """
    if mode not in COLUMN_SIZE_MODES:
        raise ValueError(f"column size mode must be one of {COLUMN_SIZE_MODES}")

    if isinstance(size, ColumnSize):
        return [f"w3-{size.value}"]

    text = str(size).strip().lower()

    if text in {member.value for member in ColumnSize}:
        return [f"w3-{text}"]

    if is_responsive_size(text):
        if mode == "literal":
            return [f"w3-{text}"]
        return ["w3-col", *text.split()]

    if strict:
        raise ColumnSizeError(f"Unrecognised column size {size!r}")

    log.warning("Unrecognised column size %r, passing it through", size)
    return [f"w3-{text}"]


def layout_classes(
    kind,
    *,
    padding=False,
    vertical_align=None,
    column_size=None,
    column_size_mode="framework",
    strict=False,
):
    """Ordered class tokens for a container of the given layout kind."""
    kind = _coerce(LayoutKind, kind)

    if kind is LayoutKind.PANEL:
        return ["w3-panel"]

    if kind is LayoutKind.CONTENT:
        return ["w3-content"]

    if kind is LayoutKind.AUTO_ROW:
        return ["w3-cell-row"]

    if kind is LayoutKind.AUTO_COLUMN:
        classes = ["w3-cell"]
        if vertical_align:
            align = _coerce(VerticalAlign, vertical_align)
            classes.append(f"w3-cell-{align.value}")
        return classes

    if kind is LayoutKind.ROW:
        return ["w3-row-padding" if padding else "w3-row"]

    classes = ["w3-container"]
    if column_size:
        classes.extend(column_size_classes(column_size, column_size_mode, strict))
    return classes
