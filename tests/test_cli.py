from click.testing import CliRunner

from w3_layout import cli as cli_module
from w3_layout.cli import cli


def invoke(*args):
    return CliRunner().invoke(cli, list(args))


def test_classes_panel():
    result = invoke("classes", "panel")
    assert result.exit_code == 0
    assert result.output == "w3-panel\n"


def test_classes_row_padding():
    assert invoke("classes", "row", "--padding").output == "w3-row-padding\n"


def test_classes_auto_column():
    result = invoke("classes", "auto-column", "--vertical-align", "Middle")
    assert result.output == "w3-cell w3-cell-middle\n"


def test_classes_responsive():
    result = invoke("classes", "grid-container", "--column-size", "s12 m6 l4")
    assert result.output == "w3-container w3-col s12 m6 l4\n"


def test_classes_responsive_literal():
    result = invoke(
        "classes", "grid-container", "--column-size", "s12 m6 l4", "--literal"
    )
    assert result.output == "w3-container w3-s12 m6 l4\n"


def test_classes_strict_rejects_unknown_size():
    result = invoke("classes", "grid-container", "--column-size", "s13", "--strict")
    assert result.exit_code == 2
    assert "Unrecognised column size" in result.output


def test_classes_unknown_kind():
    result = invoke("classes", "sidebar")
    assert result.exit_code == 2


def test_demo(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(cli_module, "run_demo", lambda **kwargs: calls.append(kwargs))

    result = invoke("demo", "--css-dir", str(tmp_path), "--no-debug")
    assert result.exit_code == 0
    assert calls == [
        dict(
            stylesheet_url="/css/w3.css",
            css_dir=str(tmp_path),
            page_width=980,
            debug=False,
        )
    ]


def test_demo_page_width(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_module, "run_demo", lambda **kwargs: calls.append(kwargs))

    invoke("demo", "--page-width", "1200", "--stylesheet-url", "/w3.css")
    assert calls[0]["page_width"] == 1200
    assert calls[0]["stylesheet_url"] == "/w3.css"
