import pytest
from dash import Dash, html

from w3_layout import initialize
from w3_layout.config import ENV_PREFIX, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in Settings.__dataclass_fields__:
        monkeypatch.delenv(ENV_PREFIX + key, raising=False)


@pytest.fixture
def app():
    return Dash(__name__)


@pytest.fixture
def ctx(app):
    return initialize(app)


@pytest.fixture
def parent():
    return html.Div(id="parent")
