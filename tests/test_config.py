import pytest

from flowcanvas import ConfigurationError, LayoutConfig
from flowcanvas.config import DEFAULT_SERVER_URL, SERVER_URL_ENV, resolve_server_url


def test_defaults():
    config = LayoutConfig()
    assert (config.node_width, config.node_height) == (120, 60)
    assert config.column_step == 220


@pytest.mark.parametrize(
    "kwargs",
    [
        {"node_width": 0},
        {"node_height": -5},
        {"canvas_width": "800"},
        {"level_height": True},
        {"horizontal_gap": -1},
        {"level_height": 40},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ConfigurationError):
        LayoutConfig(**kwargs)


def test_server_url_precedence(monkeypatch):
    monkeypatch.delenv(SERVER_URL_ENV, raising=False)
    assert resolve_server_url() == DEFAULT_SERVER_URL

    monkeypatch.setenv(SERVER_URL_ENV, "https://canvas.example/")
    assert resolve_server_url() == "https://canvas.example"
    assert resolve_server_url("http://other:9000") == "http://other:9000"


def test_server_url_requires_http_scheme():
    with pytest.raises(ConfigurationError):
        resolve_server_url("ftp://canvas.example")
