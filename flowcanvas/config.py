import os
from dataclasses import dataclass, fields
from typing import Optional

from .errors import ConfigurationError

DEFAULT_SERVER_URL = "http://localhost:3000"
SERVER_URL_ENV = "CANVAS_SERVER_URL"


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry constants for the layered layout, in canvas units.

    ``fallback_x``/``fallback_y`` place nodes the level traversal never reached.
    """

    node_width: float = 120
    node_height: float = 60
    level_height: float = 150
    horizontal_gap: float = 100
    canvas_width: float = 800
    top_margin: float = 50
    min_margin: float = 50
    fallback_x: float = 100
    fallback_y: float = 100

    def __post_init__(self) -> None:
        for spec in fields(self):
            value = getattr(self, spec.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{spec.name} must be a number.")

        for name in ("node_width", "node_height", "level_height", "canvas_width"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be greater than zero.")
        for name in ("horizontal_gap", "top_margin", "min_margin"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative.")
        if self.level_height < self.node_height:
            raise ConfigurationError("level_height must be greater than or equal to node_height.")

    @property
    def column_step(self) -> float:
        return self.node_width + self.horizontal_gap


def resolve_server_url(explicit_url: Optional[str] = None) -> str:
    url = explicit_url or os.getenv(SERVER_URL_ENV) or DEFAULT_SERVER_URL
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(f"Canvas server URL must be http(s): {url!r}")
    return url.rstrip("/")
