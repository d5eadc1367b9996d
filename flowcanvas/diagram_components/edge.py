from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConnectorKind(Enum):

    ARROW = "arrow"
    THICK_ARROW = "thick_arrow"
    THICK = "thick"
    DOTTED = "dotted"
    PLAIN = "plain"


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    label: Optional[str] = None
    connector: ConnectorKind = ConnectorKind.ARROW
