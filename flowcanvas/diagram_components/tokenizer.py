import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import EmptyInputError
from .core import DiagramKind, Direction

logger = logging.getLogger(__name__)

COMMENT_MARKER = "%%"

# Checked in order; "stateDiagram" also covers "stateDiagram-v2".
KIND_KEYWORDS: Tuple[Tuple[str, DiagramKind], ...] = (
    ("graph", DiagramKind.FLOWCHART),
    ("flowchart", DiagramKind.FLOWCHART),
    ("sequenceDiagram", DiagramKind.SEQUENCE),
    ("classDiagram", DiagramKind.CLASS),
    ("stateDiagram", DiagramKind.STATE),
    ("gantt", DiagramKind.GANTT),
)


@dataclass(frozen=True)
class TokenizedText:
    kind: DiagramKind
    lines: Tuple[str, ...]
    header: Optional[str] = None
    direction: Direction = Direction.TB


def split_lines(text: str) -> List[str]:
    if not isinstance(text, str):
        raise TypeError("diagram text must be a string")

    lines: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        lines.append(line)
    return lines


def detect_kind(line: str) -> DiagramKind:
    for keyword, kind in KIND_KEYWORDS:
        if line.startswith(keyword):
            return kind
    return DiagramKind.UNKNOWN


def _detect_direction(header: str) -> Direction:
    parts = header.rstrip(";").split()
    if len(parts) < 2:
        return Direction.TB
    return Direction.from_token(parts[1].rstrip(";"))


def tokenize(text: str) -> TokenizedText:
    lines = split_lines(text)
    if not lines:
        raise EmptyInputError("Diagram text is empty: no content lines after removing blanks and comments.")

    first = lines[0]
    kind = detect_kind(first)
    if kind is DiagramKind.UNKNOWN:
        logger.debug("No diagram keyword on first line %r, treating it as content", first)
        return TokenizedText(kind=kind, lines=tuple(lines))

    direction = _detect_direction(first) if kind is DiagramKind.FLOWCHART else Direction.TB
    return TokenizedText(kind=kind, lines=tuple(lines[1:]), header=first, direction=direction)
