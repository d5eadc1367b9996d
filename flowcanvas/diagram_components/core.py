from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagramKind(Enum):

    FLOWCHART = "flowchart"
    SEQUENCE = "sequence"
    CLASS = "class"
    STATE = "state"
    GANTT = "gantt"
    UNKNOWN = "unknown"


class Direction(Enum):

    TB = "TB"
    BT = "BT"
    LR = "LR"
    RL = "RL"

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Direction":
        if not token:
            return cls.TB
        key = token.upper().strip()
        if key == "TD":
            return cls.TB
        try:
            return cls(key)
        except ValueError:
            return cls.TB


class ShapeKind(Enum):

    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    ROUNDED = "rounded"
    PLAIN = "plain"


class ElementKind(Enum):

    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    ARROW = "arrow"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ElementStyle:

    stroke_color: str = "#1f2937"
    background_color: str = "#dbeafe"
    fill_style: str = "hachure"
    stroke_width: int = 2
    roughness: int = 1
    opacity: int = 100
    roundness: Optional[str] = None

    @classmethod
    def for_shape(cls, shape_kind: ShapeKind) -> "ElementStyle":
        if shape_kind is ShapeKind.ROUNDED:
            return cls(roundness="round")
        return cls()

    @classmethod
    def for_connector(cls) -> "ElementStyle":
        return cls(background_color="transparent")


@dataclass
class BoxChars:

    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    horizontal: str = "─"
    vertical: str = "│"

    trail: str = "·"
    arrow_down: str = "▼"
    arrow_right: str = "►"
    arrow_left: str = "◄"
    arrow_up: str = "▲"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"square", "line", "box"}:
            return cls()
        if key in {"rounded", "round", "modern"}:
            return cls(top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯")
        if key == "diamond":
            return cls(top_left="/", top_right="\\", bottom_left="\\", bottom_right="/")
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                horizontal="-",
                vertical="|",
                trail=".",
                arrow_down="v",
                arrow_right=">",
                arrow_left="<",
                arrow_up="^",
            )
        raise ValueError(f"Unknown box style: {style}")
