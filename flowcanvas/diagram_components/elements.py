from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .core import ElementKind, ElementStyle, Point


def _style_dict(style: ElementStyle) -> Dict[str, Any]:
    return {
        "strokeColor": style.stroke_color,
        "backgroundColor": style.background_color,
        "fillStyle": style.fill_style,
        "strokeWidth": style.stroke_width,
        "roughness": style.roughness,
        "opacity": style.opacity,
        "roundness": {"type": style.roundness} if style.roundness else None,
    }


@dataclass(frozen=True)
class ShapeElement:
    id: str
    kind: ElementKind
    x: float
    y: float
    width: float
    height: float
    text: str
    style: ElementStyle = field(default_factory=ElementStyle)
    seed: int = field(default=0, compare=False)
    version_nonce: int = field(default=0, compare=False)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "type": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "text": self.text,
        }
        payload.update(_style_dict(self.style))
        payload.update({"seed": self.seed, "versionNonce": self.version_nonce, "isDeleted": False})
        return payload


@dataclass(frozen=True)
class ConnectorElement:
    id: str
    start: Point
    end: Point
    text: Optional[str] = None
    style: ElementStyle = field(default_factory=ElementStyle.for_connector)
    start_arrowhead: Optional[str] = None
    end_arrowhead: Optional[str] = "arrow"
    seed: int = field(default=0, compare=False)
    version_nonce: int = field(default=0, compare=False)

    kind = ElementKind.ARROW

    @property
    def x(self) -> float:
        return self.start.x

    @property
    def y(self) -> float:
        return self.start.y

    @property
    def width(self) -> float:
        return self.end.x - self.start.x

    @property
    def height(self) -> float:
        return self.end.y - self.start.y

    @property
    def points(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return ((0, 0), (self.width, self.height))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "type": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "points": [list(point) for point in self.points],
        }
        if self.text:
            payload["text"] = self.text
        payload.update(_style_dict(self.style))
        payload.update(
            {
                "startArrowhead": self.start_arrowhead,
                "endArrowhead": self.end_arrowhead,
                "startBinding": None,
                "endBinding": None,
                "seed": self.seed,
                "versionNonce": self.version_nonce,
                "isDeleted": False,
            }
        )
        return payload


DiagramElement = Union[ShapeElement, ConnectorElement]
