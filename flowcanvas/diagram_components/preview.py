from typing import Iterator, List, Sequence, Set, Tuple

from .canvas import Canvas, display_width, fit_text
from .core import BoxChars, ElementKind
from .elements import ConnectorElement, DiagramElement, ShapeElement

# Canvas units per character cell.
SCALE_X = 10
SCALE_Y = 20
PADDING = 1

_SHAPE_MARKUP = {
    ElementKind.RECTANGLE: "[bold cyan]",
    ElementKind.DIAMOND: "[bold yellow]",
    ElementKind.ELLIPSE: "[bold magenta]",
}


def _cell(value: float, scale: int, origin: float) -> int:
    return int((value - origin) // scale) + PADDING


def _line_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        doubled = 2 * err
        if doubled >= dy:
            err += dy
            x0 += sx
        if doubled <= dx:
            err += dx
            y0 += sy


class PreviewRenderer:

    def __init__(self, box_style: str = "unicode") -> None:
        self._ascii = box_style.lower().strip() in {"ascii", "plain"}
        self._boxes: Set[Tuple[int, int]] = set()

    def _chars_for(self, shape: ShapeElement) -> BoxChars:
        if self._ascii:
            return BoxChars.for_style("ascii")
        if shape.kind is ElementKind.DIAMOND:
            return BoxChars.for_style("diamond")
        if shape.kind is ElementKind.ELLIPSE or shape.style.roundness:
            return BoxChars.for_style("rounded")
        return BoxChars.for_style("square")

    def render(self, elements: Sequence[DiagramElement], include_markup: bool = False) -> str:
        shapes = [element for element in elements if isinstance(element, ShapeElement)]
        connectors = [element for element in elements if isinstance(element, ConnectorElement)]
        if not shapes:
            return ""
        self._boxes = set()

        origin_x = min(shape.x for shape in shapes)
        origin_y = min(shape.y for shape in shapes)
        max_x = max(shape.x + shape.width for shape in shapes)
        max_y = max(shape.y + shape.height for shape in shapes)
        canvas = Canvas(
            width=_cell(max_x, SCALE_X, origin_x) + PADDING + 2,
            height=_cell(max_y, SCALE_Y, origin_y) + PADDING + 2,
        )

        for shape in shapes:
            self._draw_shape(canvas, shape, origin_x, origin_y)
        for connector in connectors:
            self._draw_connector(canvas, connector, origin_x, origin_y)
        return canvas.render(include_markup=include_markup)

    def _draw_shape(self, canvas: Canvas, shape: ShapeElement, origin_x: float, origin_y: float) -> None:
        chars = self._chars_for(shape)
        left = _cell(shape.x, SCALE_X, origin_x)
        top = _cell(shape.y, SCALE_Y, origin_y)
        right = max(_cell(shape.x + shape.width, SCALE_X, origin_x) - 1, left + 3)
        bottom = max(_cell(shape.y + shape.height, SCALE_Y, origin_y) - 1, top + 2)

        for x in range(left + 1, right):
            canvas.set(x, top, chars.horizontal)
            canvas.set(x, bottom, chars.horizontal)
        for y in range(top + 1, bottom):
            canvas.set(left, y, chars.vertical)
            canvas.set(right, y, chars.vertical)
            for x in range(left + 1, right):
                canvas.set(x, y, " ")
        canvas.set(left, top, chars.top_left)
        canvas.set(right, top, chars.top_right)
        canvas.set(left, bottom, chars.bottom_left)
        canvas.set(right, bottom, chars.bottom_right)

        inner = right - left - 1
        label = fit_text(shape.text, inner)
        label_x = left + 1 + (inner - display_width(label)) // 2
        label_y = (top + bottom) // 2
        end = canvas.write(label_x, label_y, label)
        self._boxes.update((x, y) for y in range(top, bottom + 1) for x in range(left, right + 1))
        if label:
            canvas.insert_markup(label_x, label_y, _SHAPE_MARKUP.get(shape.kind, "[bold]"))
            canvas.insert_markup(end - 1, label_y, "[/]", position="suffix")

    def _arrow_for(self, chars: BoxChars, dx: int, dy: int) -> str:
        if abs(dy) >= abs(dx):
            return chars.arrow_down if dy > 0 else chars.arrow_up
        return chars.arrow_right if dx > 0 else chars.arrow_left

    def _draw_connector(
        self, canvas: Canvas, connector: ConnectorElement, origin_x: float, origin_y: float
    ) -> None:
        chars = BoxChars.for_style("ascii" if self._ascii else "square")
        x0 = _cell(connector.start.x, SCALE_X, origin_x)
        y0 = _cell(connector.start.y, SCALE_Y, origin_y)
        x1 = _cell(connector.end.x, SCALE_X, origin_x)
        y1 = _cell(connector.end.y, SCALE_Y, origin_y)

        trail: List[Tuple[int, int]] = []
        started = False
        for x, y in _line_cells(x0, y0, x1, y1):
            if canvas.is_blank(x, y) and not self._inside_box(x, y):
                started = True
                trail.append((x, y))
            elif started:
                break
        if not trail:
            return

        for x, y in trail[:-1]:
            canvas.set(x, y, chars.trail)
            canvas.insert_markup(x, y, "[dim]")
            canvas.insert_markup(x, y, "[/]", position="suffix")
        tip_x, tip_y = trail[-1]
        canvas.set(tip_x, tip_y, self._arrow_for(chars, x1 - x0, y1 - y0))

        if connector.text:
            self._draw_label(canvas, connector.text, trail)

    def _inside_box(self, x: int, y: int) -> bool:
        return (x, y) in self._boxes

    def _draw_label(self, canvas: Canvas, text: str, trail: List[Tuple[int, int]]) -> None:
        mid_x, mid_y = trail[len(trail) // 2]
        label = fit_text(text, 12)
        start = mid_x + 1
        cells = [(start + i, mid_y) for i in range(display_width(label))]
        if all(canvas.is_blank(x, y) and not self._inside_box(x, y) for x, y in cells):
            canvas.write(start, mid_y, label)


def render_preview(
    elements: Sequence[DiagramElement],
    *,
    box_style: str = "unicode",
    include_markup: bool = False,
) -> str:
    return PreviewRenderer(box_style).render(elements, include_markup=include_markup)
