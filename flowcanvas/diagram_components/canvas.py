from typing import Dict, List, Tuple

from rich.markup import escape
from wcwidth import wcwidth

from ..errors import LayoutOverflowError


def display_width(text: str) -> int:
    return sum(max(wcwidth(char), 1) for char in text)


def fit_text(text: str, limit: int) -> str:
    if limit <= 0:
        return ""
    if display_width(text) <= limit:
        return text
    fitted: List[str] = []
    used = 0
    for char in text:
        width = max(wcwidth(char), 1)
        if used + width > limit - 1:
            break
        fitted.append(char)
        used += width
    return "".join(fitted) + "…"


class Canvas:

    def __init__(self, width: int = 200, height: int = 100):
        self.width = width
        self.height = height
        self.grid = [[" " for _ in range(width)] for _ in range(height)]
        self.cell_widths = [[1 for _ in range(width)] for _ in range(height)]
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}

    def _check(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise LayoutOverflowError(
                f"Preview content exceeds canvas bounds at ({x}, {y}) "
                f"on a {self.width}x{self.height} canvas."
            )

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        self._check(x, y)
        width = max(width, 1)
        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            self._check(x + i, y)
            self.grid[y][x + i] = " "
            self.cell_widths[y][x + i] = 0

    def is_blank(self, x: int, y: int) -> bool:
        return (
            0 <= y < self.height
            and 0 <= x < self.width
            and self.cell_widths[y][x] == 1
            and self.grid[y][x] == " "
        )

    def write(self, x: int, y: int, text: str) -> int:
        cursor = x
        for char in text:
            width = max(wcwidth(char), 1)
            self.set(cursor, y, char, width)
            cursor += width
        return cursor

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup:
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def render(self, include_markup: bool = False) -> str:
        lines: List[str] = []
        for y in range(self.height):
            parts: List[str] = []
            run: List[str] = []
            for x in range(self.width):
                if self.cell_widths[y][x] == 0:
                    continue
                markup_cell = self.markup.get((x, y)) if include_markup else None
                if markup_cell:
                    parts.append(escape("".join(run)))
                    run = []
                    parts.extend(markup_cell.get("prefix", []))
                run.append(self.grid[y][x])
                if markup_cell:
                    parts.append(escape("".join(run)))
                    run = []
                    parts.extend(markup_cell.get("suffix", []))
            tail = "".join(run).rstrip()
            parts.append(escape(tail) if include_markup else tail)
            lines.append("".join(parts).rstrip())
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)
