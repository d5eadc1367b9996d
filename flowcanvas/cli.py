import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import LayoutConfig
from .converter import convert_diagram_text, parse_diagram
from .diagram_components import ShapeElement, diff, render_preview
from .errors import DiagramError
from .sync import CanvasSyncError, check_health, publish_elements

logger = logging.getLogger("flowcanvas")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise DiagramError(f"Diagram file is not valid UTF-8 ({exc.reason} at byte {exc.start}): {path}") from exc


def _element_table(elements) -> Table:
    table = Table(title="Diagram elements")
    table.add_column("id", style="cyan")
    table.add_column("type")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("text")
    for element in elements:
        kind = element.kind.value
        text = element.text or ""
        table.add_row(escape(element.id), kind, f"{element.x:g}", f"{element.y:g}", escape(text))
    return table


def cmd_convert(args: argparse.Namespace, console: Console) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    elements = convert_diagram_text(_read_text(args.file), config=LayoutConfig(), rng=rng)

    if args.json:
        console.print_json(json.dumps([element.to_dict() for element in elements]))
    else:
        console.print(_element_table(elements))
        shapes = sum(1 for element in elements if isinstance(element, ShapeElement))
        console.print(f"[green]{shapes} shape(s), {len(elements) - shapes} connector(s)[/green]")

    if args.preview:
        console.print(Panel(render_preview(elements, include_markup=True), title="Preview", expand=False))

    if args.publish:
        status = check_health(client_kwargs={"base_url": args.server})
        if not status.healthy:
            raise CanvasSyncError(f"Canvas server is not healthy: {status.status}")
        result = publish_elements(elements, client_kwargs={"base_url": args.server})
        console.print(f"[green]Published {result.count} element(s)[/green]")
    return 0


def _edge_suffix(label: Optional[str]) -> str:
    return f" ({escape(label)})" if label else ""


def cmd_diff(args: argparse.Namespace, console: Console) -> int:
    result = diff(parse_diagram(_read_text(args.old)), parse_diagram(_read_text(args.new)))
    if not result.has_changes():
        console.print("[green]No structural changes[/green]")
        return 0

    for node_id in result.added_nodes:
        console.print(f"[green]+ node {node_id}[/green]")
    for node_id in result.removed_nodes:
        console.print(f"[red]- node {node_id}[/red]")
    for node_id, before, after in result.changed_nodes:
        console.print(f"[yellow]~ node {node_id}: {escape(before)} -> {escape(after)}[/yellow]")
    for source, target, label in result.added_edges:
        console.print(f"[green]+ edge {source} -> {target}{_edge_suffix(label)}[/green]")
    for source, target, label in result.removed_edges:
        console.print(f"[red]- edge {source} -> {target}{_edge_suffix(label)}[/red]")
    return 1


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flowcanvas", description="Convert flowchart text into canvas elements")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a diagram file ('-' for stdin)")
    convert.add_argument("file")
    convert.add_argument("--json", action="store_true", help="Print elements as JSON")
    convert.add_argument("--preview", action="store_true", help="Draw a terminal preview")
    convert.add_argument("--seed", type=int, default=None, help="Seed for element seeds and nonces")
    convert.add_argument("--publish", action="store_true", help="Send elements to the canvas server")
    convert.add_argument("--server", default=None, help="Canvas server URL (defaults to $CANVAS_SERVER_URL)")

    compare = subparsers.add_parser("diff", help="Compare the structure of two diagram files")
    compare.add_argument("old")
    compare.add_argument("new")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    console = Console()

    try:
        if args.command == "convert":
            return cmd_convert(args, console)
        return cmd_diff(args, console)
    except (DiagramError, CanvasSyncError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
