import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import NoNodesFoundError
from .core import ShapeKind
from .diagram import ParsedDiagram
from .edge import ConnectorKind, Edge
from .node import Node
from .tokenizer import TokenizedText

logger = logging.getLogger(__name__)

NODE_ID = r"[A-Za-z0-9_]+"

DIRECTIVES = frozenset(
    {"subgraph", "end", "classDef", "class", "style", "linkStyle", "click", "direction"}
)


@dataclass(frozen=True)
class ShapeRule:
    name: str
    pattern: re.Pattern
    shape_kind: ShapeKind


@dataclass(frozen=True)
class ConnectorRule:
    glyph: str
    kind: ConnectorKind


def _shape_pattern(opening: str, closing: str) -> re.Pattern:
    body = "[^" + re.escape(closing[-1]) + "]*"
    return re.compile(
        rf"(?<![A-Za-z0-9_])(?P<id>{NODE_ID}){re.escape(opening)}(?P<label>{body}){re.escape(closing)}"
    )


# Priority order: at the same column the earlier rule wins.
SHAPE_RULES: Tuple[ShapeRule, ...] = (
    ShapeRule("rectangle", _shape_pattern("[", "]"), ShapeKind.RECTANGLE),
    ShapeRule("diamond", _shape_pattern("{", "}"), ShapeKind.DIAMOND),
    ShapeRule("ellipse", _shape_pattern("((", "))"), ShapeKind.ELLIPSE),
    ShapeRule("rounded", _shape_pattern("(", ")"), ShapeKind.ROUNDED),
)

# Longest glyph first so the alternation never stops at a prefix.
CONNECTOR_RULES: Tuple[ConnectorRule, ...] = (
    ConnectorRule("-.->", ConnectorKind.DOTTED),
    ConnectorRule("-->", ConnectorKind.ARROW),
    ConnectorRule("==>", ConnectorKind.THICK_ARROW),
    ConnectorRule("===", ConnectorKind.THICK),
    ConnectorRule("---", ConnectorKind.PLAIN),
    ConnectorRule("--", ConnectorKind.PLAIN),
)

_SHAPE_SUFFIX = r"(?:\(\([^)]*\)\)|\[[^\]]*\]|\{[^}]*\}|\([^)]*\))"


def _edge_pattern(connectors: Sequence[ConnectorRule]) -> re.Pattern:
    glyphs = "|".join(re.escape(rule.glyph) for rule in connectors)
    return re.compile(
        rf"^(?P<source>{NODE_ID})\s*{_SHAPE_SUFFIX}?\s*(?P<glyph>{glyphs})\s*"
        rf"(?:\|(?P<label>[^|]*)\|)?\s*(?P<target>{NODE_ID})"
    )


def _clean_label(raw: str) -> str:
    label = raw.strip()
    if len(label) >= 2 and label[0] == label[-1] and label[0] in {'"', "'"}:
        label = label[1:-1].strip()
    return label


@dataclass(frozen=True)
class _Mention:
    column: int
    node_id: str
    label: Optional[str] = None
    shape_kind: Optional[ShapeKind] = None


class GraphBuilder:

    def __init__(
        self,
        shape_rules: Sequence[ShapeRule] = SHAPE_RULES,
        connector_rules: Sequence[ConnectorRule] = CONNECTOR_RULES,
    ) -> None:
        if not shape_rules:
            raise ValueError("GraphBuilder requires at least one shape rule.")
        if not connector_rules:
            raise ValueError("GraphBuilder requires at least one connector rule.")
        self._shape_rules = tuple(shape_rules)
        self._connector_rules = tuple(connector_rules)
        self._connector_kinds = {rule.glyph: rule.kind for rule in self._connector_rules}
        self._edge_pattern = _edge_pattern(self._connector_rules)

    def build(self, tokenized: TokenizedText) -> ParsedDiagram:
        registry: Dict[str, Node] = {}
        edges: List[Edge] = []

        for line in tokenized.lines:
            content = line.rstrip(";").strip()
            if self._is_directive(content):
                logger.debug("Skipping directive line %r", line)
                continue

            match = self._edge_pattern.match(content)
            mentions = self._scan_declarations(content, self._label_span(match))
            edge = self._edge_from(match, mentions) if match else None
            if not mentions and edge is None:
                logger.debug("Skipping unrecognized line %r", line)
                continue

            for mention in sorted(mentions, key=lambda item: item.column):
                self._register(registry, mention)
            if edge is not None:
                edges.append(edge)

        if not registry:
            raise NoNodesFoundError("No nodes found in diagram text.")

        logger.debug("Built graph with %d nodes and %d edges", len(registry), len(edges))
        return ParsedDiagram(
            kind=tokenized.kind,
            nodes=tuple(registry.values()),
            edges=tuple(edges),
            direction=tokenized.direction,
        )

    def _is_directive(self, line: str) -> bool:
        head = line.split(None, 1)[0] if line else ""
        return head in DIRECTIVES

    def _label_span(self, match: Optional[re.Match]) -> Optional[Tuple[int, int]]:
        if match is None or match.group("label") is None:
            return None
        # Include the surrounding pipes.
        return match.start("label") - 1, match.end("label") + 1

    def _scan_declarations(self, line: str, excluded: Optional[Tuple[int, int]] = None) -> List[_Mention]:
        candidates: List[Tuple[int, int, int, _Mention]] = []
        for priority, rule in enumerate(self._shape_rules):
            for match in rule.pattern.finditer(line):
                if excluded and excluded[0] <= match.start() < excluded[1]:
                    continue
                mention = _Mention(
                    column=match.start(),
                    node_id=match.group("id"),
                    label=_clean_label(match.group("label")),
                    shape_kind=rule.shape_kind,
                )
                candidates.append((match.start(), priority, match.end(), mention))

        accepted: List[_Mention] = []
        covered_until = 0
        for start, _, end, mention in sorted(candidates, key=lambda item: (item[0], item[1])):
            if start < covered_until:
                continue
            accepted.append(mention)
            covered_until = end
        return accepted

    def _edge_from(self, match: re.Match, mentions: List[_Mention]) -> Edge:
        declared_columns = {mention.column for mention in mentions}
        for group in ("source", "target"):
            column = match.start(group)
            if column not in declared_columns:
                mentions.append(_Mention(column=column, node_id=match.group(group)))

        label = match.group("label")
        label = _clean_label(label) if label is not None else None
        return Edge(
            source=match.group("source"),
            target=match.group("target"),
            label=label or None,
            connector=self._connector_kinds[match.group("glyph")],
        )

    def _register(self, registry: Dict[str, Node], mention: _Mention) -> None:
        existing = registry.get(mention.node_id)
        if mention.shape_kind is None:
            if existing is None:
                registry[mention.node_id] = Node.implicit(mention.node_id)
            return

        if existing is None:
            registry[mention.node_id] = Node(
                node_id=mention.node_id,
                label=mention.label or mention.node_id,
                shape_kind=mention.shape_kind,
                declared=True,
            )
        elif not existing.declared:
            registry[mention.node_id] = existing.declare(
                mention.label or mention.node_id, mention.shape_kind
            )
        else:
            logger.debug("Ignoring redeclaration of node %r", mention.node_id)
