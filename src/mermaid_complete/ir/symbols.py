"""Symbol table: merges scan pass output into one ordered, deduplicated table.

The first occurrence of an id, across all passes in pass order, fixes its
label; later occurrences never overwrite it. Connectors found by the
relationship pass are kept in a networkx DiGraph for link queries.
"""

from __future__ import annotations

import logging

import networkx as nx

from mermaid_complete.scanner import default_passes, scan_occurrences
from mermaid_complete.scanner.passes import RelationshipPass
from mermaid_complete.syntax.types import Relationship, Symbol, SymbolOccurrence

logger = logging.getLogger(__name__)


class SymbolTable:
    """Ordered mapping from symbol id to its best-known label.

    Built fresh from a document snapshot; holds no state between builds.
    """

    def __init__(self, labels: dict[str, str], links: nx.DiGraph) -> None:
        self.labels = labels
        self.links = links

    @classmethod
    def from_occurrences(
        cls,
        occurrences: list[SymbolOccurrence],
        relationships: list[Relationship] | None = None,
    ) -> SymbolTable:
        """Build a table from occurrences already in pass order."""
        labels: dict[str, str] = {}
        for occ in occurrences:
            if occ.id not in labels:
                labels[occ.id] = occ.label

        links: nx.DiGraph = nx.DiGraph()
        for rel in relationships or []:
            if rel.source is None or rel.target is None:
                continue
            if links.has_edge(rel.source, rel.target):
                continue
            links.add_edge(rel.source, rel.target, operator=rel.operator)

        return cls(labels=labels, links=links)

    @classmethod
    def from_text(cls, text: str) -> SymbolTable:
        """Scan text with the default passes and build its table."""
        occurrences = scan_occurrences(text, default_passes())
        relationships = RelationshipPass().relationships(text)
        table = cls.from_occurrences(occurrences, relationships)
        logger.debug(
            "symbol table: %d occurrences -> %d symbols, %d links",
            len(occurrences),
            len(table),
            table.link_count(),
        )
        return table

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self.labels

    def symbols(self) -> list[Symbol]:
        """Symbols in first-insertion order; empty labels fall back to the id."""
        return [
            Symbol(id=symbol_id, label=label) if label else Symbol.bare(symbol_id)
            for symbol_id, label in self.labels.items()
        ]

    def link_count(self) -> int:
        return self.links.number_of_edges()

    def successors(self, symbol_id: str) -> list[str]:
        if symbol_id not in self.links:
            return []
        return list(self.links.successors(symbol_id))

    def predecessors(self, symbol_id: str) -> list[str]:
        if symbol_id not in self.links:
            return []
        return list(self.links.predecessors(symbol_id))

    def unreferenced(self) -> list[str]:
        """Symbol ids that take part in no relationship."""
        # links only gains nodes through edges
        return [symbol_id for symbol_id in self.labels if symbol_id not in self.links]


def extract_symbols(text: str) -> list[Symbol]:
    """Recover the declared and referenced symbols of a document.

    Args:
        text: Full document text; may be incomplete or malformed.

    Returns:
        One Symbol per distinct id, in first-seen order (labeled declarations
        first, then bare declarations, then relationship references).
    """
    return SymbolTable.from_occurrences(scan_occurrences(text)).symbols()
