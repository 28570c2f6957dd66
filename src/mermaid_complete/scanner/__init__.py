"""Scanner registry — runs the symbol scan passes in their fixed order."""

from __future__ import annotations

from mermaid_complete.scanner.base import ScanPass
from mermaid_complete.scanner.passes import (
    BareDeclarationPass,
    LabeledDeclarationPass,
    RelationshipPass,
)
from mermaid_complete.syntax.types import SymbolOccurrence


def default_passes() -> list[ScanPass]:
    """Labeled declarations, then bare declarations, then relationship references."""
    return [LabeledDeclarationPass(), BareDeclarationPass(), RelationshipPass()]


def scan_occurrences(text: str, passes: list[ScanPass] | None = None) -> list[SymbolOccurrence]:
    """Run every pass over text and concatenate their occurrences in pass order."""
    occurrences: list[SymbolOccurrence] = []
    for scan_pass in passes if passes is not None else default_passes():
        occurrences.extend(scan_pass.scan(text))
    return occurrences


__all__ = [
    "BareDeclarationPass",
    "LabeledDeclarationPass",
    "RelationshipPass",
    "ScanPass",
    "default_passes",
    "scan_occurrences",
]
