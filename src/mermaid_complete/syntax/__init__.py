"""Scan results and completion records."""

from mermaid_complete.syntax.types import (
    CompletionCandidate,
    CursorContext,
    Rank,
    Relationship,
    Symbol,
    SymbolOccurrence,
    VocabularyEntry,
)

__all__ = [
    "CompletionCandidate",
    "CursorContext",
    "Rank",
    "Relationship",
    "Symbol",
    "SymbolOccurrence",
    "VocabularyEntry",
]
