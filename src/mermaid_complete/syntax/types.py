"""Data structures shared by the scanner, symbol table, and ranker.

Scan results (SymbolOccurrence, Relationship), the extracted Symbol, static
VocabularyEntry rows, and the per-request CursorContext / CompletionCandidate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from mermaid_complete.types import CandidateKind, OccurrenceKind, VocabularyCategory


@dataclass(frozen=True)
class Symbol:
    id: str
    label: str

    @classmethod
    def bare(cls, id: str) -> Symbol:
        """Create a symbol whose label is its own id."""
        return cls(id=id, label=id)


@dataclass(frozen=True)
class SymbolOccurrence:
    id: str
    label: str
    kind: OccurrenceKind
    offset: int


@dataclass(frozen=True)
class Relationship:
    source: str | None
    target: str | None
    operator: str
    offset: int


@dataclass(frozen=True)
class VocabularyEntry:
    label: str
    insert_text: str
    category: VocabularyCategory
    detail: str
    documentation: str

    @classmethod
    def literal(cls, label: str, category: VocabularyCategory, detail: str, documentation: str) -> VocabularyEntry:
        """Create an entry whose insert text is its label."""
        return cls(label=label, insert_text=label, category=category, detail=detail, documentation=documentation)


class Rank(NamedTuple):
    tier: int
    tiebreak: str


@dataclass(frozen=True)
class CompletionCandidate:
    label: str
    insert_text: str
    kind: CandidateKind
    detail: str
    documentation: str
    rank: Rank
    is_snippet: bool = False

    @property
    def sort_key(self) -> Rank:
        return self.rank


@dataclass(frozen=True)
class CursorContext:
    full_text: str
    word_under_cursor: str = ""
    word_is_new: bool = True
