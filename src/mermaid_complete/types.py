"""Shared type definitions for mermaid-complete.

Enums used across the scanner, symbol table, vocabularies, and completion.
"""

from __future__ import annotations

from enum import Enum, auto


class OccurrenceKind(Enum):
    Labeled = auto()  # id[Label]
    Bare = auto()  # id alone on a line
    Reference = auto()  # id --> other


class VocabularyCategory(Enum):
    Keyword = auto()
    Operator = auto()
    Shape = auto()


class CandidateKind(Enum):
    Symbol = auto()
    NewSymbol = auto()
    Operator = auto()
    Shape = auto()
    Keyword = auto()

    @classmethod
    def from_category(cls, category: VocabularyCategory) -> CandidateKind:
        return _CATEGORY_KINDS[category]


_CATEGORY_KINDS: dict[VocabularyCategory, CandidateKind] = {
    VocabularyCategory.Keyword: CandidateKind.Keyword,
    VocabularyCategory.Operator: CandidateKind.Operator,
    VocabularyCategory.Shape: CandidateKind.Shape,
}
