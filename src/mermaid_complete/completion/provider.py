"""Completion provider: adapts ranked candidates to an editor's completion items.

This is the only module that knows the host editor's vocabulary: 1-based
positions, replace ranges, item kinds, snippet insertion rules, and string
sort keys. The shapes follow the Monaco completion-item provider contract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from mermaid_complete.completion.ranker import rank
from mermaid_complete.config import CompletionConfig
from mermaid_complete.ir.symbols import extract_symbols
from mermaid_complete.scanner.cursor import is_ident_char, iter_lines
from mermaid_complete.syntax.types import CompletionCandidate, CursorContext
from mermaid_complete.types import CandidateKind

logger = logging.getLogger(__name__)


class EditorItemKind(Enum):
    Variable = "variable"
    Operator = "operator"
    Snippet = "snippet"
    Keyword = "keyword"


_KIND_MAP: dict[CandidateKind, EditorItemKind] = {
    CandidateKind.Symbol: EditorItemKind.Variable,
    CandidateKind.NewSymbol: EditorItemKind.Variable,
    CandidateKind.Operator: EditorItemKind.Operator,
    CandidateKind.Shape: EditorItemKind.Snippet,
    CandidateKind.Keyword: EditorItemKind.Keyword,
}


@dataclass(frozen=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True)
class WordRange:
    word: str
    start_column: int
    end_column: int


@dataclass(frozen=True)
class EditRange:
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def to_dict(self) -> dict[str, int]:
        return {
            "startLineNumber": self.start_line,
            "startColumn": self.start_column,
            "endLineNumber": self.end_line,
            "endColumn": self.end_column,
        }


@dataclass(frozen=True)
class EditorCompletionItem:
    label: str
    kind: EditorItemKind
    detail: str
    documentation: str
    insert_text: str
    insert_as_snippet: bool
    range: EditRange
    sort_text: str

    def to_dict(self) -> dict[str, object]:
        item: dict[str, object] = {
            "label": self.label,
            "kind": self.kind.value,
            "detail": self.detail,
            "documentation": self.documentation,
            "insertText": self.insert_text,
            "range": self.range.to_dict(),
            "sortText": self.sort_text,
        }
        if self.insert_as_snippet:
            item["insertTextRules"] = "insertAsSnippet"
        return item


@dataclass
class CompletionList:
    suggestions: list[EditorCompletionItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"suggestions": [item.to_dict() for item in self.suggestions]}


def word_until_position(text: str, position: Position) -> WordRange:
    """Return the identifier characters typed before the cursor on its line.

    Lines and columns are 1-based. A position past the end of its line, or a
    line past the end of the document, is clamped.

    Raises:
        ValueError: If line or column is less than 1.
    """
    if position.line < 1 or position.column < 1:
        raise ValueError(f"Invalid position {position.line}:{position.column}; lines and columns start at 1")
    lines = [line for _, line in iter_lines(text)]
    line = lines[min(position.line, len(lines)) - 1]
    end = min(position.column - 1, len(line))
    start = end
    while start > 0 and is_ident_char(line[start - 1]):
        start -= 1
    return WordRange(word=line[start:end], start_column=start + 1, end_column=end + 1)


def sort_text(candidate: CompletionCandidate) -> str:
    """String form of a candidate's rank; orders the same as the rank itself."""
    return f"{candidate.rank.tier + 1:02d}{candidate.rank.tiebreak}"


class CompletionProvider:
    """Stateless completion provider; every call works on the snapshot it is given."""

    def __init__(self, config: CompletionConfig | None = None) -> None:
        self.config = config or CompletionConfig()

    @property
    def trigger_characters(self) -> tuple[str, ...]:
        return self.config.trigger_characters

    def provide_completion_items(
        self,
        text: str,
        position: Position,
        word: WordRange | None = None,
    ) -> CompletionList:
        """Rank completions for the cursor and shape them as editor items.

        Args:
            text: Full document text.
            position: 1-based cursor position.
            word: The word range the host is replacing; computed from text when omitted.

        Returns:
            The suggestions, already in rank order.

        Raises:
            ValueError: If position is not 1-based.
        """
        if word is None:
            word = word_until_position(text, position)
        elif position.line < 1 or position.column < 1:
            raise ValueError(f"Invalid position {position.line}:{position.column}; lines and columns start at 1")

        context = CursorContext(
            full_text=text,
            word_under_cursor=word.word,
            word_is_new=self.config.suggest_new_symbols,
        )
        candidates = rank(extract_symbols(text), context, self.config)
        edit_range = EditRange(
            start_line=position.line,
            start_column=word.start_column,
            end_line=position.line,
            end_column=word.end_column,
        )
        logger.debug("completion at %d:%d for %r: %d items", position.line, position.column, word.word, len(candidates))
        return CompletionList(suggestions=[to_editor_item(c, edit_range) for c in candidates])


def to_editor_item(candidate: CompletionCandidate, edit_range: EditRange) -> EditorCompletionItem:
    return EditorCompletionItem(
        label=candidate.label,
        kind=_KIND_MAP[candidate.kind],
        detail=candidate.detail,
        documentation=candidate.documentation,
        insert_text=candidate.insert_text,
        insert_as_snippet=candidate.is_snippet,
        range=edit_range,
        sort_text=sort_text(candidate),
    )
