"""Completion ranking and the editor-facing provider."""

from mermaid_complete.completion.provider import (
    CompletionList,
    CompletionProvider,
    EditorCompletionItem,
    EditorItemKind,
    EditRange,
    Position,
    WordRange,
    word_until_position,
)
from mermaid_complete.completion.ranker import rank

__all__ = [
    "CompletionList",
    "CompletionProvider",
    "EditRange",
    "EditorCompletionItem",
    "EditorItemKind",
    "Position",
    "WordRange",
    "rank",
    "word_until_position",
]
