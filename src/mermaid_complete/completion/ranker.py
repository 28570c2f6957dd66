"""Completion ranker: turns a symbol table and the word at the cursor into candidates.

Tiers, best first:
  -1  the word being typed, when it is not a known symbol yet
   0  known symbols, alphabetical by id
   1  connector operators, catalog order
   2  node shapes (snippets), catalog order
   3  keywords, catalog order
"""

from __future__ import annotations

import logging

from mermaid_complete.config import CompletionConfig
from mermaid_complete.scanner.cursor import is_identifier
from mermaid_complete.syntax.types import CompletionCandidate, CursorContext, Rank, Symbol, VocabularyEntry
from mermaid_complete.types import CandidateKind
from mermaid_complete.vocabulary.catalogs import KEYWORDS, OPERATORS, SHAPES

logger = logging.getLogger(__name__)

NEW_SYMBOL_TIER = -1
SYMBOL_TIER = 0
OPERATOR_TIER = 1
SHAPE_TIER = 2
KEYWORD_TIER = 3


def rank(
    symbols: list[Symbol],
    context: CursorContext,
    config: CompletionConfig | None = None,
) -> list[CompletionCandidate]:
    """Produce the ordered candidate list for one completion request.

    Args:
        symbols: Symbols extracted from context.full_text.
        context: The document snapshot and the word being typed.
        config: Display and filtering options; defaults apply when omitted.

    Returns:
        Candidates sorted ascending by their (tier, tiebreak) rank.
    """
    config = config or CompletionConfig()
    candidates = [_symbol_candidate(symbol, config) for symbol in symbols]

    new_symbol = _new_symbol_candidate(symbols, context, config)
    if new_symbol is not None:
        candidates.append(new_symbol)

    if config.include_vocabulary:
        candidates.extend(_vocabulary_candidates(OPERATORS, OPERATOR_TIER))
        candidates.extend(_vocabulary_candidates(SHAPES, SHAPE_TIER, is_snippet=True))
        candidates.extend(_vocabulary_candidates(KEYWORDS, KEYWORD_TIER))

    candidates.sort(key=lambda c: c.sort_key)
    logger.debug(
        "ranked %d candidates (%d symbols, new word: %s)",
        len(candidates),
        len(symbols),
        new_symbol is not None,
    )
    return candidates


def _symbol_candidate(symbol: Symbol, config: CompletionConfig) -> CompletionCandidate:
    return CompletionCandidate(
        label=symbol.id,
        insert_text=symbol.id,
        kind=CandidateKind.Symbol,
        detail=symbol.label or config.node_detail,
        documentation=f"Reference to node: {symbol.label}" if symbol.label else "Mermaid Node",
        rank=Rank(SYMBOL_TIER, symbol.id),
    )


def _new_symbol_candidate(
    symbols: list[Symbol],
    context: CursorContext,
    config: CompletionConfig,
) -> CompletionCandidate | None:
    """Offer the word being typed as a new node, unless it is already known or not an identifier."""
    word = context.word_under_cursor
    if not context.word_is_new or not is_identifier(word):
        return None
    if any(symbol.id == word for symbol in symbols):
        return None
    return CompletionCandidate(
        label=word,
        insert_text=word,
        kind=CandidateKind.NewSymbol,
        detail=config.new_node_detail,
        documentation="Create a new node",
        rank=Rank(NEW_SYMBOL_TIER, word),
    )


def _vocabulary_candidates(
    entries: tuple[VocabularyEntry, ...],
    tier: int,
    is_snippet: bool = False,
) -> list[CompletionCandidate]:
    # Zero-padded index keeps catalog order under string comparison.
    width = len(str(len(entries)))
    return [
        CompletionCandidate(
            label=entry.label,
            insert_text=entry.insert_text,
            kind=CandidateKind.from_category(entry.category),
            detail=entry.detail,
            documentation=entry.documentation,
            rank=Rank(tier, f"{index:0{width}d}"),
            is_snippet=is_snippet,
        )
        for index, entry in enumerate(entries)
    ]
