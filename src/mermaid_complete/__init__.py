"""mermaid-complete: symbol extraction and completion ranking for Mermaid flowcharts."""

from mermaid_complete.completion.ranker import rank
from mermaid_complete.config import CompletionConfig
from mermaid_complete.ir.symbols import SymbolTable, extract_symbols
from mermaid_complete.syntax.types import CompletionCandidate, CursorContext, Symbol


def complete(
    text: str,
    word: str = "",
    word_is_new: bool = True,
    config: CompletionConfig | None = None,
) -> list[CompletionCandidate]:
    """Extract the symbols of a document and rank completions for the word being typed.

    Args:
        text: Full document text.
        word: The in-progress word at the cursor (may be empty).
        word_is_new: Offer the word as a new node when it is not a known symbol.
        config: Completion options; defaults apply when omitted.

    Returns:
        Candidates sorted by (tier, tiebreak).
    """
    context = CursorContext(full_text=text, word_under_cursor=word, word_is_new=word_is_new)
    return rank(extract_symbols(text), context, config)


__all__ = [
    "CompletionCandidate",
    "CompletionConfig",
    "CursorContext",
    "Symbol",
    "SymbolTable",
    "complete",
    "extract_symbols",
    "rank",
]
