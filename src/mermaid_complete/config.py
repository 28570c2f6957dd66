"""Centralized configuration for mermaid-complete."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TRIGGER_CHARACTERS: tuple[str, ...] = (">", "-", "[", "(", "{", "=", ".")


@dataclass
class CompletionConfig:
    """Configuration for the completion pipeline."""

    trigger_characters: tuple[str, ...] = DEFAULT_TRIGGER_CHARACTERS
    suggest_new_symbols: bool = True
    include_vocabulary: bool = True
    node_detail: str = "Node"
    new_node_detail: str = "New Node"
