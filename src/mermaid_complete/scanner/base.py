"""Base scan pass protocol."""

from __future__ import annotations

from typing import Protocol

from mermaid_complete.syntax.types import SymbolOccurrence


class ScanPass(Protocol):
    """Protocol that all symbol scan passes must implement."""

    def scan(self, text: str) -> list[SymbolOccurrence]:
        """Scan document text into symbol occurrences, in text order."""
        ...
