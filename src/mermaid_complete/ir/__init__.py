"""Intermediate representation: the per-document symbol table."""

from mermaid_complete.ir.symbols import SymbolTable, extract_symbols

__all__ = [
    "SymbolTable",
    "extract_symbols",
]
