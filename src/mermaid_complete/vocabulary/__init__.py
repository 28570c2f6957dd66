"""Static vocabulary catalogs."""

from mermaid_complete.vocabulary.catalogs import (
    KEYWORDS,
    LABEL_PLACEHOLDER,
    OPERATORS,
    RESERVED_BARE_WORDS,
    SHAPES,
    catalog,
)

__all__ = [
    "KEYWORDS",
    "LABEL_PLACEHOLDER",
    "OPERATORS",
    "RESERVED_BARE_WORDS",
    "SHAPES",
    "catalog",
]
