"""Static vocabularies for Mermaid completion: connectors, node shapes, keywords.

Catalogs are tuples built at import time and never mutated. Row order is the
order candidates are offered in, and rows are kept as literal data: the two
Circle shape rows are both part of the catalog.
"""

from __future__ import annotations

from mermaid_complete.syntax.types import VocabularyEntry
from mermaid_complete.types import VocabularyCategory

# Placeholder the host expands into an editable selection after insertion.
LABEL_PLACEHOLDER = "${1:Label}"


def _operator(label: str, detail: str, documentation: str) -> VocabularyEntry:
    return VocabularyEntry.literal(label, VocabularyCategory.Operator, detail, documentation)


def _shape(label: str, open_: str, close: str, detail: str, documentation: str) -> VocabularyEntry:
    return VocabularyEntry(
        label=label,
        insert_text=f"{open_}{LABEL_PLACEHOLDER}{close}",
        category=VocabularyCategory.Shape,
        detail=detail,
        documentation=documentation,
    )


def _keyword(label: str, detail: str, documentation: str) -> VocabularyEntry:
    return VocabularyEntry.literal(label, VocabularyCategory.Keyword, detail, documentation)


OPERATORS: tuple[VocabularyEntry, ...] = (
    _operator("-->", "Solid Link", "A standard arrow connection"),
    _operator("---", "Solid Line", "A connection with no arrow"),
    _operator("-.->", "Dotted Link", "A dotted arrow connection"),
    _operator("==>", "Thick Link", "A thick arrow connection"),
    _operator("--o", "Circle Link", "A link ending with a circle"),
    _operator("<-->", "Double Arrow", "A standard double arrow connection"),
    _operator("x-x", "Cross Link", "A link ending with crosses"),
)

SHAPES: tuple[VocabularyEntry, ...] = (
    _shape("[]", "[", "]", "Rectangle", "Square rectangle node"),
    _shape("(())", "((", "))", "Circle", "Circle node"),
    _shape("([])", "([", "])", "Stadium", "Stadium-shaped node"),
    _shape("[[]]", "[[", "]]", "Subroutine", "Subroutine node"),
    _shape("[()]", "[(", ")]", "Database", "Cylindrical database node"),
    _shape("(())", "((", "))", "Circle", "Circle node"),
    _shape(">>]", ">", "]", "Flag", "Asymmetric shape"),
    _shape("{}", "{", "}", "Rhombus", "Rhombus (Decision) node"),
    _shape("{{}}", "{{", "}}", "Hexagon", "Hexagon node"),
    _shape("[//]", "[/", "/]", "Parallelogram", "Parallelogram node (Lean Right)"),
    _shape("[\\\\]", "[\\", "\\]", "Parallelogram Alt", "Parallelogram node (Lean Left)"),
)

KEYWORDS: tuple[VocabularyEntry, ...] = (
    # Diagram types
    _keyword("graph", "Diagram Type", "Start a flowchart"),
    _keyword("flowchart", "Diagram Type", "Start a flowchart"),
    _keyword("sequenceDiagram", "Diagram Type", "Start a sequence diagram"),
    _keyword("classDiagram", "Diagram Type", "Start a class diagram"),
    _keyword("stateDiagram-v2", "Diagram Type", "Start a state diagram"),
    _keyword("erDiagram", "Diagram Type", "Start an entity relationship diagram"),
    _keyword("gantt", "Diagram Type", "Start a Gantt chart"),
    _keyword("pie", "Diagram Type", "Start a pie chart"),
    _keyword("gitGraph", "Diagram Type", "Start a git graph"),
    _keyword("journey", "Diagram Type", "Start a user journey map"),
    _keyword("mindmap", "Diagram Type", "Start a mindmap"),
    # Sequence diagram
    _keyword("participant", "Keyword", "Define a participant"),
    _keyword("actor", "Keyword", "Define an actor"),
    _keyword("activate", "Keyword", "Activate a participant"),
    _keyword("deactivate", "Keyword", "Deactivate a participant"),
    _keyword("loop", "Keyword", "Start a loop block"),
    _keyword("alt", "Keyword", "Start an alternate path block"),
    _keyword("opt", "Keyword", "Start an optional path block"),
    _keyword("par", "Keyword", "Start a parallel block"),
    _keyword("critical", "Keyword", "Start a critical block"),
    _keyword("rect", "Keyword", "Start a colored rectangle block"),
    # Class diagram
    _keyword("class", "Keyword", "Define a class"),
    _keyword("classDef", "Keyword", "Define a class style"),
    _keyword("style", "Keyword", "Apply style to a node"),
    _keyword("click", "Keyword", "Add click event to a node"),
    # Common
    _keyword("subgraph", "Keyword", "Start a subgraph"),
    _keyword("end", "Keyword", "End a block"),
    _keyword("direction", "Keyword", "Set diagram direction (TB, LR, etc.)"),
)

# Words that are never bare node declarations, even alone on a line.
RESERVED_BARE_WORDS: frozenset[str] = frozenset(
    {"graph", "flowchart", "subgraph", "end", "style", "classDef", "click"}
)

_CATALOGS: dict[VocabularyCategory, tuple[VocabularyEntry, ...]] = {
    VocabularyCategory.Operator: OPERATORS,
    VocabularyCategory.Shape: SHAPES,
    VocabularyCategory.Keyword: KEYWORDS,
}


def catalog(category: VocabularyCategory) -> tuple[VocabularyEntry, ...]:
    """Return the catalog for a vocabulary category."""
    return _CATALOGS[category]
