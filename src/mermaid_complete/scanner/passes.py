"""Symbol scan passes — small matchers over a TextCursor.

Each pass walks the whole document on its own and returns structured
occurrences in text order. None of them raise on malformed text: fragments
that do not match simply produce nothing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from mermaid_complete.scanner.cursor import (
    IDENT_RE,
    TextCursor,
    identifier_ending_at,
    is_identifier,
    iter_lines,
)
from mermaid_complete.syntax.types import Relationship, SymbolOccurrence
from mermaid_complete.types import OccurrenceKind
from mermaid_complete.vocabulary.catalogs import RESERVED_BARE_WORDS

logger = logging.getLogger(__name__)

# ─── Labeled declarations ────────────────────────────────────────────────────

# Opening/closing pairs — longer/more specific first
_SHAPE_DELIMITERS: list[tuple[str, str]] = [
    ("((", "))"),
    ("([", "])"),
    ("[[", "]]"),
    ("[(", ")]"),
    ("{{", "}}"),
    ("[/", "/]"),
    ("[\\", "\\]"),
    ("[/", "\\]"),
    ("[\\", "/]"),
    ("[", "]"),
    ("(", ")"),
    ("{", "}"),
    (">", "]"),
]

_QUOTES = ("'", '"')


def clean_label(raw: str) -> str:
    """Trim a captured label and drop one wrapping quote on each side."""
    label = raw.strip()
    if label[:1] in _QUOTES:
        label = label[1:]
    if label[-1:] in _QUOTES:
        label = label[:-1]
    return label


class LabeledDeclarationPass:
    """Finds `id<open>label<close>` node declarations."""

    def scan(self, text: str) -> list[SymbolOccurrence]:
        cursor = TextCursor(src=text)
        found: list[SymbolOccurrence] = []
        while not cursor.eof():
            start = cursor.pos
            node_id = cursor.match_re(IDENT_RE)
            if node_id is None:
                cursor.advance()
                continue
            after_id = cursor.pos
            cursor.skip_inline_ws()
            label = _match_shape_label(cursor)
            if label is None:
                cursor.pos = after_id
                continue
            found.append(SymbolOccurrence(node_id, clean_label(label), OccurrenceKind.Labeled, start))
        logger.debug("labeled pass: %d occurrences", len(found))
        return found


def _match_shape_label(cursor: TextCursor) -> str | None:
    """Consume a delimited label at the cursor; the closer must be on the same line."""
    for open_, close in _SHAPE_DELIMITERS:
        if not cursor.peek(open_):
            continue
        saved = cursor.pos
        cursor.advance(len(open_))
        end = cursor.find_on_line(close)
        if end < 0:
            cursor.pos = saved
            continue
        label = cursor.src[cursor.pos : end]
        cursor.pos = end + len(close)
        return label
    return None


# ─── Bare declarations ───────────────────────────────────────────────────────


class BareDeclarationPass:
    """Finds lines that hold nothing but one identifier."""

    def __init__(self, reserved: frozenset[str] = RESERVED_BARE_WORDS) -> None:
        self.reserved = reserved

    def scan(self, text: str) -> list[SymbolOccurrence]:
        found: list[SymbolOccurrence] = []
        for offset, line in iter_lines(text):
            word = line.strip()
            if not is_identifier(word) or word in self.reserved:
                continue
            found.append(SymbolOccurrence(word, "", OccurrenceKind.Bare, offset + line.index(word)))
        logger.debug("bare pass: %d occurrences", len(found))
        return found


# ─── Relationship references ─────────────────────────────────────────────────

_CONNECTOR_RUN_RE = re.compile(r"[-=.]+")
_TERMINATORS = (">", "|", ")")
_MAX_CONNECTOR_BODY = 3


class RelationshipPass:
    """Finds identifiers on either side of a connector such as `-->` or `-.->`.

    A connector is one to three of `-`, `=`, `.` closed by `>`, `|` or `)`.
    Longer runs keep their last three characters, so nothing sits directly
    before them. A `<` right before the connector makes it bidirectional and
    is part of the operator. An edge label `|text|` between the connector and
    its target is skipped.
    """

    def relationships(self, text: str) -> list[Relationship]:
        found = [
            Relationship(
                source=source[0] if source else None,
                target=target[0] if target else None,
                operator=operator,
                offset=offset,
            )
            for operator, offset, source, target in _connectors(text)
        ]
        logger.debug("relationship pass: %d connectors", len(found))
        return found

    def scan(self, text: str) -> list[SymbolOccurrence]:
        found: list[SymbolOccurrence] = []
        for _operator, _offset, source, target in _connectors(text):
            for end in (source, target):
                if end is not None:
                    found.append(SymbolOccurrence(end[0], "", OccurrenceKind.Reference, end[1]))
        logger.debug("relationship pass: %d occurrences", len(found))
        return found


_Ident = tuple[str, int]


def _connectors(text: str) -> Iterator[tuple[str, int, _Ident | None, _Ident | None]]:
    """Yield (operator, offset, source, target) for every connector in text."""
    cursor = TextCursor(src=text)
    while not cursor.eof():
        run = cursor.match_re(_CONNECTOR_RUN_RE)
        if run is None:
            cursor.advance()
            continue
        terminator = cursor.current()
        if terminator not in _TERMINATORS:
            continue
        body = run[-_MAX_CONNECTOR_BODY:]
        op_start = cursor.pos - len(body)
        if len(run) == len(body) and op_start > 0 and text[op_start - 1] == "<":
            op_start -= 1
        operator = text[op_start : cursor.pos + 1]
        cursor.advance()
        source = identifier_ending_at(text, op_start)
        target = _target_after(cursor, inside_label=terminator == "|")
        yield operator, op_start, source, target


def _target_after(cursor: TextCursor, inside_label: bool) -> _Ident | None:
    """Peek at the identifier following a connector; the cursor is left where it was."""
    saved = cursor.pos
    try:
        if not inside_label:
            cursor.skip_inline_ws()
            inside_label = cursor.consume("|")
        if inside_label:
            close = cursor.find_on_line("|")
            if close < 0:
                return None
            cursor.pos = close + 1
        cursor.skip_inline_ws()
        start = cursor.pos
        node_id = cursor.match_re(IDENT_RE)
        if node_id is None:
            return None
        return node_id, start
    finally:
        cursor.pos = saved
