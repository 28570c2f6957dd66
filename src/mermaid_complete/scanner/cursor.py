"""Character cursor shared by the scan passes."""

from __future__ import annotations

import re
import string
from collections.abc import Iterator
from dataclasses import dataclass, field

IDENT_RE = re.compile(r"[A-Za-z0-9_]+")
_INLINE_WS_RE = re.compile(r"[ \t]+")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def is_ident_char(ch: str) -> bool:
    return ch in _IDENT_CHARS


def is_identifier(word: str) -> bool:
    """True when word is a non-empty run of identifier characters."""
    return IDENT_RE.fullmatch(word) is not None


@dataclass
class TextCursor:
    """Forward-only cursor over a document snapshot.

    Substring lookups are memoized per needle, so repeated searches for the
    same closer or line break on one long line stay linear overall.
    """

    src: str
    pos: int = 0
    # needle -> (search start, first index at or after it, or -1)
    _found: dict[str, tuple[int, int]] = field(default_factory=dict, repr=False)

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def current(self) -> str:
        return self.src[self.pos] if self.pos < len(self.src) else ""

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip_inline_ws(self) -> None:
        self.match_re(_INLINE_WS_RE)

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, len(self.src))

    def next_index(self, s: str) -> int:
        """Offset of the first s at or after the cursor, or -1."""
        cached = self._found.get(s)
        if cached is not None:
            start, hit = cached
            if start <= self.pos and (hit < 0 or hit >= self.pos):
                return hit
        hit = self.src.find(s, self.pos)
        self._found[s] = (self.pos, hit)
        return hit

    def line_end(self) -> int:
        """Offset of the next line break (or end of text) from the cursor."""
        breaks = [i for i in (self.next_index("\n"), self.next_index("\r")) if i >= 0]
        return min(breaks) if breaks else len(self.src)

    def find_on_line(self, s: str) -> int:
        """Offset of s between the cursor and the end of the line, or -1."""
        hit = self.next_index(s)
        if hit < 0 or hit + len(s) > self.line_end():
            return -1
        return hit


def identifier_ending_at(src: str, end: int) -> tuple[str, int] | None:
    """Return (identifier, start) for the identifier run that ends at `end`.

    Spaces and tabs between the identifier and `end` are skipped.
    """
    i = end
    while i > 0 and src[i - 1] in " \t":
        i -= 1
    start = i
    while start > 0 and is_ident_char(src[start - 1]):
        start -= 1
    if start == i:
        return None
    return src[start:i], start


def iter_lines(src: str) -> Iterator[tuple[int, str]]:
    """Yield (offset, line) for every line of src, without line breaks."""
    pos = 0
    for m in _NEWLINE_RE.finditer(src):
        yield pos, src[pos : m.start()]
        pos = m.end()
    yield pos, src[pos:]
