from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import IdentityMismatch
from .spans import EntryId, Offset, Span


@dataclass(slots=True)
class InputCursor:
    """Forward-only reader over one registered source.

    Parsing code reads characters through the cursor and captures positions
    with :meth:`current_offset`; it never handles raw indices.
    """

    entry: EntryId
    content: str
    i: int = 0

    def at_end(self) -> bool:
        return self.i >= len(self.content)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self.content[self.i]

    def peek_is(self, ch: str) -> bool:
        return self.peek() == ch

    def advance(self) -> str | None:
        if self.at_end():
            return None
        ch = self.content[self.i]
        self.i += 1
        return ch

    def skip(self, n: int) -> int:
        """Advance up to ``n`` characters; returns how many were consumed."""
        n = max(0, min(n, len(self.content) - self.i))
        self.i += n
        return n

    def skip_char(self, ch: str) -> bool:
        if self.peek() != ch:
            return False
        self.i += 1
        return True

    def remaining(self) -> str:
        return self.content[self.i :]

    def __len__(self) -> int:
        return len(self.content) - self.i

    def __iter__(self) -> Iterator[str]:
        while not self.at_end():
            yield self.content[self.i]
            self.i += 1

    def current_offset(self) -> Offset:
        return Offset(entry=self.entry, index=self.i)

    def mark_span(self, start: Offset) -> Span:
        if start.entry != self.entry:
            raise IdentityMismatch(expected=self.entry, actual=start.entry, what="span start")
        return Span(start=start, end=self.current_offset())
