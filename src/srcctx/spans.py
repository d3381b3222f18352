from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .errors import IdentityMismatch, InvalidSpan, OutOfRange


@dataclass(frozen=True, slots=True, order=True)
class EntryId:
    """Identity of one registered source: the owning map plus the entry's slot."""

    map_id: int
    index: int

    def __repr__(self) -> str:
        return f"EntryId(map={self.map_id}, entry={self.index})"


@dataclass(frozen=True, slots=True)
class Offset:
    """A single position in a registered source.

    ``index`` is a 0-based character index. ``len(content)`` is a valid index
    denoting the end of the source.
    """

    entry: EntryId
    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise OutOfRange(index=self.index)

    def _check_same_entry(self, other: Offset) -> None:
        if not isinstance(other, Offset):
            raise TypeError(f"cannot compare Offset with {type(other).__name__}")
        if other.entry != self.entry:
            raise IdentityMismatch(expected=self.entry, actual=other.entry, what="offset")

    def __lt__(self, other: Offset) -> bool:
        self._check_same_entry(other)
        return self.index < other.index

    def __le__(self, other: Offset) -> bool:
        self._check_same_entry(other)
        return self.index <= other.index

    def __gt__(self, other: Offset) -> bool:
        self._check_same_entry(other)
        return self.index > other.index

    def __ge__(self, other: Offset) -> bool:
        self._check_same_entry(other)
        return self.index >= other.index

    def is_at_start(self) -> bool:
        return self.index == 0

    def advance(self, n: int = 1) -> Offset:
        return Offset(entry=self.entry, index=self.index + n)

    def span_to(self, end: Offset) -> Span:
        return Span(start=self, end=end)

    def to_span(self) -> Span:
        return Span(start=self, end=self)

    def __repr__(self) -> str:
        return f"Offset({self.entry.map_id}:{self.entry.index}@{self.index})"


@total_ordering
@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single registered source."""

    start: Offset
    end: Offset

    def __post_init__(self) -> None:
        if self.start.entry != self.end.entry:
            raise IdentityMismatch(expected=self.start.entry, actual=self.end.entry, what="span end")
        if self.end.index < self.start.index:
            raise InvalidSpan(start=self.start.index, end=self.end.index)

    @classmethod
    def point(cls, offset: Offset) -> Span:
        return cls(start=offset, end=offset)

    @classmethod
    def between(cls, a: Offset, b: Offset) -> Span:
        """Span covering both offsets, whichever order they come in."""
        if b < a:
            a, b = b, a
        return cls(start=a, end=b)

    @property
    def entry(self) -> EntryId:
        return self.start.entry

    def __len__(self) -> int:
        return self.end.index - self.start.index

    def range(self) -> range:
        return range(self.start.index, self.end.index)

    def is_empty(self) -> bool:
        return self.start.index == self.end.index

    def contains(self, offset: Offset) -> bool:
        return self.start <= offset < self.end

    def shrink_to_start(self) -> Span:
        return Span(start=self.start, end=self.start)

    def shrink_to_end(self) -> Span:
        return Span(start=self.end, end=self.end)

    def __lt__(self, other: Span) -> bool:
        return (self.start, self.end) < (other.start, other.end)

    def __repr__(self) -> str:
        return f"Span({self.entry.map_id}:{self.entry.index}@{self.start.index}..{self.end.index})"


Location = Offset | Span


def location_start(location: Location) -> Offset:
    return location.start if isinstance(location, Span) else location
