from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .cursor import InputCursor
from .errors import IdentityMismatch, OutOfRange, UnknownEntry
from .origin import Origin
from .spans import EntryId, Offset, Span


logger = logging.getLogger(__name__)

_MAP_IDS = itertools.count()


@dataclass(frozen=True, slots=True)
class SourceEntry:
    origin: Origin
    content: str


@dataclass(frozen=True, slots=True)
class Insert:
    """Outcome of :meth:`SourceMap.insert`.

    ``inserted`` is False when the origin was already registered; ``entry`` then
    points at the earlier registration and the new content was discarded.
    """

    entry: EntryId
    inserted: bool


@dataclass(frozen=True, slots=True)
class ResolvedPosition:
    """Line/column context for one offset.

    ``line`` and ``column`` are 1-based. Every character counts as one column,
    tabs included; ``tabs`` is the number of tabs between the start of the line
    and the offset, for renderers that want to expand them.
    """

    entry: EntryId
    origin: Origin
    index: int
    line: int
    column: int
    line_text: str
    tabs: int = 0

    @property
    def origin_label(self) -> str:
        return self.origin.label

    def format(self, *, prefix: bool = False) -> str:
        return self.origin.format_location(self.line, self.column, prefix=prefix)


@dataclass(frozen=True, slots=True)
class ResolvedSpan:
    start: ResolvedPosition
    end: ResolvedPosition

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line


class SourceMap:
    """Append-only registry of source buffers.

    Every map draws a fresh id from a process-wide counter, and every handle it
    hands out carries that id, so a handle can never resolve against a map it
    did not come from. Registration is not synchronized: register everything
    from one thread (or under an external lock) before sharing the map.
    """

    def __init__(self) -> None:
        self.id = next(_MAP_IDS)
        self._entries: list[SourceEntry] = []
        self._by_origin: dict[Origin, int] = {}

    def __repr__(self) -> str:
        return f"SourceMap(id={self.id}, entries={len(self._entries)})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, EntryId) and entry.map_id == self.id and 0 <= entry.index < len(self._entries)

    def register(self, origin: Origin | str | Path, content: str) -> EntryId:
        if not isinstance(content, str):
            raise TypeError(f"source content must be str, got {type(content).__name__}")
        org = Origin.coerce(origin)
        index = len(self._entries)
        self._entries.append(SourceEntry(origin=org, content=content))
        self._by_origin.setdefault(org, index)
        logger.debug("map %d: registered %s as entry %d (%d chars)", self.id, org, index, len(content))
        return EntryId(map_id=self.id, index=index)

    def insert(self, origin: Origin | str | Path, content: str) -> Insert:
        org = Origin.coerce(origin)
        prev = self._by_origin.get(org)
        if prev is not None:
            logger.debug("map %d: %s already registered as entry %d", self.id, org, prev)
            return Insert(entry=EntryId(map_id=self.id, index=prev), inserted=False)
        return Insert(entry=self.register(org, content), inserted=True)

    def _entry(self, entry: EntryId) -> SourceEntry:
        if not isinstance(entry, EntryId):
            raise TypeError(f"expected EntryId, got {type(entry).__name__}")
        if entry.map_id != self.id:
            raise IdentityMismatch(expected=self.id, actual=entry.map_id, what="source map id")
        if not 0 <= entry.index < len(self._entries):
            raise UnknownEntry(entry=entry)
        return self._entries[entry.index]

    def content_of(self, entry: EntryId) -> str:
        return self._entry(entry).content

    def origin_of(self, entry: EntryId) -> Origin:
        return self._entry(entry).origin

    def entries(self) -> Iterator[EntryId]:
        for i in range(len(self._entries)):
            yield EntryId(map_id=self.id, index=i)

    def origins(self) -> Iterator[Origin]:
        return (e.origin for e in self._entries)

    def files(self) -> Iterator[Path]:
        for org in self.origins():
            if org.path is not None:
                yield org.path

    def origin_index(self, origin: Origin) -> EntryId | None:
        index = self._by_origin.get(origin)
        if index is None:
            return None
        return EntryId(map_id=self.id, index=index)

    def file_index(self, path: str | Path) -> EntryId | None:
        return self.origin_index(Origin.file(path))

    def contains_file(self, path: str | Path) -> bool:
        return self.file_index(path) is not None

    def cursor(self, entry: EntryId) -> InputCursor:
        return InputCursor(entry=entry, content=self.content_of(entry))

    def span_text(self, span: Span) -> str:
        content = self.content_of(span.entry)
        if span.end.index > len(content):
            raise OutOfRange(index=span.end.index, length=len(content))
        return content[span.start.index : span.end.index]

    def resolve_position(self, offset: Offset) -> ResolvedPosition:
        entry = self._entry(offset.entry)
        content = entry.content
        target = offset.index
        if target > len(content):
            raise OutOfRange(index=target, length=len(content))

        # Linear scan over everything strictly before the offset.
        line = 1
        column = 1
        line_start = 0
        tabs = 0
        for i in range(target):
            ch = content[i]
            if ch == "\n":
                line += 1
                column = 1
                line_start = i + 1
                tabs = 0
            else:
                if ch == "\t":
                    tabs += 1
                column += 1

        line_end = content.find("\n", target)
        if line_end == -1:
            line_end = len(content)
        return ResolvedPosition(
            entry=offset.entry,
            origin=entry.origin,
            index=target,
            line=line,
            column=column,
            line_text=content[line_start:line_end],
            tabs=tabs,
        )

    def resolve_span(self, span: Span) -> ResolvedSpan:
        start = self.resolve_position(span.start)
        end = self.resolve_position(span.end)
        return ResolvedSpan(start=start, end=end)
