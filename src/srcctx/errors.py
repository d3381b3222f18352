from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .diagnostics import Diagnostic
    from .spans import EntryId


class SourceContextError(Exception):
    """Base class for every error raised by srcctx."""

    def __reduce__(self):
        return type(self), tuple(getattr(self, f.name) for f in fields(self))


@dataclass(slots=True)
class IdentityMismatch(SourceContextError):
    """A handle was used with a source map (or handle) it does not belong to."""

    expected: EntryId | int
    actual: EntryId | int
    what: str = "handle"

    def __str__(self) -> str:
        return f"{self.what} belongs to {self.actual!r}, expected {self.expected!r}"


@dataclass(slots=True)
class OutOfRange(SourceContextError):
    index: int
    length: int | None = None

    def __str__(self) -> str:
        if self.length is None:
            return f"offset index {self.index} is negative"
        return f"offset index {self.index} is past the end of its source (length {self.length})"


@dataclass(slots=True)
class UnknownEntry(SourceContextError):
    entry: EntryId

    def __str__(self) -> str:
        return f"no source registered for {self.entry!r}"


@dataclass(slots=True)
class InvalidSpan(SourceContextError, ValueError):
    start: int
    end: int

    def __str__(self) -> str:
        return f"span end {self.end} is before its start {self.start}"


@dataclass(slots=True)
class LoadError(SourceContextError):
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"failed to read from `{self.path}`: {self.reason}"


@dataclass(slots=True)
class DiagnosticError(SourceContextError):
    """A diagnostic promoted to an exception, with its text already resolved."""

    diagnostic: Diagnostic
    summary: str
    rendered: str

    def __str__(self) -> str:
        return self.summary
