from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from .errors import DiagnosticError, IdentityMismatch
from .render import RenderConfig, render, render_summary
from .spans import Location, Offset, location_start

if TYPE_CHECKING:
    from .source_map import SourceMap


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True, slots=True)
class Note:
    message: str
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """An error, warning or note about some place in a source map.

    Diagnostics are values: every builder method returns a new Diagnostic and
    leaves the receiver untouched. Collecting them is up to the caller.
    """

    severity: Severity
    message: str
    location: Location | None = None
    label: str | None = None
    context: Offset | None = None
    notes: tuple[Note, ...] = ()

    @classmethod
    def error(cls, message: str) -> Diagnostic:
        return cls(severity=Severity.ERROR, message=message)

    @classmethod
    def warning(cls, message: str) -> Diagnostic:
        return cls(severity=Severity.WARNING, message=message)

    @classmethod
    def note(cls, message: str) -> Diagnostic:
        return cls(severity=Severity.NOTE, message=message)

    def at(self, location: Location, label: str | None = None) -> Diagnostic:
        if self.context is not None and location_start(location).entry != self.context.entry:
            raise IdentityMismatch(expected=self.context.entry, actual=location_start(location).entry, what="location")
        if label is None:
            return replace(self, location=location)
        return replace(self, location=location, label=label)

    def with_label(self, label: str) -> Diagnostic:
        return replace(self, label=label)

    def with_context(self, offset: Offset) -> Diagnostic:
        """Show ``offset``'s line above the primary line (an opening brace, say)."""
        if self.location is not None and location_start(self.location).entry != offset.entry:
            raise IdentityMismatch(expected=location_start(self.location).entry, actual=offset.entry, what="context")
        return replace(self, context=offset)

    def with_note(self, message: str, location: Location | None = None) -> Diagnostic:
        return replace(self, notes=self.notes + (Note(message=message, location=location),))

    def map_message(self, fn: Callable[[str], str]) -> Diagnostic:
        return replace(self, message=fn(self.message))

    def render(self, source_map: SourceMap, config: RenderConfig | None = None) -> str:
        return render(self, source_map, config)

    def into_error(self, source_map: SourceMap, config: RenderConfig | None = None) -> DiagnosticError:
        return DiagnosticError(
            diagnostic=self,
            summary=render_summary(self, source_map),
            rendered=render(self, source_map, config),
        )
