from __future__ import annotations

from .cursor import InputCursor
from .diagnostics import Diagnostic, Note, Severity
from .errors import (
    DiagnosticError,
    IdentityMismatch,
    InvalidSpan,
    LoadError,
    OutOfRange,
    SourceContextError,
    UnknownEntry,
)
from .loader import load_directory, load_file
from .origin import Origin
from .render import RenderConfig, render, render_summary
from .source_map import Insert, ResolvedPosition, ResolvedSpan, SourceEntry, SourceMap
from .spans import EntryId, Location, Offset, Span

__all__ = [
    "Diagnostic",
    "DiagnosticError",
    "EntryId",
    "IdentityMismatch",
    "InputCursor",
    "Insert",
    "InvalidSpan",
    "LoadError",
    "Location",
    "Note",
    "Offset",
    "Origin",
    "OutOfRange",
    "RenderConfig",
    "ResolvedPosition",
    "ResolvedSpan",
    "Severity",
    "SourceContextError",
    "SourceEntry",
    "SourceMap",
    "Span",
    "UnknownEntry",
    "load_directory",
    "load_file",
    "render",
    "render_summary",
]
