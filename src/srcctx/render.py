from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .spans import Location, Offset, Span

if TYPE_CHECKING:
    from .diagnostics import Diagnostic
    from .source_map import ResolvedPosition, SourceMap


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation knobs for :func:`render`.

    ``tab_width=None`` echoes tabs verbatim in both the source line and the
    caret row, so the caret lines up under any terminal tab stops; a tab inside
    an underline is drawn as ``^`` followed by the tab itself. An integer
    expands every tab to that many spaces instead.
    """

    tab_width: int | None = None

    def __post_init__(self) -> None:
        if self.tab_width is not None and self.tab_width < 1:
            raise ValueError(f"tab_width must be positive, got {self.tab_width}")


DEFAULT_CONFIG = RenderConfig()


def render(diagnostic: Diagnostic, source_map: SourceMap, config: RenderConfig | None = None) -> str:
    """Render a diagnostic with source context.

    Every location is resolved against ``source_map``; resolution errors
    propagate unchanged. Only the first line of a multi-line span is shown.
    """
    cfg = config or DEFAULT_CONFIG
    _check_detached_context(diagnostic, source_map)
    out = [f"{diagnostic.severity.value}: {diagnostic.message}"]
    if diagnostic.location is not None:
        out.extend(
            _location_block(
                source_map,
                diagnostic.location,
                label=diagnostic.label,
                context=diagnostic.context,
                cfg=cfg,
            )
        )
    for note in diagnostic.notes:
        out.append(f"note: {note.message}")
        if note.location is not None:
            out.extend(_location_block(source_map, note.location, label=None, context=None, cfg=cfg))
    return "\n".join(out) + "\n"


def render_summary(diagnostic: Diagnostic, source_map: SourceMap) -> str:
    """One-line form: ``message in `name`, line L, column C``."""
    _check_detached_context(diagnostic, source_map)
    locations: list[Location] = []
    if diagnostic.location is not None:
        locations.append(diagnostic.location)
    locations.extend(n.location for n in diagnostic.notes if n.location is not None)
    where = [_resolve_start(source_map, loc).format(prefix=True) for loc in locations]
    if not where:
        return diagnostic.message
    if len(where) == 1:
        return f"{diagnostic.message} {where[0]}"
    return f"{diagnostic.message} {', '.join(where[:-1])} and {where[-1]}"


def _resolve_start(source_map: SourceMap, location: Location) -> ResolvedPosition:
    if isinstance(location, Span):
        return source_map.resolve_span(location).start
    return source_map.resolve_position(location)


def _check_detached_context(diagnostic: Diagnostic, source_map: SourceMap) -> None:
    # Not drawn without a primary location, but it must still resolve.
    if diagnostic.location is None and diagnostic.context is not None:
        source_map.resolve_position(diagnostic.context)


def _location_block(
    source_map: SourceMap,
    location: Location,
    *,
    label: str | None,
    context: Offset | None,
    cfg: RenderConfig,
) -> list[str]:
    if isinstance(location, Span):
        resolved = source_map.resolve_span(location)
        start, end = resolved.start, resolved.end
    else:
        start = source_map.resolve_position(location)
        end = None
    ctx = source_map.resolve_position(context) if context is not None else None

    shown = [start.line] + ([ctx.line] if ctx is not None else [])
    width = len(str(max(shown)))
    gutter = " " * width

    out = [f"--> {start.format()}"]
    if ctx is not None and ctx.line != start.line:
        out.append(f" {ctx.line:>{width}} | {_expand(ctx.line_text, cfg)}")
        if ctx.line + 1 != start.line:
            out.append(f" {gutter} | ...")
    out.append(f" {start.line:>{width}} | {_expand(start.line_text, cfg)}")

    skipped = start.line_text[: start.column - 1]
    pad = "".join(ch if ch == "\t" else " " for ch in skipped)
    row = f" {gutter} | {_expand(pad, cfg)}{_underline(start, end, cfg)}"
    if label:
        row += f" {label}"
    out.append(row)
    return out


def _underline(start: ResolvedPosition, end: ResolvedPosition | None, cfg: RenderConfig) -> str:
    if end is None:
        return "^"
    first = start.column - 1
    if end.line == start.line:
        covered = start.line_text[first : end.column - 1]
        extra = 0
    else:
        # The span runs past this line; the line break itself is covered too.
        covered = start.line_text[first:]
        extra = 1
    if cfg.tab_width is None:
        carets = "".join("^\t" if ch == "\t" else "^" for ch in covered)
    else:
        carets = "".join("^" * cfg.tab_width if ch == "\t" else "^" for ch in covered)
    carets += "^" * extra
    return carets or "^"


def _expand(text: str, cfg: RenderConfig) -> str:
    if cfg.tab_width is None:
        return text
    return text.replace("\t", " " * cfg.tab_width)
