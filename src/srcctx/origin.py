from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Origin:
    """Where a source buffer came from: a file on disk or a synthetic name.

    File origins render as ``path:line:column``; named origins (``<stdin>``,
    test fixtures, generated code) render as "`name`, line L, column C".
    """

    name: str
    is_file: bool = False

    @classmethod
    def file(cls, path: str | Path) -> Origin:
        return cls(name=str(Path(path)), is_file=True)

    @classmethod
    def named(cls, name: str) -> Origin:
        return cls(name=name, is_file=False)

    @classmethod
    def coerce(cls, value: Origin | str | Path) -> Origin:
        if isinstance(value, Origin):
            return value
        if isinstance(value, Path):
            return cls.file(value)
        return cls.named(value)

    @property
    def label(self) -> str:
        return self.name

    @property
    def path(self) -> Path | None:
        return Path(self.name) if self.is_file else None

    def format_location(self, line: int, column: int, *, prefix: bool = False) -> str:
        if self.is_file:
            lead = "at " if prefix else ""
            return f"{lead}{self.name}:{line}:{column}"
        lead = "in " if prefix else ""
        return f"{lead}`{self.name}`, line {line}, column {column}"

    def __str__(self) -> str:
        return self.name
