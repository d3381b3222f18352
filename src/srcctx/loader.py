from __future__ import annotations

import logging
from pathlib import Path

from .errors import LoadError
from .origin import Origin
from .source_map import Insert, SourceMap


logger = logging.getLogger(__name__)


def load_file(source_map: SourceMap, path: str | Path) -> Insert:
    """Read a UTF-8 file into ``source_map``.

    A path that is already registered is not read again; the earlier entry is
    returned with ``inserted=False``.
    """
    p = Path(path)
    prev = source_map.file_index(p)
    if prev is not None:
        return Insert(entry=prev, inserted=False)
    try:
        src = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path=p, reason=str(e)) from e
    logger.debug("loaded %s (%d chars)", p, len(src))
    return source_map.insert(Origin.file(p), src)


def load_directory(source_map: SourceMap, root: str | Path, extension: str) -> list[Insert]:
    """Load every file under ``root`` whose name ends with ``extension``.

    Files are visited in sorted path order. Nothing is registered unless every
    new file could be read.
    """
    base = Path(root)
    if not base.is_dir():
        raise LoadError(path=base, reason=f"cannot search for `*{extension}` files: not a directory")

    pending: list[tuple[Path, str] | Insert] = []
    for p in sorted(base.rglob("*")):
        if not p.is_file() or not p.name.endswith(extension):
            continue
        prev = source_map.file_index(p)
        if prev is not None:
            pending.append(Insert(entry=prev, inserted=False))
            continue
        try:
            pending.append((p, p.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(path=p, reason=str(e)) from e

    out: list[Insert] = []
    for item in pending:
        if isinstance(item, Insert):
            out.append(item)
        else:
            p, src = item
            out.append(source_map.insert(Origin.file(p), src))
    logger.debug("loaded %d file(s) from %s", sum(1 for i in out if i.inserted), base)
    return out
