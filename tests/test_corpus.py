from __future__ import annotations

import os

from srcctx import Diagnostic, Offset, SourceMap, Span, render
from srcctx.testing import generate_sources


def test_corpus_positions_and_rendering() -> None:
    seed = int(os.environ.get("SRCCTX_CORPUS_SEED", "1"))
    count = int(os.environ.get("SRCCTX_CORPUS_CASES", "200"))

    sm = SourceMap()
    for i, src in enumerate(generate_sources(seed=seed, count=count)):
        idx = sm.register(f"corpus:{seed}:{i}", src)
        lines = src.split("\n")
        cur = sm.cursor(idx)
        line, col = 1, 1
        while True:
            off = cur.current_offset()
            pos = sm.resolve_position(off)
            assert (pos.line, pos.column) == (line, col), f"case {i}, index {off.index}"
            assert pos.line_text == lines[line - 1]

            block = render(Diagnostic.error("here").at(Span.point(off)), sm)
            assert f" {line} | {lines[line - 1]}\n" in block

            ch = cur.advance()
            if ch is None:
                break
            if ch == "\n":
                line, col = line + 1, 1
            else:
                col += 1
        assert cur.current_offset() == Offset(idx, len(src))
    assert len(sm) == count


def test_corpus_is_deterministic() -> None:
    assert generate_sources(seed=7, count=20) == generate_sources(seed=7, count=20)
    assert generate_sources(seed=7, count=20) != generate_sources(seed=8, count=20)
