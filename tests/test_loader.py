from __future__ import annotations

from pathlib import Path

import pytest

from srcctx import LoadError, Offset, Origin, SourceMap, load_directory, load_file


def test_load_file(tmp_path: Path) -> None:
    p = tmp_path / "main.src"
    p.write_text("one\ntwo\n", encoding="utf-8")

    sm = SourceMap()
    ins = load_file(sm, p)
    assert ins.inserted
    assert sm.content_of(ins.entry) == "one\ntwo\n"
    assert sm.origin_of(ins.entry) == Origin.file(p)
    assert sm.resolve_position(Offset(ins.entry, 5)).format() == f"{p}:2:2"


def test_load_file_twice_reuses_entry(tmp_path: Path) -> None:
    p = tmp_path / "main.src"
    p.write_text("one", encoding="utf-8")
    sm = SourceMap()
    first = load_file(sm, p)
    p.write_text("changed", encoding="utf-8")
    again = load_file(sm, p)
    assert not again.inserted
    assert again.entry == first.entry
    assert sm.content_of(again.entry) == "one"
    assert len(sm) == 1


def test_load_missing_file_is_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.src"
    with pytest.raises(LoadError) as e:
        load_file(SourceMap(), missing)
    assert str(missing) in str(e.value)
    assert isinstance(e.value.__cause__, OSError)


def test_load_directory(tmp_path: Path) -> None:
    (tmp_path / "b.src").write_text("b", encoding="utf-8")
    (tmp_path / "a.src").write_text("a", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("skip me", encoding="utf-8")
    sub = tmp_path / "nested"
    sub.mkdir()
    (sub / "c.src").write_text("c", encoding="utf-8")

    sm = SourceMap()
    pre = load_file(sm, tmp_path / "b.src")
    out = load_directory(sm, tmp_path, ".src")

    assert [sm.content_of(i.entry) for i in out] == ["a", "b", "c"]
    assert [i.inserted for i in out] == [True, False, True]
    assert out[1].entry == pre.entry
    assert sm.contains_file(sub / "c.src")
    assert not sm.contains_file(tmp_path / "notes.txt")


def test_load_directory_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        load_directory(SourceMap(), tmp_path / "nope", ".src")


def test_load_directory_registers_nothing_on_failure(tmp_path: Path) -> None:
    (tmp_path / "a.src").write_text("a", encoding="utf-8")
    (tmp_path / "b.src").write_bytes(b"\xff\xfe\xfa")
    sm = SourceMap()
    with pytest.raises(LoadError):
        load_directory(sm, tmp_path, ".src")
    assert len(sm) == 0
