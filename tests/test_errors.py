from __future__ import annotations

import pickle
from pathlib import Path

import pytest

from srcctx import InvalidSpan, LoadError, OutOfRange, SourceContextError


@pytest.mark.parametrize(
    "err",
    [
        OutOfRange(index=5, length=3),
        OutOfRange(index=-1),
        InvalidSpan(start=4, end=1),
        LoadError(path=Path("missing.src"), reason="no such file"),
    ],
)
def test_errors_survive_pickling(err: SourceContextError) -> None:
    back = pickle.loads(pickle.dumps(err))
    assert type(back) is type(err)
    assert back == err
    assert str(back) == str(err)


def test_invalid_span_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        raise InvalidSpan(start=2, end=0)
