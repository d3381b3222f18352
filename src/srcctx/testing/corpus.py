from __future__ import annotations

import random
import string


_WORD_CHARS = string.ascii_letters + string.digits + "_"
_PUNCT = "{}[]();,.=:/+-*<>\"'"


def normalize(content: str) -> str:
    """Strip a ``|`` margin from an indented multi-line fixture.

    Blank lines are dropped; every other line must contain ``|`` and keeps
    whatever follows the first one. Each kept line ends with ``\\n``.
    """
    lead = "|"
    out: list[str] = []
    for line in content.splitlines():
        if not line.strip():
            continue
        idx = line.find(lead)
        if idx < 0:
            raise ValueError(f"non-empty lines must start with `{lead}` character: `{line}`")
        out.append(line[idx + len(lead) :] + "\n")
    return "".join(out)


def _word(r: random.Random) -> str:
    return "".join(r.choice(_WORD_CHARS) for _ in range(r.randint(1, 8)))


def _line(r: random.Random) -> str:
    parts: list[str] = []
    if r.random() < 0.3:
        parts.append("\t" * r.randint(1, 2))
    elif r.random() < 0.5:
        parts.append(" " * r.randint(1, 8))
    for _ in range(r.randint(0, 6)):
        pick = r.random()
        if pick < 0.6:
            parts.append(_word(r))
        elif pick < 0.8:
            parts.append(r.choice(_PUNCT))
        elif pick < 0.9:
            parts.append("\t")
        else:
            parts.append(" ")
        if r.random() < 0.5:
            parts.append(" ")
    return "".join(parts)


def generate_sources(*, seed: int, count: int) -> list[str]:
    """Deterministic corpus of small multi-line texts.

    The texts mix tabs, blank lines, ``\\r\\n`` endings and a missing final
    newline, which is what position resolution has to get right.
    """
    r = random.Random(seed)
    out: list[str] = []
    for _ in range(count):
        lines = [_line(r) for _ in range(r.randint(0, 12))]
        sep = "\r\n" if r.random() < 0.1 else "\n"
        src = sep.join(lines)
        if lines and r.random() < 0.5:
            src += sep
        out.append(src)
    return out
