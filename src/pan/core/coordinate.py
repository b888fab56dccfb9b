"""Coordinate grammar.

A coordinate is a sequence of dimension segments that cycle through three
character classes, always starting with lowercase letters::

    lowercase run -> positive integer -> uppercase run -> lowercase run ...

So ``e4`` is a 2D square, ``a1A`` a 3D cell and ``aa10`` a square on a board
wider than 26 files. Integers never carry a leading zero.
"""

from __future__ import annotations

import re

_SEGMENT_RE = re.compile(r"[a-z]+|[1-9][0-9]*|[A-Z]+")
_CYCLE = ("lower", "digit", "upper")


def _segment_class(segment: str) -> str:
    first = segment[0]
    if first.isdigit():
        return "digit"
    return "lower" if first.islower() else "upper"


def is_valid(text: object) -> bool:
    """Return True if *text* is a well-formed coordinate."""
    if not isinstance(text, str) or not text:
        return False

    pos = 0
    for idx, match in enumerate(_SEGMENT_RE.finditer(text)):
        if match.start() != pos:
            return False
        if _segment_class(match.group()) != _CYCLE[idx % len(_CYCLE)]:
            return False
        pos = match.end()
    return pos == len(text)
