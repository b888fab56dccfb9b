"""Piece identifier grammar.

A piece identifier is a single ASCII letter, optionally prefixed with a state
modifier (``+`` enhanced, ``-`` diminished) and optionally suffixed with the
derivation marker ``'``::

    K    +P    -p    K'    +R'
"""

from __future__ import annotations

import re

_PIECE_RE = re.compile(r"[-+]?[A-Za-z]'?")


def is_valid(text: object) -> bool:
    """Return True if *text* is a well-formed piece identifier."""
    return isinstance(text, str) and _PIECE_RE.fullmatch(text) is not None
