"""Turns made of several PAN actions joined by a separator.

Castling, for instance, is two special moves in one turn::

    parse_turn("e1~g1;h1~f1")
    # (Special("e1", "g1"), Special("h1", "f1"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pan.core.actions import Action
from pan.core.errors import InvalidSyntax, PanError
from pan.core.grammar import ACTION_SEPARATOR
from pan.core.notation.dispatcher import parse_action, render_action

_LOGGER = logging.getLogger(__name__)


def parse_turn(text: str) -> tuple[Action, ...]:
    """Parse every action of a turn, keeping their order."""
    if not isinstance(text, str) or not text:
        raise InvalidSyntax("PAN turn cannot be empty")

    actions: list[Action] = []
    for idx, chunk in enumerate(text.split(ACTION_SEPARATOR)):
        if not chunk:
            _LOGGER.debug("Empty action #%d in PAN turn %r", idx, text)
            raise InvalidSyntax(
                f"Misplaced {ACTION_SEPARATOR!r} in PAN turn: {text!r}"
            )
        actions.append(parse_action(chunk))
    return tuple(actions)


def render_turn(actions: Iterable[Action]) -> str:
    """Join the canonical text of *actions* into one turn."""
    parts = [render_action(action) for action in actions]
    if not parts:
        raise ValueError("A PAN turn needs at least one action")
    return ACTION_SEPARATOR.join(parts)


def is_valid_turn(text: object) -> bool:
    """Return True if *text* is a well-formed PAN turn."""
    try:
        parse_turn(text)  # type: ignore[arg-type]
    except PanError:
        return False
    return True


def safe_parse_turn(text: str) -> tuple[Action, ...] | None:
    """Like :func:`parse_turn` but returns ``None`` for invalid input."""
    try:
        return parse_turn(text)
    except PanError:
        return None
