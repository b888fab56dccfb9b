"""Notation package: PAN action and turn parsing and serialization."""

from pan.core.notation.dispatcher import (
    ACTION_KINDS,
    action_from_dict,
    dump_action,
    is_valid_action,
    parse_action,
    render_action,
    safe_dump_action,
    safe_parse_action,
)
from pan.core.notation.turn import (
    ACTION_SEPARATOR,
    is_valid_turn,
    parse_turn,
    render_turn,
    safe_parse_turn,
)

__all__ = [
    "ACTION_KINDS",
    "ACTION_SEPARATOR",
    "action_from_dict",
    "dump_action",
    "is_valid_action",
    "is_valid_turn",
    "parse_action",
    "parse_turn",
    "render_action",
    "render_turn",
    "safe_dump_action",
    "safe_parse_action",
    "safe_parse_turn",
]
