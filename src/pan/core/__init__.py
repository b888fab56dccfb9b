"""Core domain layer — PAN grammar with zero external dependencies.

Quick start::

    from pan.core import Move, parse_action, render_action

    action = parse_action("e7-e8=Q")
    assert action == Move("e7", "e8", transformation="Q")
    assert render_action(action) == "e7-e8=Q"
"""

from pan.core.actions import (
    Action,
    ActionType,
    Capture,
    Drop,
    DropCapture,
    Modify,
    Move,
    Pass,
    Special,
    StaticCapture,
)
from pan.core.errors import (
    InvalidActionData,
    InvalidCoordinate,
    InvalidPiece,
    InvalidSyntax,
    MultipleTransformationMarkers,
    PanError,
)
from pan.core.notation import (
    ACTION_KINDS,
    ACTION_SEPARATOR,
    action_from_dict,
    dump_action,
    is_valid_action,
    is_valid_turn,
    parse_action,
    parse_turn,
    render_action,
    render_turn,
    safe_dump_action,
    safe_parse_action,
    safe_parse_turn,
)

__all__ = [
    # Actions
    "Action",
    "ActionType",
    "Capture",
    "Drop",
    "DropCapture",
    "Modify",
    "Move",
    "Pass",
    "Special",
    "StaticCapture",
    # Errors
    "InvalidActionData",
    "InvalidCoordinate",
    "InvalidPiece",
    "InvalidSyntax",
    "MultipleTransformationMarkers",
    "PanError",
    # Notation
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
