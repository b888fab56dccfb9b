"""Operator characters and slot checks shared by every action shape."""

from __future__ import annotations

from pan.core import coordinate, piece
from pan.core.errors import (
    InvalidCoordinate,
    InvalidPiece,
    InvalidSyntax,
    MultipleTransformationMarkers,
)

PASS_NOTATION = "..."
MOVE_OPERATOR = "-"
CAPTURE_OPERATOR = "+"
SPECIAL_OPERATOR = "~"
DROP_OPERATOR = "*"
DROP_CAPTURE_OPERATOR = "."
TRANSFORMATION_SEPARATOR = "="
ACTION_SEPARATOR = ";"

OPERATORS = frozenset(
    MOVE_OPERATOR
    + CAPTURE_OPERATOR
    + SPECIAL_OPERATOR
    + DROP_OPERATOR
    + DROP_CAPTURE_OPERATOR
    + TRANSFORMATION_SEPARATOR
)


def check_text(text: object) -> str:
    """Reject anything that cannot be an action before shape matching starts."""
    if not isinstance(text, str):
        raise InvalidSyntax(f"PAN action must be a string, got {type(text).__name__}")
    if not text:
        raise InvalidSyntax("PAN action cannot be empty")
    if any(ch.isspace() for ch in text):
        raise InvalidSyntax(f"Whitespace is not allowed in PAN action: {text!r}")
    if ACTION_SEPARATOR in text:
        raise InvalidSyntax(f"Misplaced {ACTION_SEPARATOR!r} in PAN action: {text!r}")
    return text


def split_operator(text: str, operator: str) -> tuple[str, str]:
    """Split *text* on the first *operator*, e.g. 'e2-e4' → ('e2', 'e4')."""
    head, found, tail = text.partition(operator)
    if not found:
        raise InvalidSyntax(f"Missing {operator!r} operator: {text!r}")
    return head, tail


def split_transformation(rest: str, text: str) -> tuple[str, str | None]:
    """Split 'e8=Q' into ('e8', 'Q'); 'e8' gives ('e8', None)."""
    markers = rest.count(TRANSFORMATION_SEPARATOR)
    if markers == 0:
        return rest, None
    if markers > 1:
        raise MultipleTransformationMarkers(
            f"At most one {TRANSFORMATION_SEPARATOR!r} allowed: {text!r}"
        )
    destination, _, transformation = rest.partition(TRANSFORMATION_SEPARATOR)
    if not transformation:
        raise InvalidSyntax(f"Missing transformation piece: {text!r}")
    return destination, transformation


def require_coordinate(value: str, role: str, text: str) -> str:
    """Check one coordinate slot of *text*; *role* names it in error messages."""
    if not value:
        raise InvalidSyntax(f"Missing {role} coordinate: {text!r}")
    if not OPERATORS.isdisjoint(value):
        raise InvalidSyntax(f"Unexpected operator in {role} coordinate: {text!r}")
    if not coordinate.is_valid(value):
        raise InvalidCoordinate(f"Invalid {role} coordinate {value!r} in {text!r}")
    return value


def require_piece(value: str, role: str, text: str) -> str:
    """Check one piece slot of *text*; *role* names it in error messages."""
    if not value:
        raise InvalidSyntax(f"Missing {role} piece: {text!r}")
    if not piece.is_valid(value):
        raise InvalidPiece(f"Invalid {role} piece {value!r} in {text!r}")
    return value


def validate_coordinate(value: object, role: str) -> None:
    """Constructor-side counterpart of :func:`require_coordinate`."""
    if not coordinate.is_valid(value):
        raise InvalidCoordinate(f"Invalid {role} coordinate: {value!r}")


def validate_piece(value: object, role: str, *, optional: bool = False) -> None:
    """Constructor-side counterpart of :func:`require_piece`."""
    if optional and value is None:
        return
    if not piece.is_valid(value):
        raise InvalidPiece(f"Invalid {role} piece: {value!r}")
