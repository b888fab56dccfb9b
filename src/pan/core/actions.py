"""PAN action value objects.

Every action kind is an immutable dataclass carrying only the fields that are
meaningful to it, plus the three grammar operations for its shape:

=============  ==================  ===========
Kind           Shape               Example
=============  ==================  ===========
Pass           ``...``             ``...``
Move           ``S-D[=T]``         ``e7-e8=Q``
Capture        ``S+D[=T]``         ``d1+f3``
Special        ``S~D[=T]``         ``e1~g1``
StaticCapture  ``+D``              ``+d4``
Drop           ``[P]*D[=T]``       ``P*e5``
DropCapture    ``[P].D[=T]``       ``L.b4``
Modify         ``D=P``             ``e4=+P``
=============  ==================  ===========
"""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, fields
from enum import StrEnum
from typing import ClassVar, Self

from pan.core.errors import InvalidSyntax, MultipleTransformationMarkers, PanError
from pan.core.grammar import (
    CAPTURE_OPERATOR,
    DROP_CAPTURE_OPERATOR,
    DROP_OPERATOR,
    MOVE_OPERATOR,
    PASS_NOTATION,
    SPECIAL_OPERATOR,
    TRANSFORMATION_SEPARATOR,
    check_text,
    require_coordinate,
    require_piece,
    split_operator,
    split_transformation,
    validate_coordinate,
    validate_piece,
)


class ActionType(StrEnum):
    """Tag identifying the shape of an action."""

    PASS = "pass"
    MOVE = "move"
    CAPTURE = "capture"
    SPECIAL = "special"
    STATIC_CAPTURE = "static_capture"
    DROP = "drop"
    DROP_CAPTURE = "drop_capture"
    MODIFY = "modify"


_MOVEMENT_TYPES = frozenset(
    {ActionType.MOVE, ActionType.CAPTURE, ActionType.SPECIAL}
)
_DROP_TYPES = frozenset({ActionType.DROP, ActionType.DROP_CAPTURE})


class Action:
    """Common surface of all action kinds."""

    __slots__ = ()

    kind: ClassVar[ActionType]

    # ── Grammar ──────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build an action of this kind from *text* or raise a :class:`PanError`."""
        raise NotImplementedError

    @classmethod
    def recognize(cls, text: object) -> bool:
        """Return True if *text* is a valid action of this kind."""
        try:
            cls.parse(text)  # type: ignore[arg-type]
        except PanError:
            return False
        return True

    def render(self) -> str:
        """Canonical PAN text."""
        return str(self)

    def as_dict(self) -> dict[str, str]:
        """Plain mapping with the action type and every present field."""
        data = {"type": str(self.kind)}
        for field in fields(self):  # type: ignore[arg-type]
            value = getattr(self, field.name)
            if value is not None:
                data[field.name] = value
        return data

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_pass(self) -> bool:
        return self.kind is ActionType.PASS

    @property
    def is_move(self) -> bool:
        return self.kind is ActionType.MOVE

    @property
    def is_capture(self) -> bool:
        return self.kind is ActionType.CAPTURE

    @property
    def is_special(self) -> bool:
        return self.kind is ActionType.SPECIAL

    @property
    def is_static_capture(self) -> bool:
        return self.kind is ActionType.STATIC_CAPTURE

    @property
    def is_drop(self) -> bool:
        return self.kind is ActionType.DROP

    @property
    def is_drop_capture(self) -> bool:
        return self.kind is ActionType.DROP_CAPTURE

    @property
    def is_modify(self) -> bool:
        return self.kind is ActionType.MODIFY

    @property
    def is_movement(self) -> bool:
        """Move, capture or special: a piece travels from source to destination."""
        return self.kind in _MOVEMENT_TYPES

    @property
    def is_drop_like(self) -> bool:
        """Drop or drop-capture: a piece enters the board from reserve."""
        return self.kind in _DROP_TYPES


# ── Pass ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Pass(Action):
    """Turn passed without any board change."""

    kind = ActionType.PASS

    def __str__(self) -> str:
        return PASS_NOTATION

    @classmethod
    def parse(cls, text: str) -> Self:
        if check_text(text) != PASS_NOTATION:
            raise InvalidSyntax(f"Invalid pass notation: {text!r}")
        return cls()


# ── Movements: source → destination ──────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _Movement(Action):
    source: str
    destination: str
    transformation: str | None = None

    operator: ClassVar[str]

    def __post_init__(self) -> None:
        validate_coordinate(self.source, "source")
        validate_coordinate(self.destination, "destination")
        validate_piece(self.transformation, "transformation", optional=True)

    def __str__(self) -> str:
        text = f"{self.source}{self.operator}{self.destination}"
        if self.transformation is not None:
            text += TRANSFORMATION_SEPARATOR + self.transformation
        return text

    @classmethod
    def parse(cls, text: str) -> Self:
        text = check_text(text)
        source, rest = split_operator(text, cls.operator)
        require_coordinate(source, "source", text)
        destination, transformation = split_transformation(rest, text)
        require_coordinate(destination, "destination", text)
        if transformation is not None:
            require_piece(transformation, "transformation", text)
        return cls(source, destination, transformation)


@dataclass(frozen=True, slots=True)
class Move(_Movement):
    """Piece moves to an empty destination: ``e2-e4``."""

    kind = ActionType.MOVE
    operator = MOVE_OPERATOR


@dataclass(frozen=True, slots=True)
class Capture(_Movement):
    """Piece moves and captures on the destination: ``d1+f3``."""

    kind = ActionType.CAPTURE
    operator = CAPTURE_OPERATOR


@dataclass(frozen=True, slots=True)
class Special(_Movement):
    """Move with side effects handled elsewhere (castling, en passant): ``e1~g1``."""

    kind = ActionType.SPECIAL
    operator = SPECIAL_OPERATOR


# ── Static capture ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StaticCapture(Action):
    """Piece removed from *destination* with nothing moving there: ``+d4``."""

    destination: str

    kind = ActionType.STATIC_CAPTURE

    def __post_init__(self) -> None:
        validate_coordinate(self.destination, "destination")

    def __str__(self) -> str:
        return f"{CAPTURE_OPERATOR}{self.destination}"

    @classmethod
    def parse(cls, text: str) -> Self:
        text = check_text(text)
        source, destination = split_operator(text, CAPTURE_OPERATOR)
        if source:
            raise InvalidSyntax(
                f"Static capture must start with {CAPTURE_OPERATOR!r}: {text!r}"
            )
        return cls(require_coordinate(destination, "destination", text))


# ── Drops: reserve → board ───────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _DropLike(Action):
    destination: str
    _: KW_ONLY
    piece: str | None = None
    transformation: str | None = None

    operator: ClassVar[str]

    def __post_init__(self) -> None:
        validate_coordinate(self.destination, "destination")
        validate_piece(self.piece, "dropped", optional=True)
        validate_piece(self.transformation, "transformation", optional=True)

    def __str__(self) -> str:
        text = f"{self.piece or ''}{self.operator}{self.destination}"
        if self.transformation is not None:
            text += TRANSFORMATION_SEPARATOR + self.transformation
        return text

    @classmethod
    def parse(cls, text: str) -> Self:
        text = check_text(text)
        piece, rest = split_operator(text, cls.operator)
        if piece:
            require_piece(piece, "dropped", text)
        destination, transformation = split_transformation(rest, text)
        require_coordinate(destination, "destination", text)
        if transformation is not None:
            require_piece(transformation, "transformation", text)
        return cls(
            destination, piece=piece or None, transformation=transformation
        )


@dataclass(frozen=True, slots=True)
class Drop(_DropLike):
    """Piece placed from reserve on an empty square: ``P*e5``, ``*d4``.

    The destination is the only positional field, so ``P*e5`` is built as
    ``Drop("e5", piece="P")``.
    """

    kind = ActionType.DROP
    operator = DROP_OPERATOR


@dataclass(frozen=True, slots=True)
class DropCapture(_DropLike):
    """Piece placed from reserve, capturing the occupant: ``L.b4``."""

    kind = ActionType.DROP_CAPTURE
    operator = DROP_CAPTURE_OPERATOR


# ── In-place transformation ──────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Modify(Action):
    """Piece on *destination* becomes *piece* without moving: ``e4=+P``."""

    destination: str
    piece: str

    kind = ActionType.MODIFY

    def __post_init__(self) -> None:
        validate_coordinate(self.destination, "destination")
        validate_piece(self.piece, "final")

    def __str__(self) -> str:
        return f"{self.destination}{TRANSFORMATION_SEPARATOR}{self.piece}"

    @classmethod
    def parse(cls, text: str) -> Self:
        text = check_text(text)
        destination, piece = split_operator(text, TRANSFORMATION_SEPARATOR)
        require_coordinate(destination, "destination", text)
        if TRANSFORMATION_SEPARATOR in piece:
            raise MultipleTransformationMarkers(
                f"At most one {TRANSFORMATION_SEPARATOR!r} allowed: {text!r}"
            )
        return cls(destination, require_piece(piece, "final", text))
