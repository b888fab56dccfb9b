"""Single-action PAN parsing and serialization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import MISSING, fields
from typing import Any

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
from pan.core.errors import InvalidActionData, InvalidSyntax, PanError

_LOGGER = logging.getLogger(__name__)

# Dispatch order. A new kind must be slotted in here together with a test
# proving it cannot claim input that an existing kind accepts.
ACTION_KINDS: tuple[type[Action], ...] = (
    Pass,
    Move,
    Capture,
    Special,
    StaticCapture,
    Drop,
    DropCapture,
    Modify,
)

_KIND_BY_TYPE: dict[ActionType, type[Action]] = {cls.kind: cls for cls in ACTION_KINDS}


def parse_action(text: str) -> Action:
    """Parse one PAN action, e.g. ``'e2-e4'`` → ``Move('e2', 'e4')``.

    When no kind accepts *text*, the first error that pins down a bad
    component (coordinate, piece, repeated ``=``) is raised; otherwise an
    :class:`InvalidSyntax` naming the text.
    """
    diagnosis: PanError | None = None
    for kind in ACTION_KINDS:
        try:
            return kind.parse(text)
        except InvalidSyntax:
            continue
        except PanError as exc:
            if diagnosis is None:
                diagnosis = exc

    _LOGGER.debug("Rejected PAN action %r: %s", text, diagnosis or "no matching shape")
    if diagnosis is not None:
        raise diagnosis
    raise InvalidSyntax(f"Invalid PAN action: {text!r}")


def is_valid_action(text: object) -> bool:
    """Return True if *text* is a single well-formed PAN action."""
    if not isinstance(text, str) or not text:
        return False
    return any(kind.recognize(text) for kind in ACTION_KINDS)


def safe_parse_action(text: str) -> Action | None:
    """Like :func:`parse_action` but returns ``None`` for invalid input."""
    try:
        return parse_action(text)
    except PanError:
        return None


def render_action(action: Action) -> str:
    """Serialise *action* to canonical PAN text."""
    if type(action) not in ACTION_KINDS:
        raise TypeError(f"Not a PAN action: {action!r}")
    return action.render()


# ── Structured data ──────────────────────────────────────────────────────────


def action_from_dict(data: Mapping[str, Any]) -> Action:
    """Build an action from a mapping as produced by :meth:`Action.as_dict`.

    Example::

        action_from_dict({"type": "drop", "piece": "P", "destination": "e5"})
    """
    if not isinstance(data, Mapping):
        raise InvalidActionData(
            f"Action data must be a mapping, got {type(data).__name__}"
        )

    raw_type = data.get("type")
    try:
        action_type = ActionType(raw_type)
    except ValueError:
        raise InvalidActionData(f"Unknown action type: {raw_type!r}") from None

    cls = _KIND_BY_TYPE[action_type]
    known = {field.name for field in fields(cls)}  # type: ignore[arg-type]
    required = {
        field.name
        for field in fields(cls)  # type: ignore[arg-type]
        if field.default is MISSING
    }

    foreign = set(data) - known - {"type"}
    if foreign:
        raise InvalidActionData(
            f"Fields not allowed for {action_type} action: {sorted(foreign)}"
        )
    missing = required - set(data)
    if missing:
        raise InvalidActionData(
            f"Missing fields for {action_type} action: {sorted(missing)}"
        )

    return cls(**{name: data[name] for name in known if name in data})


def dump_action(data: Mapping[str, Any]) -> str:
    """Serialise a structured action mapping straight to PAN text."""
    return render_action(action_from_dict(data))


def safe_dump_action(data: Mapping[str, Any]) -> str | None:
    """Like :func:`dump_action` but returns ``None`` for invalid data."""
    try:
        return dump_action(data)
    except PanError:
        return None
