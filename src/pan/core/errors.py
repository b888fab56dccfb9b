"""Exceptions raised by PAN parsing and construction.

All of them derive from :class:`ValueError`, so callers that only care about
"bad notation" can keep catching that.
"""

from __future__ import annotations


class PanError(ValueError):
    """Base class for every PAN notation error."""


class InvalidSyntax(PanError):
    """Text does not match any known action shape."""


class InvalidCoordinate(PanError):
    """A coordinate slot holds a string rejected by the coordinate grammar."""


class InvalidPiece(PanError):
    """A piece slot holds a string rejected by the piece grammar."""


class MultipleTransformationMarkers(PanError):
    """More than one ``=`` where at most one is allowed."""


class InvalidActionData(PanError):
    """A structured action mapping has an unknown type or wrong fields."""
