"""Tests for multi-action PAN turns."""

import pytest

from pan.core.actions import Capture, Move, Special, StaticCapture
from pan.core.errors import InvalidCoordinate, InvalidSyntax
from pan.core.grammar import OPERATORS
from pan.core.notation import (
    ACTION_SEPARATOR,
    is_valid_turn,
    parse_turn,
    render_turn,
    safe_parse_turn,
)


class TestParseTurn:
    def test_castling(self) -> None:
        assert parse_turn("e1~g1;h1~f1") == (Special("e1", "g1"), Special("h1", "f1"))

    def test_en_passant(self) -> None:
        assert parse_turn("d5-e6;+e5") == (Move("d5", "e6"), StaticCapture("e5"))

    def test_single_action(self) -> None:
        assert parse_turn("e2-e4") == (Move("e2", "e4"),)

    def test_order_preserved(self) -> None:
        actions = parse_turn("+d4;d1+f3;e2-e4")
        assert [type(a) for a in actions] == [StaticCapture, Capture, Move]

    @pytest.mark.parametrize(
        "text", ["", ";", "e2-e4;", ";e2-e4", "e2-e4;;e7-e5", "e2-e4; e7-e5"]
    )
    def test_misplaced_separators(self, text: str) -> None:
        with pytest.raises(InvalidSyntax):
            parse_turn(text)

    def test_bad_action_error_propagates(self) -> None:
        with pytest.raises(InvalidCoordinate):
            parse_turn("e2-e4;e2-e0")


class TestRenderTurn:
    def test_castling(self) -> None:
        actions = [Special("e1", "g1"), Special("h1", "f1")]
        assert render_turn(actions) == "e1~g1;h1~f1"

    def test_accepts_any_iterable(self) -> None:
        actions = (a for a in [Move("d5", "e6"), StaticCapture("e5")])
        assert render_turn(actions) == "d5-e6;+e5"

    def test_empty_turn_raises(self) -> None:
        with pytest.raises(ValueError):
            render_turn([])

    def test_roundtrip(self) -> None:
        text = "e1~g1;h1~f1"
        assert render_turn(parse_turn(text)) == text


class TestTurnHelpers:
    def test_separator_is_not_an_operator(self) -> None:
        assert ACTION_SEPARATOR not in OPERATORS

    def test_is_valid_turn(self) -> None:
        assert is_valid_turn("e1~g1;h1~f1")
        assert not is_valid_turn("e1~g1;")
        assert not is_valid_turn(None)

    def test_safe_parse_turn(self) -> None:
        assert safe_parse_turn("...") is not None
        assert safe_parse_turn("e2e4;e7e5") is None
