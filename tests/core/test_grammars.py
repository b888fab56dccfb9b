"""Tests for the coordinate and piece grammars."""

import pytest

from pan.core import coordinate, piece


class TestCoordinate:
    @pytest.mark.parametrize(
        "text",
        ["a", "e4", "h8", "a10", "aa1", "z99", "a1A", "b2Cd", "c3De4"],
    )
    def test_valid(self, text: str) -> None:
        assert coordinate.is_valid(text)

    @pytest.mark.parametrize(
        "text",
        ["", "4", "A1", "E4", "e0", "e04", "4e", "a1A1", "e-4", "e4 ", " e4", "é4"],
    )
    def test_invalid(self, text: str) -> None:
        assert not coordinate.is_valid(text)

    @pytest.mark.parametrize("value", [None, 42, b"e4", ["e4"]])
    def test_non_string_is_invalid(self, value: object) -> None:
        assert not coordinate.is_valid(value)


class TestPiece:
    @pytest.mark.parametrize("text", ["K", "k", "+P", "-p", "K'", "+R'", "-s'"])
    def test_valid(self, text: str) -> None:
        assert piece.is_valid(text)

    @pytest.mark.parametrize(
        "text",
        ["", "KK", "++P", "+-P", "P+", "'K", "K''", "+", "1", "P\n", "é"],
    )
    def test_invalid(self, text: str) -> None:
        assert not piece.is_valid(text)

    @pytest.mark.parametrize("value", [None, 1, ("K",)])
    def test_non_string_is_invalid(self, value: object) -> None:
        assert not piece.is_valid(value)
