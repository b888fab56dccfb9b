"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from pan.core.actions import (
    Action,
    Capture,
    Drop,
    DropCapture,
    Modify,
    Move,
    Pass,
    Special,
    StaticCapture,
)

# One canonical text per shape, including every optional part.
SAMPLE_ACTIONS: list[tuple[str, Action]] = [
    ("...", Pass()),
    ("e2-e4", Move("e2", "e4")),
    ("e7-e8=Q", Move("e7", "e8", transformation="Q")),
    ("a7-a8=+R", Move("a7", "a8", transformation="+R")),
    ("d1+f3", Capture("d1", "f3")),
    ("b7+a8=-q'", Capture("b7", "a8", transformation="-q'")),
    ("e1~g1", Special("e1", "g1")),
    ("e5~d6", Special("e5", "d6")),
    ("+d4", StaticCapture("d4")),
    ("P*e5", Drop("e5", piece="P")),
    ("*d4", Drop("d4")),
    ("S*c3=+S", Drop("c3", piece="S", transformation="+S")),
    ("L.b4", DropCapture("b4", piece="L")),
    (".c3", DropCapture("c3")),
    ("e4=+P", Modify("e4", "+P")),
    ("a1A-b2B", Move("a1A", "b2B")),
]


@pytest.fixture
def sample_actions() -> list[tuple[str, Action]]:
    """Canonical PAN strings paired with the action they encode."""
    return list(SAMPLE_ACTIONS)
