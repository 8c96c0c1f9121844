"""Unit tests for /src/notation/destination.py"""

import pytest

from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.core.shared_types import NotationStyle
from src.notation.destination import PASS, destination_only_notation

FEN = "8/8/8/3pP3/3Pp3/8/8/8 b"


@pytest.mark.parametrize("uci, notation", [("P@d3", "d6"), ("P@a1", "a8"), ("P@h8", "h1"), ("P@e4", "e5")])
def test_rank_is_flipped(flipello: VariantDescriptor, uci: str, notation: str) -> None:
    move = MoveDescriptor(san="", uci=uci, fen=FEN)
    assert destination_only_notation(move, flipello) == notation


def test_ten_rank_board() -> None:
    variant = VariantDescriptor(10, 10, NotationStyle.DESTINATION_ONLY)
    move = MoveDescriptor(san="", uci="P@d10", fen=FEN)
    assert destination_only_notation(move, variant) == "d1"


@pytest.mark.parametrize("uci", ["a1a1", "pass", ""])
def test_pass(flipello: VariantDescriptor, uci: str) -> None:
    """Without a placement there is nothing to show but the pass"""
    move = MoveDescriptor(san="", uci=uci, fen=FEN)
    assert destination_only_notation(move, flipello) == PASS == "PASS"


@pytest.mark.parametrize("uci", ["P@", "P@d9", "P@Q@"])
def test_malformed_placements(flipello: VariantDescriptor, uci: str) -> None:
    move = MoveDescriptor(san="", uci=uci, fen=FEN)
    with pytest.raises(MalformedMoveError):
        destination_only_notation(move, flipello)
