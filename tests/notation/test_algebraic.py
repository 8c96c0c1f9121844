"""Unit tests for /src/notation/algebraic.py"""

import pytest

from src.core.models import MoveDescriptor, VariantDescriptor
from src.core.shared_types import NotationStyle
from src.notation.algebraic import san_notation, uci_notation

CHESS = VariantDescriptor(8, 8, NotationStyle.SAN)
FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


@pytest.mark.parametrize(
    "san, notation",
    [("Pe4", "e4"), ("e4", "e4"), ("Nf3", "Nf3"), ("Pxd5", "xd5"), ("O-O", "O-O"), ("Qh5+", "Qh5+")],
)
def test_san_strips_pawn_letter(san: str, notation: str) -> None:
    move = MoveDescriptor(san=san, uci="e2e4", fen=FEN)
    assert san_notation(move, CHESS) == notation


def test_uci_is_passed_through() -> None:
    move = MoveDescriptor(san="Pe4", uci="e2e4", fen=FEN)
    assert uci_notation(move, CHESS) == "e2e4"
