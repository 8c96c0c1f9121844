"""Unit tests for /src/notation/pieces.py"""

import pytest

from src.notation.pieces import Piece


@pytest.mark.parametrize("char", list("PLNSGBRK"))
def test_upper_case_is_first_player(char: str) -> None:
    assert Piece.from_fen(char).is_first_player
    assert not Piece.from_fen(char.lower()).is_first_player


@pytest.mark.parametrize(
    "piece, fen",
    [(Piece("P"), "P"), (Piece("p"), "p"), (Piece("R", True), "+R"), (Piece("s", True), "+s")],
)
def test_piece_to_fen(piece: Piece, fen: str) -> None:
    assert piece.to_fen() == fen
    assert piece.role == fen


def test_kind_ignores_side() -> None:
    assert Piece("s", True).kind == Piece("S", True).kind == "+S"


def test_same_type_requires_letter_case_and_promotion() -> None:
    assert Piece("S") == Piece.from_fen("S")
    assert Piece("S") != Piece("s")
    assert Piece("S") != Piece("S", promoted=True)
