"""Defines the pieces as they appear in a board encoding"""

from dataclasses import dataclass
from typing import Self

PROMOTION_MARKER = "+"


@dataclass(frozen=True)
class Piece:
    """
    A piece is a one letter role plus a promoted flag.

    Upper case letters: first player's pieces, lower case letters: second player's pieces.
    Two pieces are "the same type" when letter (case included) and promoted flag both match,
    which is exactly dataclass equality.
    """

    letter: str
    promoted: bool = False

    @classmethod
    def from_fen(cls, character: str, promoted: bool = False) -> Self:
        return cls(character, promoted)

    def to_fen(self) -> str:
        return f"{PROMOTION_MARKER}{self.letter}" if self.promoted else self.letter

    @property
    def role(self) -> str:
        """Same as the encoding: '+P' for a promoted first player pawn"""
        return self.to_fen()

    @property
    def is_first_player(self) -> bool:
        return self.letter.isupper()

    @property
    def kind(self) -> str:
        """Case-insensitive role ('+P' and '+p' are both '+P')"""
        return self.role.upper()
