"""
Boundary layer data model(s).

These objects are handed to the notation generators by the Service.
They carry raw strings only: decoding into squares and positions is the job of the domain layer (src/notation).
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import NotationStyle


@dataclass(frozen=True)
class MoveDescriptor:
    """One ply as recorded by the move generator upstream.

    * san: algebraic notation of the move (only meaningful for chess-like variants)
    * uci: coordinate move, e.g. "c3c4", "P@e5", "a1a1"
    * fen: board encoding after the move
    * prev_fen: board encoding before the move. Required by the shogi and mancala styles.
    """

    san: str
    uci: str
    fen: str
    prev_fen: Optional[str] = None


@dataclass(frozen=True)
class VariantDescriptor:
    """Read-only board geometry + notation family of a variant"""

    width: int
    height: int
    notation_style: NotationStyle
