"""
Snapshot of the pieces on the board, decoded from the board part of a FEN-like encoding.

The same encoding is shared by every variant family:

<rank>/<rank>/.../<rank>[<pocket>] <side to move> ...

* ranks are listed from the top of the board downwards
* inside a rank, the first character describes the leftmost file
* a number is the amount of consecutive empty squares (may be more than one digit on large boards)
* '+' promotes the piece that follows it, '~' is a marker some variants emit and carries no information here
* any letter is a piece: upper case for the first player, lower case for the second player
* everything after '[' is the pool of pieces in hand, which is not part of the board

ex) minishogi starting position
rbsgk/4p/5/P4/KGSBR[-] w 0 1
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Self

from src.notation.pieces import PROMOTION_MARKER, Piece
from src.notation.square import Square

logger = logging.getLogger(__name__)

RANK_SEPARATOR = "/"
POCKET_DELIMITER = "["
IGNORED_MARKER = "~"
_TOKEN = re.compile(r"\d+|.")


@dataclass(frozen=True)
class Position:
    """Immutable snapshot. Not hashable: the pieces are kept in a plain dict."""

    pieces: dict[Square, Piece]
    first_player_moved: bool
    files: int
    ranks: int
    # number of occupied squares, the only thing the diff classifier needs
    piece_count: int = field(init=False)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "piece_count", len(self.pieces))

    @classmethod
    def from_fen(cls, fen: str, files: int, ranks: int) -> Self:
        """
        Best-effort decoding: malformed ranks never raise, squares that cannot be read are treated as empty.
        Only the first `ranks` ranks are read.
        """
        parts = fen.split(" ")
        # side to move is given AFTER the move, so "b" means the first player just moved
        first_player_moved = len(parts) > 1 and parts[1] == "b"

        board_fen = parts[0].split(POCKET_DELIMITER)[0]
        pieces: dict[Square, Piece] = {}
        for rank_idx, rank_fen in enumerate(board_fen.split(RANK_SEPARATOR)[:ranks]):
            rank = rank_idx + 1
            file = files
            promoted = False
            for token in _TOKEN.findall(rank_fen):
                if token.isdecimal():
                    file -= int(token)
                elif token == PROMOTION_MARKER:
                    promoted = True
                elif token == IGNORED_MARKER:
                    continue
                elif token.isalpha():
                    square = Square(file, rank)
                    if square.is_within_bounds(files, ranks):
                        pieces[square] = Piece.from_fen(token, promoted)
                    else:
                        logger.debug("Dropping piece %r beyond the edge of rank %d in %r", token, rank, fen)
                    file -= 1
                    promoted = False
                else:
                    logger.debug("Skipping unknown token %r in %r", token, fen)

        return cls(pieces, first_player_moved, files, ranks)

    def to_fen(self) -> str:
        """Board part + side to move. Reverse operation of `from_fen` (the pocket and counters are not kept)."""
        board_fen = RANK_SEPARATOR.join(
            self._rank_to_fen(rank) for rank in range(1, self.ranks + 1)
        )
        side_to_move = "b" if self.first_player_moved else "w"
        return f"{board_fen} {side_to_move}"

    def _rank_to_fen(self, rank: int) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(self.files, 0, -1):
            piece = self.piece(Square(file, rank))
            if piece is None:
                empty_count += 1
                continue

            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.pieces.get(square)

    def locate(self, piece: Piece) -> list[Square]:
        return [square for square, other in self.pieces.items() if other == piece]


def decode(encoding: str, ranks: int, files: int) -> Position:
    return Position.from_fen(encoding, files, ranks)


def encode(position: Position) -> str:
    return position.to_fen()
