"""
Classify a ply by comparing the positions before and after it.

There is no replay of the move: the classification only looks at the number of pieces on the board.
That is enough because the two positions are always exactly one ply apart.
"""

from src.core.shared_types import MoveKind
from src.notation.moves import ParsedMove
from src.notation.position import Position

# '+' promoted, '=' could have promoted but did not, '' nothing to report
PROMOTED = "+"
DECLINED_PROMOTION = "="
NO_PROMOTION = ""

# Royal and gold-equivalent pieces never promote
UNPROMOTABLE_LETTERS = frozenset({"K", "G"})


def classify(before: Position, after: Position) -> MoveKind:
    difference = after.piece_count - before.piece_count
    if difference == 1:
        return MoveKind.DROP
    if difference == -1:
        return MoveKind.CAPTURE
    return MoveKind.MOVE


def promotion_zone_depth(ranks: int) -> int:
    """3 ranks on a 9x9 board, the last rank only on a 5x5 board"""
    return max(ranks // 3, 1)


def in_promotion_zone(rank: int, first_player: bool, ranks: int) -> bool:
    """The first player moves up the board (towards rank 1), so their zone is at the top."""
    depth = promotion_zone_depth(ranks)
    if first_player:
        return rank <= depth
    return rank > ranks - depth


def promotion_symbol(before: Position, after: Position, move: ParsedMove) -> str:
    if classify(before, after) == MoveKind.DROP or move.orig is None:
        return NO_PROMOTION

    previous_piece = before.piece(move.orig)
    current_piece = after.piece(move.dest)
    if previous_piece is None or current_piece is None:
        return NO_PROMOTION

    if previous_piece != current_piece:
        return PROMOTED

    if previous_piece.promoted:
        return NO_PROMOTION

    if current_piece.letter.upper() not in UNPROMOTABLE_LETTERS and in_promotion_zone(
        move.dest.rank, after.first_player_moved, after.ranks
    ):
        return DECLINED_PROMOTION
    return NO_PROMOTION
