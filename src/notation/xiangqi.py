"""
Xiangqi family notation (WXF):

<piece><file><direction><movement>

* files are counted from the right-hand side of the player who moved, so both players see file 1 on their right
* direction: '+' advances towards the opponent, '-' retreats, '=' stays on the same rank
* movement: the number of ranks travelled for straight moves, the destination file for sideways
  and diagonal moves (horse, elephant, advisor)

ex) "C2=5", "H8+7", "R1-2", "E3+5"

Pawns sharing a file with pawns of the same side are told apart:
* two pawns: '+' (front) or '-' (rear) is written between piece and direction, the file is dropped ("P+=4")
* three or more: the piece letter is replaced by the pawn's ordinal, counted from the rear ("33+1")
"""

from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.notation.moves import ParsedMove
from src.notation.pieces import Piece
from src.notation.position import Position
from src.notation.square import Square

ADVANCE = "+"
RETREAT = "-"
SIDEWAYS = "="
FRONT = "+"
REAR = "-"

PAWN = "P"
# the letters used in the encoding are shared with chess, WXF uses its own names for these two
DISPLAY_LETTERS: dict[str, str] = {
    "N": "H",  # horse
    "B": "E",  # elephant
}


def display_letter(piece: Piece) -> str:
    letter = piece.letter.upper()
    return DISPLAY_LETTERS.get(letter, letter)


def xiangqi_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    parsed = ParsedMove.from_uci(move.uci, variant.width, variant.height)
    if parsed.orig is None:
        raise MalformedMoveError(f"Xiangqi has no drops: {move.uci!r}")

    board = Position.from_fen(move.fen, variant.width, variant.height)
    piece = board.piece(parsed.dest)
    if piece is None:
        raise MalformedMoveError(f"No piece on the destination square of {move.uci!r}")

    first_player = board.first_player_moved
    prev_file = _player_file(parsed.orig.file, first_player, variant.width)
    new_file = _player_file(parsed.dest.file, first_player, variant.width)
    prev_rank = parsed.orig.rank
    new_rank = parsed.dest.rank

    if new_rank == prev_rank:
        direction = SIDEWAYS
    elif (new_rank < prev_rank) == first_player:
        # the first player advances towards rank 1, the second player towards the last rank
        direction = ADVANCE
    else:
        direction = RETREAT

    is_diagonal_move = new_rank != prev_rank and new_file != prev_file
    movement = new_file if direction == SIDEWAYS or is_diagonal_move else abs(new_rank - prev_rank)
    letter = display_letter(piece)

    if piece.letter.upper() == PAWN:
        pawn_ranks = friendly_pawn_ranks(
            board,
            parsed.orig.file,
            Piece(PAWN if first_player else PAWN.lower()),
            moved_sideways=prev_file != new_file,
            orig_rank=prev_rank,
            new_rank=new_rank,
        )
        index = pawn_ranks.index(prev_rank) if prev_rank in pawn_ranks else -1
        if index >= 0 and len(pawn_ranks) == 2:
            # index 0 is the pawn closest to rank 1, which is the front pawn for the first player only
            is_front = (index == 0) == first_player
            return f"{letter}{FRONT if is_front else REAR}{direction}{movement}"
        if index >= 0 and len(pawn_ranks) > 2:
            # counted from the mover's own back rank: index 0 is the top of the board
            ordinal = len(pawn_ranks) - index if first_player else index + 1
            return f"{ordinal}{prev_file}{direction}{movement}"

    return f"{letter}{prev_file}{direction}{movement}"


def _player_file(file: int, first_player: bool, width: int) -> int:
    """Files are already counted from the first player's right. Mirror them for the second player."""
    return file if first_player else width + 1 - file


def friendly_pawn_ranks(
    board: Position,
    file: int,
    pawn: Piece,
    moved_sideways: bool,
    orig_rank: int,
    new_rank: int,
) -> list[int]:
    """
    Ranks (sorted from the top of the board) of the mover's pawns on the file the moving pawn started on,
    as they stood BEFORE the move. The board is the position after the move, so the moving pawn is put back:
    * moved sideways: it left the file, add it on its original rank
    * moved along the file: it stands on `new_rank`, record it as `orig_rank`
    """
    pawn_ranks: list[int] = []
    for rank in range(1, board.ranks + 1):
        if moved_sideways and rank == orig_rank:
            pawn_ranks.append(orig_rank)
        if board.piece(Square(file, rank)) == pawn:
            if not moved_sideways and rank == new_rank:
                pawn_ranks.append(orig_rank)
            else:
                pawn_ranks.append(rank)
    return pawn_ranks
