"""
Shogi family notation (Western/USI flavoured):

<piece><origin if ambiguous><connector><destination><promotion>

* piece: upper case letter, '+' prefix for an already promoted piece (+R = dragon)
* connector: 'x' capture, '*' drop, '-' otherwise
* promotion: '+' promotes, '=' declines promotion inside the zone, empty otherwise

ex) "P-7f", "S4hx3g", "B*5e", "N-2c=", "P-3c+"
"""

from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.core.shared_types import MoveKind
from src.notation.classifier import PROMOTED, classify, promotion_symbol
from src.notation.disambiguation import is_ambiguous
from src.notation.moves import ParsedMove
from src.notation.pieces import PROMOTION_MARKER
from src.notation.position import Position

CONNECTORS: dict[MoveKind, str] = {
    MoveKind.CAPTURE: "x",
    MoveKind.DROP: "*",
    MoveKind.MOVE: "-",
}


def shogi_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    if move.prev_fen is None:
        raise MalformedMoveError(f"Shogi notation of {move.uci!r} needs the position before the move")

    parsed = ParsedMove.from_uci(move.uci, variant.width, variant.height)
    board = Position.from_fen(move.fen, variant.width, variant.height)
    prev_board = Position.from_fen(move.prev_fen, variant.width, variant.height)

    piece = board.piece(parsed.dest)
    if piece is None:
        raise MalformedMoveError(f"No piece on the destination square of {move.uci!r}")

    kind = classify(prev_board, board)
    moving_piece = prev_board.piece(parsed.orig) if parsed.orig is not None else None
    origin = (
        parsed.orig.to_usi()
        if kind != MoveKind.DROP
        and parsed.orig is not None
        and moving_piece is not None
        and is_ambiguous(board, parsed.dest, moving_piece)
        else ""
    )
    promotion = promotion_symbol(prev_board, board, parsed)

    # a piece that promotes on this move is written with its unpromoted letter, the suffix says the rest
    symbol = piece.letter.upper()
    if piece.promoted and promotion != PROMOTED:
        symbol = f"{PROMOTION_MARKER}{symbol}"

    return f"{symbol}{origin}{CONNECTORS[kind]}{parsed.dest.to_usi()}{promotion}"
