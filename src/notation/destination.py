"""
Disc placement games (othello-like): only the square a disc was placed on is written.

The display convention puts rank 1 at the top of the board for the first player,
so the rank of the coordinate move is flipped.
"""

from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.notation.moves import coordinate_tokens, is_drop

PASS = "PASS"


def destination_only_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    # every placement is encoded as a drop, anything else is a pass
    if not is_drop(move.uci):
        return PASS

    tokens = coordinate_tokens(move.uci)
    if len(tokens) < 2:
        raise MalformedMoveError(f"Cannot find a destination in move {move.uci!r}")

    dest = tokens[1]
    if not dest[1:].isdigit():
        raise MalformedMoveError(f"Cannot find a destination in move {move.uci!r}")
    rank = int(dest[1:])
    if not 1 <= rank <= variant.height:
        raise MalformedMoveError(f"Rank of {dest!r} is not on a board with {variant.height} ranks")
    return f"{dest[0]}{variant.height + 1 - rank}"
