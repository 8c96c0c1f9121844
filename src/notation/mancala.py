"""
Sowing games (oware family): the move is the pit the stones were taken from, followed by the number of stones
captured by the move.

Pits are lettered anti-clockwise: the first player's row (bottom) is A, B, C... from left to right,
the second player's row (top) continues with lower case letters from right to left, so that the letters
of pits that face each other mirror across the board.

ex) on a 6 pit board, "C + 4" sowed from the first player's third pit and captured four stones.

The captured stone counters are stored in the encoding, one character per player after the board:
<board> <first player score> <second player score> <side to move> ...
'0' is zero, 'A'-'Z' are 1-26, 'a'-'z' are 27-52.
"""

import re

from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor

FIRST_PLAYER = 1
SECOND_PLAYER = 2
BOTTOM_ROW = "1"
_PIT_TOKEN = re.compile(r"[a-z][1-2]")


def pit_letter(token: str, width: int) -> str:
    """'a1' -> 'A' ... 'f1' -> 'F', 'f2' -> 'a' ... 'a2' -> 'f' (on a 6 pit board)"""
    file_letter, row = token[0], token[1]
    if row == BOTTOM_ROW:
        return file_letter.upper()
    return chr(ord("a") + width - 1 - (ord(file_letter) - ord("a")))


def captured_stones(fen: str, player: int) -> int:
    """Decode the single character score field of a player. A missing field counts as zero."""
    parts = fen.split(" ")
    if len(parts) <= player or not parts[player]:
        return 0

    code = ord(parts[player][0])
    if code == ord("0"):
        return 0
    # upper case letters come first: 'A' = 1 ... 'Z' = 26, then 'a' = 27 ... 'z' = 52
    return code - 70 if code > ord("Z") else code - 64


def total_captured_stones(fen: str) -> int:
    return captured_stones(fen, FIRST_PLAYER) + captured_stones(fen, SECOND_PLAYER)


def mancala_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    tokens = _PIT_TOKEN.findall(move.uci)
    if not tokens:
        raise MalformedMoveError(f"Cannot find the pit that was sowed in move {move.uci!r}")
    if move.prev_fen is None:
        raise MalformedMoveError(f"Mancala notation of {move.uci!r} needs the position before the move")

    if ord(tokens[0][0]) - ord("a") >= variant.width:
        raise MalformedMoveError(f"Pit {tokens[0]!r} is not on a board with {variant.width} pits per row")

    pit = pit_letter(tokens[0], variant.width)
    score_difference = total_captured_stones(move.fen) - total_captured_stones(move.prev_fen)
    if score_difference <= 0:
        return pit
    return f"{pit} + {score_difference}"
