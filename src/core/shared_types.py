"""
Type definitions used across layers
"""

from enum import StrEnum


class NotationStyle(StrEnum):
    """Identifiers of the supported move-notation families."""

    SAN = "san"  # chess-like algebraic, pawn letter stripped
    UCI = "uci"  # raw coordinate move
    USI = "usi"  # shogi family
    WXF = "wxf"  # xiangqi family
    MANCALA = "man"  # sowing games
    DESTINATION_ONLY = "dpo"  # disc placement games (othello-like)


class MoveKind(StrEnum):
    MOVE = "move"
    CAPTURE = "capture"
    DROP = "drop"
