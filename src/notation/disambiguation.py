"""
Reverse movement rules: from which squares could a piece of a given type have reached a destination in one step?

Key idea: same strategy pattern as forward move generation, one rule per piece type, but run backwards
from the destination square. The rules are purely geometric:
pins, pieces blocking a slider and checks are NOT taken into account.
The result is only used to decide whether the origin square has to be printed.

The deltas below are written for the first player, who moves towards rank 1 (the top of the board).
For the second player the rank component is mirrored.
"""

from typing import Callable

from src.notation.pieces import Piece
from src.notation.position import Position
from src.notation.square import Square

Vector = tuple[int, int]

KNIGHT_SOURCES: list[Vector] = [(1, 2), (-1, 2)]
SILVER_SOURCES: list[Vector] = [(-1, 1), (0, 1), (1, 1), (-1, -1), (1, -1)]
GOLD_SOURCES: list[Vector] = [(-1, 1), (0, 1), (1, 1), (-1, 0), (1, 0), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
ORTHOGONALS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def step_sources(dest: Square, piece: Piece, deltas: list[Vector]) -> list[Square]:
    """Single step pieces. Deltas are oriented according to the side the piece belongs to."""
    orientation = 1 if piece.is_first_player else -1
    return [dest.offset(df, dr * orientation) for df, dr in deltas]


def ray_sources(dest: Square, directions: list[Vector], reach: int) -> list[Square]:
    """Sliding pieces: every square along each direction, up to the size of the board"""
    return [
        dest.offset(df * distance, dr * distance)
        for distance in range(1, reach + 1)
        for df, dr in directions
    ]


def knight_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    return step_sources(dest, piece, KNIGHT_SOURCES)


def silver_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    return step_sources(dest, piece, SILVER_SOURCES)


def gold_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    """Gold general and everything that moves like one once promoted (tokin, narikyo, narikei, narigin)"""
    return step_sources(dest, piece, GOLD_SOURCES)


def bishop_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    return ray_sources(dest, DIAGONALS, reach)


def rook_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    return ray_sources(dest, ORTHOGONALS, reach)


def horse_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    """Promoted bishop: diagonal slider that also steps one square orthogonally"""
    return ray_sources(dest, DIAGONALS, reach) + ray_sources(dest, ORTHOGONALS, 1)


def dragon_sources(dest: Square, piece: Piece, reach: int) -> list[Square]:
    """Promoted rook: orthogonal slider that also steps one square diagonally"""
    return ray_sources(dest, ORTHOGONALS, reach) + ray_sources(dest, DIAGONALS, 1)


# -- STRATEGY PATTERN: REVERSE MOVEMENT RULES ---
# Kings, pawns and lances are missing on purpose: they never need an origin square.
SourceSquaresFn = Callable[[Square, Piece, int], list[Square]]
REVERSE_MOVEMENT_RULES: dict[str, SourceSquaresFn] = {
    "N": knight_sources,
    "S": silver_sources,
    "G": gold_sources,
    "+P": gold_sources,
    "+L": gold_sources,
    "+N": gold_sources,
    "+S": gold_sources,
    "B": bishop_sources,
    "R": rook_sources,
    "+B": horse_sources,
    "+R": dragon_sources,
}


def previous_locations(piece: Piece, dest: Square, files: int, ranks: int) -> list[Square]:
    """All on-board squares a piece of this type could have come from to reach `dest`"""
    rule = REVERSE_MOVEMENT_RULES.get(piece.kind)
    if rule is None:
        return []
    reach = max(files, ranks) - 1
    return [
        square for square in rule(dest, piece, reach) if square.is_within_bounds(files, ranks)
    ]


def is_ambiguous(after: Position, dest: Square, moving_piece: Piece) -> bool:
    """
    True if, after the move, another piece of exactly the same type stands on a square from which it could
    also have reached `dest`. The moving piece itself has left its origin square, so it never counts.
    """
    return any(
        after.piece(square) == moving_piece
        for square in previous_locations(moving_piece, dest, after.files, after.ranks)
    )
