"""
Parsing of the coordinate move string ("uci") into squares of the numeric board frame.

examples:
* "c3c4": the piece on c3 moves to c4
* "a10a9": ranks can be two digits on boards with ten ranks
* "P@e5": a pawn is dropped on e5. There is no origin square.
"""

import re
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import MalformedMoveError
from src.notation.square import Square

DROP_MARKER = "@"
_COORDINATE_TOKEN = re.compile(rf"[a-zA-Z][1-9{DROP_MARKER}]0?")


def coordinate_tokens(uci: str) -> list[str]:
    """Split the move string into its square tokens ('a10a9' -> ['a10', 'a9'])"""
    return _COORDINATE_TOKEN.findall(uci)


def is_drop(uci: str) -> bool:
    return DROP_MARKER in uci


@dataclass(frozen=True)
class ParsedMove:
    orig: Optional[Square]
    dest: Square
    dropped_letter: Optional[str] = None

    @classmethod
    def from_uci(cls, uci: str, files: int, ranks: int) -> Self:
        tokens = coordinate_tokens(uci)
        if len(tokens) < 2:
            raise MalformedMoveError(f"Cannot find an origin and destination in move {uci!r}")

        orig_token, dest_token = tokens[0], tokens[1]
        dest = _to_square(dest_token, files, ranks, uci)
        if orig_token.endswith(DROP_MARKER):
            return cls(orig=None, dest=dest, dropped_letter=orig_token[0])
        return cls(orig=_to_square(orig_token, files, ranks, uci), dest=dest)

    @property
    def is_drop(self) -> bool:
        return self.orig is None


def _to_square(token: str, files: int, ranks: int, uci: str) -> Square:
    if DROP_MARKER in token:
        raise MalformedMoveError(f"Drop marker can only replace the origin square in move {uci!r}")
    square = Square.from_coordinate(token, files, ranks)
    if not square.is_within_bounds(files, ranks):
        raise MalformedMoveError(
            f"Square {token!r} of move {uci!r} is not on a {files}x{ranks} board"
        )
    return square


def normalize(uci: str, files: int, ranks: int) -> tuple[Optional[Square], Square]:
    """Origin (None for a drop) and destination of the move, in the numeric frame."""
    parsed = ParsedMove.from_uci(uci, files, ranks)
    return parsed.orig, parsed.dest
