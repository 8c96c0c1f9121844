"""
A square on the board, in the numeric frame every notation generator works in.

(placed in its own module as multiple other modules need to import it)

The frame is the one shogi players use: files are counted from the right-hand side of the board
(as seen by the first player) and ranks from the top. So on a 9x9 board the top-left square is (9, 1)
and the bottom-right square is (1, 9). Any board size is supported, the dimensions are passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_coordinate(cls, token: str, files: int, ranks: int) -> Square:
        """
        Coordinate token: 'a1' - 'i10'.
        The a-file is the leftmost file, so it maps to the highest file number,
        rank 1 is the bottom rank, so it maps to the highest rank number.
        """
        file = files - (ord(token[0]) - ord("a"))
        rank = ranks + 1 - int(token[1:])
        return cls(file, rank)

    def to_coordinate(self, files: int, ranks: int) -> str:
        """Reverse of `from_coordinate`"""
        return f"{ascii_lowercase[files - self.file]}{ranks + 1 - self.rank}"

    def to_usi(self) -> str:
        """USI style: file digit(s) followed by a letter for the rank ('5e')"""
        return f"{self.file}{ascii_lowercase[self.rank - 1]}"

    def to_numeric(self) -> str:
        return f"{self.file}{self.rank}"

    def is_within_bounds(self, files: int, ranks: int) -> bool:
        return (1 <= self.file <= files) and (1 <= self.rank <= ranks)

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)
