"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.models import VariantDescriptor
from src.notation.variants import VARIANTS

BoardFenFn = Callable[[dict[int, str], str], str]


@pytest.fixture
def shogi() -> VariantDescriptor:
    return VARIANTS["shogi"]


@pytest.fixture
def xiangqi() -> VariantDescriptor:
    return VARIANTS["xiangqi"]


@pytest.fixture
def oware() -> VariantDescriptor:
    return VARIANTS["oware"]


@pytest.fixture
def flipello() -> VariantDescriptor:
    return VARIANTS["flipello"]


@pytest.fixture
def board_fen() -> Callable[[int, int], BoardFenFn]:
    """Call the returned function with the board dimensions, then with {rank: encoded rank} and the side to move.
    Ranks that are not given are empty."""

    def _for_board(files: int, ranks: int) -> BoardFenFn:
        def _create_fen(rows: dict[int, str], side_to_move: str) -> str:
            encoded = [rows.get(rank, str(files)) for rank in range(1, ranks + 1)]
            return f"{'/'.join(encoded)} {side_to_move}"

        return _create_fen

    return _for_board
