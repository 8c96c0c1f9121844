"""Unit tests for /src/notation/dispatch.py"""

from unittest.mock import Mock, patch

import pytest

from src.core.exceptions import UnsupportedNotationStyleError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.core.shared_types import NotationStyle
from src.notation.algebraic import san_notation
from src.notation.dispatch import NOTATION_RULES, notation_for_style
from src.notation.shogi import shogi_notation
from src.notation.xiangqi import xiangqi_notation


@pytest.mark.parametrize("style", list(NotationStyle))
def test_every_style_has_a_generator(style: NotationStyle) -> None:
    assert notation_for_style(style) is NOTATION_RULES[style]


@pytest.mark.parametrize(
    "style, generator",
    [("usi", shogi_notation), ("wxf", xiangqi_notation), ("san", san_notation)],
)
def test_string_identifiers(style: str, generator: object) -> None:
    assert notation_for_style(style) is generator


@pytest.mark.parametrize("style", ["kif", "", "USI"])
def test_unknown_style(style: str) -> None:
    with pytest.raises(UnsupportedNotationStyleError):
        notation_for_style(style)


def test_resolved_generator_is_called_directly() -> None:
    """The table is read once, when resolving: swapping the table afterwards does not change the generator"""
    mock_generator = Mock(return_value="G-5d")
    variant = VariantDescriptor(9, 9, NotationStyle.USI)
    move = MoveDescriptor(san="", uci="e5e6", fen="", prev_fen="")
    with patch.dict("src.notation.dispatch.NOTATION_RULES", {NotationStyle.USI: mock_generator}):
        notation = notation_for_style(variant.notation_style)
    assert notation(move, variant) == "G-5d"
    mock_generator.assert_called_once_with(move, variant)


def test_unregistered_style() -> None:
    with patch.dict("src.notation.dispatch.NOTATION_RULES", {}, clear=True):
        with pytest.raises(UnsupportedNotationStyleError):
            notation_for_style(NotationStyle.USI)
