"""Unit tests for /src/notation/variants.py"""

import pytest

from src.core.exceptions import UnknownVariantError, UnsupportedNotationStyleError
from src.core.shared_types import NotationStyle
from src.notation.variants import VARIANTS, get_variant


@pytest.mark.parametrize(
    "key, width, height, style",
    [
        ("shogi", 9, 9, NotationStyle.USI),
        ("minishogi", 5, 5, NotationStyle.USI),
        ("xiangqi", 9, 10, NotationStyle.WXF),
        ("oware", 6, 2, NotationStyle.MANCALA),
        ("flipello", 8, 8, NotationStyle.DESTINATION_ONLY),
        ("chess", 8, 8, NotationStyle.SAN),
    ],
)
def test_known_variants(key: str, width: int, height: int, style: NotationStyle) -> None:
    variant = get_variant(key)
    assert (variant.width, variant.height, variant.notation_style) == (width, height, style)


def test_every_style_is_used() -> None:
    assert {variant.notation_style for variant in VARIANTS.values()} == set(NotationStyle)


def test_unknown_variant_is_a_configuration_error() -> None:
    with pytest.raises(UnknownVariantError):
        get_variant("go")
    with pytest.raises(UnsupportedNotationStyleError):
        get_variant("go")
