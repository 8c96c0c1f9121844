"""Board geometry and notation family of the variants the engine knows about"""

from src.core.exceptions import UnknownVariantError
from src.core.models import VariantDescriptor
from src.core.shared_types import NotationStyle

VARIANTS: dict[str, VariantDescriptor] = {
    "chess": VariantDescriptor(8, 8, NotationStyle.SAN),
    "crazyhouse": VariantDescriptor(8, 8, NotationStyle.SAN),
    "shogi": VariantDescriptor(9, 9, NotationStyle.USI),
    "minishogi": VariantDescriptor(5, 5, NotationStyle.USI),
    "xiangqi": VariantDescriptor(9, 10, NotationStyle.WXF),
    "minixiangqi": VariantDescriptor(7, 7, NotationStyle.WXF),
    "oware": VariantDescriptor(6, 2, NotationStyle.MANCALA),
    "flipello": VariantDescriptor(8, 8, NotationStyle.DESTINATION_ONLY),
    "flipello10": VariantDescriptor(10, 10, NotationStyle.DESTINATION_ONLY),
    "amazons": VariantDescriptor(10, 10, NotationStyle.UCI),
}


def get_variant(key: str) -> VariantDescriptor:
    try:
        return VARIANTS[key]
    except KeyError as e:
        raise UnknownVariantError(
            f"Unknown variant: {key!r}. \nPick one from {','.join(VARIANTS)}"
        ) from e
