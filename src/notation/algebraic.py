"""Chess-like variants: the notation is already computed upstream, only cosmetics are applied here."""

from src.core.models import MoveDescriptor, VariantDescriptor

PAWN_LETTER = "P"


def san_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    """Pawn moves are written without a piece letter ('Pe4' -> 'e4')"""
    if move.san.startswith(PAWN_LETTER):
        return move.san[1:]
    return move.san


def uci_notation(move: MoveDescriptor, variant: VariantDescriptor) -> str:
    return move.uci
