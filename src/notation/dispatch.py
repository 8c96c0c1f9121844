"""
Dispatch table: one notation generator per notation style.

The style is resolved once, when the caller is configured, so an unknown style fails at startup
instead of on every move.
"""

import logging
from typing import Callable

from src.core.exceptions import UnsupportedNotationStyleError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.core.shared_types import NotationStyle
from src.notation.algebraic import san_notation, uci_notation
from src.notation.destination import destination_only_notation
from src.notation.mancala import mancala_notation
from src.notation.shogi import shogi_notation
from src.notation.xiangqi import xiangqi_notation

logger = logging.getLogger(__name__)

# -- STRATEGY PATTERN: NOTATION GENERATORS ---
NotationFn = Callable[[MoveDescriptor, VariantDescriptor], str]
NOTATION_RULES: dict[NotationStyle, NotationFn] = {
    NotationStyle.SAN: san_notation,
    NotationStyle.UCI: uci_notation,
    NotationStyle.USI: shogi_notation,
    NotationStyle.WXF: xiangqi_notation,
    NotationStyle.MANCALA: mancala_notation,
    NotationStyle.DESTINATION_ONLY: destination_only_notation,
}


def notation_for_style(style: NotationStyle | str) -> NotationFn:
    """Look up the generator of a style. Accepts the enum or its string identifier ('usi', 'wxf', ...)."""
    try:
        notation_style = NotationStyle(style)
    except ValueError as e:
        raise UnsupportedNotationStyleError(
            f"Unknown notation style: {style!r}. \nPick one from {','.join(s.value for s in NotationStyle)}"
        ) from e

    if notation_style not in NOTATION_RULES:
        raise UnsupportedNotationStyleError(f"No generator registered for {notation_style!r}")

    notation_fn = NOTATION_RULES[notation_style]
    logger.debug("Resolved notation style %s to %r", notation_style, notation_fn)
    return notation_fn
