"""Orchestration of communication from the request models to the notation generators (and the reverse direction)."""

import logging
from typing import Self

from src.api.models import (
    GameNotationRequest,
    GameNotationResponse,
    MoveNotationRequest,
    MoveNotationResponse,
)
from src.core.config import Settings
from src.core.exceptions import MalformedMoveError
from src.core.models import MoveDescriptor, VariantDescriptor
from src.notation.dispatch import NotationFn, notation_for_style
from src.notation.variants import get_variant

logger = logging.getLogger(__name__)


class NotationService:
    """Writes moves of a single variant in that variant's notation."""

    def __init__(self, variant: VariantDescriptor) -> None:
        self.variant = variant
        # resolved once: an unsupported style is a configuration error, raised here
        self._notation: NotationFn = notation_for_style(variant.notation_style)

    @classmethod
    def for_variant(cls, key: str) -> Self:
        return cls(get_variant(key))

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls.for_variant(settings.default_variant)

    # -- request logic ---
    def move_notation(self, request: MoveNotationRequest) -> MoveNotationResponse:
        """Notation of a single move. The caller supplies the position before the move itself."""
        return self._notate(request.to_descriptor())

    def game_notation(self, request: GameNotationRequest) -> GameNotationResponse:
        """
        Notation of a whole game record.
        ----
        The position before each move is the position after the previous one (the initial position for the first move).
        """
        responses: list[MoveNotationResponse] = []
        prev_fen = request.initial_fen
        for recorded in request.moves:
            descriptor = MoveDescriptor(
                san=recorded.san, uci=recorded.uci, fen=recorded.fen, prev_fen=prev_fen
            )
            responses.append(self._notate(descriptor))
            prev_fen = recorded.fen
        return GameNotationResponse(moves=responses)

    # -- Internal helpers --
    def _notate(self, move: MoveDescriptor) -> MoveNotationResponse:
        """Anything is better than nothing for display: fall back to the coordinate move if it cannot be read."""
        try:
            notation = self._notation(move, self.variant)
        except MalformedMoveError as e:
            logger.warning("Falling back to coordinate move %r: %s", move.uci, e)
            return MoveNotationResponse(notation=move.uci, uci=move.uci, is_fallback=True)
        return MoveNotationResponse(notation=notation, uci=move.uci)
