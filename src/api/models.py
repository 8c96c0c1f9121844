"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import MoveDescriptor


def _require_text(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise InvalidRequestError(f"{field_name} cannot be empty.")
    return value


# --- REQUEST MODELS ---
class RecordedMove(BaseModel):
    """One ply of a game record: the move in both notations + the board encoding after it"""

    san: str = ""
    uci: str
    fen: str

    @field_validator("uci")
    @classmethod
    def validate_uci(cls, value: str) -> str:
        return _require_text(value, "uci")

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        return _require_text(value, "fen")


class MoveNotationRequest(RecordedMove):
    prev_fen: Optional[str] = None

    @field_validator("prev_fen")
    @classmethod
    def validate_prev_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _require_text(value, "prev_fen")

    def to_descriptor(self) -> MoveDescriptor:
        return MoveDescriptor(
            san=self.san, uci=self.uci, fen=self.fen, prev_fen=self.prev_fen
        )


class GameNotationRequest(BaseModel):
    initial_fen: str
    moves: list[RecordedMove]

    @field_validator("initial_fen")
    @classmethod
    def validate_initial_fen(cls, value: str) -> str:
        return _require_text(value, "initial_fen")


# --- RESPONSE MODELS ---
class MoveNotationResponse(BaseModel):
    notation: str
    uci: str
    is_fallback: bool = False


class GameNotationResponse(BaseModel):
    moves: list[MoveNotationResponse]
