"""Errors raised across layers"""


class NotationError(Exception):
    """Base class for everything the notation engine raises."""


class MalformedMoveError(NotationError):
    """The coordinate move cannot be interpreted on the given board (missing tokens, square off the board)."""


class UnsupportedNotationStyleError(NotationError):
    """Configuration error: no notation generator is registered for the requested style."""


class UnknownVariantError(UnsupportedNotationStyleError):
    """Configuration error: the variant key is not in the registry."""


class InvalidRequestError(NotationError):
    """Raised by the request models when the incoming data is structurally invalid."""
