"""Custom exceptions shared across layers.

Illegal moves are never exceptions: the rules engine answers those with `False`.
The errors below signal malformed input or a broken precondition.
"""


class ChessSimError(Exception):
    """Base class for all errors raised by the simulator."""


class OutOfBoundsError(ChessSimError):
    """A location outside of the board was accessed."""


class MissingKingError(ChessSimError):
    """Check / checkmate evaluation requires a king of the given color on the board."""


class InvalidFENError(ChessSimError):
    """The supplied string is not a valid FEN piece placement."""


class InvalidRequestError(ChessSimError):
    """A request at the boundary could not be interpreted.

    NOTE: not a ValueError on purpose, so pydantic lets it propagate as-is instead of wrapping it in a ValidationError.
    """


class RepositoryError(ChessSimError):
    """Record could not be found / stored."""
