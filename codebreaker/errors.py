"""
Error kinds raised by the game core.
The API layer turns these into HTTP responses; the core never talks HTTP.
"""


class CodebreakerError(Exception):
    """Base class for every game error."""

    default_message = "Code Breaker error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidGuessError(CodebreakerError, ValueError):
    default_message = "Invalid guess. Please enter a 4-digit number."


class NoActiveGameError(CodebreakerError):
    default_message = "No game in progress. Start a new game first."


class GameAlreadyWonError(CodebreakerError):
    default_message = "Game already won! Start a new game."


class InvalidInputError(CodebreakerError, ValueError):
    """Scorer called with something that is not a pair of 4-digit codes."""

    default_message = "Secret and guess must both be 4 digits between 0 and 9."
