"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

from .engine import format_code
from .store import GameSession, GameStore, GuessRecord


# 1. Player's guess
# Untyped: parse_guess is the only validator (lax int would turn true into 1).
class GuessRequest(BaseModel):
    guess: Any = Field(
        ..., description='The guess, either "0123" or [0, 1, 2, 3]. Exactly 4 digits between 0 and 9.'
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "0123"},
                {"guess": [0, 1, 2, 3]},
            ]
        }
    }


# 2. Feedback numbers for one guess
class HintsOut(BaseModel):
    correct_place: int = Field(..., description="Digits right in value and position")
    wrong_place: int = Field(..., description="Digits right in value but in another position")


# 3. One entry in the guess history
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The player's guess as a digit string")
    hints: HintsOut
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")


# 4. Overall state of the game; the secret is only revealed once cracked
class GameStateOut(BaseModel):
    status: Literal["no_game", "in_progress", "won"] = Field(..., description="Current state of the game")
    game_won: bool = Field(..., description="True once the code is cracked")
    message: str = Field(..., description="Latest message for the player")
    guesses: List[GuessEntryOut] = Field(default_factory=list, description="All guesses so far, oldest first")
    secret: Optional[str] = Field(None, description="The secret code (only revealed after a win)")


# 5. Envelope for every successful call
class GameResponse(BaseModel):
    success: bool = True
    game_state: GameStateOut


def to_guess_out(record: GuessRecord) -> GuessEntryOut:
    return GuessEntryOut(
        guess=format_code(record.guess),
        hints=HintsOut(
            correct_place=record.score.exact_matches,
            wrong_place=record.score.partial_matches,
        ),
        message=record.message,
        timestamp=record.timestamp,
    )


def to_game_state(store: GameStore) -> GameStateOut:
    session: Optional[GameSession] = store.get()
    if session is None:
        return GameStateOut(status="no_game", game_won=False, message=store.message)
    return GameStateOut(
        status=session.status,
        game_won=session.won,
        message=session.message,
        guesses=[to_guess_out(r) for r in session.history],
        secret=format_code(session.secret) if session.won else None,
    )
