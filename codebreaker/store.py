"""
In-memory store
Owns the one live game session: secret, guess history, win flag.
Nothing survives a restart.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import List, Optional

from .engine import ScoreResult, is_valid_code, is_win, parse_guess, score_guess
from .errors import GameAlreadyWonError, InvalidInputError, NoActiveGameError
from .random_client import generate_secret
from .types import Code, GameStatus, CODE_LENGTH

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = 'Welcome to Code Breaker! Click "New Game" to start.'
NEW_GAME_MESSAGE = f"New game started. Guess the {CODE_LENGTH}-digit code!"
WIN_MESSAGE = "Congratulations! You cracked the code!"


@dataclass
class GuessRecord:
    guess: Code
    score: ScoreResult
    message: str
    timestamp: float = field(default_factory=time)


@dataclass
class GameSession:
    secret: Code
    history: List[GuessRecord] = field(default_factory=list)
    won: bool = False
    message: str = NEW_GAME_MESSAGE
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

    @property
    def status(self) -> GameStatus:
        return "won" if self.won else "in_progress"


def feedback_message(score: ScoreResult) -> str:
    if score.exact_matches == CODE_LENGTH:
        return WIN_MESSAGE
    return f"Correct: {score.exact_matches}, Wrong Place: {score.partial_matches}"


class GameStore:
    def __init__(self) -> None:
        self._session: Optional[GameSession] = None
        self._lock = RLock()

    @property
    def status(self) -> GameStatus:
        with self._lock:
            if self._session is None:
                return "no_game"
            return self._session.status

    @property
    def message(self) -> str:
        with self._lock:
            if self._session is None:
                return WELCOME_MESSAGE
            return self._session.message

    def get(self) -> Optional[GameSession]:
        with self._lock:
            return self._session

    def new_game(self, secret: Optional[Code] = None) -> GameSession:
        """Start over with a fresh secret. Any previous game is discarded."""
        if secret is None:
            secret = generate_secret(CODE_LENGTH)
        if not is_valid_code(secret):
            raise InvalidInputError("Secret must be 4 digits between 0 and 9.")

        session = GameSession(secret=list(secret))
        with self._lock:
            self._session = session
        logger.info("New game started")
        return session

    def submit_guess(self, guess) -> GuessRecord:
        """
        Score one guess against the current secret.
        Validation happens before anything is touched, so a rejected guess
        leaves the session exactly as it was.
        """
        attempt = parse_guess(guess)

        with self._lock:
            session = self._session
            if session is None:
                raise NoActiveGameError()
            if session.won:
                raise GameAlreadyWonError()

            score = score_guess(session.secret, attempt)
            record = GuessRecord(
                guess=attempt,
                score=score,
                message=feedback_message(score),
            )

            session.history.append(record)
            session.won = is_win(session.secret, attempt)
            session.message = record.message
            session.updated_at = record.timestamp
            guesses_made = len(session.history)
            won = session.won

        logger.info(
            "Guess %d scored: exact=%d partial=%d",
            guesses_made, score.exact_matches, score.partial_matches,
        )
        if won:
            logger.info("Game won in %d guess(es)", guesses_made)
        return record
