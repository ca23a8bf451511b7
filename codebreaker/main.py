'''
Code Breaker API

Endpoints:
POST /api/new_game   -> start a new game (discards the current one)
POST /api/guess      -> submit a 4-digit guess
GET  /api/game       -> read state & history

Any other path answers 404: this is an API server, no frontend.
The game lives in one in-memory GameStore; a restart forgets it.
'''

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .errors import CodebreakerError, InvalidInputError
from .random_client import generate_secret
from .schemas import GameResponse, GuessRequest, to_game_state
from .store import GameStore

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Code Breaker API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The single game this process serves. Routes reach it through get_store so
# tests (or a future multi-session setup) can swap in their own instance.
_store = GameStore()


def get_store() -> GameStore:
    return _store


# Failures use the same envelope as successes: {"success": false, "message": ...}
@app.exception_handler(StarletteHTTPException)
def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ---------------- Routes ----------------

@app.post("/api/new_game", response_model=GameResponse, summary="Start a new game")
def new_game(store: GameStore = Depends(get_store)) -> GameResponse:
    secret = generate_secret()
    store.new_game(secret)
    return GameResponse(game_state=to_game_state(store))


@app.post("/api/guess", response_model=GameResponse, summary="Submit a guess")
def submit_guess(
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GameResponse:
    try:
        store.submit_guess(payload.guess)
    except InvalidInputError:
        logger.exception("Scorer rejected internal input")
        raise HTTPException(status_code=500, detail="Internal scoring error.")
    except CodebreakerError as err:
        logger.warning("Guess rejected: %s", err)
        raise HTTPException(status_code=400, detail=str(err))
    return GameResponse(game_state=to_game_state(store))


@app.get("/api/game", response_model=GameResponse, summary="Get current game state")
def get_game(store: GameStore = Depends(get_store)) -> GameResponse:
    return GameResponse(game_state=to_game_state(store))


@app.api_route(
    "/{full_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def not_found(full_path: str, request: Request):
    raise HTTPException(
        status_code=404,
        detail=f"Cannot {request.method} /{full_path} - This is an API server.",
    )
