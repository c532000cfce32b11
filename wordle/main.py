'''
Wordle API

Endpoints:
POST /games                   -> start a game
GET  /games/{id}              -> read state & history
POST /games/{id}/guess        -> submit a guess

Settings:
GET  /settings                -> current maximum attempts
PUT  /settings/max-attempts   -> change it for games started afterwards

Games live in memory only; restarting the server forgets them.
Run with: uvicorn wordle.main:app
'''

import logging

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .engine import LengthMismatch
from .settings import InvalidConfiguration, get_settings
from .store import Game, GameStore, GuessEntry
from .word_source import WordSourceError, draw_word

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
    GuessEntryOut,
    LetterOut,
    SettingsOut,
    MaxAttemptsUpdate,
)

logger = logging.getLogger(__name__)

# Read once at import: a bad WORDLE_* value keeps the server from starting
settings = get_settings()

app = FastAPI(title="Wordle API", version="1.0.0")

# Allow everything in dev so the docs and front-ends work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

_store = GameStore()


# Routes share one in-memory store; tests override this dependency
def get_store() -> GameStore:
    return _store


# --- DTO builders: keep the secret out of responses until a game ends ---

def _to_guess_out(entry: GuessEntry) -> GuessEntryOut:
    return GuessEntryOut(
        guess=entry.guess,
        letters=[
            LetterOut(letter=letter, status=status)
            for letter, status in zip(entry.guess, entry.result)
        ],
        timestamp=entry.timestamp,
    )


def _to_game_state(game: Game) -> GameState:
    return GameState(
        game_id=game.id,
        word_length=game.word_length,
        max_attempts=game.max_attempts,
        attempts_left=game.attempts_left,
        status=game.status,
        history=[_to_guess_out(h) for h in game.history],
        secret=game.secret if game.finished else None,
    )

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(store: GameStore = Depends(get_store)) -> NewGameResponse:
    try:
        secret = draw_word(settings.wordlist_path, use_remote=settings.use_random_org)
    except WordSourceError as exc:
        logger.error("Cannot start a game: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))

    # max attempts is read once here; later settings changes don't touch this game
    game = store.create(secret, settings.max_attempts)

    return NewGameResponse(
        game_id=game.id,
        word_length=game.word_length,
        attempts_left=game.attempts_left,
        status=game.status,
    )


@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(game_id: str, store: GameStore = Depends(get_store)) -> GameState:
    game = store.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_game_state(game)


@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # Wrong length -> 400, no attempt used
    try:
        updated, entry = store.guess(game_id, payload.guess)
    except LengthMismatch as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if not updated:
        raise HTTPException(status_code=404, detail="Game not found")

    # Only this request's own guess; None when the game had already ended
    feedback = _to_guess_out(entry) if entry else None

    return GuessResponse(
        attempts_left=updated.attempts_left,
        status=updated.status,
        feedback=feedback,
        secret=updated.secret if updated.finished else None,
        note=(f"Game {updated.status}. No more guesses allowed."
              if updated.finished else None),
    )


@app.get("/settings", response_model=SettingsOut, summary="Read game settings")
def read_settings() -> SettingsOut:
    return SettingsOut(max_attempts=settings.max_attempts)


@app.put("/settings/max-attempts", response_model=SettingsOut, summary="Change maximum attempts")
def update_max_attempts(payload: MaxAttemptsUpdate) -> SettingsOut:
    try:
        value = settings.set_max_attempts(payload.max_attempts)
    except InvalidConfiguration as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return SettingsOut(max_attempts=value)
