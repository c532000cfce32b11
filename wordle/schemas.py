"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

GameStatusField = Literal["in_progress", "won", "lost"]


# 1. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    word_length: int = Field(..., description="Number of letters in the secret word")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: GameStatusField = Field(..., description="Current state of the game")


# 2. Player's guess. Sent as-is: no trimming or case change.
class GuessRequest(BaseModel):
    guess: str = Field(
        ..., description="The guessed word. Its length must match the secret word."
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "crane"},
            ]
        }
    }


# 3. One guessed letter and how it scored
class LetterOut(BaseModel):
    letter: str = Field(..., description="The guessed character")
    status: Literal["correct", "present", "absent"] = Field(
        ..., description="correct = right place, present = elsewhere in the word, absent = not in the word"
    )


# 4. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The player's guess")
    letters: List[LetterOut] = Field(..., description="Per-letter result, aligned with the guess")
    timestamp: float = Field(..., description="When the guess was made")


# 5. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    word_length: int = Field(..., description="Number of letters in the secret word")
    max_attempts: int = Field(..., description="Attempts this game started with")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: GameStatusField = Field(..., description="Current state of the game")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[str] = Field(None, description="The secret word (only revealed if game is over)")


# 6. Result of a guess (or end of the game)
class GuessResponse(BaseModel):
    attempts_left: int = Field(..., description="How many guesses remain")
    status: GameStatusField = Field(..., description="Current state of the game")
    feedback: Optional[GuessEntryOut] = Field(None, description="Feedback from the latest guess")
    secret: Optional[str] = Field(None, description="The secret word (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses allowed.')")


# 7. Process-wide settings
class SettingsOut(BaseModel):
    max_attempts: int = Field(..., description="Attempts given to newly started games")


class MaxAttemptsUpdate(BaseModel):
    max_attempts: int = Field(..., description="New maximum attempts; must be greater than zero")
