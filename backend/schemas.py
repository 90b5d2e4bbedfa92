from pydantic import BaseModel, Field

from constants import Difficulty


class PositionRequest(BaseModel):
    fen: str | None = Field(None, description="FEN string of the current position; starting position if omitted")
    difficulty: Difficulty | None = Field(None, description="Engine tier; the configured default if omitted")


class MoveRequest(BaseModel):
    fen: str | None = Field(None, description="FEN string of the position before the move")
    move: str = Field(..., description="Move in SAN or UCI (e.g., 'Nf3' or 'g1f3')")


class SuggestionResponse(BaseModel):
    ok: bool
    move: str | None = None
    uci: str | None = None
    explanation: str | None = None
    score: int | None = None
    note: str | None = None


class ClassifyResponse(BaseModel):
    normalized_move: str
    tags: list[str]


class OpeningResponse(BaseModel):
    name: str
    description: str


class OpeningLookupResponse(BaseModel):
    opening: OpeningResponse | None


class FeedbackResponse(BaseModel):
    feedback: list[str]


class OpponentResponse(BaseModel):
    difficulty: Difficulty
    name: str
    nickname: str
    era: str
    style: str
