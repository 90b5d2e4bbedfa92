import logging

import chess
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from coach import OPPONENTS
from constants import Difficulty
from engine import ChessEngine, Suggestion
from features import load_position
from schemas import (
    ClassifyResponse,
    FeedbackResponse,
    MoveRequest,
    OpeningLookupResponse,
    OpeningResponse,
    OpponentResponse,
    PositionRequest,
    SuggestionResponse,
)
from settings import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Chess Coach Engine", version="0.3.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origins] if settings.cors_origins != "*" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Engines hold no game state, so one per tier serves every request.
# Endpoints are plain functions so the search runs in the worker threadpool.
_engines = {difficulty: ChessEngine(difficulty) for difficulty in Difficulty}


def _engine(difficulty: Difficulty | None) -> ChessEngine:
    return _engines[difficulty or settings.default_difficulty]


def _board(fen: str | None) -> chess.Board:
    try:
        return load_position(fen)
    except ValueError as e:
        logger.info(f"Rejected position: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e


def _suggestion_response(suggestion: Suggestion | None) -> SuggestionResponse:
    if suggestion is None:
        return SuggestionResponse(ok=False, note="No move available: the game is over.")
    return SuggestionResponse(
        ok=True,
        move=suggestion.move,
        uci=suggestion.uci,
        explanation=suggestion.explanation,
        score=suggestion.score,
    )


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.get("/opponents", response_model=list[OpponentResponse])
def opponents():
    return [OpponentResponse(difficulty=d, **persona) for d, persona in OPPONENTS.items()]


@app.post("/best-move", response_model=SuggestionResponse)
def best_move(req: PositionRequest):
    board = _board(req.fen)
    return _suggestion_response(_engine(req.difficulty).best_move(board))


@app.post("/hint", response_model=SuggestionResponse)
def hint(req: PositionRequest):
    board = _board(req.fen)
    return _suggestion_response(_engine(req.difficulty).hint(board))


@app.post("/classify", response_model=ClassifyResponse)
def classify(req: MoveRequest):
    board = _board(req.fen)
    engine = _engine(None)
    try:
        move = engine.resolve_move(board, req.move)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ClassifyResponse(normalized_move=move.notation, tags=engine.classify(board, move))


@app.post("/opening", response_model=OpeningLookupResponse)
def opening(req: PositionRequest):
    entry = _engine(req.difficulty).detect_opening(_board(req.fen))
    if entry is None:
        return OpeningLookupResponse(opening=None)
    return OpeningLookupResponse(opening=OpeningResponse(name=entry.name, description=entry.description))


@app.post("/analyze/move", response_model=FeedbackResponse)
def analyze_move(req: MoveRequest):
    board = _board(req.fen)
    try:
        feedback = _engine(None).analyze_player_move(board, req.move)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return FeedbackResponse(feedback=feedback)


@app.post("/analyze/position", response_model=FeedbackResponse)
def analyze_position(req: PositionRequest):
    board = _board(req.fen)
    return FeedbackResponse(feedback=_engine(req.difficulty).analyze_position(board))
