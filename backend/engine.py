"""Computer opponent and coach for one single-player game.

A ``ChessEngine`` is bound to one difficulty for its lifetime and holds no
game state: the caller owns the board and passes it in on every call. Every
public method leaves that board exactly as it found it.
"""
import logging
import random
import threading
from dataclasses import dataclass

import chess

from coach import (
    OpeningEntry,
    analyze_player_move,
    analyze_position,
    classify_move,
    detect_opening,
    explain_choice,
)
from constants import SEARCH_DEPTH, Difficulty
from movegen import DEFAULT_GENERATOR, MoveGenerator, VerboseMove
from search import SearchState, select_move
from settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    """A move picked by the engine, with the reason shown to the player."""

    move: str
    uci: str
    explanation: str
    score: int | None = None


class ChessEngine:
    """Move selection and coaching at a fixed difficulty."""

    def __init__(
        self,
        difficulty: Difficulty | str = Difficulty.medium,
        generator: MoveGenerator = DEFAULT_GENERATOR,
        rng: random.Random | None = None,
    ) -> None:
        self._difficulty = Difficulty(difficulty)
        self._generator = generator
        self._rng = rng or random.Random()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def depth(self) -> int:
        return SEARCH_DEPTH[self._difficulty]

    def best_move(
        self, position: chess.Board, stop_event: threading.Event | None = None
    ) -> Suggestion | None:
        """Choose a move for the side to move.

        Easy picks uniformly at random; medium and hard run the minimax
        search at their depth.

        Args:
            position: Current board. Left unchanged.
            stop_event: Optional event to cancel a running search; when set,
                ``search.SearchAborted`` propagates to the caller.

        Returns:
            The suggestion, or None when there is no legal move.
        """
        if self._difficulty is Difficulty.easy:
            moves = self._generator.legal_moves(position, notation=False)
            if not moves:
                return None
            move, score = self._rng.choice(moves), None
        else:
            state = SearchState(stop_event=stop_event or threading.Event())
            move, score = select_move(position, self.depth, self._generator, state)
            if move is None:
                return None
            logger.debug(
                f"Searched {self.depth} plies below the root: {state.nodes} nodes, {state.cutoffs} cutoffs, score {score}"
            )

        move = self._with_notation(position, move)
        suggestion = Suggestion(
            move=move.notation,
            uci=move.uci,
            explanation=explain_choice(self._difficulty, move),
            score=score,
        )
        logger.info(f"{self._difficulty.value} engine plays {suggestion.move}")
        return suggestion

    def hint(
        self, position: chess.Board, stop_event: threading.Event | None = None
    ) -> Suggestion | None:
        """Suggest a move for the player; the same computation as ``best_move``."""
        return self.best_move(position, stop_event=stop_event)

    def classify(self, position: chess.Board, move: VerboseMove | str) -> list[str]:
        """Tags for ``move`` played from ``position``."""
        return classify_move(self.resolve_move(position, move))

    def detect_opening(self, position: chess.Board) -> OpeningEntry | None:
        return detect_opening(position, self._generator)

    def analyze_player_move(self, position: chess.Board, move: VerboseMove | str) -> list[str]:
        """Feedback on a player move about to be played from ``position``."""
        return analyze_player_move(
            position,
            self.resolve_move(position, move),
            ply_limit=settings.opening_ply_limit,
            generator=self._generator,
        )

    def analyze_position(self, position: chess.Board) -> list[str]:
        return analyze_position(position, self._generator)

    def resolve_move(self, position: chess.Board, move: VerboseMove | str) -> VerboseMove:
        # Moves from callers are checked against the position before use.
        if isinstance(move, VerboseMove):
            move = move.uci
        return self._generator.parse(position, move)

    def _with_notation(self, position: chess.Board, move: VerboseMove) -> VerboseMove:
        if move.san is not None:
            return move
        return self._generator.parse(position, move.uci)
