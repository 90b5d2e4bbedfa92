"""
Bounded minimax search with alpha-beta pruning.

The search runs to a fixed depth with no quiescence, transposition table or
iterative deepening: it is meant for coaching-strength play, not for maximum
strength. Scores come from ``evaluation.evaluate`` and are White-positive, so
White is the maximizing side and Black the minimizing side.

Every move the search applies is undone through ``movegen.applied``, so the
caller's board is restored on every exit path, including cutoffs and
cancellation.

Threading model:
    The search is plain synchronous recursion. Callers that must stay
    responsive run it on a worker thread and may cancel it by setting
    ``SearchState.stop_event``; the search then raises ``SearchAborted``.
"""
import math
import threading
from dataclasses import dataclass, field

import chess

from constants import PIECE_VALUES
from evaluation import evaluate
from movegen import DEFAULT_GENERATOR, MoveGenerator, VerboseMove, applied


class SearchAborted(RuntimeError):
    """Raised when a search is cancelled through its stop event."""


@dataclass
class SearchState:
    """
    Counters and cancellation flag for one search.

    Attributes:
        stop_event: Optional event; once set, the next visited node raises
                    ``SearchAborted``.
        nodes:      Number of positions visited.
        cutoffs:    Number of alpha-beta cutoffs taken.
    """

    stop_event: threading.Event = field(default_factory=threading.Event)
    nodes: int = 0
    cutoffs: int = 0

    def visit(self) -> None:
        if self.stop_event.is_set():
            raise SearchAborted("search cancelled")
        self.nodes += 1


def order_moves(moves: list[VerboseMove]) -> list[VerboseMove]:
    """
    Search captures first, most valuable victim and least valuable attacker
    first (MVV-LVA). Quiet moves keep their generator order.

    Ordering only affects how many siblings get pruned, never the value.
    """
    def _mvv_lva_score(move: VerboseMove) -> int:
        if move.captured is None:
            return 0
        return 10_000 + PIECE_VALUES[move.captured] - PIECE_VALUES[move.piece]

    # sorted() is stable even with reverse=True
    return sorted(moves, key=_mvv_lva_score, reverse=True)


def minimax(
    position: chess.Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    generator: MoveGenerator = DEFAULT_GENERATOR,
    state: SearchState | None = None,
) -> int:
    """
    Best attainable evaluation from ``position`` looking ``depth`` plies ahead.

    Args:
        position:   Board to search. Restored before returning.
        depth:      Remaining plies. 0 returns the static evaluation.
        alpha:      Best value the maximizer can already guarantee.
        beta:       Best value the minimizer can already guarantee.
        maximizing: True when the side to move is White.
        generator:  Move generator providing legal moves and apply/undo.
        state:      Optional counters and stop event.

    Returns:
        The minimax value, identical to what an unpruned search returns.
    """
    if state is not None:
        state.visit()

    if depth == 0 or generator.is_game_over(position):
        return evaluate(position, generator)

    moves = order_moves(generator.legal_moves(position, notation=False))

    if maximizing:
        best = -math.inf
        for move in moves:
            with applied(generator, position, move):
                value = minimax(position, depth - 1, alpha, beta, False, generator, state)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                if state is not None:
                    state.cutoffs += 1
                break
        return best

    best = math.inf
    for move in moves:
        with applied(generator, position, move):
            value = minimax(position, depth - 1, alpha, beta, True, generator, state)
        best = min(best, value)
        beta = min(beta, value)
        if beta <= alpha:
            if state is not None:
                state.cutoffs += 1
            break
    return best


def select_move(
    position: chess.Board,
    depth: int,
    generator: MoveGenerator = DEFAULT_GENERATOR,
    state: SearchState | None = None,
) -> tuple[VerboseMove | None, int | None]:
    """
    Pick the best root move for the side to move.

    Each root move is applied and searched ``depth`` further plies with the
    opponent to move. White keeps the strictly greatest
    value, Black the strictly smallest, so ties go to the move enumerated
    first. The window is narrowed by the best value found so far; a sibling
    that can only tie is cut off early, which leaves both the choice and the
    returned value unchanged.

    Args:
        position:  Board to search. Restored before returning.
        depth:     Plies searched below each root move. 0 compares the root
                   moves by static evaluation.
        generator: Move generator.
        state:     Optional counters and stop event.

    Returns:
        ``(move, value)`` or ``(None, None)`` when there is no legal move.
    """
    moves = generator.legal_moves(position, notation=False)
    if not moves:
        return None, None

    white_to_move = generator.turn(position) == chess.WHITE
    best_move = moves[0]
    best_value = -math.inf if white_to_move else math.inf

    for move in moves:
        with applied(generator, position, move):
            if white_to_move:
                value = minimax(position, depth, best_value, math.inf, False, generator, state)
            else:
                value = minimax(position, depth, -math.inf, best_value, True, generator, state)
        if (white_to_move and value > best_value) or (not white_to_move and value < best_value):
            best_value = value
            best_move = move

    return best_move, int(best_value)
