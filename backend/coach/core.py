"""Core coaching logic: move explanations and learning-mode feedback."""

import chess

from constants import Difficulty
from evaluation import evaluate
from movegen import DEFAULT_GENERATOR, MoveGenerator, VerboseMove, applied

from .classifier import classify_move
from .feedback_builder import FeedbackBuilder
from .openings import detect_opening
from .templates import TIER_EXPLANATIONS


def explain_choice(difficulty: Difficulty, move: VerboseMove) -> str:
    """Explain why the engine played ``move`` at the given tier.

    Args:
        difficulty: The tier that chose the move.
        move: The chosen move, with SAN filled in.

    Returns:
        A short, never empty, explanation.
    """
    phrases = TIER_EXPLANATIONS[Difficulty(difficulty)]
    tags = classify_move(move)
    san = move.notation

    if "capture" in phrases and move.is_capture:
        return phrases["capture"].format(san=san)
    if tags:
        return phrases["tagged"].format(tag=tags[0], san=san)
    return phrases["plain"].format(san=san)


def analyze_player_move(
    position: chess.Board,
    move: VerboseMove,
    ply_limit: int,
    generator: MoveGenerator = DEFAULT_GENERATOR,
) -> list[str]:
    """Feedback on a move the player is making from ``position``.

    The move's tags come first. While the game is still within ``ply_limit``
    half-moves after the move, a matching book opening is appended. The move
    is applied only to look the opening up and is undone before returning.
    """
    feedback = FeedbackBuilder().tags(classify_move(move))

    with applied(generator, position, move):
        if generator.ply(position) <= ply_limit:
            feedback.opening(detect_opening(position, generator))

    return feedback.build()


def analyze_position(
    position: chess.Board, generator: MoveGenerator = DEFAULT_GENERATOR
) -> list[str]:
    """Learning-mode feedback for the side to move.

    In order: a check warning, the first mate in one found, up to
    CAPTURE_HINT_LIMIT capturing moves (only when neither in check nor
    mating), and a material summary.
    """
    feedback = FeedbackBuilder()
    moves = generator.legal_moves(position)
    in_check = generator.is_check(position)

    if in_check:
        feedback.check_warning()

    mate = find_mate_in_one(position, moves, generator)
    if mate is not None:
        feedback.mate(mate)
    elif not in_check:
        feedback.captures(moves)

    return feedback.material(evaluate(position, generator)).build()


def find_mate_in_one(
    position: chess.Board,
    moves: list[VerboseMove],
    generator: MoveGenerator = DEFAULT_GENERATOR,
) -> VerboseMove | None:
    """Return the first of ``moves`` that checkmates, trying each in turn."""
    for move in moves:
        with applied(generator, position, move):
            if generator.is_checkmate(position):
                return move
    return None
