"""Rule-based move tags.

Every rule is checked independently and all matching tags are returned, in
the order the rules are listed below.
"""
import chess

from constants import BACK_RANKS, CENTER_SQUARES
from movegen import MoveFlag, VerboseMove

from .templates import tag
from .utils import describe_piece


def classify_move(move: VerboseMove) -> list[str]:
    """Return the ordered tags describing ``move``.

    Args:
        move: A legal move as produced by the move generator.

    Returns:
        Zero or more tag strings: capture, castling, en passant, promotion,
        development, center control.
    """
    tags: list[str] = []

    if move.captured is not None:
        tags.append(tag("capture", piece=describe_piece(move.captured)))

    if move.is_castle:
        tags.append(tag("castling"))

    if MoveFlag.EN_PASSANT in move.flags:
        tags.append(tag("en_passant"))

    if MoveFlag.PROMOTION in move.flags:
        tags.append(tag("promotion", piece=describe_piece(move.promotion)))

    # Minor piece leaving its home rank
    if move.piece in (chess.KNIGHT, chess.BISHOP) and move.from_square[1] in BACK_RANKS:
        tags.append(tag("development"))

    if move.to_square in CENTER_SQUARES:
        tags.append(tag("center_control"))

    return tags
