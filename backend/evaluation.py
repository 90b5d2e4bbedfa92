"""Static position evaluation: material plus piece-square tables.

Scores are always from White's point of view: positive means White is
better, negative means Black is better. The minimax search maximizes for
White and minimizes for Black, so no perspective flipping happens here.
"""
import chess

from constants import CASTLING_BONUS, PIECE_SQUARE_TABLES, PIECE_VALUES
from movegen import DEFAULT_GENERATOR, MoveGenerator


def evaluate(position: chess.Board, generator: MoveGenerator = DEFAULT_GENERATOR) -> int:
    """
    Centipawn evaluation of ``position`` from White's perspective.

    Each piece contributes its material value, and pawns and knights add the
    piece-square table entry for their square. The grid from
    ``board_squares`` is printed-board order (row 0 = rank 8), which is the
    order the tables are written in; Black mirrors the index with ``63 - i``.

    Args:
        position: Board to score. Not modified.
        generator: Move generator used to read the board.

    Returns:
        Signed centipawn score.

    Example:
        >>> evaluate(chess.Board())  # material and tables cancel out
        30
    """
    score = 0
    for row, rank in enumerate(generator.board_squares(position)):
        for col, piece in enumerate(rank):
            if piece is None:
                continue
            sign = 1 if piece.color == chess.WHITE else -1
            score += PIECE_VALUES[piece.piece_type] * sign

            table = PIECE_SQUARE_TABLES.get(piece.piece_type)
            if table is not None:
                index = row * 8 + col
                if piece.color == chess.BLACK:
                    index = 63 - index
                score += table[index] * sign

    return score + castling_term(position, generator)


def castling_term(position: chess.Board, generator: MoveGenerator = DEFAULT_GENERATOR) -> int:
    """Castling-rights adjustment, looked at for the side to move only.

    White to move with any right left scores +CASTLING_BONUS; Black to move
    with any right left scores -CASTLING_BONUS. The side not on move is
    ignored, so the term flips sign from ply to ply in an otherwise quiet
    position.
    """
    side = generator.turn(position)
    rights = generator.castling_rights(position, side)
    if not (rights.kingside or rights.queenside):
        return 0
    return CASTLING_BONUS if side == chess.WHITE else -CASTLING_BONUS
