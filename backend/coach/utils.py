"""Utility functions for move feedback."""

import chess

PIECE_NAMES: dict[chess.PieceType, str] = {
    chess.PAWN: "Pawn",
    chess.KNIGHT: "Knight",
    chess.BISHOP: "Bishop",
    chess.ROOK: "Rook",
    chess.QUEEN: "Queen",
    chess.KING: "King",
}


def describe_piece(piece_type: chess.PieceType | None) -> str:
    """Get a human-readable name for a piece type.

    Args:
        piece_type: A python-chess piece type constant.

    Returns:
        Capitalized piece name (e.g., "Knight", "Queen").
    """
    return PIECE_NAMES.get(piece_type, "Piece")
