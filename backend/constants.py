"""Engine constants: piece values, piece-square tables, and difficulty tiers.

Everything here is read-only data shared by the evaluator, the search and the
coaching layer. Tables are laid out the way a board is printed: index 0 is a8,
index 63 is h1, so a white piece looks up its own square directly and a black
piece looks up the mirrored index ``63 - i``.
"""
from enum import Enum
from types import MappingProxyType

import chess

# ---------------------------------------------------------------------------
# Piece values (centipawns)
# ---------------------------------------------------------------------------

PAWN_VALUE: int = 100
KNIGHT_VALUE: int = 320
BISHOP_VALUE: int = 330
ROOK_VALUE: int = 500
QUEEN_VALUE: int = 900
KING_VALUE: int = 20_000  # dwarfs every positional term

PIECE_VALUES = MappingProxyType({
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
})

# ---------------------------------------------------------------------------
# Piece-square tables
# ---------------------------------------------------------------------------
# Only pawns and knights carry a positional term; the other pieces are scored
# on material alone.

PAWN_TABLE: tuple[int, ...] = (
     0,  0,   0,   0,   0,   0,  0,  0,
    50, 50,  50,  50,  50,  50, 50, 50,
    10, 10,  20,  30,  30,  20, 10, 10,
     5,  5,  10,  25,  25,  10,  5,  5,
     0,  0,   0,  20,  20,   0,  0,  0,
     5, -5, -10,   0,   0, -10, -5,  5,
     5, 10,  10, -20, -20,  10, 10,  5,
     0,  0,   0,   0,   0,   0,  0,  0,
)

KNIGHT_TABLE: tuple[int, ...] = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20,   0,   0,   0,   0, -20, -40,
    -30,   0,  10,  15,  15,  10,   0, -30,
    -30,   5,  15,  20,  20,  15,   5, -30,
    -30,   0,  15,  20,  20,  15,   0, -30,
    -30,   5,  10,  15,  15,  10,   5, -30,
    -40, -20,   0,   5,   5,   0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)

PIECE_SQUARE_TABLES = MappingProxyType({
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
})

# Applied for the side to move only; see evaluation.castling_term().
CASTLING_BONUS: int = 30

# ---------------------------------------------------------------------------
# Coaching thresholds
# ---------------------------------------------------------------------------

# Evaluations beyond +/- this many centipawns count as a material edge.
MATERIAL_EDGE: int = 300

CENTER_SQUARES = frozenset({"d4", "d5", "e4", "e5"})
BACK_RANKS = frozenset({"1", "8"})

# How many capturing moves the position analysis lists at most.
CAPTURE_HINT_LIMIT: int = 3


# ---------------------------------------------------------------------------
# Difficulty tiers
# ---------------------------------------------------------------------------

class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# Plies searched below each root move. Easy does not search.
SEARCH_DEPTH = MappingProxyType({
    Difficulty.easy: 0,
    Difficulty.medium: 3,
    Difficulty.hard: 4,
})
