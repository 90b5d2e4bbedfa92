"""Move-generator capability interface and its python-chess adapter.

The search, evaluator and coaching code never touch chess rules directly.
They go through a ``MoveGenerator``: anything that can enumerate legal moves,
apply and undo them, and report check, mate and game-over state. The default
implementation wraps ``chess.Board``.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Protocol

import chess

from features import parse_move


class MoveFlag(str, Enum):
    KINGSIDE_CASTLE = "k"
    QUEENSIDE_CASTLE = "q"
    EN_PASSANT = "e"
    PROMOTION = "p"


class CastlingRights(NamedTuple):
    kingside: bool
    queenside: bool


@dataclass(frozen=True)
class VerboseMove:
    """A legal move with everything the classifier and search need to know.

    ``san`` is only filled when the generator was asked for notation; search
    enumerates thousands of moves and skips it.
    """

    move: chess.Move
    from_square: str
    to_square: str
    piece: chess.PieceType
    color: chess.Color
    captured: chess.PieceType | None = None
    promotion: chess.PieceType | None = None
    flags: frozenset[MoveFlag] = frozenset()
    san: str | None = None

    @property
    def uci(self) -> str:
        return self.move.uci()

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return MoveFlag.KINGSIDE_CASTLE in self.flags or MoveFlag.QUEENSIDE_CASTLE in self.flags

    @property
    def notation(self) -> str:
        """SAN when known, UCI otherwise."""
        return self.san or self.uci


class MoveGenerator(Protocol):
    """Rules-correct move generator consumed by the engine."""

    def legal_moves(self, position: chess.Board, notation: bool = True) -> list[VerboseMove]:
        ...

    def apply(self, position: chess.Board, move: VerboseMove) -> None:
        ...

    def undo(self, position: chess.Board) -> None:
        ...

    def is_game_over(self, position: chess.Board) -> bool:
        ...

    def is_check(self, position: chess.Board) -> bool:
        ...

    def is_checkmate(self, position: chess.Board) -> bool:
        ...

    def board_squares(self, position: chess.Board) -> list[list[chess.Piece | None]]:
        ...

    def castling_rights(self, position: chess.Board, color: chess.Color) -> CastlingRights:
        ...

    def canonical_key(self, position: chess.Board) -> str:
        ...

    def turn(self, position: chess.Board) -> chess.Color:
        ...

    def ply(self, position: chess.Board) -> int:
        ...

    def parse(self, position: chess.Board, text: str) -> VerboseMove:
        ...


class PythonChessMoveGenerator:
    """``MoveGenerator`` backed by python-chess."""

    def legal_moves(self, position: chess.Board, notation: bool = True) -> list[VerboseMove]:
        return [self.describe(position, move, notation) for move in position.legal_moves]

    def describe(self, position: chess.Board, move: chess.Move, notation: bool = True) -> VerboseMove:
        """Build the verbose form of ``move``, which must be legal in ``position``."""
        flags = set()
        if position.is_en_passant(move):
            flags.add(MoveFlag.EN_PASSANT)
            captured = chess.PAWN
        elif position.is_castling(move):
            flags.add(
                MoveFlag.KINGSIDE_CASTLE if position.is_kingside_castling(move) else MoveFlag.QUEENSIDE_CASTLE
            )
            captured = None
        else:
            captured = position.piece_type_at(move.to_square)
        if move.promotion is not None:
            flags.add(MoveFlag.PROMOTION)

        return VerboseMove(
            move=move,
            from_square=chess.square_name(move.from_square),
            to_square=chess.square_name(move.to_square),
            piece=position.piece_type_at(move.from_square),
            color=position.turn,
            captured=captured,
            promotion=move.promotion,
            flags=frozenset(flags),
            san=position.san(move) if notation else None,
        )

    def parse(self, position: chess.Board, text: str) -> VerboseMove:
        """Parse SAN or UCI into a verbose move; raises ``ValueError`` if illegal."""
        move = parse_move(position, text)
        if not position.is_legal(move):
            raise ValueError(f"Illegal move: '{text}' in position {position.fen()}")
        return self.describe(position, move)

    def apply(self, position: chess.Board, move: VerboseMove) -> None:
        position.push(move.move)

    def undo(self, position: chess.Board) -> None:
        position.pop()

    def is_game_over(self, position: chess.Board) -> bool:
        return position.is_game_over()

    def is_check(self, position: chess.Board) -> bool:
        return position.is_check()

    def is_checkmate(self, position: chess.Board) -> bool:
        return position.is_checkmate()

    def board_squares(self, position: chess.Board) -> list[list[chess.Piece | None]]:
        """8x8 grid, row 0 is rank 8 and column 0 is the a-file."""
        grid: list[list[chess.Piece | None]] = [[None] * 8 for _ in range(8)]
        for square, piece in position.piece_map().items():
            grid[7 - chess.square_rank(square)][chess.square_file(square)] = piece
        return grid

    def castling_rights(self, position: chess.Board, color: chess.Color) -> CastlingRights:
        return CastlingRights(
            kingside=position.has_kingside_castling_rights(color),
            queenside=position.has_queenside_castling_rights(color),
        )

    def canonical_key(self, position: chess.Board) -> str:
        # Piece placement only: no side to move, rights or counters.
        return position.board_fen()

    def turn(self, position: chess.Board) -> chess.Color:
        return position.turn

    def ply(self, position: chess.Board) -> int:
        return position.ply()


DEFAULT_GENERATOR = PythonChessMoveGenerator()


@contextmanager
def applied(generator: MoveGenerator, position: chess.Board, move: VerboseMove) -> Iterator[chess.Board]:
    """Apply ``move`` for the duration of the block and always undo it."""
    generator.apply(position, move)
    try:
        yield position
    finally:
        generator.undo(position)
