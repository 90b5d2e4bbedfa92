"""Tests for move tags, including special moves."""

import os
import sys

import chess
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from coach import TAGS, classify_move
from movegen import DEFAULT_GENERATOR, MoveFlag

CENTER = TAGS["center_control"]
DEVELOPMENT = TAGS["development"]
CASTLING = TAGS["castling"]
EN_PASSANT = TAGS["en_passant"]


def tags_for(fen: str, move: str) -> list[str]:
    board = chess.Board(fen)
    return classify_move(DEFAULT_GENERATOR.parse(board, move))


class TestQuietMoves:
    """Tests for development and center control."""

    def test_king_pawn_controls_center(self):
        assert tags_for(chess.STARTING_FEN, "e4") == [CENTER]

    def test_knight_development(self):
        assert tags_for(chess.STARTING_FEN, "Nf3") == [DEVELOPMENT]
        assert tags_for(chess.STARTING_FEN, "Nc3") == [DEVELOPMENT]

    def test_black_knight_development(self):
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
        assert tags_for(fen, "Nc6") == [DEVELOPMENT]

    def test_bishop_development_into_center(self):
        assert tags_for("4k3/8/8/8/8/8/8/B3K3 w - - 0 1", "Bd4") == [DEVELOPMENT, CENTER]

    def test_knight_off_back_rank_is_not_development(self):
        fen = "rnbqkbnr/pppp1ppp/8/8/8/5N2/PPPPPPPP/RNBQKB1R w KQkq - 0 1"
        assert tags_for(fen, "Ne5") == [CENTER]

    def test_flank_pawn_has_no_tags(self):
        assert tags_for(chess.STARTING_FEN, "h3") == []


class TestCaptures:
    """Tests for capture tags."""

    def test_pawn_capture_in_center(self):
        fen = "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"
        assert tags_for(fen, "exd5") == ["Capture: Takes Pawn", CENTER]

    def test_en_passant(self):
        # Position after 1.e4 d5 2.e5 f5 - en passant available
        fen = "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3"
        assert tags_for(fen, "exf6") == ["Capture: Takes Pawn", EN_PASSANT]

    def test_queen_capture_names_piece(self):
        assert tags_for("4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1", "Rxd5") == ["Capture: Takes Queen", CENTER]


class TestPromotion:
    """Tests for pawn promotion tags."""

    def test_promotion_to_queen(self):
        assert tags_for("8/P7/8/8/8/8/8/K6k w - - 0 1", "a8=Q") == ["Promotion: Pawn becomes a Queen!"]

    def test_underpromotion_to_knight(self):
        assert tags_for("8/P7/8/8/8/8/8/K6k w - - 0 1", "a8=N") == ["Promotion: Pawn becomes a Knight!"]

    def test_capture_with_promotion(self):
        tags = tags_for("1r2k3/P7/8/8/8/8/8/4K3 w - - 0 1", "axb8=Q")
        assert tags == ["Capture: Takes Rook", "Promotion: Pawn becomes a Queen!"]


class TestCastling:
    """Tests for castling moves."""

    @pytest.mark.parametrize("san", ["O-O", "O-O-O"])
    def test_castling(self, san):
        assert tags_for("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1", san) == [CASTLING]


class TestCompleteness:
    """Tags for every legal move of a few busy positions."""

    FENS = [
        chess.STARTING_FEN,
        "r1bqkbnr/pppp1ppp/2n5/4p3/3PP3/5N2/PPP2PPP/RNBQKB1R b KQkq d3 0 3",
        "rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3",
        "1r2k3/P7/8/8/8/8/8/4K3 w - - 0 1",
        "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1",
    ]

    @pytest.mark.parametrize("fen", FENS)
    def test_required_tags_present(self, fen):
        board = chess.Board(fen)
        for move in DEFAULT_GENERATOR.legal_moves(board):
            tags = classify_move(move)
            if move.captured is not None:
                assert any(t.startswith("Capture:") for t in tags), move.san
            if MoveFlag.PROMOTION in move.flags:
                assert any(t.startswith("Promotion:") for t in tags), move.san
            if move.to_square in {"d4", "d5", "e4", "e5"}:
                assert CENTER in tags, move.san
