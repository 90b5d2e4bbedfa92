"""Tests for the features module."""

import os
import sys

import chess
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from features import load_position, parse_move, validate_fen


class TestValidateFen:
    """Tests for FEN validation."""

    def test_valid_starting_position(self):
        valid, error = validate_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        assert valid is True
        assert error is None

    def test_valid_mid_game_position(self):
        valid, error = validate_fen(
            "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"
        )
        assert valid is True
        assert error is None

    def test_invalid_no_white_king(self):
        valid, error = validate_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQ1BNR w KQkq - 0 1")
        assert valid is False
        assert "White king" in error

    def test_invalid_no_black_king(self):
        valid, error = validate_fen("rnbq1bnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        assert valid is False
        assert "Black king" in error

    def test_invalid_malformed_fen(self):
        valid, error = validate_fen("not a valid fen")
        assert valid is False
        assert error is not None


class TestLoadPosition:
    """Tests for building boards at the boundary."""

    def test_defaults_to_starting_position(self):
        assert load_position().fen() == chess.STARTING_FEN
        assert load_position("").fen() == chess.STARTING_FEN

    def test_loads_given_fen(self):
        fen = "4k3/8/8/8/8/8/8/4K3 b - - 3 40"
        assert load_position(fen).fen() == fen

    def test_rejects_missing_king(self):
        with pytest.raises(ValueError, match="Black king"):
            load_position("8/8/8/8/8/8/8/4K3 w - - 0 1")

    def test_rejects_garbage(self):
        with pytest.raises(ValueError, match="Invalid FEN"):
            load_position("hello world")


class TestParseMove:
    """Tests for SAN/UCI move parsing."""

    def test_san(self):
        board = chess.Board()
        assert parse_move(board, "Nf3") == chess.Move.from_uci("g1f3")

    def test_uci(self):
        board = chess.Board()
        assert parse_move(board, "g1f3") == chess.Move.from_uci("g1f3")

    def test_surrounding_whitespace_is_ignored(self):
        board = chess.Board()
        assert parse_move(board, "  e4 ") == chess.Move.from_uci("e2e4")

    def test_invalid(self):
        board = chess.Board()
        with pytest.raises(ValueError, match="Invalid move"):
            parse_move(board, "invalid")

    def test_illegal_san(self):
        board = chess.Board()
        with pytest.raises(ValueError):
            parse_move(board, "e5")
