"""Tests for the command line entry point."""
import os
import sys
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import cli


def run(capsys, *argv):
    with patch.object(sys, "argv", ["cli.py", *argv]):
        cli.main()
    return capsys.readouterr().out


def test_analyze_player_move(capsys):
    out = run(capsys, "--move", "e4")
    assert "Move: e4" in out
    assert "King's Pawn Opening" in out


def test_engine_move(capsys):
    out = run(capsys, "--fen", "4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1", "--difficulty", "medium")
    assert "Engine move (medium): Rxd5" in out
    assert "Explanation: Capture: Takes Queen (Tactical play)" in out
    assert "Possible captures: Rxd5" in out


def test_game_over(capsys):
    fen = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
    out = run(capsys, "--fen", fen, "--difficulty", "easy")
    assert "No move available" in out
    assert "You are in check!" in out
