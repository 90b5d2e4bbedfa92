import argparse
import logging

from constants import Difficulty
from engine import ChessEngine
from features import load_position
from settings import settings


def main():
    p = argparse.ArgumentParser(description="Chess Coach Engine (CLI)")
    p.add_argument("--fen", default=None, help="FEN string (starting position if omitted)")
    p.add_argument("--move", default=None, help="Player move in SAN (e.g., Nf3) or UCI (e.g., g1f3) to analyze")
    p.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=settings.default_difficulty.value,
        help="Engine tier used to pick a move",
    )
    args = p.parse_args()

    logging.basicConfig(level=settings.log_level)
    board = load_position(args.fen)
    engine = ChessEngine(args.difficulty)

    if args.move:
        move = engine.resolve_move(board, args.move)
        print(f"Move: {move.notation}")
        print("Feedback:")
        for line in engine.analyze_player_move(board, move):
            print(f"  - {line}")
        return

    suggestion = engine.best_move(board)
    if suggestion is None:
        print("No move available: the game is over.")
    else:
        print(f"Engine move ({engine.difficulty.value}): {suggestion.move}")
        print(f"Explanation: {suggestion.explanation}")

    opening = engine.detect_opening(board)
    if opening:
        print(f"Opening: {opening.name} - {opening.description}")
    print("Position:")
    for line in engine.analyze_position(board):
        print(f"  - {line}")


if __name__ == "__main__":
    main()
