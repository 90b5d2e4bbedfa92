"""Opening identification by piece placement."""
from types import MappingProxyType
from typing import NamedTuple

import chess

from movegen import DEFAULT_GENERATOR, MoveGenerator


class OpeningEntry(NamedTuple):
    name: str
    description: str


# Keyed by the placement field of the FEN only, so move order and counters
# do not matter.
OPENING_BOOK = MappingProxyType({
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR": OpeningEntry(
        "King's Pawn Opening",
        "The most popular first move, controlling the center",
    ),
    "rnbqkbnr/pppppppp/8/8/3P4/8/PPP1PPPP/RNBQKBNR": OpeningEntry(
        "Queen's Pawn Opening",
        "Solid opening, preparing for a strong center",
    ),
    "rnbqkbnr/pppppppp/8/8/2P5/8/PP1PPPPP/RNBQKBNR": OpeningEntry(
        "English Opening",
        "Flank opening that fights for d5 from the side",
    ),
    "rnbqkbnr/pppppppp/8/8/8/5N2/PPPPPPPP/RNBQKB1R": OpeningEntry(
        "Reti Opening",
        "Flexible knight development, keeping pawn moves in reserve",
    ),
    "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR": OpeningEntry(
        "Open Game",
        "Both sides fight for the center with pawns",
    ),
    "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR": OpeningEntry(
        "Sicilian Defense",
        "Asymmetrical reply that contests d4 from the flank",
    ),
    "rnbqkbnr/pppp1ppp/4p3/8/4P3/8/PPPP1PPP/RNBQKBNR": OpeningEntry(
        "French Defense",
        "Solid pawn chain, preparing to strike back with d5",
    ),
    "rnbqkbnr/pp1ppppp/2p5/8/4P3/8/PPPP1PPP/RNBQKBNR": OpeningEntry(
        "Caro-Kann Defense",
        "Prepares d5 while keeping the light-squared bishop free",
    ),
    "rnbqkbnr/ppp1pppp/8/3p4/3P4/8/PPP1PPPP/RNBQKBNR": OpeningEntry(
        "Closed Game",
        "Symmetrical queen's pawn structure with a slower fight",
    ),
    "rnbqkbnr/ppp1pppp/8/3p4/2PP4/8/PP2PPPP/RNBQKBNR": OpeningEntry(
        "Queen's Gambit",
        "Offering a wing pawn to pull Black's pawn away from the center",
    ),
    "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R": OpeningEntry(
        "King's Knight Opening",
        "Developing the knight to attack the center",
    ),
    "rnbqkb1r/pppp1ppp/5n2/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R": OpeningEntry(
        "Petrov Defense",
        "Symmetrical defense, solid but passive",
    ),
    "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R": OpeningEntry(
        "Italian Game (start)",
        "Classical opening aiming for rapid development",
    ),
    "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R": OpeningEntry(
        "Italian Game",
        "The bishop eyes f7, the weakest point in Black's camp",
    ),
    "r1bqkbnr/pppp1ppp/2n5/1B2p3/4P3/5N2/PPPP1PPP/RNBQK2R": OpeningEntry(
        "Ruy Lopez",
        "Pressure on the knight that defends e5",
    ),
})


def detect_opening(
    position: chess.Board, generator: MoveGenerator = DEFAULT_GENERATOR
) -> OpeningEntry | None:
    """Return the book entry matching the current piece placement, if any."""
    return OPENING_BOOK.get(generator.canonical_key(position))
