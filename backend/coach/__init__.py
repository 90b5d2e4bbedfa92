"""Chess coaching module.

This module labels moves, explains engine choices, identifies book openings
and produces learning-mode feedback on the current position.
"""
from .assessment import material_tone, summarize_material
from .classifier import classify_move
from .core import analyze_player_move, analyze_position, explain_choice, find_mate_in_one
from .feedback_builder import FeedbackBuilder
from .openings import OPENING_BOOK, OpeningEntry, detect_opening
from .templates import OPPONENTS, TAGS
from .utils import describe_piece

__all__ = [
    "analyze_player_move",
    "analyze_position",
    "classify_move",
    "describe_piece",
    "detect_opening",
    "explain_choice",
    "find_mate_in_one",
    "FeedbackBuilder",
    "material_tone",
    "OPENING_BOOK",
    "OpeningEntry",
    "OPPONENTS",
    "summarize_material",
    "TAGS",
]
