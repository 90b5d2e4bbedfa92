"""Feedback templates, tier phrasing and opponent personas."""
from constants import Difficulty

# Move tags, emitted in this order by the classifier
TAGS: dict[str, str] = {
    "capture": "Capture: Takes {piece}",
    "castling": "Castling: Securing the king",
    "en_passant": "En Passant: Special pawn capture",
    "promotion": "Promotion: Pawn becomes a {piece}!",
    "development": "Development: Bringing pieces into play",
    "center_control": "Center Control: Dominating the board",
}

# How each tier explains the move it picked. "tagged" is used when the move
# carries at least one tag, "plain" otherwise.
TIER_EXPLANATIONS: dict[Difficulty, dict[str, str]] = {
    Difficulty.easy: {
        "tagged": "{tag}",
        "plain": "Playing {san}",
    },
    Difficulty.medium: {
        "tagged": "{tag} (Tactical play)",
        "plain": "Strong move: {san}",
    },
    Difficulty.hard: {
        "capture": "Winning material with {san}",
        "tagged": "{tag} (Strategic depth)",
        "plain": "Optimal move: {san}",
    },
}

# Learning-mode position feedback
POSITION_FEEDBACK: dict[str, str] = {
    "in_check": "You are in check! You must move your king or block the attack.",
    "mate_available": "Checkmate available with {san}!",
    "captures": "Possible captures: {moves}",
    "opening": "{name}: {description}",
}

MATERIAL_FEEDBACK: dict[str, str] = {
    "advantage": "You have a material advantage!",
    "disadvantage": "You are behind in material. Look for tactics!",
    "equal": "Material is roughly equal. Focus on position!",
}

# Who the player faces at each tier
OPPONENTS: dict[Difficulty, dict[str, str]] = {
    Difficulty.easy: {
        "name": "José Raúl Capablanca",
        "nickname": "The Chess Machine",
        "era": "1888-1942",
        "style": "Positional genius, simple and elegant",
    },
    Difficulty.medium: {
        "name": "Garry Kasparov",
        "nickname": "The Beast from Baku",
        "era": "1963-present",
        "style": "Aggressive and tactical brilliance",
    },
    Difficulty.hard: {
        "name": "Magnus Carlsen",
        "nickname": "The Mozart of Chess",
        "era": "1990-present",
        "style": "Universal player, endgame master",
    },
}


def tag(key: str, **values: str) -> str:
    """Render the tag template for ``key``."""
    return TAGS[key].format(**values)
