"""Material assessment from a static evaluation."""
from typing import Literal

from constants import MATERIAL_EDGE

from .templates import MATERIAL_FEEDBACK

MaterialTone = Literal["advantage", "disadvantage", "equal"]


def material_tone(score: int) -> MaterialTone:
    """Bucket a White-positive centipawn score.

    Args:
        score: Evaluation in centipawns, positive when White is ahead.

    Returns:
        "advantage" above +MATERIAL_EDGE, "disadvantage" below -MATERIAL_EDGE,
        "equal" otherwise (both bounds inclusive of "equal").
    """
    if score > MATERIAL_EDGE:
        return "advantage"
    if score < -MATERIAL_EDGE:
        return "disadvantage"
    return "equal"


def summarize_material(score: int) -> str:
    return MATERIAL_FEEDBACK[material_tone(score)]
