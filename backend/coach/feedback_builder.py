"""FeedbackBuilder class for assembling learning-mode feedback."""
from constants import CAPTURE_HINT_LIMIT
from movegen import VerboseMove

from .assessment import summarize_material
from .openings import OpeningEntry
from .templates import POSITION_FEEDBACK


class FeedbackBuilder:
    """Formats coaching lines in the order they are reported.

    Each method renders one kind of line from its template. A line that is
    already present is not repeated.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def tags(self, tags: list[str]) -> "FeedbackBuilder":
        for tag in tags:
            self._add(tag)
        return self

    def check_warning(self) -> "FeedbackBuilder":
        self._add(POSITION_FEEDBACK["in_check"])
        return self

    def mate(self, move: VerboseMove) -> "FeedbackBuilder":
        self._add(POSITION_FEEDBACK["mate_available"].format(san=move.notation))
        return self

    def captures(self, moves: list[VerboseMove]) -> "FeedbackBuilder":
        """List the first CAPTURE_HINT_LIMIT capturing moves, if there are any.

        Args:
            moves: Legal moves in enumeration order; quiet moves are skipped.
        """
        sans = [m.notation for m in moves if m.is_capture][:CAPTURE_HINT_LIMIT]
        if sans:
            self._add(POSITION_FEEDBACK["captures"].format(moves=", ".join(sans)))
        return self

    def opening(self, entry: OpeningEntry | None) -> "FeedbackBuilder":
        if entry is not None:
            self._add(POSITION_FEEDBACK["opening"].format(
                name=entry.name, description=entry.description
            ))
        return self

    def material(self, score: int) -> "FeedbackBuilder":
        self._add(summarize_material(score))
        return self

    def build(self) -> list[str]:
        """Return a copy of the accumulated lines."""
        return self._lines.copy()

    def __len__(self) -> int:
        return len(self._lines)

    def _add(self, text: str) -> None:
        if text not in self._lines:
            self._lines.append(text)
