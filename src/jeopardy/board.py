"""The playable board: questions grouped into category columns."""
import logging

from jeopardy.models import Question

logger = logging.getLogger(__name__)


class GameBoard:
    """Categories in first-seen order, each holding questions sorted by value.

    The set of questions is fixed at construction; play only flips their
    ``used`` flags.
    """

    def __init__(self, questions: list[Question]):
        if not questions:
            raise ValueError("GameBoard requires at least one question")
        board: dict[str, list[Question]] = {}
        for q in questions:
            board.setdefault(q.category, []).append(q)
        for column in board.values():
            column.sort(key=lambda q: q.value)
        self._board = board
        logger.debug(f"Board built with {len(board)} categories and {len(questions)} questions")

    def categories(self) -> list[str]:
        return list(self._board)

    def available_values(self, category: str) -> list[int]:
        return sorted(q.value for q in self._board.get(category, []) if not q.used)

    def question(self, category: str, value: int) -> Question | None:
        """First unused question at this value, or None if missing or used up."""
        for q in self._board.get(category, []):
            if q.value == value and not q.used:
                return q
        return None

    def mark_used(self, question: Question | None) -> None:
        if question is not None:
            question.used = True

    def remaining_count(self) -> int:
        return sum(1 for column in self._board.values() for q in column if not q.used)

    def is_finished(self) -> bool:
        return all(q.used for column in self._board.values() for q in column)
