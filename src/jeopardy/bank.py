"""Question lookup keyed by (category, value)."""
import logging
from collections.abc import Iterable

from jeopardy.models import Question

logger = logging.getLogger(__name__)


class QuestionBank:
    """Index of validated questions, one per (category, value).

    A later question with the same category and value replaces the earlier
    one without complaint, so ``size()`` can be smaller than the number of
    questions added.
    """

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: dict[str, dict[int, Question]] = {}
        for q in questions:
            self.add(q)

    def add(self, question: Question) -> None:
        by_value = self._questions.setdefault(question.category, {})
        if question.value in by_value:
            logger.debug(f"Replacing {question.category}/{question.value}")
        by_value[question.value] = question

    def get(self, category: str, value: int) -> Question | None:
        return self._questions.get(category, {}).get(value)

    def has_question(self, category: str, value: int) -> bool:
        return self.get(category, value) is not None

    def categories(self) -> set[str]:
        return set(self._questions)

    def values_in(self, category: str) -> set[int]:
        return set(self._questions.get(category, {}))

    def size(self) -> int:
        return sum(len(by_value) for by_value in self._questions.values())

    def __len__(self) -> int:
        return self.size()

    def all_questions(self) -> list[Question]:
        return [q for by_value in self._questions.values() for q in by_value.values()]
