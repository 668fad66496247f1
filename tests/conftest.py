import pytest

from jeopardy.models import GameRecord, Question


def make_question(category="Math", value=100, prompt="What is 2 + 2?", correct="B", **options):
    opts = {"A": "3", "B": "4", "C": "5", "D": "22"}
    opts.update(options)
    return Question(category=category, value=value, prompt=prompt, options=opts, correct_answer=correct)


def make_record(player, correct, value=100, running_score=0, category="Math"):
    return GameRecord(
        player_name=player, category=category, value=value, question_text="Q?",
        user_answer="A", correct_answer="A" if correct else "B", correct=correct,
        points_earned=value if correct else -value, running_score=running_score,
    )


@pytest.fixture
def questions():
    """A small board: two categories, Math listed out of value order."""
    return [
        make_question("Math", 300),
        make_question("Math", 100),
        make_question("Math", 200),
        make_question("Sci", 500, prompt="H2O is?", correct="A", A="Water"),
    ]
