"""End-to-end game over the bundled sample questions."""
import pytest

from jeopardy.config import SAMPLE_FILES
from jeopardy.game import GameSession
from jeopardy.parsers import load_questions
from jeopardy.report import generate_report


@pytest.mark.parametrize("fmt", ["csv", "xml"])
def test_play_whole_sample_board(tmp_path, fmt):
    questions = load_questions(SAMPLE_FILES[fmt])
    session = GameSession(questions, ["Ann", "Bo", "Cy"])
    assert session.board.categories() == [
        "Variables & Data Types", "Control Structures", "OOP Concepts",
    ]

    turns = 0
    while not session.is_over():
        player = session.current_player
        category = next(c for c in session.board.categories() if session.board.available_values(c))
        value = session.board.available_values(category)[0]
        question = session.select(category, value)
        # Ann always answers correctly, everyone else always picks A
        answer = question.correct_answer if player.name == "Ann" else "A"
        session.answer(question, answer)
        turns += 1

    assert turns == 9
    history = session.history
    assert len(history) == 9
    assert history.correct_counts()["Ann"] == 3
    assert history.accuracy_map()["Ann"] == 100.0
    assert history.most_correct()[0] == "Ann"
    assert sum(history.correct_counts().values()) + sum(history.incorrect_counts().values()) == 9
    for name, score in history.final_scores().items():
        assert score == sum(r.points_earned for r in history.records if r.player_name == name)
    assert session.winner().name == "Ann"

    report = generate_report(history, tmp_path / "game", "txt")
    assert "Total Turns        : 9" in report.read_text()
