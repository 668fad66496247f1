import csv

import pytest
from conftest import make_question

from jeopardy.events import LOG_FILE, GameEventLogger
from jeopardy.game import GameSession


def test_correct_answer_scores_and_passes_turn(questions):
    session = GameSession(questions, ["Ann", "Bo"])
    q = session.select("Math", 200)
    record = session.answer(q, " b ")
    assert record.correct is True
    assert record.user_answer == "B"
    assert record.points_earned == 200
    assert record.running_score == 200
    assert q.used is True
    assert session.current_player.name == "Bo"
    assert len(session.history) == 1


def test_wrong_answer_loses_value(questions):
    session = GameSession(questions, ["Ann"])
    record = session.answer(session.select("Sci", 500), "C")
    assert record.correct is False
    assert record.points_earned == -500
    assert session.players[0].score == -500


def test_used_question_cannot_be_answered_again(questions):
    session = GameSession(questions, ["Ann"])
    q = session.select("Math", 100)
    session.answer(q, "B")
    assert session.select("Math", 100) is None
    with pytest.raises(ValueError, match="already used"):
        session.answer(q, "B")
    assert len(session.history) == 1


def test_duplicate_keys_collapse_before_play():
    first = make_question("Math", 100, prompt="First?")
    second = make_question("Math", 100, prompt="Second?")
    session = GameSession([first, second], ["Ann"])
    assert session.board.remaining_count() == 1
    assert session.select("Math", 100) is second


def test_game_ends_when_board_is_empty(questions):
    session = GameSession(questions, ["Ann", "Bo"])
    for category in session.board.categories():
        for value in session.board.available_values(category):
            assert not session.is_over()
            session.answer(session.select(category, value), "B")
    assert session.is_over()
    assert len(session.history) == 4
    scores = session.history.final_scores()
    assert scores == {p.name: p.score for p in session.standings()}


def test_winner_and_standings(questions):
    session = GameSession(questions, ["Ann", "Bo"])
    session.answer(session.select("Math", 100), "A")
    session.answer(session.select("Math", 300), "B")
    assert [p.name for p in session.standings()] == ["Bo", "Ann"]
    assert session.winner().name == "Bo"


def test_rejects_bad_player_lists(questions):
    with pytest.raises(ValueError):
        GameSession(questions, [])
    with pytest.raises(ValueError):
        GameSession(questions, ["A", "B", "C", "D", "E"])
    with pytest.raises(ValueError, match="blank"):
        GameSession(questions, ["  "])


@pytest.mark.parametrize("names", [["Ann", "Ann"], ["Ann", " ann "], ["Bo", "Ann", "ANN"]])
def test_player_names_must_be_unique(questions, names):
    with pytest.raises(ValueError, match="unique"):
        GameSession(questions, names)


def test_events_are_logged(tmp_path, questions):
    session = GameSession(questions, ["Ann"], GameEventLogger(tmp_path, "GAME007"))
    session.answer(session.select("Sci", 500), "A")
    with open(tmp_path / LOG_FILE, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    activities = [r[2] for r in rows[1:]]
    assert activities == [
        "Start Game", "Select Player Count", "Enter Player Name", "Score Updated", "Answered Question",
    ]
    assert rows[2][6] == "1"
    assert rows[3][1:3] == ["Ann", "Enter Player Name"]
    assert rows[4][6] == "+500"
    answered = rows[5]
    assert answered[0] == "GAME007"
    assert answered[6] == "A) Water"
    assert answered[7] == "Correct"
    assert answered[8] == "500"
