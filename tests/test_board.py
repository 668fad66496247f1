import pytest
from conftest import make_question

from jeopardy.board import GameBoard


def test_grouping_keeps_first_seen_order_and_sorts_values(questions):
    board = GameBoard(questions)
    assert board.categories() == ["Math", "Sci"]
    assert board.available_values("Math") == [100, 200, 300]
    assert board.available_values("Sci") == [500]


def test_category_order_is_not_alphabetical():
    board = GameBoard([make_question("Zoo", 100), make_question("Art", 100)])
    assert board.categories() == ["Zoo", "Art"]


@pytest.mark.parametrize("empty", [None, []])
def test_board_requires_questions(empty):
    with pytest.raises(ValueError, match="at least one question"):
        GameBoard(empty)


def test_unknown_category_is_empty_not_error(questions):
    board = GameBoard(questions)
    assert board.available_values("History") == []
    assert board.question("History", 100) is None


def test_used_question_is_no_longer_available(questions):
    board = GameBoard(questions)
    q = board.question("Math", 100)
    board.mark_used(q)
    assert q.used is True
    assert board.question("Math", 100) is None
    assert board.available_values("Math") == [200, 300]


def test_duplicate_values_are_served_in_original_order():
    first = make_question("Math", 100, prompt="First?")
    second = make_question("Math", 100, prompt="Second?")
    board = GameBoard([first, second])
    assert board.available_values("Math") == [100, 100]
    assert board.question("Math", 100) is first
    board.mark_used(first)
    assert board.question("Math", 100) is second
    board.mark_used(second)
    assert board.question("Math", 100) is None


def test_mark_used_none_is_noop(questions):
    board = GameBoard(questions)
    board.mark_used(None)
    assert board.remaining_count() == 4


def test_finished_iff_nothing_remains(questions):
    board = GameBoard(questions)
    for category in board.categories():
        for value in list(board.available_values(category)):
            assert board.is_finished() == (board.remaining_count() == 0)
            board.mark_used(board.question(category, value))
    assert board.remaining_count() == 0
    assert board.is_finished()


def test_marking_twice_does_not_double_count(questions):
    board = GameBoard(questions)
    q = board.question("Sci", 500)
    board.mark_used(q)
    board.mark_used(q)
    assert board.remaining_count() == 3
