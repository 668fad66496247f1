from conftest import make_question

from jeopardy.bank import QuestionBank


def test_lookup_by_category_and_value(questions):
    bank = QuestionBank(questions)
    assert bank.get("Math", 200) is questions[2]
    assert bank.get("Math", 999) is None
    assert bank.get("History", 100) is None
    assert bank.has_question("Sci", 500)
    assert not bank.has_question("Sci", 100)


def test_categories_and_values(questions):
    bank = QuestionBank(questions)
    assert bank.categories() == {"Math", "Sci"}
    assert bank.values_in("Math") == {100, 200, 300}
    assert bank.values_in("History") == set()


def test_duplicate_key_last_write_wins():
    first = make_question("Math", 100, prompt="First?")
    second = make_question("Math", 100, prompt="Second?")
    bank = QuestionBank([first])
    bank.add(second)
    assert bank.size() == 1
    assert len(bank) == 1
    assert bank.get("Math", 100) is second


def test_size_counts_distinct_keys(questions):
    bank = QuestionBank(questions + [make_question("Sci", 500)])
    assert bank.size() == 4
    assert len(bank.all_questions()) == 4


def test_all_questions_keeps_insertion_order(questions):
    bank = QuestionBank(questions)
    assert bank.all_questions() == questions


def test_empty_bank():
    bank = QuestionBank()
    assert bank.size() == 0
    assert bank.categories() == set()
    assert bank.all_questions() == []
