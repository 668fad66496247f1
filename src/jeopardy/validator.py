"""Validation rules shared by every question source.

Each source adapter turns raw input into loose candidate fields; this module
is the only place that decides whether those fields make a playable
``Question``. Rules run in a fixed order and the first failure wins, so the
outcome is a deterministic function of the candidate.
"""
from collections.abc import Mapping
from typing import Any

from jeopardy.config import OPTION_KEYS
from jeopardy.errors import QuestionValidationError
from jeopardy.models import Question


def _clean_text(raw: Any, label: str, field: str) -> str:
    """Return trimmed text, failing on None, blanks and non-string values."""
    if raw is None:
        raise QuestionValidationError(f"{label} cannot be blank", field=field)
    if not isinstance(raw, str):
        raise QuestionValidationError(f"{label} must be text", field=field)
    text = raw.strip()
    if not text:
        raise QuestionValidationError(f"{label} cannot be blank", field=field)
    return text


def parse_value(raw: Any) -> int:
    """Coerce a raw point value to a positive int."""
    if isinstance(raw, bool) or raw is None:
        raise QuestionValidationError("Value must be a valid integer", field="value")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise QuestionValidationError("Value must be a valid integer", field="value")
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise QuestionValidationError("Value must be a valid integer", field="value") from None
    if value <= 0:
        raise QuestionValidationError("Value must be a positive integer", field="value")
    return value


def validate_options(options: Any) -> dict[str, str]:
    if options is None:
        raise QuestionValidationError("Options cannot be missing", field="options")
    if not isinstance(options, Mapping):
        raise QuestionValidationError("Options must be a mapping", field="options")
    if len(options) != len(OPTION_KEYS):
        raise QuestionValidationError("Options must contain exactly 4 entries", field="options")
    if set(options) != set(OPTION_KEYS):
        raise QuestionValidationError("Options must include keys A, B, C, D", field="options")
    return {key: _clean_text(options[key], f"Option {key}", "options") for key in OPTION_KEYS}


def validate_question(category, value, prompt, options, correct_answer) -> Question:
    """Check every rule against the raw fields and build the Question."""
    # YAML reads numeric names such as 1990 as ints
    if isinstance(category, int) and not isinstance(category, bool):
        category = str(category)
    category = _clean_text(category, "Category", "category")
    prompt = _clean_text(prompt, "Question text", "prompt")
    points = parse_value(value)
    clean_options = validate_options(options)
    answer = _clean_text(correct_answer, "Correct answer", "correct_answer")
    if answer not in OPTION_KEYS:
        raise QuestionValidationError(
            "Correct answer must be one of A, B, C, or D", field="correct_answer"
        )
    return Question(
        category=category,
        value=points,
        prompt=prompt,
        options=clean_options,
        correct_answer=answer,
    )
