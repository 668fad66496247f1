"""Question loading for CSV, JSON, XML and YAML sources."""
import csv
import io
import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import yaml

from jeopardy.errors import (
    MalformedSourceError, QuestionValidationError, SourceNotFoundError, UnsupportedFormatError,
)
from jeopardy.models import Question
from jeopardy.validator import validate_question

logger = logging.getLogger(__name__)

CSV_COLUMNS = (
    "Category", "Value", "Question", "OptionA", "OptionB", "OptionC", "OptionD", "CorrectAnswer",
)


def read_csv(text: str) -> list[dict]:
    reader = csv.DictReader(io.StringIO(text))
    try:
        header = reader.fieldnames or []
        missing = [col for col in CSV_COLUMNS if col not in header]
        if missing:
            raise MalformedSourceError(f"CSV is missing columns: {', '.join(missing)}")
        candidates = []
        for row in reader:
            candidates.append({
                "category": row["Category"],
                "value": row["Value"],
                "prompt": row["Question"],
                "options": {
                    "A": row["OptionA"],
                    "B": row["OptionB"],
                    "C": row["OptionC"],
                    "D": row["OptionD"],
                },
                "correct_answer": row["CorrectAnswer"],
            })
    except csv.Error as e:
        raise MalformedSourceError(f"Invalid CSV: {e}") from e
    return candidates


def _from_mappings(items, source: str) -> list[dict]:
    """Shared shape for JSON and YAML: a list of question objects."""
    if not isinstance(items, list):
        raise MalformedSourceError(f"{source} must contain a list of questions")
    candidates = []
    for i, item in enumerate(items, 1):
        if not isinstance(item, dict):
            raise MalformedSourceError(f"{source} item {i} is not an object")
        candidates.append({
            "category": item.get("Category"),
            "value": item.get("Value"),
            "prompt": item.get("Question"),
            "options": item.get("Options"),
            "correct_answer": item.get("CorrectAnswer"),
        })
    return candidates


def read_json(text: str) -> list[dict]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedSourceError(f"Invalid JSON: {e}") from e
    return _from_mappings(data, "JSON")


def read_yaml(text: str) -> list[dict]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedSourceError(f"Invalid YAML: {e}") from e
    if data is None:
        return []
    return _from_mappings(data, "YAML")


def _text(parent, tag: str) -> str:
    if parent is None:
        return ""
    node = parent.find(tag)
    if node is None or node.text is None:
        return ""
    return node.text.strip()


def read_xml(text: str) -> list[dict]:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedSourceError(f"Invalid XML: {e}") from e
    items = [root] if root.tag == "QuestionItem" else root.iter("QuestionItem")
    candidates = []
    for item in items:
        opts = item.find("Options")
        candidates.append({
            "category": _text(item, "Category"),
            "value": _text(item, "Value"),
            "prompt": _text(item, "QuestionText"),
            "options": {key: _text(opts, f"Option{key}") for key in "ABCD"},
            "correct_answer": _text(item, "CorrectAnswer"),
        })
    return candidates


READERS = {
    "csv": read_csv,
    "json": read_json,
    "xml": read_xml,
    "yaml": read_yaml,
    "yml": read_yaml,
}


def get_reader(fmt: str):
    """Return the candidate reader for a format name or file extension."""
    if fmt is None or not fmt.strip():
        raise UnsupportedFormatError("Format cannot be empty")
    key = fmt.strip().lower().lstrip(".")
    if key not in READERS:
        raise UnsupportedFormatError(f"Unsupported format: {fmt}")
    return READERS[key]


def parse_questions(text: str, fmt: str) -> list[Question]:
    """Parse source text and validate every record. One bad record fails the batch."""
    candidates = get_reader(fmt)(text)
    if not candidates:
        raise MalformedSourceError(f"{fmt.strip().lstrip('.').upper()} source contains no questions")
    questions = []
    for i, candidate in enumerate(candidates, 1):
        try:
            questions.append(validate_question(**candidate))
        except QuestionValidationError as e:
            raise QuestionValidationError(str(e), field=e.field, record=i) from e
    return questions


def load_questions(file_path, fmt: str | None = None) -> list[Question]:
    """Load and validate all questions from a file. Format defaults to the suffix."""
    path = Path(file_path)
    fmt = (fmt or path.suffix).strip().lower().lstrip(".")
    if not path.is_file():
        raise SourceNotFoundError(f"Question file not found: {path}")
    get_reader(fmt)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedSourceError(f"Cannot decode {path.name}: {e}") from e
    questions = parse_questions(text, fmt)
    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions
