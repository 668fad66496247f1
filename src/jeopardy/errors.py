"""Errors raised while loading questions."""


class QuestionLoadError(Exception):
    """Base class for every failure in the question-loading pipeline."""


class SourceNotFoundError(QuestionLoadError, FileNotFoundError):
    pass


class MalformedSourceError(QuestionLoadError):
    pass


class UnsupportedFormatError(QuestionLoadError, ValueError):
    pass


class QuestionValidationError(QuestionLoadError, ValueError):
    """A candidate question broke one of the validation rules.

    ``field`` names the offending field; ``record`` is the 1-based position
    of the candidate in its source when known.
    """

    def __init__(self, message: str, field: str | None = None, record: int | None = None):
        self.field = field
        self.record = record
        if record is not None:
            message = f"Record {record}: {message}"
        super().__init__(message)
