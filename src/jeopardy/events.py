"""CSV event log of everything that happens in a game session."""
import csv
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_FILE = "game_event_log.csv"
COUNTER_FILE = "game_counter.txt"
HEADER = [
    "Case_ID", "Player_ID", "Activity", "Timestamp", "Category",
    "Question_Value", "Answer_Given", "Result", "Score_After_Play",
]
TS_FORMAT = "%Y-%m-%dT%H:%M:%S"


class SessionCounter:
    """Sequence of session numbers persisted in a one-line text file."""

    def __init__(self, path):
        self.path = Path(path)

    def next(self) -> int:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        number = 1
        if self.path.exists():
            try:
                number = int(self.path.read_text().strip()) + 1
            except (OSError, ValueError) as e:
                logger.warning(f"Unreadable session counter {self.path}, restarting at 1: {e}")
                number = 1
        self.path.write_text(str(number))
        return number


class GameEventLogger:
    """Appends one row per game event to ``game_event_log.csv`` under ``log_dir``."""

    def __init__(self, log_dir, case_id: str):
        self.log_dir = Path(log_dir)
        self.case_id = case_id
        self.path = self.log_dir / LOG_FILE
        self._ensure_header()

    @classmethod
    def for_session(cls, log_dir, counter: SessionCounter | None = None) -> "GameEventLogger":
        """Create a logger whose case id (GAME001, GAME002, ...) comes from ``counter``."""
        counter = counter or SessionCounter(Path(log_dir) / COUNTER_FILE)
        return cls(log_dir, f"GAME{counter.next():03d}")

    def _ensure_header(self) -> None:
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                with self.path.open("w", newline="", encoding="utf-8") as f:
                    csv.writer(f).writerow(HEADER)
        except OSError as e:
            logger.error(f"Could not create event log {self.path}: {e}")

    def log(self, player_id, activity, category="", question_value="",
            answer="", result="", score_after="0") -> None:
        row = [
            self.case_id, player_id, activity, datetime.now().strftime(TS_FORMAT),
            category, question_value, answer, result, score_after,
        ]
        row = ["" if cell is None else str(cell) for cell in row]
        try:
            with self.path.open("a", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow(row)
        except OSError as e:
            logger.error(f"Could not write event log {self.path}: {e}")
