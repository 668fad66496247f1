"""Game-wide settings, paths and logging setup."""
import logging
import os
from pathlib import Path

MAX_PLAYERS = 4
OPTION_KEYS = ("A", "B", "C", "D")

DEFAULT_REPORTS_DIR = Path(os.environ.get("JEOPARDY_REPORTS_DIR", "reports"))
DEFAULT_LOG_DIR = Path(os.environ.get("JEOPARDY_LOG_DIR", str(DEFAULT_REPORTS_DIR / "logs")))

SAMPLE_DATA_DIR = Path(__file__).parent / "data"
SAMPLE_FILES = {
    "csv": SAMPLE_DATA_DIR / "sample_game.csv",
    "json": SAMPLE_DATA_DIR / "sample_game.json",
    "xml": SAMPLE_DATA_DIR / "sample_game.xml",
    "yaml": SAMPLE_DATA_DIR / "sample_game.yaml",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging; level defaults to $JEOPARDY_LOG_LEVEL or WARNING."""
    level = (level or os.environ.get("JEOPARDY_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)
