"""End-of-game summary reports in TXT, PDF and DOCX."""
import logging
import re
import textwrap
from datetime import datetime
from pathlib import Path

from docx import Document
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from jeopardy.errors import UnsupportedFormatError
from jeopardy.history import GameHistory

logger = logging.getLogger(__name__)

WRAP_WIDTH = 72
RULE = "=" * 60
THIN_RULE = "-" * 60

A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
LINE_HEIGHT = 14


def default_report_name() -> str:
    return f"jeopardy_report_{datetime.now():%Y%m%d_%H%M%S}"


def sanitize_report_name(name: str) -> str:
    return re.sub(r'[\\/:*?"<>|]', "", name or "").strip()


def _section(title: str) -> list[str]:
    return [RULE, title.center(60).rstrip(), RULE, ""]


def player_rows(history: GameHistory) -> list[dict]:
    """Per-player summary in final-score order."""
    correct = history.correct_counts()
    incorrect = history.incorrect_counts()
    accuracy = history.accuracy_map()
    return [
        {
            "rank": rank,
            "player": name,
            "score": score,
            "correct": correct.get(name, 0),
            "incorrect": incorrect.get(name, 0),
            "accuracy": accuracy.get(name, 0.0),
        }
        for rank, (name, score) in enumerate(history.final_scores().items(), 1)
    ]


def summary_lines(history: GameHistory) -> list[str]:
    rows = player_rows(history)
    lines = _section("JEOPARDY GAME SUMMARY REPORT")
    lines.append(f"Generated: {datetime.now():%Y-%m-%d %H:%M}")
    lines.append("")

    lines += _section("GAME OVERVIEW")
    lines.append(f"{'Players':<18} : {len(rows)}")
    lines.append(f"{'Total Turns':<18} : {len(history)}")
    lines.append(f"{'Total Correct':<18} : {history.total_correct()}")
    lines.append(f"{'Total Incorrect':<18} : {history.total_incorrect()}")
    lines.append("")

    lines += _section("PLAYER SUMMARY")
    for row in rows:
        lines.append(THIN_RULE)
        lines.append(f"{'Player Name':<18} : {row['player']}")
        lines.append(f"{'Final Score':<18} : {row['score']}")
        lines.append(f"{'Correct Answers':<18} : {row['correct']}")
        lines.append(f"{'Incorrect Answers':<18} : {row['incorrect']}")
        lines.append(f"{'Accuracy':<18} : {row['accuracy']:.2f}%")
        lines.append(THIN_RULE)
        lines.append("")

    lines += _section("FINAL SCORES")
    lines.append(f"{'Rank':<5} {'Player':<18} {'Score':<10}")
    lines.append(THIN_RULE)
    for row in rows:
        lines.append(f"{row['rank']:<5} {row['player']:<18} {row['score']:<10}")
    lines.append("")

    lines += _section("STATISTICS")
    most_correct = history.most_correct()
    most_incorrect = history.most_incorrect()
    if most_correct:
        lines.append(f"Most Correct Answers   : {most_correct[0]} ({most_correct[1]})")
    if most_incorrect:
        lines.append(f"Most Incorrect Answers : {most_incorrect[0]} ({most_incorrect[1]})")
    lines.append("")

    lines += _section("TURN-BY-TURN LOG")
    for turn, r in enumerate(history.records, 1):
        lines.append(f"Turn {turn}: {r.player_name} - {r.category} for {r.value}")
        for part in textwrap.wrap(f"Question: {r.question_text}", WRAP_WIDTH) or [""]:
            lines.append(f"  {part}")
        result = "Correct" if r.correct else "Incorrect"
        lines.append(
            f"  Answer: {r.user_answer or '-'} (correct: {r.correct_answer}) "
            f"{result}  {r.points_earned:+d} pts  Score: {r.running_score}"
        )
        lines.append("")
    return lines


def write_txt_report(history: GameHistory, path: Path) -> Path:
    path.write_text("\n".join(summary_lines(history)) + "\n", encoding="utf-8")
    return path


def write_pdf_report(history: GameHistory, path: Path) -> Path:
    c = canvas.Canvas(str(path), pagesize=A4)
    c.setFont("Courier", 9)
    y = A4_HEIGHT - MARGIN
    for line in summary_lines(history):
        if y < MARGIN:
            c.showPage()
            c.setFont("Courier", 9)
            y = A4_HEIGHT - MARGIN
        c.drawString(MARGIN, y, line)
        y -= LINE_HEIGHT
    c.showPage()
    c.save()
    return path


def write_docx_report(history: GameHistory, path: Path) -> Path:
    doc = Document()
    doc.add_heading("Jeopardy Game Summary Report", level=0)
    doc.add_paragraph(f"Generated: {datetime.now():%Y-%m-%d %H:%M}")

    doc.add_heading("Game Overview", level=1)
    rows = player_rows(history)
    for label, value in (
        ("Players", len(rows)),
        ("Total Turns", len(history)),
        ("Total Correct", history.total_correct()),
        ("Total Incorrect", history.total_incorrect()),
    ):
        doc.add_paragraph(f"{label}: {value}", style="List Bullet")

    doc.add_heading("Player Summary", level=1)
    table = doc.add_table(rows=1, cols=6)
    table.style = "Table Grid"
    for cell, title in zip(table.rows[0].cells,
                           ("Rank", "Player", "Score", "Correct", "Incorrect", "Accuracy")):
        cell.text = title
    for row in rows:
        cells = table.add_row().cells
        cells[0].text = str(row["rank"])
        cells[1].text = row["player"]
        cells[2].text = str(row["score"])
        cells[3].text = str(row["correct"])
        cells[4].text = str(row["incorrect"])
        cells[5].text = f"{row['accuracy']:.2f}%"

    doc.add_heading("Statistics", level=1)
    most_correct = history.most_correct()
    most_incorrect = history.most_incorrect()
    if most_correct:
        doc.add_paragraph(f"Most Correct Answers: {most_correct[0]} ({most_correct[1]})")
    if most_incorrect:
        doc.add_paragraph(f"Most Incorrect Answers: {most_incorrect[0]} ({most_incorrect[1]})")

    doc.add_heading("Turn-by-Turn Log", level=1)
    for turn, r in enumerate(history.records, 1):
        result = "Correct" if r.correct else "Incorrect"
        doc.add_paragraph(
            f"Turn {turn}: {r.player_name} - {r.category} for {r.value}. "
            f"{r.question_text} Answer {r.user_answer or '-'} "
            f"(correct {r.correct_answer}): {result}, {r.points_earned:+d} pts, "
            f"score {r.running_score}"
        )
    doc.save(str(path))
    return path


WRITERS = {
    "txt": write_txt_report,
    "pdf": write_pdf_report,
    "docx": write_docx_report,
}


def generate_report(history: GameHistory, file_path, fmt: str | None = None) -> Path:
    """Write a summary report; the format comes from ``fmt`` or the file suffix."""
    if history is None:
        raise ValueError("GameHistory cannot be None")
    path = Path(file_path)
    fmt = (fmt or path.suffix or "txt").lower().lstrip(".")
    if fmt not in WRITERS:
        raise UnsupportedFormatError(f"Unsupported report format: {fmt}")
    if path.suffix.lower() != f".{fmt}":
        path = path.with_name(f"{path.name}.{fmt}")
    path.parent.mkdir(parents=True, exist_ok=True)
    WRITERS[fmt](history, path)
    logger.info(f"Wrote {fmt} report to {path}")
    return path
