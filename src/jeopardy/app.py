"""Interactive CLI application."""
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from jeopardy.config import (
    DEFAULT_LOG_DIR, DEFAULT_REPORTS_DIR, MAX_PLAYERS, OPTION_KEYS, SAMPLE_FILES,
    configure_logging,
)
from jeopardy.errors import QuestionLoadError
from jeopardy.events import GameEventLogger
from jeopardy.game import GameSession
from jeopardy.parsers import load_questions
from jeopardy.report import default_report_name, generate_report, sanitize_report_name

console = Console()

REPORT_FORMATS = {"1": "txt", "2": "pdf", "3": "docx"}


def show_welcome():
    console.print(Panel(
        "[bold]Multiplayer Jeopardy[/bold]\n[dim]Pick a category, pick a value, answer A-D[/dim]",
        title="Welcome", border_style="blue",
    ))


def choose_source(argv: list[str]) -> Path:
    if argv:
        return Path(argv[0])
    console.print("\n[bold]Choose a question file:[/bold]")
    formats = list(SAMPLE_FILES)
    for i, fmt in enumerate(formats, 1):
        console.print(f"  [cyan]{i}[/cyan]) {fmt.upper()}")
    choice = Prompt.ask("Format", choices=[str(i) for i in range(1, len(formats) + 1)], default="2")
    return SAMPLE_FILES[formats[int(choice) - 1]]


def setup_players() -> list[str]:
    count = int(Prompt.ask(
        f"How many players? (1-{MAX_PLAYERS})",
        choices=[str(n) for n in range(1, MAX_PLAYERS + 1)],
    ))
    names = []
    for i in range(1, count + 1):
        taken = {n.casefold() for n in names}
        name = Prompt.ask(f"Enter name for player #{i}").strip()
        while not name or name.casefold() in taken:
            if name:
                console.print(f"[red]{name} is already playing.[/red]")
            else:
                console.print("[red]Name cannot be blank.[/red]")
            name = Prompt.ask(f"Enter name for player #{i}").strip()
        names.append(name)
    return names


def show_board(session: GameSession):
    table = Table(title="Board")
    table.add_column("Category", style="cyan")
    table.add_column("Available values")
    for category in session.board.categories():
        values = session.board.available_values(category)
        table.add_row(category, ", ".join(str(v) for v in values) or "[dim]done[/dim]")
    console.print(table)
    session.log_event("SYSTEM", "Show Board", result="OK")


def ask_question(session: GameSession, question) -> None:
    console.print(Panel(
        question.prompt,
        title=f"{question.category} for {question.value} pts",
        border_style="cyan",
    ))
    for key in OPTION_KEYS:
        console.print(f"  [cyan]{key})[/cyan] {question.options[key]}")
    answer = Prompt.ask("\nYour answer (A-D)")
    record = session.answer(question, answer)
    if record.correct:
        console.print("[green]Correct![/green]")
    else:
        console.print(f"[red]Incorrect.[/red] Answer: [green]{record.correct_answer}[/green]")
    console.print(f"Points earned: {record.points_earned}  |  Running score: {record.running_score}")


def play_turn(session: GameSession) -> bool:
    """Run one selection-and-answer cycle. Returns False when the player quits."""
    player = session.current_player
    console.print(f"\n[bold]Turn: {player.name}[/bold] ({player.score} pts)")
    session.log_event(player.name, "Start Turn", score_after=player.score)
    show_board(session)

    while True:
        category = Prompt.ask("Enter category or Q to quit").strip()
        if category.upper() == "Q":
            session.log_event(player.name, "Exit Game", score_after=player.score)
            return False
        if category not in session.board.categories():
            console.print("[red]Invalid category, try again.[/red]")
            session.log_event(player.name, "Select Category", category,
                              result="Invalid", score_after=player.score)
            continue
        values = session.board.available_values(category)
        if not values:
            console.print("[yellow]No values left in that category![/yellow]")
            continue
        session.log_event(player.name, "Select Category", category,
                          result="OK", score_after=player.score)
        break

    while True:
        raw = Prompt.ask(f"Enter value {values}").strip()
        try:
            value = int(raw)
        except ValueError:
            console.print("[red]Invalid number.[/red]")
            continue
        question = session.select(category, value)
        if question is None:
            console.print("[red]Invalid value.[/red]")
            session.log_event(player.name, "Select Question", category, value,
                              result="Invalid", score_after=player.score)
            continue
        session.log_event(player.name, "Select Question", category, value,
                          result="OK", score_after=player.score)
        break

    ask_question(session, question)
    return True


def show_final_scores(session: GameSession):
    table = Table(title="Final Scoreboard")
    table.add_column("Rank", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("Score", justify="right")
    for rank, player in enumerate(session.standings(), 1):
        table.add_row(str(rank), player.name, str(player.score))
    console.print(table)
    console.print(f"Turns played: {len(session.history)}")

    winner = session.winner()
    if winner:
        console.print(f"\n[bold green]WINNER: {winner.name} with {winner.score} points![/bold green]")
    best = session.history.most_correct()
    if best:
        console.print(f"Most correct answers: {best[0]} ({best[1]})")
    worst = session.history.most_incorrect()
    if worst:
        console.print(f"Most incorrect answers: {worst[0]} ({worst[1]})")


def offer_report(session: GameSession, reports_dir: Path) -> Path | None:
    if Prompt.ask("\nGenerate report?", choices=["y", "n"], default="n") != "y":
        session.log_event("SYSTEM", "Generate Report", result="Cancelled")
        return None
    console.print("  [cyan]1[/cyan]) TXT\n  [cyan]2[/cyan]) PDF\n  [cyan]3[/cyan]) DOCX\n  [cyan]0[/cyan]) Cancel")
    choice = Prompt.ask("Format", choices=["0", "1", "2", "3"], default="1")
    if choice == "0":
        session.log_event("SYSTEM", "Generate Report", result="Cancelled")
        return None
    fmt = REPORT_FORMATS[choice]
    name = sanitize_report_name(Prompt.ask("Report name (leave empty for default)", default=""))
    path = Path(reports_dir) / f"{name or default_report_name()}.{fmt}"
    try:
        path = generate_report(session.history, path, fmt)
    except OSError as e:
        console.print(f"[red]Error creating report: {e}[/red]")
        session.log_event("SYSTEM", "Generate Report", result="Failed")
        return None
    session.log_event("SYSTEM", "Generate Report", answer=fmt, result="OK")
    console.print(f"[green]Report created: {path}[/green]")
    return path


def run_game(session: GameSession) -> None:
    while not session.is_over():
        if not play_turn(session):
            console.print("\n[dim]Player quit. Ending game...[/dim]")
            break


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    show_welcome()

    source = choose_source(argv)
    try:
        questions = load_questions(source)
    except QuestionLoadError as e:
        console.print(f"[red]Error loading questions: {e}[/red]")
        return 1
    console.print(f"[green]Loaded {len(questions)} questions from {source.name}.[/green]")

    event_logger = GameEventLogger.for_session(DEFAULT_LOG_DIR)
    session = GameSession(questions, setup_players(), event_logger)
    session.log_event("SYSTEM", "File Loaded Successfully", answer=source.name, result="Success")

    try:
        run_game(session)
    except KeyboardInterrupt:
        console.print("\n[dim]Game interrupted.[/dim]")
    show_final_scores(session)
    offer_report(session, DEFAULT_REPORTS_DIR)
    session.log_event("SYSTEM", "Exit Game", result="OK")
    console.print("[dim]Thanks for playing![/dim]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
