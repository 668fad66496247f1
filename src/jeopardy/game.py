"""Game session: resolves turns against the board, turn order and history."""
import logging

from jeopardy.bank import QuestionBank
from jeopardy.board import GameBoard
from jeopardy.events import GameEventLogger
from jeopardy.history import GameHistory
from jeopardy.models import GameRecord, Player, Question
from jeopardy.turns import TurnManager

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the board and history of one game and is the only thing that mutates them."""

    def __init__(self, questions: list[Question], player_names: list[str],
                 event_logger: GameEventLogger | None = None):
        self.bank = QuestionBank(questions)
        self.board = GameBoard(self.bank.all_questions())
        self.players = [Player(name) for name in player_names or []]
        if len({p.name.casefold() for p in self.players}) != len(self.players):
            raise ValueError("Player names must be unique")
        self.turns = TurnManager(self.players)
        self.history = GameHistory()
        self.event_logger = event_logger
        self.log_event("SYSTEM", "Start Game")
        self.log_event("SYSTEM", "Select Player Count", answer=len(self.players), result="OK")
        for player in self.players:
            self.log_event(player.name, "Enter Player Name", answer=player.name, result="OK")

    def log_event(self, player_id, activity, category="", question_value="",
                  answer="", result="", score_after="0") -> None:
        if self.event_logger is not None:
            self.event_logger.log(player_id, activity, category, question_value,
                                  answer, result, score_after)

    @property
    def current_player(self) -> Player:
        return self.turns.current_player

    def select(self, category: str, value: int) -> Question | None:
        return self.board.question(category, value)

    def answer(self, question: Question, answer_key: str) -> GameRecord:
        """Score the current player's answer, record the turn and pass play on."""
        if question.used:
            raise ValueError(f"Question {question.category}/{question.value} was already used")
        player = self.current_player
        given = (answer_key or "").strip().upper()
        correct = given == question.correct_answer
        earned = question.value if correct else -question.value
        player.add_score(earned)
        self.board.mark_used(question)

        record = GameRecord(
            player_name=player.name,
            category=question.category,
            value=question.value,
            question_text=question.prompt,
            user_answer=given,
            correct_answer=question.correct_answer,
            correct=correct,
            points_earned=earned,
            running_score=player.score,
        )
        self.history.add(record)
        full_answer = question.option_text(given) or ""
        self.log_event(
            player.name, "Score Updated", question.category, question.value,
            f"{earned:+d}", "Correct" if correct else "Incorrect", player.score,
        )
        self.log_event(
            player.name, "Answered Question", question.category, question.value,
            f"{given}) {full_answer}", "Correct" if correct else "Incorrect", player.score,
        )
        logger.debug(f"{record}")
        self.turns.next()
        return record

    def is_over(self) -> bool:
        return self.board.is_finished()

    def standings(self) -> list[Player]:
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def winner(self) -> Player | None:
        standings = self.standings()
        return standings[0] if standings else None
