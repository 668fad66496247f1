"""Data classes for the game domain model."""
from dataclasses import dataclass


@dataclass
class Question:
    category: str
    value: int
    prompt: str
    options: dict[str, str]
    correct_answer: str
    used: bool = False

    def option_text(self, key: str) -> str | None:
        return self.options.get(key)


@dataclass
class Player:
    name: str
    score: int = 0

    def __post_init__(self):
        if self.name is None or not str(self.name).strip():
            raise ValueError("Player name cannot be blank")
        self.name = str(self.name).strip()

    def add_score(self, points: int) -> None:
        self.score += points

    def __str__(self) -> str:
        return f"{self.name} ({self.score})"


@dataclass(frozen=True)
class GameRecord:
    player_name: str
    category: str
    value: int
    question_text: str
    user_answer: str
    correct_answer: str
    correct: bool
    points_earned: int
    running_score: int

    def __str__(self) -> str:
        return (
            f"[{self.player_name:<12}] ({self.category} / {self.value} pts)  "
            f"Ans='{self.user_answer}' Correct={self.correct} "
            f"Earned={self.points_earned}  Score={self.running_score}"
        )
