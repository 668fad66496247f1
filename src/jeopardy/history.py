"""Turn history and the statistics derived from it."""
from jeopardy.models import GameRecord


class GameHistory:
    """Append-only log of resolved turns.

    Every statistic is recomputed from the records on each call. Where
    players tie, the one who appears first in the history comes first.
    """

    def __init__(self):
        self._records: list[GameRecord] = []

    def add(self, record: GameRecord | None) -> None:
        if record is not None:
            self._records.append(record)

    @property
    def records(self) -> tuple[GameRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def players(self) -> list[str]:
        return list(dict.fromkeys(r.player_name for r in self._records))

    def final_scores(self) -> dict[str, int]:
        """Latest running score per player, highest first."""
        latest = {name: 0 for name in self.players()}
        for r in self._records:
            latest[r.player_name] = r.running_score
        ranked = sorted(latest.items(), key=lambda item: item[1], reverse=True)
        return dict(ranked)

    def _counts(self, correct: bool) -> dict[str, int]:
        counts = {name: 0 for name in self.players()}
        for r in self._records:
            if r.correct == correct:
                counts[r.player_name] += 1
        return {name: n for name, n in counts.items() if n}

    def correct_counts(self) -> dict[str, int]:
        return self._counts(True)

    def incorrect_counts(self) -> dict[str, int]:
        return self._counts(False)

    def total_correct(self) -> int:
        return sum(self.correct_counts().values())

    def total_incorrect(self) -> int:
        return sum(self.incorrect_counts().values())

    def accuracy_map(self) -> dict[str, float]:
        """Percentage of correct answers per player."""
        correct = self.correct_counts()
        incorrect = self.incorrect_counts()
        accuracy = {}
        for name in self.players():
            c = correct.get(name, 0)
            total = c + incorrect.get(name, 0)
            accuracy[name] = c * 100.0 / total if total else 0.0
        return accuracy

    @staticmethod
    def _leader(counts: dict[str, int]) -> tuple[str, int] | None:
        best = None
        for name, count in counts.items():
            if best is None or count > best[1]:
                best = (name, count)
        return best

    def most_correct(self) -> tuple[str, int] | None:
        return self._leader(self.correct_counts())

    def most_incorrect(self) -> tuple[str, int] | None:
        return self._leader(self.incorrect_counts())
