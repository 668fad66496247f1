"""Round-robin turn order."""
from jeopardy.config import MAX_PLAYERS
from jeopardy.models import Player


class TurnManager:
    def __init__(self, players: list[Player]):
        if not players:
            raise ValueError("Must have at least one player")
        if len(players) > MAX_PLAYERS:
            raise ValueError(f"Maximum {MAX_PLAYERS} players allowed")
        self._players = tuple(players)
        self._index = 0

    @property
    def current_player(self) -> Player:
        return self._players[self._index]

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def player_count(self) -> int:
        return len(self._players)

    def next(self) -> Player:
        """Pass the turn to the next player, wrapping after the last."""
        self._index = (self._index + 1) % len(self._players)
        return self.current_player
