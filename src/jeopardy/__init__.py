"""Multiplayer Jeopardy: question loading, board state, turns and history."""
