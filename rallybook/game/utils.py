"""Utility functions for game rosters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from rallybook.player.models import Player

    from .models import Game


def players_in_game(game: Game, players: Iterable[Player]) -> list[Player]:
    """Resolve a game's player IDs, in registry order.

    IDs that no longer match a player are skipped.
    """
    members = set(game.player_ids)
    return [player for player in players if player.id in members]


def available_players(
    game: Game, players: Iterable[Player], query: str = ""
) -> list[Player]:
    """List players not yet in the game, optionally filtered by name."""
    members = set(game.player_ids)
    candidates = [player for player in players if player.id not in members]
    if not query.strip():
        return candidates
    return [player for player in candidates if player.matches(query)]


def stale_player_ids(game: Game, players: Iterable[Player]) -> list[str]:
    """Return the game's player IDs that no longer match any player."""
    known = {player.id for player in players}
    return [pid for pid in game.player_ids if pid not in known]
