"""Service layer for game sessions."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Optional

from rallybook.core.registry import Registry
from rallybook.core.validators import validate_schedules_non_empty
from rallybook.errors import ValidationError
from rallybook.signals import (
    CLEARED,
    CREATED,
    DELETED,
    PLAYER_ADDED,
    PLAYER_REMOVED,
    UPDATED,
    games_changed,
)

from .models import Game, GameSubmission

if TYPE_CHECKING:
    from flask import Flask

    from rallybook.player.services import PlayerRegistry

logger = logging.getLogger(__name__)


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


class GameRegistry(Registry[Game]):
    """Owns the game sessions, their court bookings and player membership."""

    signal = games_changed
    extension_name = "rallybook.games"
    entity_name = "game"

    def __init__(self, app: Optional[Flask] = None) -> None:
        self._followed: Optional[PlayerRegistry] = None
        super().__init__(app)

    @property
    def games(self) -> tuple[Game, ...]:
        """Return a read-only snapshot of all games in insertion order."""
        return self._snapshot()

    @staticmethod
    def _validate(submission: GameSubmission) -> None:
        """Raise a ValidationError naming the first violated constraint."""
        checks = (
            ("court_name", not submission.court_name, "Court name cannot be empty"),
            (
                "schedules",
                not submission.schedules,
                validate_schedules_non_empty(len(submission.schedules)),
            ),
            (
                "court_rate",
                not _is_positive(submission.court_rate),
                "Court rate must be greater than 0",
            ),
            (
                "shuttle_price",
                not _is_positive(submission.shuttle_price),
                "Shuttle cock price must be greater than 0",
            ),
            (
                "schedules",
                not all(s.is_valid for s in submission.schedules),
                "End time must be after start time",
            ),
        )
        for field, failed, error in checks:
            if failed:
                logger.warning(f"Rejected game submission: {error}")
                raise ValidationError(error, field=field)

    def create(self, submission: GameSubmission) -> Game:
        """Validate and add a new game.

        Raises:
            ValidationError: If the court name, schedules or prices are invalid.
        """
        submission = submission.cleaned()
        self._validate(submission)

        game = Game.create(submission)
        self._items.append(game)
        logger.info(f"Created game {game.id} ({game.display_title})")
        self._notify(CREATED, game=game)
        return game

    def update(self, game_id: str, submission: GameSubmission) -> Optional[Game]:
        """Replace a game's editable fields.

        Player membership is kept when the submission carries no player IDs.
        Returns the updated game, or None if no game has that ID.
        """
        index = self._index_of(game_id)
        if index == -1:
            logger.info(f"Update skipped, no game with id {game_id}")
            return None

        submission = submission.cleaned()
        self._validate(submission)

        existing = self._items[index]
        updated = existing.replace(
            title=submission.title,
            court_name=submission.court_name,
            schedules=tuple(submission.schedules),
            court_rate=float(submission.court_rate),
            shuttle_price=float(submission.shuttle_price),
            divide_equally=bool(submission.divide_equally),
            player_ids=(
                submission.player_ids
                if submission.player_ids is not None
                else existing.player_ids
            ),
        )
        self._items[index] = updated
        logger.info(f"Updated game {game_id}")
        self._notify(UPDATED, game=updated)
        return updated

    def search(self, query: str) -> list[Game]:
        """Find games whose display title or schedule date contains the query."""
        if not query or not query.strip():
            return list(self._items)
        return [game for game in self._items if game.matches(query)]

    def add_player_to_game(self, game_id: str, player_id: str) -> bool:
        """Add a player to a game. Returns False if not found or already added."""
        index = self._index_of(game_id)
        if index == -1:
            return False

        game = self._items[index]
        if player_id in game.player_ids:
            return False

        updated = game.with_player(player_id)
        self._items[index] = updated
        logger.info(f"Added player {player_id} to game {game_id}")
        self._notify(PLAYER_ADDED, game=updated, player_id=player_id)
        return True

    def remove_player_from_game(self, game_id: str, player_id: str) -> bool:
        """Remove a player from a game. Returns False if not found or absent."""
        index = self._index_of(game_id)
        if index == -1:
            return False

        game = self._items[index]
        if player_id not in game.player_ids:
            return False

        updated = game.without_player(player_id)
        self._items[index] = updated
        logger.info(f"Removed player {player_id} from game {game_id}")
        self._notify(PLAYER_REMOVED, game=updated, player_id=player_id)
        return True

    def detach_player(self, player_id: str) -> int:
        """Remove a player from every game. Returns how many games changed."""
        changed = 0
        for game in self._snapshot():
            if self.remove_player_from_game(game.id, player_id):
                changed += 1
        return changed

    def follow(self, players: PlayerRegistry) -> None:
        """Detach players from all games when they are deleted from ``players``."""
        if self._followed is players:
            return
        if self._followed is not None:
            self._followed.disconnect(self._on_players_changed)
        players.connect(self._on_players_changed)
        self._followed = players

    def unfollow(self) -> None:
        if self._followed is not None:
            self._followed.disconnect(self._on_players_changed)
            self._followed = None

    def _on_players_changed(self, sender: Any, action: str, **payload: Any) -> None:
        if action == DELETED:
            removed = [payload["player"]]
        elif action == CLEARED:
            removed = list(payload.get("removed", ()))
        else:
            return

        for player in removed:
            changed = self.detach_player(player.id)
            if changed:
                logger.info(
                    f"Detached deleted player {player.id} from {changed} game(s)"
                )
