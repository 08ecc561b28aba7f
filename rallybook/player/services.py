"""Service layer for player profiles."""

from __future__ import annotations

import logging
from typing import Optional

from rallybook.core.registry import Registry
from rallybook.core.validators import (
    validate_address,
    validate_email,
    validate_full_name,
    validate_level_range,
    validate_nickname,
    validate_phone,
)
from rallybook.errors import (
    DuplicateResourceError,
    InvalidSkillRangeError,
    ValidationError,
)
from rallybook.signals import CREATED, UPDATED, players_changed

from .models import Player, PlayerSubmission

logger = logging.getLogger(__name__)


class PlayerRegistry(Registry[Player]):
    """Owns the player profiles and enforces their invariants.

    Nickname and email uniqueness is checked inside ``create`` and ``update``
    so a caller cannot add a duplicate by skipping the pre-check. The
    ``is_nickname_exists``/``is_email_exists`` helpers stay available for
    forms that want to warn before submitting.
    """

    signal = players_changed
    extension_name = "rallybook.players"
    entity_name = "player"

    @property
    def players(self) -> tuple[Player, ...]:
        """Return a read-only snapshot of all players in insertion order."""
        return self._snapshot()

    @staticmethod
    def _validate(submission: PlayerSubmission) -> None:
        """Raise on the first invalid field, checking the skill range last."""
        for field, error in (
            ("nickname", validate_nickname(submission.nickname)),
            ("full_name", validate_full_name(submission.full_name)),
            ("contact_number", validate_phone(submission.contact_number)),
            ("email", validate_email(submission.email)),
            ("address", validate_address(submission.address)),
        ):
            if error:
                logger.warning(f"Rejected player submission: {error}")
                raise ValidationError(error, field=field)

        range_error = validate_level_range(
            submission.min_level,
            submission.min_strength,
            submission.max_level,
            submission.max_strength,
        )
        if range_error:
            logger.warning(f"Rejected player submission: {range_error}")
            raise InvalidSkillRangeError(range_error)

    def _ensure_unique(
        self, submission: PlayerSubmission, exclude_id: Optional[str] = None
    ) -> None:
        if self.is_nickname_exists(submission.nickname, exclude_id=exclude_id):
            logger.warning(f"Duplicate nickname rejected: {submission.nickname}")
            raise DuplicateResourceError(
                f'Nickname "{submission.nickname}" already exists', field="nickname"
            )
        if self.is_email_exists(submission.email, exclude_id=exclude_id):
            logger.warning(f"Duplicate email rejected: {submission.email}")
            raise DuplicateResourceError(
                f'Email "{submission.email}" already exists', field="email"
            )

    def create(self, submission: PlayerSubmission) -> Player:
        """Validate and add a new player.

        Raises:
            ValidationError: If a field is malformed.
            InvalidSkillRangeError: If the minimum skill exceeds the maximum.
            DuplicateResourceError: If the nickname or email is taken.
        """
        submission = submission.cleaned()
        self._validate(submission)
        self._ensure_unique(submission)

        player = Player.create(submission)
        self._items.append(player)
        logger.info(f"Created player {player.id} ({player.nickname})")
        self._notify(CREATED, player=player)
        return player

    def update(self, player_id: str, submission: PlayerSubmission) -> Optional[Player]:
        """Replace a player's editable fields.

        Returns the updated player, or None if no player has that ID.
        """
        index = self._index_of(player_id)
        if index == -1:
            logger.info(f"Update skipped, no player with id {player_id}")
            return None

        submission = submission.cleaned()
        self._validate(submission)
        self._ensure_unique(submission, exclude_id=player_id)

        updated = self._items[index].replace(**submission.fields())
        self._items[index] = updated
        logger.info(f"Updated player {player_id}")
        self._notify(UPDATED, player=updated)
        return updated

    def search(self, query: str) -> list[Player]:
        """Find players whose nickname or full name contains the query."""
        if not query or not query.strip():
            return list(self._items)
        return [player for player in self._items if player.matches(query)]

    def is_nickname_exists(
        self, nickname: str, exclude_id: Optional[str] = None
    ) -> bool:
        """Return True if another player already uses this nickname."""
        nickname = nickname.strip()
        return any(
            p.nickname == nickname and p.id != exclude_id for p in self._items
        )

    def is_email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """Return True if another player already uses this email."""
        email = email.strip()
        return any(p.email == email and p.id != exclude_id for p in self._items)
