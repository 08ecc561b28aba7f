"""Common utilities for tests."""

from __future__ import annotations

import datetime
from typing import Any

from rallybook.game.models import CourtSchedule, GameSubmission
from rallybook.player.models import PlayerSubmission, SkillLevel, SkillStrength

GAME_DAY = datetime.date(2025, 11, 3)


def make_player_submission(**overrides: Any) -> PlayerSubmission:
    """Build a valid player submission, overriding any field."""
    values: dict[str, Any] = {
        "nickname": "AceKing",
        "full_name": "Michael Chen",
        "contact_number": "+1 (234) 567-890",
        "email": "michael.chen@example.com",
        "address": "123 Main Street, San Francisco",
        "remarks": "Plays on Tuesdays",
        "min_level": SkillLevel.LEVEL_E,
        "min_strength": SkillStrength.MID,
        "max_level": SkillLevel.LEVEL_D,
        "max_strength": SkillStrength.STRONG,
    }
    values.update(overrides)
    return PlayerSubmission(**values)


def make_schedule(
    court: str = "Court 1",
    start_hour: int = 18,
    end_hour: int = 21,
    day: datetime.date = GAME_DAY,
) -> CourtSchedule:
    return CourtSchedule.for_date(
        court, day, datetime.time(hour=start_hour), datetime.time(hour=end_hour)
    )


def make_game_submission(**overrides: Any) -> GameSubmission:
    """Build a valid 3-hour game submission, overriding any field."""
    values: dict[str, Any] = {
        "title": "Tuesday Night Doubles",
        "court_name": "Court 1",
        "schedules": [make_schedule()],
        "court_rate": 400.0,
        "shuttle_price": 150.0,
        "divide_equally": True,
    }
    values.update(overrides)
    return GameSubmission(**values)
