"""Sample data for development and manual testing.

Never call these from production code paths: every ``seed_*`` function
clears the registry it fills first.
"""

from __future__ import annotations

import datetime
import logging
import random
from typing import Any, Optional

from faker import Faker

from .errors import AppError
from .game.models import CourtSchedule, GameSubmission
from .game.services import GameRegistry
from .player.models import (
    MAX_SKILL_ORDINAL,
    PlayerSubmission,
    SkillLevel,
    SkillStrength,
    from_skill_ordinal,
)
from .player.services import PlayerRegistry
from .settings.models import UserSettings

logger = logging.getLogger(__name__)

L = SkillLevel
S = SkillStrength

SAMPLE_PLAYERS: list[dict[str, Any]] = [
    {
        "nickname": "AceKing",
        "full_name": "Michael Chen",
        "contact_number": "+1234567890",
        "email": "michael.chen@example.com",
        "address": "123 Main Street, San Francisco, CA 94102",
        "remarks": "Plays every Tuesday and Thursday evening",
        "min_level": L.LEVEL_E,
        "min_strength": S.MID,
        "max_level": L.LEVEL_D,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "SmashQueen",
        "full_name": "Sarah Johnson",
        "contact_number": "+1234567891",
        "email": "sarah.j@example.com",
        "address": "456 Oak Avenue, San Francisco, CA 94103",
        "remarks": "Prefers doubles, available weekends",
        "min_level": L.LEVEL_F,
        "min_strength": S.WEAK,
        "max_level": L.LEVEL_E,
        "max_strength": S.MID,
    },
    {
        "nickname": "RallyKing",
        "full_name": "David Martinez",
        "contact_number": "+1234567892",
        "email": "david.m@example.com",
        "address": "789 Pine Street, Oakland, CA 94607",
        "remarks": "New to competitive play",
        "min_level": L.INTERMEDIATE,
        "min_strength": S.STRONG,
        "max_level": L.LEVEL_G,
        "max_strength": S.MID,
    },
    {
        "nickname": "NetNinja",
        "full_name": "Emily Wong",
        "contact_number": "+1234567893",
        "email": "emily.wong@example.com",
        "address": "321 Elm Road, Berkeley, CA 94704",
        "remarks": "Excellent at net play, recovering from minor injury",
        "min_level": L.LEVEL_D,
        "min_strength": S.WEAK,
        "max_level": L.LEVEL_D,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "ProShuttle",
        "full_name": "James Anderson",
        "contact_number": "+1234567894",
        "email": "james.a@example.com",
        "address": "654 Maple Drive, Palo Alto, CA 94301",
        "remarks": "Former college player, looking for competitive matches",
        "min_level": L.OPEN_PLAYER,
        "min_strength": S.WEAK,
        "max_level": L.OPEN_PLAYER,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "BirdieGal",
        "full_name": "Lisa Thompson",
        "contact_number": "+1234567895",
        "email": "lisa.t@example.com",
        "address": "987 Cedar Lane, San Jose, CA 95113",
        "remarks": "Available for morning sessions only",
        "min_level": L.INTERMEDIATE,
        "min_strength": S.WEAK,
        "max_level": L.INTERMEDIATE,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "DriveForce",
        "full_name": "Robert Lee",
        "contact_number": "+1234567896",
        "email": "robert.lee@example.com",
        "address": "147 Birch Street, Fremont, CA 94538",
        "remarks": "Powerful drives, learning footwork",
        "min_level": L.LEVEL_G,
        "min_strength": S.MID,
        "max_level": L.LEVEL_F,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "ClearMaster",
        "full_name": "Jessica Brown",
        "contact_number": "+1234567897",
        "email": "jessica.b@example.com",
        "address": "258 Willow Court, Mountain View, CA 94040",
        "remarks": "Great defensive player",
        "min_level": L.LEVEL_F,
        "min_strength": S.STRONG,
        "max_level": L.LEVEL_E,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "DropShot",
        "full_name": "Kevin Park",
        "contact_number": "+1234567898",
        "email": "kevin.park@example.com",
        "address": "369 Spruce Avenue, Sunnyvale, CA 94086",
        "remarks": "Precise drop shots, working on stamina",
        "min_level": L.LEVEL_E,
        "min_strength": S.WEAK,
        "max_level": L.LEVEL_E,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "NewbiePro",
        "full_name": "Amanda Garcia",
        "contact_number": "+1234567899",
        "email": "amanda.g@example.com",
        "address": "741 Redwood Lane, Santa Clara, CA 95050",
        "remarks": "Just started, very enthusiastic",
        "min_level": L.BEGINNER,
        "min_strength": S.WEAK,
        "max_level": L.BEGINNER,
        "max_strength": S.STRONG,
    },
    {
        "nickname": "SpeedDemon",
        "full_name": "Thomas Wilson",
        "contact_number": "+1234567800",
        "email": "thomas.w@example.com",
        "address": "852 Ash Street, Cupertino, CA 95014",
        "remarks": "Fast reflexes, practicing consistency",
        "min_level": L.LEVEL_G,
        "min_strength": S.STRONG,
        "max_level": L.LEVEL_F,
        "max_strength": S.MID,
    },
    {
        "nickname": "BackhandBoss",
        "full_name": "Michelle Taylor",
        "contact_number": "+1234567801",
        "email": "michelle.t@example.com",
        "address": "963 Cherry Road, Milpitas, CA 95035",
        "remarks": "Strong backhand, available evenings",
        "min_level": L.LEVEL_D,
        "min_strength": S.MID,
        "max_level": L.OPEN_PLAYER,
        "max_strength": S.WEAK,
    },
]

QUICK_TEST_PLAYERS: list[dict[str, Any]] = [
    {
        "nickname": "TestUser1",
        "full_name": "Test User One",
        "contact_number": "+1234567890",
        "email": "test1@example.com",
        "address": "123 Test Street, Test City, TC 12345",
        "remarks": "Test player for development",
        "min_level": L.BEGINNER,
        "min_strength": S.MID,
        "max_level": L.INTERMEDIATE,
        "max_strength": S.MID,
    },
    {
        "nickname": "TestUser2",
        "full_name": "Test User Two",
        "contact_number": "+1234567891",
        "email": "test2@example.com",
        "address": "456 Test Avenue, Test City, TC 12345",
        "remarks": "Another test player",
        "min_level": L.LEVEL_E,
        "min_strength": S.STRONG,
        "max_level": L.LEVEL_D,
        "max_strength": S.MID,
    },
]

# (title, court, day offset, [(start hour, end hour), ...])
SAMPLE_GAMES: list[tuple[str, str, int, list[tuple[int, int]]]] = [
    ("Tuesday Night Doubles", "Court 1", 0, [(18, 21)]),
    ("Weekend Open Play", "Court 3", 4, [(8, 11), (11, 13)]),
    ("", "Court 2", 1, [(19, 21)]),
    ("Beginners Clinic", "Court 5", 2, [(9, 10)]),
    ("Level D Sparring", "Court 4", 7, [(17, 20)]),
]


def _create_players(
    registry: PlayerRegistry, rows: list[dict[str, Any]]
) -> int:
    count = 0
    for row in rows:
        try:
            registry.create(PlayerSubmission(**row))
        except AppError as e:
            logger.warning(f"Failed to seed player {row['nickname']}: {e.message}")
            continue
        count += 1
    return count


def seed_players(registry: PlayerRegistry) -> int:
    """Replace all players with the sample roster. Returns how many were added."""
    registry.clear_all()
    count = _create_players(registry, SAMPLE_PLAYERS)
    logger.info(f"Seeded {count} players")
    return count


def seed_quick_test(registry: PlayerRegistry) -> int:
    """Replace all players with two test players."""
    registry.clear_all()
    count = _create_players(registry, QUICK_TEST_PLAYERS)
    logger.info(f"Seeded {count} test players")
    return count


def seed_random_players(
    registry: PlayerRegistry, count: int = 10, seed: Optional[int] = None
) -> int:
    """Add randomly generated players without clearing the registry.

    Generated rows that fail validation (for example a repeated username)
    are skipped, so fewer than ``count`` players may be added.
    """
    fake = Faker()
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)

    rows = []
    for _ in range(count):
        low = rng.randint(0, MAX_SKILL_ORDINAL)
        high = rng.randint(low, MAX_SKILL_ORDINAL)
        min_level, min_strength = from_skill_ordinal(low)
        max_level, max_strength = from_skill_ordinal(high)
        rows.append(
            {
                "nickname": fake.user_name()[:20],
                "full_name": fake.name()[:50],
                "contact_number": fake.numerify("+63##########"),
                "email": fake.email(),
                "address": fake.address().replace("\n", ", "),
                "remarks": fake.sentence(),
                "min_level": min_level,
                "min_strength": min_strength,
                "max_level": max_level,
                "max_strength": max_strength,
            }
        )

    added = _create_players(registry, rows)
    logger.info(f"Generated {added} random players")
    return added


def _schedules_for(
    court: str, day: datetime.date, hours: list[tuple[int, int]]
) -> list[CourtSchedule]:
    return [
        CourtSchedule.for_date(
            court, day, datetime.time(hour=start), datetime.time(hour=end)
        )
        for start, end in hours
    ]


def seed_games(
    registry: GameRegistry,
    settings: Optional[UserSettings] = None,
    today: Optional[datetime.date] = None,
) -> int:
    """Replace all games with five sample sessions starting tomorrow."""
    settings = settings or UserSettings.defaults()
    start_day = (today or datetime.date.today()) + datetime.timedelta(days=1)

    registry.clear_all()
    count = 0
    for title, court, offset, hours in SAMPLE_GAMES:
        day = start_day + datetime.timedelta(days=offset)
        try:
            registry.create(
                GameSubmission(
                    title=title,
                    court_name=court,
                    schedules=_schedules_for(court, day, hours),
                    court_rate=settings.court_rate,
                    shuttle_price=settings.shuttle_price,
                    divide_equally=settings.divide_equally,
                )
            )
        except AppError as e:
            logger.warning(f"Failed to seed game {title or court}: {e.message}")
            continue
        count += 1

    logger.info(f"Seeded {count} games")
    return count


def seed_quick_test_games(
    registry: GameRegistry, today: Optional[datetime.date] = None
) -> int:
    """Replace all games with one three-hour test session."""
    day = (today or datetime.date.today()) + datetime.timedelta(days=1)
    registry.clear_all()
    registry.create(
        GameSubmission(
            title="Test Game",
            court_name="Court 1",
            schedules=_schedules_for("Court 1", day, [(18, 21)]),
            court_rate=400.0,
            shuttle_price=150.0,
        )
    )
    logger.info("Seeded 1 test game")
    return 1


def clear_data(
    players: Optional[PlayerRegistry] = None, games: Optional[GameRegistry] = None
) -> None:
    """Remove all seeded players and games."""
    if games is not None:
        games.clear_all()
    if players is not None:
        players.clear_all()
    logger.info("Cleared seeded data")
