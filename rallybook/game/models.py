"""Data models for the game package."""

from __future__ import annotations

import dataclasses
import datetime
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from rallybook.core.constants import (
    FIELD_CREATED_AT,
    FIELD_ID,
    FIELD_UPDATED_AT,
    NO_SCHEDULE,
    UNTITLED_GAME,
)
from rallybook.core.types import GameDocument, ScheduleDocument

MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def _now() -> datetime.datetime:
    return datetime.datetime.now()


def _format_time(value: datetime.datetime) -> str:
    """Format a time on the 12-hour clock, e.g. '6:00 PM'."""
    hour = value.hour
    period = "PM" if hour >= 12 else "AM"
    display_hour = hour - 12 if hour > 12 else (12 if hour == 0 else hour)
    return f"{display_hour}:{value.minute:02d} {period}"


def unique_ids(ids: Optional[Iterable[str]]) -> tuple[str, ...]:
    """Drop repeated IDs while keeping first-seen order."""
    return tuple(dict.fromkeys(ids or ()))


@dataclass(frozen=True)
class CourtSchedule:
    """A single court reservation within a game."""

    court_number: str
    start_time: datetime.datetime
    end_time: datetime.datetime

    @classmethod
    def for_date(
        cls,
        court_number: str,
        day: datetime.date,
        start_time: datetime.time,
        end_time: datetime.time,
    ) -> CourtSchedule:
        """Build a schedule from a date and two times of day."""
        return cls(
            court_number=court_number.strip(),
            start_time=datetime.datetime.combine(day, start_time),
            end_time=datetime.datetime.combine(day, end_time),
        )

    @property
    def is_valid(self) -> bool:
        return self.end_time > self.start_time

    @property
    def duration_in_hours(self) -> float:
        """Return the booked duration in hours, counted in whole minutes."""
        minutes = int((self.end_time - self.start_time).total_seconds() // 60)
        return minutes / 60.0

    @property
    def time_range(self) -> str:
        """Return the time range, e.g. '6:00 PM - 9:00 PM'."""
        return f"{_format_time(self.start_time)} - {_format_time(self.end_time)}"

    @property
    def date_formatted(self) -> str:
        """Return the booking date, e.g. 'Nov 3, 2025'."""
        start = self.start_time
        return f"{MONTHS[start.month - 1]} {start.day}, {start.year}"

    def to_dict(self) -> ScheduleDocument:
        """Convert to a dict for storage."""
        return {
            "courtNumber": self.court_number,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CourtSchedule:
        return cls(
            court_number=data["courtNumber"],
            start_time=datetime.datetime.fromisoformat(data["startTime"]),
            end_time=datetime.datetime.fromisoformat(data["endTime"]),
        )


@dataclass(frozen=True)
class GameSubmission:
    """Dataclass for the editable fields of a game session."""

    court_name: str
    schedules: Sequence[CourtSchedule]
    court_rate: float
    shuttle_price: float
    divide_equally: bool = True
    title: str = ""
    player_ids: Optional[Sequence[str]] = None

    def cleaned(self) -> GameSubmission:
        """Return a copy with trimmed text, tuple schedules and unique IDs."""
        return dataclasses.replace(
            self,
            title=(self.title or "").strip(),
            court_name=(self.court_name or "").strip(),
            schedules=tuple(self.schedules or ()),
            player_ids=(
                unique_ids(self.player_ids) if self.player_ids is not None else None
            ),
        )


@dataclass(frozen=True)
class Game:
    """A badminton game session with its court bookings and players."""

    id: str
    title: str
    court_name: str
    schedules: tuple[CourtSchedule, ...]
    court_rate: float
    shuttle_price: float
    divide_equally: bool
    player_ids: tuple[str, ...]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    @classmethod
    def create(cls, submission: GameSubmission) -> Game:
        """Create a new game with a generated ID and timestamps."""
        now = _now()
        return cls(
            id=str(uuid.uuid4()),
            title=submission.title,
            court_name=submission.court_name,
            schedules=tuple(submission.schedules),
            court_rate=float(submission.court_rate),
            shuttle_price=float(submission.shuttle_price),
            divide_equally=bool(submission.divide_equally),
            player_ids=unique_ids(submission.player_ids),
            created_at=now,
            updated_at=now,
        )

    def replace(self, **changes: Any) -> Game:
        """Return a copy with the given changes and a refreshed update time."""
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = _now()
        return dataclasses.replace(self, **changes)

    def with_player(self, player_id: str) -> Game:
        return self.replace(player_ids=(*self.player_ids, player_id))

    def without_player(self, player_id: str) -> Game:
        return self.replace(
            player_ids=tuple(pid for pid in self.player_ids if pid != player_id)
        )

    @property
    def player_count(self) -> int:
        return len(self.player_ids)

    @property
    def total_duration_in_hours(self) -> float:
        return sum(schedule.duration_in_hours for schedule in self.schedules)

    @property
    def total_court_cost(self) -> float:
        return self.court_rate * self.total_duration_in_hours

    @property
    def cost_per_player(self) -> float:
        """Return each player's share of the court cost.

        The share is 0 when the game does not divide the cost equally or has
        no players yet.
        """
        if not self.divide_equally or not self.player_ids:
            return 0.0
        return self.total_court_cost / len(self.player_ids)

    @property
    def display_title(self) -> str:
        """Return the title, falling back to the first schedule's date."""
        if self.title.strip():
            return self.title
        if not self.schedules:
            return UNTITLED_GAME
        return self.schedules[0].date_formatted

    @property
    def schedule_summary(self) -> str:
        if not self.schedules:
            return NO_SCHEDULE
        if len(self.schedules) == 1:
            first = self.schedules[0]
            return f"{first.court_number}: {first.time_range}"
        return f"{len(self.schedules)} courts scheduled"

    def matches(self, query: str) -> bool:
        """Return True if the display title or a schedule date contains the query."""
        needle = query.strip().lower()
        if needle in self.display_title.lower():
            return True
        return any(
            needle in schedule.date_formatted.lower() for schedule in self.schedules
        )

    def to_dict(self) -> GameDocument:
        """Convert to a dict for storage."""
        return {
            FIELD_ID: self.id,
            "title": self.title,
            "courtName": self.court_name,
            "schedules": [schedule.to_dict() for schedule in self.schedules],
            "courtRate": self.court_rate,
            "shuttleCockPrice": self.shuttle_price,
            "divideCourtEqually": self.divide_equally,
            "playerIds": list(self.player_ids),
            FIELD_CREATED_AT: self.created_at.isoformat(),
            FIELD_UPDATED_AT: self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Game:
        """Create a game from its stored dict."""
        created_at = datetime.datetime.fromisoformat(data[FIELD_CREATED_AT])
        updated_raw = data.get(FIELD_UPDATED_AT)
        return cls(
            id=data[FIELD_ID],
            title=data.get("title") or "",
            court_name=data["courtName"],
            schedules=tuple(
                CourtSchedule.from_dict(item) for item in data.get("schedules", [])
            ),
            court_rate=float(data["courtRate"]),
            shuttle_price=float(data["shuttleCockPrice"]),
            divide_equally=bool(data.get("divideCourtEqually", True)),
            player_ids=unique_ids(data.get("playerIds")),
            created_at=created_at,
            updated_at=(
                datetime.datetime.fromisoformat(updated_raw)
                if updated_raw
                else created_at
            ),
        )
