"""Data models for the player package."""

from __future__ import annotations

import dataclasses
import datetime
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

from rallybook.core.constants import (
    FIELD_CREATED_AT,
    FIELD_ID,
    FIELD_UPDATED_AT,
    STRENGTHS_PER_LEVEL,
)
from rallybook.core.types import PlayerDocument


class _OrderedChoice(Enum):
    """An enumeration compared by declaration order only."""

    @property
    def index(self) -> int:
        """Return the zero-based position of this value."""
        return list(type(self)).index(self)

    @property
    def display_name(self) -> str:
        """Return the label shown to users."""
        return str(self.value)

    @classmethod
    def from_index(cls, index: int) -> Any:
        """Return the value at a position, clamped to the valid range."""
        members = list(cls)
        return members[max(0, min(index, len(members) - 1))]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.index >= other.index


class SkillLevel(_OrderedChoice):
    """Badminton skill levels, lowest first."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    LEVEL_G = "Level G"
    LEVEL_F = "Level F"
    LEVEL_E = "Level E"
    LEVEL_D = "Level D"
    OPEN_PLAYER = "Open Player"


class SkillStrength(_OrderedChoice):
    """Strength within a single skill level, weakest first."""

    WEAK = "Weak"
    MID = "Mid"
    STRONG = "Strong"


MAX_SKILL_ORDINAL = len(SkillLevel) * STRENGTHS_PER_LEVEL - 1


def skill_ordinal(level: SkillLevel, strength: SkillStrength) -> int:
    """Place a level/strength pair on the continuous 0-20 skill scale."""
    return level.index * STRENGTHS_PER_LEVEL + strength.index


def from_skill_ordinal(value: int) -> tuple[SkillLevel, SkillStrength]:
    """Map a point on the skill scale back to its level/strength pair."""
    value = max(0, min(int(value), MAX_SKILL_ORDINAL))
    level_index, strength_index = divmod(value, STRENGTHS_PER_LEVEL)
    return SkillLevel.from_index(level_index), SkillStrength.from_index(
        strength_index
    )


def _now() -> datetime.datetime:
    return datetime.datetime.now()


@dataclass(frozen=True)
class PlayerSubmission:
    """Dataclass for the editable fields of a player profile."""

    nickname: str
    full_name: str
    contact_number: str
    email: str
    address: str
    min_level: SkillLevel
    min_strength: SkillStrength
    max_level: SkillLevel
    max_strength: SkillStrength
    remarks: str = ""

    def cleaned(self) -> PlayerSubmission:
        """Return a copy with surrounding whitespace removed from text fields."""
        return dataclasses.replace(
            self,
            nickname=(self.nickname or "").strip(),
            full_name=(self.full_name or "").strip(),
            contact_number=(self.contact_number or "").strip(),
            email=(self.email or "").strip(),
            address=(self.address or "").strip(),
            remarks=(self.remarks or "").strip(),
        )

    def fields(self) -> dict[str, Any]:
        """Return the submission as keyword arguments for a Player."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}


@dataclass(frozen=True)
class Player:
    """A badminton player profile."""

    id: str
    nickname: str
    full_name: str
    contact_number: str
    email: str
    address: str
    remarks: str
    min_level: SkillLevel
    min_strength: SkillStrength
    max_level: SkillLevel
    max_strength: SkillStrength
    created_at: datetime.datetime
    updated_at: datetime.datetime

    @classmethod
    def create(cls, submission: PlayerSubmission) -> Player:
        """Create a new player with a generated ID and timestamps."""
        now = _now()
        return cls(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **submission.fields(),
        )

    def replace(self, **changes: Any) -> Player:
        """Return a copy with the given changes and a refreshed update time."""
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = _now()
        return dataclasses.replace(self, **changes)

    @property
    def min_skill(self) -> int:
        return skill_ordinal(self.min_level, self.min_strength)

    @property
    def max_skill(self) -> int:
        return skill_ordinal(self.max_level, self.max_strength)

    @property
    def skill_level_range(self) -> str:
        """Return the skill range, e.g. 'Level E (Mid) → Level D (Strong)'."""
        low = f"{self.min_level.display_name} ({self.min_strength.display_name})"
        high = f"{self.max_level.display_name} ({self.max_strength.display_name})"
        if self.min_skill == self.max_skill:
            return low
        return f"{low} → {high}"

    def matches(self, query: str) -> bool:
        """Return True if the nickname or full name contains the query."""
        needle = query.strip().lower()
        return needle in self.nickname.lower() or needle in self.full_name.lower()

    def to_dict(self) -> PlayerDocument:
        """Convert to a dict for storage."""
        return {
            FIELD_ID: self.id,
            "nickname": self.nickname,
            "fullName": self.full_name,
            "contactNumber": self.contact_number,
            "email": self.email,
            "address": self.address,
            "remarks": self.remarks,
            "minLevel": self.min_level.name,
            "minStrength": self.min_strength.name,
            "maxLevel": self.max_level.name,
            "maxStrength": self.max_strength.name,
            FIELD_CREATED_AT: self.created_at.isoformat(),
            FIELD_UPDATED_AT: self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        """Create a player from its stored dict."""
        created_at = datetime.datetime.fromisoformat(data[FIELD_CREATED_AT])
        updated_raw = data.get(FIELD_UPDATED_AT)
        return cls(
            id=data[FIELD_ID],
            nickname=data["nickname"],
            full_name=data["fullName"],
            contact_number=data["contactNumber"],
            email=data["email"],
            address=data["address"],
            remarks=data.get("remarks") or "",
            min_level=SkillLevel[data["minLevel"]],
            min_strength=SkillStrength[data["minStrength"]],
            max_level=SkillLevel[data["maxLevel"]],
            max_strength=SkillStrength[data["maxStrength"]],
            created_at=created_at,
            updated_at=(
                datetime.datetime.fromisoformat(updated_raw)
                if updated_raw
                else created_at
            ),
        )
