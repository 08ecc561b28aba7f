"""Data models for the settings package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rallybook.core.constants import (
    DEFAULT_COURT_NAME,
    DEFAULT_COURT_RATE,
    DEFAULT_DIVIDE_EQUALLY,
    DEFAULT_SHUTTLE_PRICE,
)
from rallybook.core.types import SettingsDocument


@dataclass(frozen=True)
class UserSettings:
    """Default values used to pre-fill new games."""

    court_name: str
    court_rate: float
    shuttle_price: float
    divide_equally: bool

    @classmethod
    def defaults(cls) -> UserSettings:
        return cls(
            court_name=DEFAULT_COURT_NAME,
            court_rate=DEFAULT_COURT_RATE,
            shuttle_price=DEFAULT_SHUTTLE_PRICE,
            divide_equally=DEFAULT_DIVIDE_EQUALLY,
        )

    def to_dict(self) -> SettingsDocument:
        """Convert to a dict for storage."""
        return {
            "defaultCourtName": self.court_name,
            "defaultCourtRate": self.court_rate,
            "defaultShuttleCockPrice": self.shuttle_price,
            "divideCourtEqually": self.divide_equally,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserSettings:
        return cls(
            court_name=data["defaultCourtName"],
            court_rate=float(data["defaultCourtRate"]),
            shuttle_price=float(data["defaultShuttleCockPrice"]),
            divide_equally=bool(data["divideCourtEqually"]),
        )
