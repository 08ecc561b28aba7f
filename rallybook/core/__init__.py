"""Core module for the rallybook application."""

from .types import (
    GameDocument,
    PlayerDocument,
    ScheduleDocument,
    SettingsDocument,
    StoredDocument,
)

__all__ = [
    "GameDocument",
    "PlayerDocument",
    "ScheduleDocument",
    "SettingsDocument",
    "StoredDocument",
]
