"""Core data types for the rallybook application."""

from typing import List, TypedDict  # noqa: UP035


class _StoredDocumentBase(TypedDict):
    id: str
    createdAt: str


class StoredDocument(_StoredDocumentBase, total=False):
    """Generic stored record structure."""

    updatedAt: str


class ScheduleDocument(TypedDict):
    """Stored shape of a court schedule."""

    courtNumber: str
    startTime: str
    endTime: str


class PlayerDocument(StoredDocument, total=False):
    """Stored shape of a player profile."""

    nickname: str
    fullName: str
    contactNumber: str
    email: str
    address: str
    remarks: str
    minLevel: str
    minStrength: str
    maxLevel: str
    maxStrength: str


class GameDocument(StoredDocument, total=False):
    """Stored shape of a game session."""

    title: str
    courtName: str
    schedules: List[ScheduleDocument]  # noqa: UP006
    courtRate: float
    shuttleCockPrice: float
    divideCourtEqually: bool
    playerIds: List[str]  # noqa: UP006


class SettingsDocument(TypedDict):
    """Stored shape of the user settings."""

    defaultCourtName: str
    defaultCourtRate: float
    defaultShuttleCockPrice: float
    divideCourtEqually: bool
