"""Game sessions, court bookings and cost splitting."""

from .models import CourtSchedule, Game, GameSubmission

__all__ = ["CourtSchedule", "Game", "GameSubmission"]
