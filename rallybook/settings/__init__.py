"""Default values for new games."""

from .models import UserSettings

__all__ = ["UserSettings"]
