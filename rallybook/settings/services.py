"""Service layer for the user's default game settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from rallybook.core.validators import validate_positive_number
from rallybook.errors import ValidationError
from rallybook.signals import RESET, UPDATED, settings_changed

from .models import UserSettings

if TYPE_CHECKING:
    from flask import Flask

logger = logging.getLogger(__name__)


class SettingsStore:
    """Holds the single settings record for the process."""

    extension_name = "rallybook.settings"

    def __init__(self, app: Optional[Flask] = None) -> None:
        self._defaults = UserSettings.defaults()
        self._settings = self._defaults
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Take the default record from the application config."""
        self._defaults = UserSettings(
            court_name=app.config["DEFAULT_COURT_NAME"],
            court_rate=app.config["DEFAULT_COURT_RATE"],
            shuttle_price=app.config["DEFAULT_SHUTTLE_PRICE"],
            divide_equally=app.config["DEFAULT_DIVIDE_EQUALLY"],
        )
        self._settings = self._defaults
        app.extensions[self.extension_name] = self

    @property
    def settings(self) -> UserSettings:
        return self._settings

    @property
    def defaults(self) -> UserSettings:
        return self._defaults

    def get(self) -> UserSettings:
        """Return the current settings."""
        return self._settings

    def update(
        self,
        court_name: str,
        court_rate: float,
        shuttle_price: float,
        divide_equally: bool,
    ) -> None:
        """Replace the settings after validating every value.

        Raises:
            ValidationError: If the court name is blank or a price is not a
                finite number greater than zero. The current settings are
                left untouched. As with games, only a non-empty court name is
                required here; the 2-character minimum is a form rule.
        """
        court_name = (court_name or "").strip()
        for field, error in (
            ("court_name", None if court_name else "Court name cannot be empty"),
            ("court_rate", validate_positive_number(court_rate, "Court rate")),
            (
                "shuttle_price",
                validate_positive_number(shuttle_price, "Shuttle cock price"),
            ),
        ):
            if error:
                logger.warning(f"Rejected settings update: {error}")
                raise ValidationError(error, field=field)

        self._settings = UserSettings(
            court_name=court_name,
            court_rate=float(court_rate),
            shuttle_price=float(shuttle_price),
            divide_equally=bool(divide_equally),
        )
        logger.info("Updated default game settings")
        settings_changed.send(self, action=UPDATED, settings=self._settings)

    def reset_to_defaults(self) -> None:
        self._settings = self._defaults
        logger.info("Reset default game settings")
        settings_changed.send(self, action=RESET, settings=self._settings)

    def game_defaults(self) -> dict[str, Any]:
        """Return the values a new game form is pre-filled with."""
        current = self._settings
        return {
            "court_name": current.court_name,
            "court_rate": current.court_rate,
            "shuttle_price": current.shuttle_price,
            "divide_equally": current.divide_equally,
        }

    def connect(self, receiver: Callable[..., Any]) -> Callable[..., Any]:
        """Subscribe a receiver to settings changes."""
        return settings_changed.connect(receiver, sender=self, weak=False)

    def disconnect(self, receiver: Callable[..., Any]) -> None:
        settings_changed.disconnect(receiver, sender=self)
