"""Initialize the Flask app and its extensions."""

import os

from flask import Flask

from .core.constants import (
    DEFAULT_COURT_NAME,
    DEFAULT_COURT_RATE,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_SHUTTLE_PRICE,
)
from .extensions import games, players, settings
from .utils import format_currency, format_hours, parse_bool


def _env_float(app, name, default):
    """Read a positive number from the environment, falling back on error."""
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        app.logger.error(f"Invalid value for {name}: {raw!r}, using {default}")
        return default
    if not value > 0:
        app.logger.error(f"{name} must be greater than 0, using {default}")
        return default
    return value


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__)

    # Load configuration
    app.config.from_mapping(
        DEFAULT_COURT_NAME=os.environ.get("DEFAULT_COURT_NAME") or DEFAULT_COURT_NAME,
        DEFAULT_COURT_RATE=_env_float(app, "DEFAULT_COURT_RATE", DEFAULT_COURT_RATE),
        DEFAULT_SHUTTLE_PRICE=_env_float(
            app, "DEFAULT_SHUTTLE_PRICE", DEFAULT_SHUTTLE_PRICE
        ),
        DEFAULT_DIVIDE_EQUALLY=parse_bool(
            os.environ.get("DEFAULT_DIVIDE_EQUALLY"), default=True
        ),
        CASCADE_PLAYER_DELETES=parse_bool(
            os.environ.get("CASCADE_PLAYER_DELETES"), default=True
        ),
        SEED_SAMPLE_DATA=parse_bool(os.environ.get("SEED_SAMPLE_DATA")),
        CURRENCY_SYMBOL=os.environ.get("CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL,
    )

    if test_config:
        app.config.update(test_config)

    # Initialize extensions
    players.init_app(app)
    games.init_app(app)
    settings.init_app(app)

    # A deleted player is dropped from every game it was added to
    if app.config["CASCADE_PLAYER_DELETES"]:
        games.follow(players)
    else:
        games.unfollow()

    symbol = app.config["CURRENCY_SYMBOL"]

    @app.template_filter("currency")
    def currency_filter(amount):
        """Format an amount of money, e.g. '₱1200.00'."""
        return format_currency(amount, symbol)

    app.add_template_filter(format_hours, "hours")

    if app.config["SEED_SAMPLE_DATA"]:
        from . import seeder

        count = seeder.seed_players(players)
        seeder.seed_games(games, settings.settings)
        app.logger.info(f"Seeded {count} sample players and {len(games)} games")

    return app
