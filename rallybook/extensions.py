"""Flask extensions for the application."""
from .game.services import GameRegistry
from .player.services import PlayerRegistry
from .settings.services import SettingsStore

players = PlayerRegistry()
games = GameRegistry()
settings = SettingsStore()
