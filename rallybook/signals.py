"""Change notifications sent by the roster services.

Each signal is sent synchronously with the service instance as the sender and
an ``action`` keyword describing the mutation. Receivers run before the
mutating call returns and must not mutate the service that is notifying them.
"""

from blinker import Namespace

_signals = Namespace()

players_changed = _signals.signal("players-changed")
games_changed = _signals.signal("games-changed")
settings_changed = _signals.signal("settings-changed")

CREATED = "created"
UPDATED = "updated"
DELETED = "deleted"
CLEARED = "cleared"
PLAYER_ADDED = "player_added"
PLAYER_REMOVED = "player_removed"
RESET = "reset"
