import unittest

from rallybook import create_app
from rallybook.extensions import games, players, settings


class BaseAppTestCase(unittest.TestCase):
    """Builds a test app and empties the shared registries afterwards."""

    config = {}

    def setUp(self):
        self.app = create_app({"TESTING": True, **self.config})
        self.app_context = self.app.app_context()
        self.app_context.push()

    def tearDown(self):
        games.unfollow()
        games.clear_all()
        players.clear_all()
        settings.reset_to_defaults()
        self.app_context.pop()
