"""Tests for GameRegistry."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from rallybook.errors import ValidationError
from rallybook.game.services import GameRegistry
from rallybook.player.services import PlayerRegistry
from rallybook.signals import CREATED, PLAYER_ADDED, PLAYER_REMOVED, UPDATED
from tests.conftest import make_game_submission, make_player_submission, make_schedule


class TestGameRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = GameRegistry()
        self.receiver = MagicMock()
        self.registry.connect(self.receiver)

    def tearDown(self) -> None:
        self.registry.disconnect(self.receiver)

    def test_create(self) -> None:
        game = self.registry.create(
            make_game_submission(title="  Doubles  ", court_name=" Court 1 ")
        )
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(game.title, "Doubles")
        self.assertEqual(game.court_name, "Court 1")
        self.assertEqual(game.total_court_cost, 1200.0)
        self.receiver.assert_called_once_with(
            self.registry, action=CREATED, game=game
        )

    def test_validation_failures(self) -> None:
        cases = [
            ({"court_name": "  "}, "court_name", "Court name cannot be empty"),
            (
                {"schedules": []},
                "schedules",
                "Please add at least one court schedule",
            ),
            ({"court_rate": 0}, "court_rate", "Court rate must be greater than 0"),
            (
                {"court_rate": float("inf")},
                "court_rate",
                "Court rate must be greater than 0",
            ),
            (
                {"shuttle_price": float("nan")},
                "shuttle_price",
                "Shuttle cock price must be greater than 0",
            ),
            (
                {"shuttle_price": -1},
                "shuttle_price",
                "Shuttle cock price must be greater than 0",
            ),
            (
                {"schedules": [make_schedule(start_hour=18, end_hour=18)]},
                "schedules",
                "End time must be after start time",
            ),
        ]
        for overrides, field, message in cases:
            with self.subTest(message=message):
                with self.assertRaises(ValidationError) as cm:
                    self.registry.create(make_game_submission(**overrides))
                self.assertEqual(cm.exception.message, message)
                self.assertEqual(cm.exception.field, field)
        self.assertEqual(len(self.registry), 0)
        self.receiver.assert_not_called()

    def test_update_keeps_players_when_none_given(self) -> None:
        game = self.registry.create(make_game_submission(player_ids=["p1"]))
        updated = self.registry.update(
            game.id, make_game_submission(title="Renamed", court_rate=500.0)
        )
        self.assertEqual(updated.id, game.id)
        self.assertEqual(updated.created_at, game.created_at)
        self.assertEqual(updated.title, "Renamed")
        self.assertEqual(updated.player_ids, ("p1",))
        self.assertEqual(updated.total_court_cost, 1500.0)
        self.receiver.assert_called_with(self.registry, action=UPDATED, game=updated)

    def test_update_replaces_players_when_given(self) -> None:
        game = self.registry.create(make_game_submission(player_ids=["p1"]))
        updated = self.registry.update(
            game.id, make_game_submission(player_ids=["p2", "p2"])
        )
        self.assertEqual(updated.player_ids, ("p2",))

    def test_update_unknown_and_invalid(self) -> None:
        game = self.registry.create(make_game_submission())
        self.assertIsNone(self.registry.update("missing", make_game_submission()))
        with self.assertRaises(ValidationError):
            self.registry.update(game.id, make_game_submission(court_name=""))
        self.assertIs(self.registry.get(game.id), game)

    def test_delete_twice(self) -> None:
        game = self.registry.create(make_game_submission())
        self.assertTrue(self.registry.delete(game.id))
        self.assertFalse(self.registry.delete(game.id))

    def test_search(self) -> None:
        first = self.registry.create(make_game_submission())
        second = self.registry.create(make_game_submission(title=""))
        self.assertEqual(self.registry.search(""), [first, second])
        self.assertEqual(self.registry.search("doubles"), [first])
        self.assertEqual(self.registry.search("Nov 3"), [first, second])
        self.assertEqual(self.registry.search("XYZ_NOMATCH"), [])

    def test_add_player_twice(self) -> None:
        game = self.registry.create(make_game_submission())
        self.assertTrue(self.registry.add_player_to_game(game.id, "p1"))
        self.assertFalse(self.registry.add_player_to_game(game.id, "p1"))
        self.assertFalse(self.registry.add_player_to_game("missing", "p1"))

        updated = self.registry.get(game.id)
        self.assertEqual(updated.player_ids, ("p1",))
        self.assertGreaterEqual(updated.updated_at, game.updated_at)
        self.receiver.assert_called_with(
            self.registry, action=PLAYER_ADDED, game=updated, player_id="p1"
        )

    def test_remove_player(self) -> None:
        game = self.registry.create(make_game_submission(player_ids=["p1", "p2"]))
        self.assertTrue(self.registry.remove_player_from_game(game.id, "p1"))
        self.assertFalse(self.registry.remove_player_from_game(game.id, "p1"))
        self.assertFalse(self.registry.remove_player_from_game("missing", "p2"))
        updated = self.registry.get(game.id)
        self.assertEqual(updated.player_ids, ("p2",))
        self.receiver.assert_called_with(
            self.registry, action=PLAYER_REMOVED, game=updated, player_id="p1"
        )

    def test_detach_player(self) -> None:
        first = self.registry.create(make_game_submission(player_ids=["p1", "p2"]))
        second = self.registry.create(make_game_submission(player_ids=["p1"]))
        third = self.registry.create(make_game_submission(player_ids=["p2"]))

        self.assertEqual(self.registry.detach_player("p1"), 2)
        self.assertEqual(self.registry.get(first.id).player_ids, ("p2",))
        self.assertEqual(self.registry.get(second.id).player_ids, ())
        self.assertEqual(self.registry.get(third.id).player_ids, ("p2",))
        self.assertEqual(self.registry.detach_player("p1"), 0)


class TestPlayerDeletionCascade(unittest.TestCase):
    def setUp(self) -> None:
        self.players = PlayerRegistry()
        self.games = GameRegistry()
        self.games.follow(self.players)
        self.player = self.players.create(make_player_submission())
        self.game = self.games.create(
            make_game_submission(player_ids=[self.player.id, "other"])
        )

    def tearDown(self) -> None:
        self.games.unfollow()

    def test_deleted_player_is_detached(self) -> None:
        self.players.delete(self.player.id)
        self.assertEqual(self.games.get(self.game.id).player_ids, ("other",))

    def test_cleared_players_are_detached(self) -> None:
        self.players.clear_all()
        self.assertEqual(self.games.get(self.game.id).player_ids, ("other",))

    def test_updates_do_not_detach(self) -> None:
        self.players.update(
            self.player.id, make_player_submission(full_name="Mike Chen")
        )
        self.assertIn(self.player.id, self.games.get(self.game.id).player_ids)

    def test_unfollow_stops_cascade(self) -> None:
        self.games.unfollow()
        self.players.delete(self.player.id)
        self.assertIn(self.player.id, self.games.get(self.game.id).player_ids)

    def test_follow_is_idempotent(self) -> None:
        self.games.follow(self.players)
        receiver = MagicMock()
        self.games.connect(receiver)
        self.players.delete(self.player.id)
        self.assertEqual(receiver.call_count, 1)
        self.games.disconnect(receiver)


if __name__ == "__main__":
    unittest.main()
