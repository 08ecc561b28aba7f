"""Tests for the validation rules."""

from __future__ import annotations

import datetime
import unittest

from rallybook.core import validators as rules
from rallybook.player.models import SkillLevel, SkillStrength


class TestEmailRule(unittest.TestCase):
    def test_valid_addresses(self) -> None:
        for email in ["a.b@example.com", "x+tag@mail.co", "  user@host.io  "]:
            self.assertIsNone(rules.validate_email(email), email)

    def test_blank_address(self) -> None:
        self.assertEqual(rules.validate_email("   "), "Please enter an email address")
        self.assertEqual(rules.validate_email(None), "Please enter an email address")

    def test_malformed_addresses(self) -> None:
        for email in ["plainaddress", "no@tld", "a@b.c", "a b@example.com"]:
            self.assertEqual(
                rules.validate_email(email), "Please enter a valid email address"
            )


class TestPhoneRule(unittest.TestCase):
    def test_separators_are_stripped(self) -> None:
        self.assertEqual(rules.normalize_phone("+1 (234) 567-890"), "1234567890")
        self.assertIsNone(rules.validate_phone("+1 (234) 567-890"))

    def test_letters_rejected(self) -> None:
        self.assertEqual(
            rules.validate_phone("555-CALL-NOW"),
            "Contact number can only contain digits",
        )

    def test_length_bounds(self) -> None:
        self.assertIsNone(rules.validate_phone("1234567"))
        self.assertIsNone(rules.validate_phone("123456789012345"))
        self.assertIn("between 7 and 15", rules.validate_phone("123456"))
        self.assertIn("between 7 and 15", rules.validate_phone("1234567890123456"))


class TestLengthRules(unittest.TestCase):
    def test_nickname(self) -> None:
        self.assertIsNone(rules.validate_nickname("Jo"))
        self.assertEqual(rules.validate_nickname(""), "Please enter a nickname")
        self.assertEqual(
            rules.validate_nickname("J"), "Nickname must be at least 2 characters"
        )
        self.assertEqual(
            rules.validate_nickname("x" * 21), "Nickname must be at most 20 characters"
        )

    def test_lengths_use_trimmed_value(self) -> None:
        self.assertEqual(
            rules.validate_nickname("  J  "), "Nickname must be at least 2 characters"
        )

    def test_full_name(self) -> None:
        self.assertIsNone(rules.validate_full_name("x" * 50))
        self.assertIsNotNone(rules.validate_full_name("x" * 51))

    def test_address(self) -> None:
        self.assertIsNone(rules.validate_address("1234567890"))
        self.assertEqual(
            rules.validate_address("Short St"), "Address must be at least 10 characters"
        )

    def test_court_name(self) -> None:
        self.assertIsNone(rules.validate_court_name("C1"))
        self.assertEqual(rules.validate_court_name(" "), "Please enter a court name")
        self.assertIsNotNone(rules.validate_court_name("C"))


class TestNumberRules(unittest.TestCase):
    def test_parse_number(self) -> None:
        self.assertEqual(rules.parse_number(" 400 "), 400.0)
        self.assertEqual(rules.parse_number(12.5), 12.5)
        self.assertIsNone(rules.parse_number("abc"))
        self.assertIsNone(rules.parse_number("nan"))
        self.assertIsNone(rules.parse_number(True))

    def test_positive_number_messages_embed_label(self) -> None:
        self.assertIsNone(rules.validate_positive_number("400", "Court rate"))
        self.assertEqual(
            rules.validate_positive_number("abc", "Court rate"),
            "Court rate must be a valid number",
        )
        self.assertEqual(
            rules.validate_positive_number("0", "Court rate"),
            "Court rate must be greater than 0",
        )
        self.assertEqual(
            rules.validate_positive_number(-5, "Shuttle cock price"),
            "Shuttle cock price must be greater than 0",
        )


class TestLevelRange(unittest.TestCase):
    def test_equal_points_allowed(self) -> None:
        self.assertIsNone(
            rules.validate_level_range(
                SkillLevel.LEVEL_E,
                SkillStrength.MID,
                SkillLevel.LEVEL_E,
                SkillStrength.MID,
            )
        )

    def test_strength_breaks_ties_within_level(self) -> None:
        self.assertEqual(
            rules.validate_level_range(
                SkillLevel.LEVEL_E,
                SkillStrength.STRONG,
                SkillLevel.LEVEL_E,
                SkillStrength.WEAK,
            ),
            "Minimum level cannot be higher than maximum level",
        )

    def test_higher_level_wins_over_strength(self) -> None:
        self.assertIsNone(
            rules.validate_level_range(
                SkillLevel.LEVEL_F,
                SkillStrength.STRONG,
                SkillLevel.LEVEL_E,
                SkillStrength.WEAK,
            )
        )


class TestScheduleRules(unittest.TestCase):
    def setUp(self) -> None:
        self.day = datetime.date(2025, 11, 3)

    def test_valid_entry(self) -> None:
        self.assertIsNone(
            rules.validate_schedule_entry(
                "Court 1", self.day, datetime.time(18), datetime.time(21)
            )
        )

    def test_missing_parts(self) -> None:
        self.assertEqual(
            rules.validate_schedule_entry("Court 1", None, None, None),
            "Please select a date",
        )
        self.assertEqual(
            rules.validate_schedule_entry("Court 1", self.day, None, None),
            "Please select a start time",
        )
        self.assertEqual(
            rules.validate_schedule_entry(
                "Court 1", self.day, datetime.time(18), None
            ),
            "Please select an end time",
        )

    def test_end_must_follow_start(self) -> None:
        for end in [datetime.time(18), datetime.time(17)]:
            self.assertEqual(
                rules.validate_schedule_entry(
                    "Court 1", self.day, datetime.time(18), end
                ),
                "End time must be after start time",
            )

    def test_schedules_non_empty(self) -> None:
        self.assertIsNone(rules.validate_schedules_non_empty(1))
        self.assertEqual(
            rules.validate_schedules_non_empty(0),
            "Please add at least one court schedule",
        )


if __name__ == "__main__":
    unittest.main()
