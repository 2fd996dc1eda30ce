"""Tests for configuration validation and the outline checks it relies on."""

from __future__ import annotations

import unittest

from keycase.geometry import rect_inside_polygon, validate_outline
from keycase.validation import validate_options
from tests.case_fixture import make_case


def test_default_configuration_is_valid():
    options, engine = make_case()
    assert validate_options(options) == []
    assert validate_options(options, engine) == []


class TestOutlineChecks(unittest.TestCase):

    def test_square_is_valid_either_winding(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        self.assertEqual(validate_outline(square, "Foot"), [])
        self.assertEqual(validate_outline(square[::-1], "Foot"), [])

    def test_bow_tie(self):
        bow_tie = [(0, 0), (10, 10), (10, 0), (0, 10)]
        errors = validate_outline(bow_tie, "Foot")
        self.assertEqual(len(errors), 1)
        self.assertIn("self-intersecting", errors[0])

    def test_sliver_has_no_area(self):
        errors = validate_outline([(0, 0), (10, 0), (20, 0.01)], "Foot")
        self.assertEqual(len(errors), 1)
        self.assertIn("area is", errors[0])

    def test_outline_too_short(self):
        errors = validate_outline([(0, 0), (1, 1)], "Foot")
        self.assertEqual(len(errors), 1)
        self.assertIn("at least 3", errors[0])

    def test_rect_inside(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        self.assertTrue(rect_inside_polygon(square, 5, 5, 4, 4))
        self.assertTrue(rect_inside_polygon(square, 5, 5, 10, 10))
        self.assertFalse(rect_inside_polygon(square, 9, 5, 4, 4))


class TestValidateOptions(unittest.TestCase):

    def test_unknown_alias(self):
        options, _ = make_case({"case": {"back-plate": {"position": {"key-alias": "nope"}}}})
        errors = validate_options(options)
        self.assertTrue(any("unknown key alias 'nope'" in e for e in errors))

    def test_bad_connection_corner(self):
        options, _ = make_case({"connection": {"position": {"corner": "NORTHISH"}}})
        errors = validate_options(options)
        self.assertTrue(any("connection.position.corner" in e for e in errors))

    def test_non_cardinal_mcu_direction(self):
        options, _ = make_case({"mcu": {"connector-direction": "SW"}})
        errors = validate_options(options)
        self.assertTrue(any("not a cardinal" in e for e in errors))

    def test_short_foot_polygon(self):
        options, engine = make_case({"case": {"foot-plates": {"polygons": [{"points": [
            {"key-alias": "foot-sw", "key-corner": "WSW"},
            {"key-alias": "foot-se", "key-corner": "ESE"},
        ]}]}}})
        errors = validate_options(options, engine)
        self.assertTrue(any("need at least 3" in e for e in errors))

    def test_crossed_foot_polygon(self):
        options, engine = make_case({"case": {"foot-plates": {"polygons": [{"points": [
            {"key-alias": "foot-sw", "key-corner": "WSW"},
            {"key-alias": "foot-ne", "key-corner": "ENE"},
            {"key-alias": "foot-se", "key-corner": "ESE"},
            {"key-alias": "foot-nw", "key-corner": "WNW"},
        ]}]}}})
        self.assertEqual(validate_options(options), [])
        errors = validate_options(options, engine)
        self.assertTrue(any("self-intersecting" in e for e in errors))

    def test_non_positive_led_values(self):
        options, _ = make_case({"case": {"leds": {"interval": 0, "housing-size": -1}}})
        errors = validate_options(options)
        self.assertTrue(any("case.leds.interval" in e for e in errors))
        self.assertTrue(any("case.leds.housing-size" in e for e in errors))

    def test_leds_escaping_channel(self):
        options, engine = make_case({"case": {"leds": {"amount": 10, "interval": 12}}})
        with self.assertLogs("keycase.validation", level="WARNING"):
            errors = validate_options(options, engine)
        self.assertTrue(any("outside the west wall channel" in e for e in errors))

    def test_excluded_features_not_checked(self):
        options, _ = make_case({
            "case": {"back-plate": {"include": False, "position": {"key-alias": "nope"}}},
        })
        self.assertEqual(validate_options(options), [])

    def test_empty_mcu_column(self):
        options, _ = make_case({
            "key-clusters": {"finger": {"matrix-columns": [
                {"rows-below-home": 1, "rows-above-home": 2},
                None,
                {"rows-below-home": 1, "rows-above-home": 2},
                {"rows-below-home": 1, "rows-above-home": 2},
                {"rows-below-home": 1, "rows-above-home": 1},
                {"rows-below-home": 0, "rows-above-home": 1},
            ]}},
        })
        errors = validate_options(options)
        self.assertTrue(any("matrix column has no rows" in e for e in errors))

    def test_finger_column_not_an_index(self):
        options, _ = make_case({"mcu": {"finger-column": "two"}})
        errors = validate_options(options)
        self.assertTrue(any("mcu.finger-column" in e for e in errors))

    def test_connection_corner_must_be_a_corner(self):
        options, _ = make_case({"connection": {"position": {"corner": "N"}}})
        errors = validate_options(options)
        self.assertIn("connection.position.corner: N is a wall, not a corner", errors)

    def test_empty_led_column(self):
        options, engine = make_case({
            "key-clusters": {"finger": {"matrix-columns": [
                None,
                {"rows-below-home": 1, "rows-above-home": 2},
            ], "aliases": {}}},
            "mcu": {"finger-column": 1},
            "case": {"back-plate": {"include": False}, "foot-plates": {"include": False}},
            "connection": {"include": False},
        })
        errors = validate_options(options, engine)
        self.assertTrue(any(e.startswith("LED strip:") and "no rows" in e for e in errors))


if __name__ == "__main__":
    unittest.main()
