"""Tests for the composition root."""

from __future__ import annotations

import unittest

from keycase.csg import Difference, Union, bounding_box, count_nodes, cube
from keycase.features import (
    auxiliary_negative, auxiliary_positive, auxiliary_preview, build_features,
    case_auxiliaries, compose_case,
)
from tests.case_fixture import make_case


ALL_OFF = {
    "mcu": {"include": False},
    "usb-holder": {"include": False},
    "connection": {"include": False},
    "case": {
        "back-plate": {"include": False},
        "leds": {"include": False},
        "foot-plates": {"include": False},
    },
}


class TestBuildFeatures(unittest.TestCase):

    def test_default_features(self):
        options, engine = make_case()
        names = [f.name for f in build_features(options, engine)]
        self.assertEqual(names, ["mcu", "back-plate", "leds", "connection", "foot-plates"])

    def test_include_flags(self):
        options, engine = make_case(ALL_OFF)
        self.assertEqual(build_features(options, engine), [])

        options, engine = make_case({**ALL_OFF, "usb-holder": {"include": True}})
        features = build_features(options, engine)
        self.assertEqual([f.name for f in features], ["usb-holder"])
        self.assertIsNotNone(features[0].positive)
        self.assertIsNotNone(features[0].negative)

    def test_mcu_support_optional(self):
        options, engine = make_case({**ALL_OFF, "mcu": {"include": True, "support": False}})
        (mcu,) = build_features(options, engine)
        self.assertIsNone(mcu.positive)
        self.assertIsNotNone(mcu.negative)
        self.assertIsNotNone(mcu.preview)

    def test_positive_and_negative_split(self):
        options, engine = make_case()
        features = {f.name: f for f in build_features(options, engine)}
        self.assertIsNone(features["leds"].positive)
        self.assertIsNone(features["foot-plates"].negative)
        positive = auxiliary_positive(list(features.values()))
        negative = auxiliary_negative(list(features.values()))
        self.assertIsInstance(positive, Union)
        self.assertEqual(len(positive.items), 4)
        self.assertEqual(len(negative.items), 4)
        self.assertEqual(count_nodes(auxiliary_preview(list(features.values())), "color"), 2)

    def test_logs_composed_features(self):
        options, engine = make_case()
        with self.assertLogs("keycase.features.compose", level="INFO") as logs:
            build_features(options, engine)
        self.assertIn("mcu", logs.output[0])


class TestCaseAuxiliaries(unittest.TestCase):

    def test_negative_subtracted_last(self):
        options, engine = make_case()
        tree = case_auxiliaries(options, engine)
        self.assertIsInstance(tree, Difference)
        self.assertEqual(len(tree.items), 2)

    def test_shell_joins_positive(self):
        options, engine = make_case()
        shell = cube(300, 200, 40, center=False)
        tree = case_auxiliaries(options, engine, shell=shell)
        self.assertIs(tree.items[0].items[0], shell)
        box = bounding_box(tree)
        self.assertAlmostEqual(box.minimum[2], 0.0)

    def test_same_tree_from_features(self):
        options, engine = make_case()
        features = build_features(options, engine)
        self.assertEqual(compose_case(features), case_auxiliaries(options, engine))
        shell = cube(300, 200, 40, center=False)
        self.assertEqual(compose_case(features, shell), case_auxiliaries(options, engine, shell))

    def test_pure(self):
        options, engine = make_case()
        self.assertEqual(case_auxiliaries(options, engine), case_auxiliaries(options, engine))
        again, again_engine = make_case()
        self.assertEqual(build_features(options, engine), build_features(again, again_engine))


if __name__ == "__main__":
    unittest.main()
