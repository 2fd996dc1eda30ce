"""Tests for CSG builders, transform chains, bounds and serialization."""

from __future__ import annotations

import json
import math
import unittest

from keycase.csg import (
    BoundingBox, Cube, DegenerateGeometryError, Hull, Transform, bottom_hull,
    bounding_box, count_nodes, cube, cylinder, difference, hull,
    intersection, iso_hex_nut_model, linear_extrude, node_to_dict, polygon,
    rotate, translate, union,
)


def assert_box_almost_equal(case: unittest.TestCase, a: BoundingBox, b: BoundingBox, places=7):
    for x, y in zip(a.minimum + a.maximum, b.minimum + b.maximum):
        case.assertAlmostEqual(x, y, places=places)


class TestBuilders(unittest.TestCase):

    def test_trees_compare_by_value(self):
        a = translate((1, 2, 3), cube(1, 1, 1))
        b = translate([1.0, 2.0, 3.0], cube(1, 1, 1))
        self.assertEqual(a, b)
        self.assertNotEqual(a, translate((1, 2, 4), cube(1, 1, 1)))

    def test_hull_needs_two_shapes(self):
        with self.assertRaises(DegenerateGeometryError) as ctx:
            hull(cube(1, 1, 1))
        self.assertEqual(ctx.exception.operator, "hull")
        self.assertEqual(ctx.exception.count, 1)

    def test_polygon_needs_three_points(self):
        with self.assertRaises(DegenerateGeometryError):
            polygon([(0, 0), (1, 1)])

    def test_collinear_polygon_is_degenerate(self):
        with self.assertRaises(DegenerateGeometryError):
            polygon([(0, 0), (1, 1), (2, 2)])

    def test_extrude_needs_positive_height(self):
        square = polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        with self.assertRaises(DegenerateGeometryError):
            linear_extrude(0, square)

    def test_vector_length_checked(self):
        with self.assertRaises(ValueError):
            translate((1, 2), cube(1, 1, 1))

    def test_rotate_about_principal_axis_only(self):
        r = rotate(math.pi / 2, cube(1, 1, 1), axis=(0, 1, 0))
        self.assertEqual(r.angles, (0.0, math.pi / 2, 0.0))
        with self.assertRaises(ValueError):
            rotate(1.0, cube(1, 1, 1), axis=(1, 1, 0))

    def test_nut_model_is_hexagonal(self):
        nut = iso_hex_nut_model(6, 5)
        self.assertEqual(nut.segments, 6)
        # 10 mm across flats
        self.assertAlmostEqual(nut.radius * math.sqrt(3), 10.0)

    def test_bottom_hull_is_a_hull(self):
        shape = bottom_hull(translate((0, 0, 10), cube(2, 2, 2)))
        self.assertIsInstance(shape, Hull)
        self.assertEqual(count_nodes(shape, "projection"), 1)


class TestBounds(unittest.TestCase):

    def test_cube(self):
        box = bounding_box(cube(2, 4, 6))
        self.assertEqual(box.minimum, (-1.0, -2.0, -3.0))
        self.assertEqual(box.maximum, (1.0, 2.0, 3.0))
        box = bounding_box(cube(2, 4, 6, center=False))
        self.assertEqual(box.minimum, (0.0, 0.0, 0.0))

    def test_translated_cylinder(self):
        box = bounding_box(translate((5, 0, 0), cylinder(1, 4)))
        self.assertAlmostEqual(box.minimum[0], 4.0)
        self.assertAlmostEqual(box.maximum[0], 6.0)
        self.assertAlmostEqual(box.minimum[2], -2.0)

    def test_rotation_swaps_axes(self):
        box = bounding_box(rotate((0, math.pi / 2, 0), cube(2, 4, 6)))
        self.assertAlmostEqual(box.size[0], 6.0)
        self.assertAlmostEqual(box.size[1], 4.0)
        self.assertAlmostEqual(box.size[2], 2.0)

    def test_bottom_hull_reaches_floor(self):
        box = bounding_box(bottom_hull(translate((0, 0, 10), cube(2, 2, 2))))
        self.assertAlmostEqual(box.minimum[2], 0.0)
        self.assertAlmostEqual(box.maximum[2], 11.0)

    def test_difference_keeps_base(self):
        box = bounding_box(difference(cube(2, 2, 2), cube(10, 10, 10)))
        self.assertEqual(box.size, (2.0, 2.0, 2.0))

    def test_intersection_clips(self):
        box = bounding_box(intersection(cube(2, 2, 2), translate((1, 0, 0), cube(2, 2, 2))))
        self.assertAlmostEqual(box.minimum[0], 0.0)
        self.assertAlmostEqual(box.maximum[0], 1.0)
        self.assertIsNone(bounding_box(intersection(
            cube(1, 1, 1), translate((5, 0, 0), cube(1, 1, 1)))))

    def test_empty_union(self):
        self.assertIsNone(bounding_box(union()))

    def test_contains(self):
        outer = bounding_box(cube(10, 10, 10))
        self.assertTrue(outer.contains(bounding_box(cube(2, 2, 2))))
        self.assertFalse(bounding_box(cube(2, 2, 2)).contains(outer))


class TestTransform(unittest.TestCase):

    def chain(self) -> Transform:
        return (
            Transform()
            .translate((0, -16.5, 0))
            .rotate_about(math.pi / 2, (0, 1, 0))
            .translate((0, 0, 9))
            .rotate((0.3, -0.2, -math.pi / 2))
            .translate((40, 25, 0))
        )

    def test_order_matters(self):
        a = Transform().rotate((0, 0, math.pi / 2)).translate((1, 0, 0))
        b = Transform().translate((1, 0, 0)).rotate((0, 0, math.pi / 2))
        pa = a.apply_point((0, 0, 0))
        pb = b.apply_point((0, 0, 0))
        self.assertAlmostEqual(pa[0], 1.0)
        self.assertAlmostEqual(pb[1], 1.0)

    def test_apply_point_matches_tree_bounds(self):
        t = self.chain()
        box = bounding_box(t.apply(cube(0.0, 0.0, 0.0)))
        p = t.apply_point((0, 0, 0))
        for a, b in zip(box.minimum, p):
            self.assertAlmostEqual(a, b)

    def test_inverse_restores_bounds(self):
        t = self.chain()
        shape = union(cube(18, 33, 1.65), translate((0, 16, 2), cylinder(3, 5)))
        round_trip = t.inverse().apply(t.apply(shape))
        assert_box_almost_equal(self, bounding_box(round_trip), bounding_box(shape))

    def test_inverse_of_point(self):
        t = self.chain()
        p = (3.0, -7.0, 11.0)
        back = t.inverse().apply_point(t.apply_point(p))
        for a, b in zip(back, p):
            self.assertAlmostEqual(a, b)

    def test_empty_transform_is_identity(self):
        shape = cube(1, 2, 3)
        self.assertIs(Transform().apply(shape), shape)


class TestSerialization(unittest.TestCase):

    def test_node_to_dict(self):
        tree = translate((1, 2, 3), union(cube(1, 1, 1), cylinder(2, 3, segments=8)))
        data = node_to_dict(tree)
        self.assertEqual(data["kind"], "translate")
        self.assertEqual(data["offset"], [1.0, 2.0, 3.0])
        inner = data["children"][0]
        self.assertEqual(inner["kind"], "union")
        self.assertEqual([c["kind"] for c in inner["children"]], ["cube", "cylinder"])
        self.assertEqual(inner["children"][1]["segments"], 8)
        json.dumps(data)

    def test_count_nodes(self):
        tree = union(cube(1, 1, 1), cube(2, 2, 2), translate((0, 0, 1), cylinder(1, 1)))
        self.assertEqual(count_nodes(tree), 5)
        self.assertEqual(count_nodes(tree, "cube"), 2)
        self.assertIsInstance(tree.items[0], Cube)


if __name__ == "__main__":
    unittest.main()
