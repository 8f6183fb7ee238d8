import math
import unittest
from types import SimpleNamespace

from geom.float2.construct import as_float2, from_array, from_json, is_float2, one, vec, zero
from geom.float2.errors import InvalidArgument
from geom.float2.vec2 import Float2, T


class TestConstruct(unittest.TestCase):
    def test_vec_and_constants(self):
        self.assertEqual(vec(1.5, -2).to_array(), [1.5, -2])
        self.assertTrue(zero().is_zero())
        self.assertTrue(one().equals(Float2(1, 1)))

    def test_constants_are_fresh_instances(self):
        z = zero()
        z.add_flat(1, 1)
        self.assertTrue(zero().is_zero())

    def test_vec_does_not_validate(self):
        v = vec(math.nan, math.inf)
        self.assertFalse(v.is_ok())

    def test_from_array(self):
        self.assertTrue(from_array([1, 2]).equals(vec(1, 2)))
        self.assertTrue(from_array((3.5, 4.5)).equals(vec(3.5, 4.5)))

    def test_from_array_ignores_extra_elements(self):
        self.assertTrue(from_array([1, 2, 3]).equals(vec(1, 2)))

    def test_from_array_too_short(self):
        with self.assertRaises(InvalidArgument):
            from_array([1])
        with self.assertRaises(ValueError):
            from_array([])

    def test_round_trip_through_array(self):
        v = vec(-0.25, 12.0)
        self.assertTrue(from_array(v.to_array()).equals(v))

    def test_from_json_mapping(self):
        v = from_json({"x": 1, "y": 2.5})
        self.assertIsInstance(v, Float2)
        self.assertTrue(v.equals(vec(1, 2.5)))

    def test_from_json_object(self):
        v = from_json(SimpleNamespace(x=-3.0, y=4))
        self.assertTrue(v.equals(vec(-3, 4)))

    def test_from_json_round_trip(self):
        v = vec(0.5, -7)
        self.assertTrue(from_json(v.to_json()).equals(v))
        self.assertTrue(from_json(v).equals(v))

    def test_from_json_rejects_non_numbers(self):
        with self.assertRaises(InvalidArgument):
            from_json({"x": "1", "y": 2})
        with self.assertRaises(InvalidArgument):
            from_json({"x": 1})
        with self.assertRaises(InvalidArgument):
            from_json(SimpleNamespace(x=1, y=None))

    def test_from_json_accepts_nan(self):
        v = from_json({"x": math.nan, "y": 0})
        self.assertFalse(v.is_ok())

    def test_as_float2(self):
        self.assertTrue(as_float2({"x": 4, "y": 5}).equals(vec(4, 5)))
        with self.assertRaises(InvalidArgument):
            as_float2({"x": [], "y": 5})

    def test_is_float2(self):
        self.assertTrue(is_float2({"x": 1, "y": 2.0}))
        self.assertTrue(is_float2(vec(1, 2)))
        self.assertFalse(is_float2({"x": "a", "y": 2}))
        self.assertFalse(is_float2({"y": 2}))
        self.assertFalse(is_float2(None))
        self.assertFalse(is_float2(42))

    def test_type_alias(self):
        self.assertIs(T, Float2)


if __name__ == "__main__":
    unittest.main()
