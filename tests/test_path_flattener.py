import unittest

from application.services.path_flattener import flatten
from domain.values import format_value, kind_of
from domain.entities import ValueKind


class TestFormatValue(unittest.TestCase):
    def test_scalars(self):
        self.assertEqual(format_value("hi"), "hi")
        self.assertEqual(format_value(True), "true")
        self.assertEqual(format_value(False), "false")
        self.assertEqual(format_value(None), "null")
        self.assertEqual(format_value(42), "42")
        self.assertEqual(format_value(2.0), "2")
        self.assertEqual(format_value(-0.25), "-0.25")
        self.assertEqual(format_value(1e-06), "1e-06")
        self.assertEqual(format_value(1e21), "1e+21")

    def test_containers_have_no_scalar_form(self):
        with self.assertRaises(TypeError):
            format_value({"a": 1})
        with self.assertRaises(TypeError):
            format_value([1])

    def test_booleans_are_not_numbers(self):
        self.assertIs(kind_of(True), ValueKind.BOOLEAN)
        self.assertIs(kind_of(1), ValueKind.NUMBER)


class TestFlatten(unittest.TestCase):
    def test_nested_paths(self):
        keys = flatten({"a": {"b": 1, "c": {"d": "x"}}, "e": False})
        self.assertEqual(keys.paths, {"a.b", "a.c.d", "e"})
        self.assertEqual(keys.path_values, {"a.b=1", "a.c.d=x", "e=false"})

    def test_arrays_are_not_indexed(self):
        keys = flatten({"a": [1, 2, 3], "b": {"c": [{"d": 1}]}, "f": 1})
        self.assertEqual(keys.paths, {"f"})
        self.assertEqual(keys.path_values, {"f=1"})

    def test_empty_object_contributes_nothing(self):
        keys = flatten({"a": {}})
        self.assertEqual(keys.all(), set())

    def test_null_leaf_is_indexed(self):
        keys = flatten({"a": None})
        self.assertEqual(keys.all(), {"a", "a=null"})


if __name__ == "__main__":
    unittest.main()
