import unittest
from dataclasses import dataclass

from sirenentity.utils import json_type_name, string_list, to_json_value


@dataclass
class Point:
    x: int
    y: int


class Temperature:
    def __init__(self, celsius):
        self.celsius = celsius

    def to_json(self):
        return {"celsius": self.celsius}


class TestToJsonValue(unittest.TestCase):

    def test_plain_values(self):
        self.assertEqual({"a": [1, 2.5, "x", True, None]}, to_json_value({"a": (1, 2.5, "x", True, None)}))

    def test_non_string_keys(self):
        self.assertEqual({"1": "one"}, to_json_value({1: "one"}))

    def test_to_json_objects(self):
        self.assertEqual({"now": {"celsius": 21}}, to_json_value({"now": Temperature(21)}))
        self.assertEqual({"celsius": 21}, to_json_value(Temperature(21)))

    def test_dataclasses(self):
        self.assertEqual({"x": 1, "y": 2}, to_json_value(Point(1, 2)))

    def test_unserializable(self):
        with self.assertRaises(TypeError):
            to_json_value({"s": {1, 2}})
        with self.assertRaises(ValueError):
            to_json_value([float("inf")])

    def test_circular(self):
        d = {}
        d["self"] = d
        with self.assertRaises(ValueError):
            to_json_value(d)


class TestJsonTypeName(unittest.TestCase):

    def test_names(self):
        self.assertEqual("object", json_type_name({}))
        self.assertEqual("array", json_type_name([]))
        self.assertEqual("string", json_type_name(""))
        self.assertEqual("boolean", json_type_name(False))
        self.assertEqual("number", json_type_name(0))
        self.assertEqual("number", json_type_name(0.5))
        self.assertEqual("null", json_type_name(None))


class TestStringList(unittest.TestCase):

    def test_string_list(self):
        self.assertEqual([], string_list(None))
        self.assertEqual(["self"], string_list("self"))
        self.assertEqual(["a", "b"], string_list(("a", "b")))
        self.assertEqual(["1"], string_list([1]))


if __name__ == '__main__':
    unittest.main()
