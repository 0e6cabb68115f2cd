import datetime
import unittest
from collections import OrderedDict

from dndlib.json_object import is_missing, is_plain_object, is_plain_object_member, json_type_name
from dndlib.text import TextBlock


class Custom:
    pass


class PlainObjectTests(unittest.TestCase):
    def test_literal_records_are_plain(self):
        self.assertTrue(is_plain_object({}))
        self.assertTrue(is_plain_object({"a": 1, "b": "x", "c": None, "d": [1, {"e": False}]}))

    def test_non_objects_are_not_plain(self):
        for value in ([], None, 0, 1.5, "str", True, len, lambda: None):
            with self.subTest(value=value):
                self.assertFalse(is_plain_object(value))

    def test_class_instances_are_not_plain(self):
        self.assertFalse(is_plain_object(Custom()))
        self.assertFalse(is_plain_object(datetime.date(2021, 1, 1)))
        self.assertFalse(is_plain_object(TextBlock(plain_text=["x"])))

    def test_dict_subclasses_are_foreign(self):
        self.assertFalse(is_plain_object(OrderedDict(a=1)))

    def test_foreign_members_poison_the_object(self):
        self.assertFalse(is_plain_object({"when": datetime.date(2021, 1, 1)}))
        self.assertFalse(is_plain_object({"nested": {"deep": Custom()}}))
        self.assertFalse(is_plain_object({1: "non-string key"}))

    def test_cycles_are_not_plain(self):
        looped = {"a": 1}
        looped["self"] = looped
        self.assertFalse(is_plain_object(looped))
        items = []
        items.append(items)
        self.assertFalse(is_plain_object_member(items))
        self.assertFalse(is_plain_object({"items": items}))

    def test_shared_members_are_plain(self):
        shared = {"x": [1, 2]}
        self.assertTrue(is_plain_object({"a": shared, "b": shared, "c": [shared, shared]}))

    def test_members(self):
        self.assertTrue(is_plain_object_member(None))
        self.assertTrue(is_plain_object_member([1, "two", [3.0]]))
        self.assertFalse(is_plain_object_member(float("nan")))
        self.assertFalse(is_plain_object_member((1, 2)))
        self.assertFalse(is_plain_object_member({1, 2}))


class PresenceTests(unittest.TestCase):
    def test_missing_values(self):
        self.assertTrue(is_missing(None))
        self.assertTrue(is_missing(""))

    def test_falsy_values_are_present(self):
        for value in (0, 0.0, False, [], {}):
            with self.subTest(value=value):
                self.assertFalse(is_missing(value))


class TypeNameTests(unittest.TestCase):
    def test_json_vocabulary(self):
        self.assertEqual(json_type_name(None), "null")
        self.assertEqual(json_type_name(True), "boolean")
        self.assertEqual(json_type_name(3), "number")
        self.assertEqual(json_type_name(3.5), "number")
        self.assertEqual(json_type_name("x"), "string")
        self.assertEqual(json_type_name([1]), "array")
        self.assertEqual(json_type_name({}), "object")
        self.assertEqual(json_type_name(len), "function")
        self.assertEqual(json_type_name(Custom()), "Custom")


if __name__ == "__main__":
    unittest.main()
