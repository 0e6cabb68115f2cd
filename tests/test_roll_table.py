import random
import unittest

import pandas as pd

from dndlib.errors import SchemaError
from dndlib.roll_table import FRAME_COLUMNS, RollTable, RollTableEntry
from dndlib.text import TextBlock
from tests._util import roll_table


def _entry(**props):
    props.setdefault("body", {"plainText": ["Something happens."]})
    return RollTableEntry.from_json(props)


class RollTableEntryTests(unittest.TestCase):
    def test_exact_value(self):
        ent = _entry(value=3)
        self.assertEqual(ent.validate(), [])
        self.assertTrue(ent.check(3))
        self.assertFalse(ent.check(4))

    def test_range(self):
        ent = _entry(minimumValue=2, maximumValue=5)
        self.assertEqual(ent.validate(), [])
        self.assertTrue(ent.check(2))
        self.assertTrue(ent.check(5))
        self.assertFalse(ent.check(6))

    def test_value_and_range_are_exclusive(self):
        errs = _entry(value=3, minimumValue=1).validate()
        self.assertEqual(
            errs,
            ["RollTableEntry requires either value or minimum/maximum. Cannot use both, found minimumValue to be set."],
        )

    def test_range_needs_both_bounds(self):
        errs = _entry(minimumValue=1).validate()
        self.assertEqual(errs, ["RollTableEntry requires a maximumValue to be set if not using value."])
        self.assertFalse(_entry(minimumValue=1).check(1))

    def test_inverted_range(self):
        errs = _entry(minimumValue=5, maximumValue=2).validate()
        self.assertEqual(len(errs), 1)
        self.assertIn("should not be greater than maximumValue 2", errs[0])

    def test_non_numeric_bounds_are_reported(self):
        ent = RollTableEntry(minimum_value="3", maximum_value=5, body=TextBlock(plain_text=["x"]))
        self.assertEqual(
            ent.validate(), ['RollTableEntry.minimumValue should be an integer type, instead found "string".']
        )
        self.assertFalse(ent.check(4))

    def test_d100_bounds(self):
        errs = _entry(value=101).validate()
        self.assertEqual(errs, ["RollTableEntry.value should be at most 100, instead found 101."])

    def test_body_is_required(self):
        with self.assertRaisesRegex(SchemaError, 'Missing "body" property for RollTableEntry.'):
            RollTableEntry.from_json({"value": 1})


class RollTableTests(unittest.TestCase):
    def test_sample_table_is_valid(self):
        table = RollTable.from_json(roll_table("D6", 6))
        self.assertEqual(table.validate(), [])
        self.assertEqual(len(table.results), 6)

    def test_empty_results(self):
        table = RollTable.from_json({"die": "D6", "results": []})
        self.assertEqual(table.validate(), ["RollTable.results should not be empty."])

    def test_unknown_die(self):
        table = RollTable.from_json(roll_table("UNKNOWN", 1))
        errs = table.validate()
        self.assertEqual(len(errs), 1)
        self.assertIn('RollTable.die should not be "UNKNOWN"', errs[0])
        self.assertIsNone(table.roll())

    def test_entry_errors_are_prefixed(self):
        props = roll_table("D6", 2)
        props["results"][1]["value"] = 0
        errs = RollTable.from_json(props).validate()
        self.assertEqual(errs, ["RollTable.results[1]: RollTableEntry.value should be at least 1, instead found 0."])

    def test_get_and_roll(self):
        table = RollTable.from_json(roll_table("D4", 4))
        self.assertEqual(table.get(2).body.plain_text, ["Result 2"])
        self.assertIsNone(table.get(7))
        rng = random.Random(42)
        for _ in range(20):
            self.assertIsNotNone(table.roll(rng))

    def test_entries_must_be_objects(self):
        with self.assertRaises(SchemaError):
            RollTable.from_json({"die": "D6", "results": ["one"]})


class FrameTests(unittest.TestCase):
    def test_to_frame(self):
        table = RollTable.from_json({
            "die": "D6",
            "results": [
                {"value": 1, "title": "Low", "body": {"plainText": ["First.", "Second."]}},
                {"minimumValue": 2, "maximumValue": 6, "body": {"plainText": ["High."]}},
            ],
        })
        frame = table.to_frame()
        self.assertEqual(list(frame.columns), FRAME_COLUMNS)
        self.assertEqual(len(frame), 2)
        self.assertEqual(frame.loc[0, "text"], "First.\nSecond.")
        self.assertEqual(frame.loc[1, "maximumValue"], 6)

    def test_from_frame(self):
        frame = pd.DataFrame(
            {
                "value": [1, None],
                "minimumValue": [None, 2],
                "maximumValue": [None, 6],
                "title": ["Low", None],
                "text": ["First.\nSecond.", "High."],
            }
        )
        table = RollTable.from_frame("D6", frame)
        self.assertEqual(table.validate(), [])
        self.assertEqual(table.results[0].value, 1)
        self.assertIsInstance(table.results[0].value, int)
        self.assertIsNone(table.results[0].minimum_value)
        self.assertEqual(table.results[0].body.plain_text, ["First.", "Second."])
        self.assertIsNone(table.results[1].title)
        self.assertEqual(table.get(4).body.plain_text, ["High."])

    def test_frame_round_trip_keeps_the_table(self):
        table = RollTable.from_json(roll_table("D8", 8))
        self.assertEqual(RollTable.from_frame("D8", table.to_frame()), table)

    def test_from_frame_needs_text(self):
        with self.assertRaises(ValueError):
            RollTable.from_frame("D6", pd.DataFrame({"value": [1]}))


if __name__ == "__main__":
    unittest.main()
