import unittest

from dndlib.errors import SchemaError
from dndlib.text import TextBlock, TextSection


class TextBlockTests(unittest.TestCase):
    def test_valid_block(self):
        block = TextBlock.from_json({"plainText": ["One.", "Two."], "markdown": ["*One.*", "Two."]})
        self.assertEqual(block.validate(), [])
        self.assertIsNone(block.html)

    def test_plain_text_is_required(self):
        with self.assertRaisesRegex(SchemaError, 'Missing "plainText" property for TextBlock.'):
            TextBlock.from_json({"markdown": ["x"]})

    def test_entries_must_be_strings(self):
        with self.assertRaisesRegex(SchemaError, "index 1 be a string"):
            TextBlock.from_json({"plainText": ["ok", 2]})

    def test_empty_block_reports_missing_entries(self):
        block = TextBlock.from_json({"plainText": []})
        self.assertEqual(block.validate(), ["TextBlock.plainText requires at least one entry, none found."])
        self.assertTrue(block.is_zero_value())

    def test_empty_entries_are_reported(self):
        block = TextBlock(plain_text=["fine", ""], html=[""])
        self.assertEqual(
            block.validate(),
            [
                'TextBlock.plainText[1] is a "string", expected a non-empty string.',
                'TextBlock.html[0] is a "string", expected a non-empty string.',
            ],
        )

    def test_shorthand(self):
        self.assertEqual(TextBlock.coerce("A line.").plain_text, ["A line."])
        with self.assertRaises(SchemaError):
            TextBlock.coerce(3)


class TextSectionTests(unittest.TestCase):
    def test_valid_section(self):
        section = TextSection.from_json({"title": "Feature", "body": {"plainText": ["Body."]}})
        self.assertEqual(section.validate(), [])
        self.assertEqual(section.to_json(), {"title": "Feature", "body": {"plainText": ["Body."]}})

    def test_body_is_required(self):
        with self.assertRaisesRegex(SchemaError, 'Missing "body" property for TextSection.'):
            TextSection.from_json({"title": "Feature"})

    def test_missing_title_is_reported_by_validate(self):
        section = TextSection.from_json({"body": {"plainText": ["Body."]}})
        self.assertEqual(section.validate(), ["TextSection.title is a required string."])

    def test_body_errors_bubble_up(self):
        section = TextSection(title="T", body=TextBlock())
        self.assertEqual(section.validate(), ["TextBlock.plainText requires at least one entry, none found."])

    def test_zero_value(self):
        self.assertTrue(TextSection().is_zero_value())
        self.assertFalse(TextSection(title="x").is_zero_value())


if __name__ == "__main__":
    unittest.main()
