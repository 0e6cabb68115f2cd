import unittest

from dndlib.enums import ResourceType
from dndlib.errors import SchemaError
from dndlib.resource import Resource
from dndlib.source import Source
from dndlib.text import TextBlock
from tests._util import resource_props


class ResourceStrictTests(unittest.TestCase):
    def test_valid_props(self):
        res = Resource.from_json(resource_props("CONDITION", "blinded", uri="/condition/blinded"))
        self.assertEqual(res.validate(), [])
        self.assertIsInstance(res.description, TextBlock)
        self.assertIsInstance(res.source, Source)

    def test_required_properties(self):
        for key in ("type", "id", "name", "description", "source", "tags"):
            props = resource_props("CONDITION", "blinded")
            del props[key]
            with self.subTest(key=key):
                with self.assertRaisesRegex(SchemaError, f'Missing "{key}" property for Resource.'):
                    Resource.from_json(props)

    def test_tags_must_be_strings(self):
        with self.assertRaisesRegex(SchemaError, 'Resource "tags" array property must have index 0 be a string'):
            Resource.from_json(resource_props("CONDITION", "blinded", tags=[1]))

    def test_empty_tags_are_present(self):
        res = Resource.from_json(resource_props("CONDITION", "blinded", uri="/condition/blinded", tags=[]))
        self.assertEqual(res.tags, [])

    def test_nested_source_is_checked(self):
        with self.assertRaisesRegex(SchemaError, 'Missing "title" property for Source.'):
            Resource.from_json(resource_props("CONDITION", "blinded", source={"publicationID": "PHB"}))


class ResourceValidationTests(unittest.TestCase):
    def test_base_resource_has_no_derived_uri(self):
        res = Resource.from_json(resource_props("CONDITION", "blinded"))
        self.assertEqual(res.uri, "/")
        self.assertEqual(
            res.validate(),
            [
                "Resource URI format is invalid. Check that it starts with a forward slash, "
                "and is only alphanumeric path segments."
            ],
        )

    def test_type_messages(self):
        res = Resource.from_json(resource_props("SPELLZ", "x", uri="/x"))
        self.assertEqual(
            res.validate(), ['Resource requires a valid "type" ResourceType enum. "SPELLZ" is not one of them.']
        )
        res = Resource.from_json(resource_props("UNKNOWN", "x", uri="/x"))
        self.assertEqual(res.validate(), ['Resource should have a valid ResourceType, it is currently "UNKNOWN".'])

    def test_id_must_be_kabob_case(self):
        res = Resource.from_json(resource_props("CONDITION", "Blinded_Now", uri="/x"))
        self.assertEqual(res.validate(), ['Resource "id" should be a kabob-case string, instead found "Blinded_Now".'])

    def test_tag_messages(self):
        res = Resource.from_json(resource_props("CONDITION", "x", uri="/x", tags=["fine", "Not Fine"]))
        res.tags.append("")
        self.assertEqual(
            res.validate(),
            ["Resource tag[1] should be a kabob-case string.", "Resource tag[2] should be a non-empty string."],
        )

    def test_nested_errors_bubble_up(self):
        res = Resource.from_json(
            resource_props("CONDITION", "x", uri="/x", description={"plainText": []}, source={"publicationID": "NOPE", "title": "t"})
        )
        errs = res.validate()
        self.assertEqual(len(errs), 2)
        self.assertEqual(errs[0], "TextBlock.plainText requires at least one entry, none found.")
        self.assertTrue(errs[1].startswith('Source.publicationID "NOPE"'))

    def test_zero_value_instance(self):
        errs = Resource().validate()
        self.assertIn('Resource should have a valid ResourceType, it is currently "UNKNOWN".', errs)
        self.assertEqual(Resource().type, ResourceType.UNKNOWN)

    def test_validate_is_repeatable(self):
        res = Resource.from_json(resource_props("SPELLZ", "Bad Id", uri="nope"))
        self.assertEqual(res.validate(), res.validate())
        self.assertEqual(len(res.validate()), 3)


if __name__ == "__main__":
    unittest.main()
