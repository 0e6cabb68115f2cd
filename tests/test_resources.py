import copy
import unittest

from dndlib.enums import ResourceType
from dndlib.errors import SchemaError
from dndlib.options import Options
from dndlib.reference import ReferenceItem, ReferenceSkill
from dndlib.resources import AbilityScore, Action, Background, Spell
from dndlib.resources.action import ActionTiming
from dndlib.resources.spell import SpellDamage, SpellRange, SpellScroll
from dndlib.roll_table import RollTable
from tests._util import ABILITY_SCORE, ACTION, BACKGROUND, SPELL


def _with(sample, **changes):
    props = copy.deepcopy(sample)
    props.update(changes)
    return props


class SampleTests(unittest.TestCase):
    def test_samples_are_valid(self):
        for cls, sample in ((Spell, SPELL), (Action, ACTION), (AbilityScore, ABILITY_SCORE), (Background, BACKGROUND)):
            with self.subTest(resource=cls.__name__):
                res = cls.from_json(sample)
                self.assertEqual(res.validate(), [])
                self.assertTrue(res.is_valid())

    def test_uri_is_derived(self):
        self.assertEqual(Spell.from_json(SPELL).uri, "/spell/fireball")
        self.assertEqual(Background.from_json(BACKGROUND).uri, "/background/acolyte")

    def test_class_type_wins(self):
        spell = Spell.from_json(_with(SPELL, type="ACTION"))
        self.assertEqual(spell.type, ResourceType.SPELL)

    def test_copies_are_equal_and_independent(self):
        bg = Background.from_json(BACKGROUND)
        clone = Background.from_existing(bg)
        self.assertEqual(clone, bg)
        clone.equipment.coin_pouch = 99
        self.assertEqual(bg.equipment.coin_pouch, 15)


class SpellTests(unittest.TestCase):
    def test_cantrips_are_allowed(self):
        spell = Spell.from_json(_with(SPELL, level=0))
        self.assertTrue(spell.is_cantrip)
        self.assertEqual(spell.validate(), [])

    def test_level_bounds(self):
        errs = Spell.from_json(_with(SPELL, level=10)).validate()
        self.assertEqual(errs, ["Spell.level should be at most 9, instead found 10."])

    def test_required_spell_properties(self):
        props = _with(SPELL)
        del props["components"]
        with self.assertRaisesRegex(SchemaError, 'Missing "components" property for Spell.'):
            Spell.from_json(props)

    def test_range_distance(self):
        self.assertEqual(SpellRange.from_json({"type": "MELEE"}).validate(), [])
        self.assertEqual(
            SpellRange.from_json({"type": "RANGED"}).validate(), ["Spell::Range.distance is a required integer."]
        )
        self.assertEqual(
            SpellRange.from_json({"type": "RANGED", "distance": 12}).validate(),
            ["Spell::Range.distance should be a multiple of 5, instead found 12."],
        )

    def test_damage_dice(self):
        damage = SpellDamage.from_json({
            "type": {"uri": "/damage-type/fire"},
            "baseAmount": "eight dice",
            "higherSlots": ["9d6", "lots"],
        })
        errs = damage.validate()
        self.assertEqual(len(errs), 2)
        self.assertTrue(errs[0].startswith('Spell::Damage.baseAmount "eight dice" does not pass'))
        self.assertTrue(errs[1].startswith('Spell::Damage.higherSlots[1] "lots" does not pass'))

    def test_character_level_length(self):
        damage = SpellDamage.from_json({
            "type": {"uri": "/damage-type/fire"},
            "baseAmount": "1d10",
            "characterLevel": ["1d10"] * 4,
        })
        self.assertEqual(
            damage.validate(),
            ["Spell::Damage.characterLevel needs to be exactly 20 items in length, instead it has a size of 4."],
        )

    def test_nested_errors_in_spell(self):
        props = _with(SPELL, school={"uri": "magic-school", "name": "Evocation"}, classes=[{"uri": "/class/", "name": "W"}])
        errs = Spell.from_json(props).validate()
        self.assertEqual(len(errs), 2)
        self.assertTrue(errs[0].startswith("Spell.school: ReferenceMagicSchool.uri"))
        self.assertTrue(errs[1].startswith("Spell.classes[0]: ReferenceClass.uri"))

    def test_scroll_needs_all_numbers(self):
        with self.assertRaisesRegex(SchemaError, 'Missing "suggestedValue" property for Spell::Scroll.'):
            SpellScroll.from_json({"rarity": "COMMON", "attackBonus": 5, "saveDC": 13})
        scroll = SpellScroll.from_json({"rarity": "RARE", "attackBonus": 9, "saveDC": 17, "suggestedValue": 5000})
        self.assertEqual(scroll.validate(), [])


class ActionTests(unittest.TestCase):
    def test_variant_needs_source(self):
        errs = Action.from_json(_with(ACTION, isVariant=True)).validate()
        self.assertEqual(errs, ['Action.variantSource is required if this action is marked as "isVariant".'])

    def test_variant_source_errors_are_prefixed(self):
        action = Action.from_json(_with(ACTION, isVariant=True, variantSource={"publicationID": "X", "title": "t"}))
        errs = action.validate()
        self.assertEqual(len(errs), 1)
        self.assertTrue(errs[0].startswith('Action.variantSource: Source.publicationID "X"'))

    def test_timing(self):
        action = Action.from_json(_with(ACTION, timing={"type": "BONUS_ACTION", "count": 2}))
        self.assertIsInstance(action.timing, ActionTiming)
        self.assertEqual(action.timing.count, 2)
        errs = Action.from_json(_with(ACTION, timing={"type": "SOMETIMES", "count": 0})).validate()
        self.assertEqual(len(errs), 2)
        self.assertTrue(errs[0].startswith('Action::Timing.type "SOMETIMES"'))

    def test_is_variant_is_required(self):
        props = _with(ACTION)
        del props["isVariant"]
        with self.assertRaisesRegex(SchemaError, 'Missing "isVariant" property for Action.'):
            Action.from_json(props)


class AbilityScoreTests(unittest.TestCase):
    def test_skills_are_typed_references(self):
        score = AbilityScore.from_json(ABILITY_SCORE)
        self.assertIsInstance(score.skills[0], ReferenceSkill)
        self.assertEqual(score.to_json()["skills"][0]["type"], "SKILL")

    def test_abbreviation_length(self):
        errs = AbilityScore.from_json(_with(ABILITY_SCORE, abbreviation="STRE")).validate()
        self.assertEqual(len(errs), 1)
        self.assertIn("exact length of 3", errs[0])

    def test_skill_errors_are_prefixed(self):
        errs = AbilityScore.from_json(_with(ABILITY_SCORE, skills=[{"uri": "athletics"}])).validate()
        self.assertEqual(len(errs), 1)
        self.assertTrue(errs[0].startswith("AbilityScore skill[0]: ReferenceSkill.uri"))

    def test_shorthand(self):
        score = AbilityScore.coerce(" dex ")
        self.assertEqual((score.id, score.name, score.abbreviation), ("dex", "DEX", "DEX"))
        self.assertEqual(score.uri, "/ability-score/dex")
        with self.assertRaises(SchemaError):
            AbilityScore.from_shorthand(3)


class BackgroundTests(unittest.TestCase):
    def test_hydrated_structure(self):
        bg = Background.from_json(BACKGROUND)
        self.assertIsInstance(bg.proficiencies.skills.starting[0], ReferenceSkill)
        self.assertIsNone(bg.proficiencies.tools)
        self.assertEqual(bg.proficiencies.languages.wildcard.amount, 2)
        group = bg.equipment.items.options[0]
        self.assertIsInstance(group, Options)
        self.assertIsInstance(group.choices[0], ReferenceItem)
        self.assertIsInstance(bg.traits, RollTable)
        self.assertEqual(bg.feature.title, "Shelter of the Faithful")

    def test_zero_pick_option_groups_are_dropped(self):
        props = copy.deepcopy(BACKGROUND)
        props["equipment"]["items"]["options"].append({"amount": 0, "fromAny": True})
        bg = Background.from_json(props)
        self.assertEqual(len(bg.equipment.items.options), 1)

    def test_required_groupings(self):
        props = copy.deepcopy(BACKGROUND)
        del props["equipment"]
        with self.assertRaisesRegex(SchemaError, 'Missing "equipment" property for Background.'):
            Background.from_json(props)
        props = copy.deepcopy(BACKGROUND)
        del props["equipment"]["clothes"]
        with self.assertRaisesRegex(SchemaError, 'Missing "clothes" property for Background::Equipment.'):
            Background.from_json(props)

    def test_option_groups_are_checked_strictly(self):
        props = copy.deepcopy(BACKGROUND)
        props["equipment"]["items"]["options"] = [{"choices": []}]
        with self.assertRaisesRegex(SchemaError, 'Missing "amount" property for Background::Items.options.'):
            Background.from_json(props)

    def test_roll_table_errors_are_prefixed(self):
        props = copy.deepcopy(BACKGROUND)
        props["bonds"]["results"] = []
        errs = Background.from_json(props).validate()
        self.assertEqual(errs, ["Background.bonds: RollTable.results should not be empty."])

    def test_lifestyle_and_wildcard(self):
        props = copy.deepcopy(BACKGROUND)
        props["lifestyle"] = "LAVISH"
        props["proficiencies"]["languages"]["wildcard"] = {"amount": 1, "standard": False}
        errs = Background.from_json(props).validate()
        self.assertEqual(len(errs), 2)
        self.assertIn("should allow standard or exotic languages", errs[0])
        self.assertTrue(errs[1].startswith('Background.lifestyle "LAVISH"'))

    def test_coin_pouch(self):
        props = copy.deepcopy(BACKGROUND)
        props["equipment"]["coinPouch"] = -1
        errs = Background.from_json(props).validate()
        self.assertEqual(
            errs, ["Background::Equipment.coinPouch should be a positive integer (0 or greater), instead found -1."]
        )


if __name__ == "__main__":
    unittest.main()
