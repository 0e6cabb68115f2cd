import unittest

from dndlib.enums import (
    CreatureSize,
    DieSize,
    Rarity,
    ResourceType,
    creature_size_as_feet,
    die_sides,
    enum_has,
    enum_values,
    enum_values_to_string,
)


class EnumHelperTests(unittest.TestCase):
    def test_mapping_membership(self):
        self.assertTrue(enum_has({"A": "A", "B": "B"}, "A"))
        self.assertFalse(enum_has({"A": "A", "B": "B"}, "C"))

    def test_every_declared_key_is_a_member(self):
        for enum_cls in (ResourceType, DieSize, Rarity, CreatureSize):
            for key in enum_values(enum_cls):
                with self.subTest(enum=enum_cls.__name__, key=key):
                    self.assertTrue(enum_has(enum_cls, key))

    def test_membership_is_exact(self):
        self.assertFalse(enum_has(Rarity, ""))
        self.assertFalse(enum_has(Rarity, "common"))
        self.assertFalse(enum_has(Rarity, "Common"))
        self.assertFalse(enum_has(Rarity, " COMMON"))

    def test_non_strings_are_never_members(self):
        self.assertFalse(enum_has(Rarity, None))
        self.assertFalse(enum_has(Rarity, 1))
        self.assertFalse(enum_has({"1": "1"}, 1))

    def test_members_are_accepted(self):
        self.assertTrue(enum_has(Rarity, Rarity.RARE))
        self.assertTrue(Rarity.has("VERY_RARE"))

    def test_unknown_is_a_declared_key(self):
        self.assertTrue(enum_has(DieSize, "UNKNOWN"))

    def test_values_in_declaration_order(self):
        self.assertEqual(enum_values(Rarity)[:2], ["COMMON", "UNCOMMON"])
        self.assertEqual(enum_values_to_string({"A": "A", "B": "B"}), "A, B")

    def test_members_compare_as_strings(self):
        self.assertEqual(DieSize.D6, "D6")
        self.assertEqual(str(DieSize.D6), "D6")


class DomainHelperTests(unittest.TestCase):
    def test_die_sides(self):
        self.assertEqual(die_sides("D20"), 20)
        self.assertEqual(die_sides(DieSize.D100), 100)
        self.assertEqual(die_sides("UNKNOWN"), 0)
        self.assertEqual(die_sides("D7"), 0)

    def test_creature_size_as_feet(self):
        self.assertEqual(creature_size_as_feet(CreatureSize.TINY), 2.5)
        self.assertEqual(creature_size_as_feet("MEDIUM"), 5)
        self.assertEqual(creature_size_as_feet("GARGANTUAN"), 20)
        self.assertEqual(creature_size_as_feet("UNKNOWN"), 0)
        self.assertEqual(creature_size_as_feet("ENORMOUS"), 0)


if __name__ == "__main__":
    unittest.main()
