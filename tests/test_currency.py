import random
import unittest

from dndlib.currency import Currency
from dndlib.errors import SchemaError


class ConversionTests(unittest.TestCase):
    def test_from_copper_uses_fewest_coins(self):
        purse = Currency.from_copper(1234)
        self.assertEqual(purse.to_json(), {"copper": 4, "silver": 3, "gold": 2, "platinum": 1})

    def test_from_copper_options(self):
        self.assertEqual(Currency.from_copper(1234, use_platinum=False).gold, 12)
        self.assertEqual(Currency.from_copper(170, use_electrum=True).to_json(), {"silver": 2, "electrum": 1, "gold": 1})

    def test_negative_totals(self):
        self.assertEqual(Currency.from_copper(-120).to_json(), {"silver": -2, "gold": -1})

    def test_from_gold_has_no_float_drift(self):
        self.assertEqual(Currency.from_gold(0.3).to_json(), {"silver": 3})
        self.assertEqual(Currency.from_gold(1.15).to_json(), {"copper": 5, "silver": 1, "gold": 1})
        self.assertEqual(Currency.from_gold(0.001).to_json(), {})

    def test_to_copper_and_gold(self):
        purse = Currency(copper=5, silver=10, electrum=3, gold=100, platinum=1)
        self.assertEqual(purse.to_copper(), 5 + 100 + 150 + 10000 + 1000)
        self.assertEqual(purse.to_gold(), 112.55)
        self.assertEqual(purse.to_gold(truncate=True), 112)

    def test_reduce(self):
        self.assertEqual(Currency.reduce(123), (3, 12))
        self.assertEqual(Currency.reduce(123, 100), (23, 1))

    def test_random_is_in_range(self):
        rng = random.Random(3)
        for _ in range(25):
            self.assertTrue(200 <= Currency.random(2, 5, rng).to_copper() <= 500)


class HydrationTests(unittest.TestCase):
    def test_negative_amounts_clamp(self):
        purse = Currency.from_json({"gold": -5, "silver": 3})
        self.assertEqual(purse.gold, 0)
        self.assertEqual(purse.silver, 3)
        self.assertEqual(purse.validate(), [])

    def test_amounts_must_be_numbers(self):
        with self.assertRaisesRegex(SchemaError, 'Currency "gold" property must be a number'):
            Currency.from_json({"gold": "5"})

    def test_fractional_amounts_fail_validation(self):
        errs = Currency.from_json({"gold": 2.5}).validate()
        self.assertEqual(errs, ["Currency.gold should be a whole integer number, instead found 2.5."])

    def test_gold_shorthand(self):
        self.assertEqual(Currency.coerce(12).to_json(), {"gold": 2, "platinum": 1})


class ArithmeticTests(unittest.TestCase):
    def test_add_and_subtract(self):
        purse = Currency(gold=10)
        purse.add({"silver": 5}).add(Currency(gold=2))
        self.assertEqual(purse.to_json(), {"silver": 5, "gold": 12})
        purse.subtract(1.5)
        self.assertEqual(purse.to_json(), {"silver": 0, "gold": 11})
        self.assertEqual(purse.to_copper(), 1100)

    def test_balance_after(self):
        purse = Currency(copper=95)
        purse.add({"copper": 15}, balance_after=True)
        self.assertEqual(purse.to_json(), {"silver": 1, "gold": 1})

    def test_balance(self):
        purse = Currency(copper=1050).balance()
        self.assertEqual(purse.platinum, 1)
        self.assertEqual(purse.silver, 5)
        self.assertIsNone(purse.copper)

    def test_str(self):
        self.assertEqual(str(Currency(copper=5, silver=10, electrum=3, gold=100, platinum=1)), "[5CP 10SP 3EP 100GP 1PP]")
        self.assertEqual(str(Currency()), "Zero")
        self.assertEqual(str(Currency(gold=0)), "Zero")


if __name__ == "__main__":
    unittest.main()
