"""
currency.py - coin purses and gold-value arithmetic
===================================================

Exchange rates (in copper pieces): CP 1, SP 10, EP 50, GP 100, PP 1000.

Internally every conversion goes through an integral copper total, so
``Currency.from_gold(0.3).silver == 3`` without any float drift.  Unset
denominations are ``None`` and are left out of :meth:`Currency.to_json`.
"""

from __future__ import annotations

import math
import random as _random
from typing import Any, Dict, Optional, Tuple

from .errors import strict_validate_optional_prop
from .model import Model
from .utils import positive, random_float
from .validator import ValidationErrors, validate_integer

__all__ = ["Currency", "COPPER_RATES"]

COPPER_RATES: Dict[str, int] = {
    "copper": 1,
    "silver": 10,
    "electrum": 50,
    "gold": 100,
    "platinum": 1000,
}

_ABBREVIATIONS = {"copper": "CP", "silver": "SP", "electrum": "EP", "gold": "GP", "platinum": "PP"}


class Currency(Model):
    FIELDS = {name: name for name in COPPER_RATES}

    def __init__(
        self,
        copper: Optional[int] = None,
        silver: Optional[int] = None,
        electrum: Optional[int] = None,
        gold: Optional[int] = None,
        platinum: Optional[int] = None,
    ):
        self.copper = copper
        self.silver = silver
        self.electrum = electrum
        self.gold = gold
        self.platinum = platinum

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        for name in COPPER_RATES:
            strict_validate_optional_prop(props, "Currency", name, "number")

    def assign(self, props: Any) -> "Currency":
        """Copy the denominations across; negative amounts clamp to zero."""
        super().assign(props)
        for name in COPPER_RATES:
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, positive(value))
        return self

    # ------------------------------------------------------------------ #
    # Construction helpers                                               #
    # ------------------------------------------------------------------ #

    @staticmethod
    def reduce(value: int, div: int = 10) -> Tuple[int, int]:
        """Split *value* into ``(remainder, carried)`` for a base of *div*."""
        return value % div, value // div

    @classmethod
    def from_copper(cls, total: int, use_platinum: bool = True, use_electrum: bool = False) -> "Currency":
        """Fewest coins worth *total* copper. Negative totals give negative coins."""
        sign = -1 if total < 0 else 1
        rem = abs(int(total))
        coins: Dict[str, int] = {}
        for name in ("platinum", "gold", "electrum", "silver", "copper"):
            if name == "platinum" and not use_platinum:
                continue
            if name == "electrum" and not use_electrum:
                continue
            coins[name], rem = divmod(rem, COPPER_RATES[name])
        return cls(**{name: sign * count for name, count in coins.items() if count})

    @classmethod
    def from_gold(cls, gold_value: float, use_platinum: bool = True, use_electrum: bool = False) -> "Currency":
        """Coins worth *gold_value* GP; fractions below one copper are dropped."""
        return cls.from_copper(math.floor(round(gold_value * 100, 6)), use_platinum, use_electrum)

    @classmethod
    def from_shorthand(cls, value: Any) -> "Currency":
        if isinstance(value, (int, float)):
            return cls.from_gold(value)
        return super().from_shorthand(value)

    @classmethod
    def random(cls, min_value: float, max_value: float, rng: Optional[_random.Random] = None) -> "Currency":
        """A purse worth a uniform random amount of gold in the given range."""
        return cls.from_gold(random_float(min_value, max_value, rng))

    # ------------------------------------------------------------------ #
    # Arithmetic                                                         #
    # ------------------------------------------------------------------ #

    def to_copper(self) -> int:
        return sum(int(getattr(self, name) or 0) * rate for name, rate in COPPER_RATES.items())

    def to_gold(self, truncate: bool = False) -> float:
        gold = self.to_copper() / 100
        return math.floor(gold) if truncate else gold

    def _combine(self, value: Any, sign: int, balance_after: bool) -> "Currency":
        other = value if isinstance(value, Currency) else Currency.coerce(value)
        for name in COPPER_RATES:
            amount = getattr(other, name)
            if amount:
                setattr(self, name, (getattr(self, name) or 0) + sign * amount)
        if balance_after:
            self.balance()
        return self

    def add(self, value: Any, balance_after: bool = False) -> "Currency":
        """Add a Currency, a plain object, or a gold amount in place."""
        return self._combine(value, 1, balance_after)

    def subtract(self, value: Any, balance_after: bool = False) -> "Currency":
        return self._combine(value, -1, balance_after)

    def balance(self, use_platinum: bool = True, use_electrum: bool = False) -> "Currency":
        """Exchange up to the fewest coins of equal total value, in place."""
        balanced = Currency.from_copper(self.to_copper(), use_platinum, use_electrum)
        for name in COPPER_RATES:
            setattr(self, name, getattr(balanced, name))
        return self

    def __str__(self) -> str:
        parts = [f"{getattr(self, name)}{abbr}" for name, abbr in _ABBREVIATIONS.items() if getattr(self, name)]
        return f"[{' '.join(parts)}]" if parts else "Zero"

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        for name in COPPER_RATES:
            validate_integer(errs, "Currency", name, getattr(self, name), {"positive": True}, True)
        return errs
