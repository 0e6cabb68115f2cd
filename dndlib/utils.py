"""
utils.py - shared, low-level helpers for the dndlib package.

This module consolidates:
- Format predicates (URIs, kabob-case identifiers, dice expressions)
- Integer predicates
- Numeric clamping and random helpers
"""

from __future__ import annotations

import math
import random
import re
import sys
from typing import Any, Optional

__all__ = [
    "REGEXP_URI",
    "REGEXP_KABOB",
    "REGEXP_DICE",
    "test_uri",
    "test_kabob",
    "test_dice",
    "test_if_integer",
    "test_if_positive_integer",
    "positive",
    "clamp_float",
    "clamp_int",
    "random_float",
    "random_int",
]

# --------------------------------------------------------------------------- #
# Format predicates                                                           #
# --------------------------------------------------------------------------- #

# Passes: /some/v4lu3s-go/here      Fails: no/prefix/and/$ymbols
REGEXP_URI = re.compile(r"^(?:/[A-Za-z0-9\-_]+)+$")

# Passes: any-values01-here         Fails: Caps_and-symbols
REGEXP_KABOB = re.compile(r"^[a-z0-9-]+$")

# Passes: 3d6, 10D12 + 8, 1d4+mod
REGEXP_DICE = re.compile(r"^[0-9]{1,2}d(?:2|4|6|8|10|12|20|100)(?:\s?\+\s?[0-9a-z]+)?$", re.IGNORECASE)


def _test(pattern: re.Pattern[str], value: Any, allow_empty: bool) -> bool:
    if not isinstance(value, str):
        return False
    if len(value) == 0:
        return allow_empty
    return pattern.fullmatch(value) is not None


def test_uri(value: Any, allow_empty: bool = False) -> bool:
    """Return True iff *value* is a slash-prefixed path of alphanumeric segments."""
    return _test(REGEXP_URI, value, allow_empty)


def test_kabob(value: Any, allow_empty: bool = False) -> bool:
    """Return True iff *value* is lowercase kabob-case."""
    return _test(REGEXP_KABOB, value, allow_empty)


def test_dice(value: Any) -> bool:
    """Return True iff *value* is a dice expression such as ``"2d6 + 3"``."""
    return _test(REGEXP_DICE, value, False)


def test_if_integer(value: Any) -> bool:
    """True for ``int`` values (``bool`` excluded) and integral floats."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def test_if_positive_integer(value: Any) -> bool:
    return test_if_integer(value) and value >= 0


# --------------------------------------------------------------------------- #
# Numeric helpers                                                             #
# --------------------------------------------------------------------------- #

def positive(value: float) -> float:
    """Clamp *value* to be no lower than zero."""
    return max(value, 0)


def clamp_float(value: float, min_value: float = 0, max_value: float = sys.float_info.max) -> float:
    return min(max(value, min_value), max_value)


def clamp_int(value: float, min_value: float = 0, max_value: float = sys.float_info.max) -> int:
    """Clamp like :func:`clamp_float`, then drop any fractional part."""
    return math.trunc(clamp_float(value, min_value, max_value))


def random_float(min_value: float = 0, max_value: float = 1, rng: Optional[random.Random] = None) -> float:
    """Uniform float in ``[min_value, max_value]``."""
    return (rng or random).uniform(min_value, max_value)


def random_int(min_value: int = 0, max_value: int = sys.maxsize, rng: Optional[random.Random] = None) -> int:
    """Uniform integer in ``[min_value, max_value]`` (both inclusive)."""
    return (rng or random).randint(min_value, max_value)
