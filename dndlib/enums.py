"""
enums.py - closed enumerations and the helpers that query them.

Every enumeration is a :class:`StringEnum`: the member name *is* the wire
value, so ``DieSize.D6 == "D6"``.  Membership is an exact, case-sensitive
match on the declared keys; no normalisation is applied because the keys are
part of the data format rather than user input.

By convention an ``UNKNOWN`` member marks the absence of a meaningful value.
It is a declared key (``enum_has`` accepts it) but the deferred validators
never let it pass.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable, Mapping, Type, Union

__all__ = [
    "UNKNOWN",
    "StringEnum",
    "enum_has",
    "enum_values",
    "enum_values_to_string",
    "ResourceType",
    "DieSize",
    "Rarity",
    "Shape",
    "Lifestyle",
    "CreatureSize",
    "creature_size_as_feet",
    "die_sides",
]

UNKNOWN = "UNKNOWN"

EnumLike = Union[Type[enum.Enum], Mapping[str, Any]]


class StringEnum(str, enum.Enum):
    """Base for enumerations whose value equals the member name."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def has(cls, key: Any) -> bool:
        return enum_has(cls, key)

    @classmethod
    def values(cls) -> list[str]:
        return enum_values(cls)


# --------------------------------------------------------------------------- #
# Membership helpers                                                          #
# --------------------------------------------------------------------------- #

def _keys(enum_like: EnumLike) -> Iterable[str]:
    if isinstance(enum_like, type) and issubclass(enum_like, enum.Enum):
        return enum_like.__members__.keys()
    return enum_like.keys()


def enum_has(enum_like: EnumLike, key: Any) -> bool:
    """Return True iff *key* is one of the keys declared by *enum_like*.

    *enum_like* is either an :class:`enum.Enum` subclass or a plain
    ``str -> str`` mapping.  Non-string candidates are never members.
    """
    if isinstance(key, enum.Enum):
        key = key.name
    if not isinstance(key, str):
        return False
    return key in _keys(enum_like)


def enum_values(enum_like: EnumLike) -> list[str]:
    """Declared keys of *enum_like* in declaration order."""
    return list(_keys(enum_like))


def enum_values_to_string(enum_like: EnumLike) -> str:
    """Declared keys joined with ``", "`` for embedding in messages."""
    return ", ".join(enum_values(enum_like))


# --------------------------------------------------------------------------- #
# Domain enumerations                                                         #
# --------------------------------------------------------------------------- #

class ResourceType(StringEnum):
    """The kind of resource an object represents."""

    UNKNOWN = "UNKNOWN"
    ANY = "ANY"

    ABILITY_SCORE = "ABILITY_SCORE"
    ACTION = "ACTION"
    BACKGROUND = "BACKGROUND"
    CLASS = "CLASS"
    CLASS_FEATURE = "CLASS_FEATURE"
    CONDITION = "CONDITION"
    DAMAGE_TYPE = "DAMAGE_TYPE"
    DEITY = "DEITY"
    DISEASE = "DISEASE"
    EQUIPMENT_PACK = "EQUIPMENT_PACK"
    FEAT = "FEAT"
    HAZARD = "HAZARD"
    ITEM = "ITEM"
    ITEM_CATEGORY = "ITEM_CATEGORY"
    LANGUAGE = "LANGUAGE"
    MAGIC_SCHOOL = "MAGIC_SCHOOL"
    MONSTER = "MONSTER"
    PROFICIENCY = "PROFICIENCY"
    RACE = "RACE"
    SKILL = "SKILL"
    SPELL = "SPELL"
    SUB_RACE = "SUB_RACE"
    TRAIT = "TRAIT"
    TRAP = "TRAP"
    VEHICLE = "VEHICLE"
    WEAPON_PROPERTY = "WEAPON_PROPERTY"


class DieSize(StringEnum):
    UNKNOWN = "UNKNOWN"

    D2 = "D2"
    D4 = "D4"
    D6 = "D6"
    D8 = "D8"
    D10 = "D10"
    D12 = "D12"
    D20 = "D20"
    D100 = "D100"


def die_sides(die: Any) -> int:
    """Number of faces for *die* (``"D20" -> 20``); 0 for UNKNOWN/invalid."""
    if not enum_has(DieSize, die) or die == DieSize.UNKNOWN:
        return 0
    return int(str(die)[1:])


class Rarity(StringEnum):
    """Rarity of an item."""

    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"
    VERY_RARE = "VERY_RARE"
    LEGENDARY = "LEGENDARY"
    ARTIFACT = "ARTIFACT"


class Shape(StringEnum):
    """Shape of an area of effect."""

    LINE = "LINE"
    CUBE = "CUBE"
    CONE = "CONE"
    CYLINDER = "CYLINDER"
    SPHERE = "SPHERE"


class Lifestyle(StringEnum):
    """Economic lifestyle a character is used to, poorest first."""

    UNKNOWN = "UNKNOWN"
    WRETCHED = "WRETCHED"
    SQUALID = "SQUALID"
    POOR = "POOR"
    MODEST = "MODEST"
    COMFORTABLE = "COMFORTABLE"
    WEALTHY = "WEALTHY"
    ARISTOCRATIC = "ARISTOCRATIC"


class CreatureSize(StringEnum):
    UNKNOWN = "UNKNOWN"
    TINY = "TINY"
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    HUGE = "HUGE"
    GARGANTUAN = "GARGANTUAN"


_CREATURE_FEET = {
    CreatureSize.TINY: 2.5,
    CreatureSize.SMALL: 5,
    CreatureSize.MEDIUM: 5,
    CreatureSize.LARGE: 10,
    CreatureSize.HUGE: 15,
    CreatureSize.GARGANTUAN: 20,
}


def creature_size_as_feet(size: Any) -> float:
    """Suggested width of one side of the creature's space, in feet.

    Returns 0 for ``UNKNOWN`` or anything that is not a CreatureSize key.
    """
    if not enum_has(CreatureSize, size):
        return 0
    return _CREATURE_FEET.get(CreatureSize(str(size)), 0)
