"""
spell.py - spells and their nested descriptors
==============================================

Besides the common resource fields a spell carries its level, casting
requirements and a handful of optional descriptors, each a small model of
its own with a ``Spell::<Part>`` type name:

=====================  ==================================================
``range``              melee/ranged and distance in feet
``components``         verbal, semantic, material (+ cost)
``damage``             damage type, dice, scaling by slot or level
``save``               ability saving throw and outcomes
``areaOfEffect``       shape and size
``scroll``             spell-scroll rarity and numbers
``enchanting``         requirements to bind the spell into an item
=====================  ==================================================

Dice strings (``baseAmount``, ``higherSlots``, ``characterLevel``,
``healing``) must match :data:`dndlib.utils.REGEXP_DICE`.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from ..enums import Rarity, ResourceType, Shape, StringEnum
from ..errors import (
    strict_validate_optional_array_prop,
    strict_validate_optional_object_prop,
    strict_validate_optional_prop,
    strict_validate_required_object_prop,
    strict_validate_required_prop,
)
from ..json_object import json_type_name
from ..model import Model
from ..reference import (
    Reference,
    ReferenceAbilityScore,
    ReferenceClass,
    ReferenceDamageType,
    ReferenceMagicSchool,
)
from ..resource import Resource
from ..utils import REGEXP_DICE, test_dice
from ..validator import (
    ElementValidator,
    ValidationErrors,
    validate_array,
    validate_array_of_objects,
    validate_boolean,
    validate_enum,
    validate_integer,
    validate_object,
    validate_string,
)

__all__ = [
    "SpellRangeType",
    "SpellRange",
    "SpellComponents",
    "SpellDamage",
    "SpellSave",
    "SpellAreaOfEffect",
    "SpellScroll",
    "SpellEnchanting",
    "Spell",
]

# Character levels 1 through 20.
CHARACTER_LEVELS = 20


def _dice_entry(path: str) -> ElementValidator:
    """Element validator for arrays of dice strings under *path*."""

    def check(value: Any, ind: int) -> ValidationErrors:
        if not isinstance(value, str):
            return [f'{path}[{ind}] is not a string type, instead found "{json_type_name(value)}".']
        if not test_dice(value):
            return [f'{path}[{ind}] "{value}" does not pass the regular expression test "{REGEXP_DICE.pattern}".']
        return []

    return check


def _prefixed(path: str, validator: Callable[[Any], ValidationErrors]) -> Callable[[Any], ValidationErrors]:
    return lambda value: [f"{path}: {err}" for err in validator(value)]


# --------------------------------------------------------------------------- #
# Nested descriptors                                                          #
# --------------------------------------------------------------------------- #

class SpellRangeType(StringEnum):
    MELEE = "MELEE"
    RANGED = "RANGED"


class SpellRange(Model):
    TYPE_NAME = "Spell::Range"
    FIELDS = {"type": "type", "distance": "distance"}

    def __init__(self, type: Any = SpellRangeType.MELEE, distance: Optional[int] = None):
        self.type = type
        self.distance = distance

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "type", "string")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "distance", "number")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, self.TYPE_NAME, "type", self.type, SpellRangeType)
        validate_integer(
            errs,
            self.TYPE_NAME,
            "distance",
            self.distance,
            {"positive": True, "min_value": 5, "multiple": 5},
            self.type != SpellRangeType.RANGED,
        )
        return errs


class SpellComponents(Model):
    TYPE_NAME = "Spell::Components"
    FIELDS = {
        "verbal": "verbal",
        "semantic": "semantic",
        "material": "material",
        "cost": "cost",
        "goldValue": "gold_value",
    }

    def __init__(
        self,
        verbal: bool = False,
        semantic: bool = False,
        material: bool = False,
        cost: Optional[str] = None,
        gold_value: Optional[int] = None,
    ):
        self.verbal = verbal
        self.semantic = semantic
        self.material = material
        self.cost = cost
        self.gold_value = gold_value

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        for key in ("verbal", "semantic", "material"):
            strict_validate_required_prop(props, cls.TYPE_NAME, key, "boolean")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "cost", "string")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "goldValue", "number")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        for key in ("verbal", "semantic", "material"):
            validate_boolean(errs, self.TYPE_NAME, key, getattr(self, key))
        validate_string(errs, self.TYPE_NAME, "cost", self.cost, None, True)
        validate_integer(errs, self.TYPE_NAME, "goldValue", self.gold_value, {"positive": True}, True)
        return errs


class SpellDamage(Model):
    TYPE_NAME = "Spell::Damage"
    FIELDS = {
        "type": "type",
        "options": "options",
        "baseAmount": "base_amount",
        "higherSlots": "higher_slots",
        "characterLevel": "character_level",
    }
    NESTED = {"type": ReferenceDamageType, "options": [Reference]}

    def __init__(
        self,
        type: Optional[Reference] = None,
        options: Optional[List[Reference]] = None,
        base_amount: str = "",
        higher_slots: Optional[List[str]] = None,
        character_level: Optional[List[str]] = None,
    ):
        self.type = type if type is not None else ReferenceDamageType()
        self.options = options
        self.base_amount = base_amount
        self.higher_slots = higher_slots
        self.character_level = character_level

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_object_prop(props, cls.TYPE_NAME, "type", ReferenceDamageType.strict_validate_props)
        strict_validate_optional_array_prop(props, cls.TYPE_NAME, "options", Reference.strict_validate_props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "baseAmount", "string")
        strict_validate_optional_array_prop(props, cls.TYPE_NAME, "higherSlots", "string")
        strict_validate_optional_array_prop(props, cls.TYPE_NAME, "characterLevel", "string")

    def validate(self) -> ValidationErrors:
        name = self.TYPE_NAME
        errs: ValidationErrors = []
        validate_object(errs, name, "type", self.type, ReferenceDamageType.validate_value)
        validate_array_of_objects(errs, name, "options", self.options, Reference.validate_value, True)
        validate_string(errs, name, "baseAmount", self.base_amount, {"regexp": REGEXP_DICE})
        validate_array(errs, name, "higherSlots", self.higher_slots, _dice_entry(f"{name}.higherSlots"), True)
        validate_array(errs, name, "characterLevel", self.character_level, _dice_entry(f"{name}.characterLevel"), True)
        if isinstance(self.character_level, list) and len(self.character_level) != CHARACTER_LEVELS:
            errs.append(
                f"{name}.characterLevel needs to be exactly {CHARACTER_LEVELS} items in length, "
                f"instead it has a size of {len(self.character_level)}."
            )
        return errs


class SpellSave(Model):
    TYPE_NAME = "Spell::Save"
    FIELDS = {"ability": "ability", "description": "description", "success": "success", "failure": "failure"}
    NESTED = {"ability": ReferenceAbilityScore}

    def __init__(
        self,
        ability: Optional[Reference] = None,
        description: Optional[str] = None,
        success: Optional[str] = None,
        failure: Optional[str] = None,
    ):
        self.ability = ability if ability is not None else ReferenceAbilityScore()
        self.description = description
        self.success = success
        self.failure = failure

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_object_prop(
            props, cls.TYPE_NAME, "ability", ReferenceAbilityScore.strict_validate_props
        )
        for key in ("description", "success", "failure"):
            strict_validate_optional_prop(props, cls.TYPE_NAME, key, "string")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_object(errs, self.TYPE_NAME, "ability", self.ability, ReferenceAbilityScore.validate_value)
        for key in ("description", "success", "failure"):
            validate_string(errs, self.TYPE_NAME, key, getattr(self, key), None, True)
        return errs


class SpellAreaOfEffect(Model):
    TYPE_NAME = "Spell::AreaOfEffect"
    FIELDS = {"shape": "shape", "size": "size", "diameter": "diameter", "centered": "centered"}

    def __init__(
        self,
        shape: Any = Shape.SPHERE,
        size: int = 5,
        diameter: Optional[bool] = None,
        centered: Optional[bool] = None,
    ):
        self.shape = shape
        self.size = size
        self.diameter = diameter
        self.centered = centered

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "shape", "string")
        strict_validate_required_prop(props, cls.TYPE_NAME, "size", "number")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "diameter", "boolean")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "centered", "boolean")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, self.TYPE_NAME, "shape", self.shape, Shape)
        validate_integer(errs, self.TYPE_NAME, "size", self.size, {"positive": True, "min_value": 5, "multiple": 5})
        validate_boolean(errs, self.TYPE_NAME, "diameter", self.diameter, True)
        validate_boolean(errs, self.TYPE_NAME, "centered", self.centered, True)
        return errs


class SpellScroll(Model):
    TYPE_NAME = "Spell::Scroll"
    FIELDS = {
        "rarity": "rarity",
        "attackBonus": "attack_bonus",
        "saveDC": "save_dc",
        "suggestedValue": "suggested_value",
    }

    def __init__(
        self,
        rarity: Any = Rarity.COMMON,
        attack_bonus: int = 0,
        save_dc: int = 0,
        suggested_value: Optional[int] = None,
    ):
        self.rarity = rarity
        self.attack_bonus = attack_bonus
        self.save_dc = save_dc
        self.suggested_value = suggested_value

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "rarity", "string")
        for key in ("attackBonus", "saveDC", "suggestedValue"):
            strict_validate_required_prop(props, cls.TYPE_NAME, key, "number")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, self.TYPE_NAME, "rarity", self.rarity, Rarity)
        validate_integer(errs, self.TYPE_NAME, "attackBonus", self.attack_bonus, {"positive": True})
        validate_integer(errs, self.TYPE_NAME, "saveDC", self.save_dc, {"positive": True})
        validate_integer(errs, self.TYPE_NAME, "suggestedValue", self.suggested_value, {"positive": True}, True)
        return errs


class SpellEnchanting(Model):
    TYPE_NAME = "Spell::Enchanting"
    FIELDS = {"minLevel": "min_level", "cost": "cost", "days": "days"}

    def __init__(self, min_level: int = 1, cost: int = 0, days: int = 0):
        self.min_level = min_level
        self.cost = cost
        self.days = days

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        for key in cls.FIELDS:
            strict_validate_required_prop(props, cls.TYPE_NAME, key, "number")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        for key, attr in self.FIELDS.items():
            validate_integer(errs, self.TYPE_NAME, key, getattr(self, attr), {"positive": True})
        return errs


# --------------------------------------------------------------------------- #
# Spell                                                                       #
# --------------------------------------------------------------------------- #

class Spell(Resource):
    RESOURCE_TYPE = ResourceType.SPELL
    URI_BASE = "/spell"

    FIELDS = {
        **Resource.FIELDS,
        "level": "level",
        "higherLevels": "higher_levels",
        "range": "range",
        "components": "components",
        "castingTime": "casting_time",
        "duration": "duration",
        "ritual": "ritual",
        "concentration": "concentration",
        "damage": "damage",
        "save": "save",
        "healing": "healing",
        "areaOfEffect": "area_of_effect",
        "school": "school",
        "classes": "classes",
        "scroll": "scroll",
        "enchanting": "enchanting",
    }
    NESTED = {
        **Resource.NESTED,
        "range": SpellRange,
        "components": SpellComponents,
        "damage": SpellDamage,
        "save": SpellSave,
        "areaOfEffect": SpellAreaOfEffect,
        "school": ReferenceMagicSchool,
        "classes": [ReferenceClass],
        "scroll": SpellScroll,
        "enchanting": SpellEnchanting,
    }

    def __init__(
        self,
        *args: Any,
        level: int = 0,
        higher_levels: Optional[str] = None,
        range: Optional[SpellRange] = None,
        components: Optional[SpellComponents] = None,
        casting_time: str = "",
        duration: str = "",
        ritual: bool = False,
        concentration: bool = False,
        damage: Optional[SpellDamage] = None,
        save: Optional[SpellSave] = None,
        healing: Optional[List[str]] = None,
        area_of_effect: Optional[SpellAreaOfEffect] = None,
        school: Optional[Reference] = None,
        classes: Optional[List[Reference]] = None,
        scroll: Optional[SpellScroll] = None,
        enchanting: Optional[SpellEnchanting] = None,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.level = level
        self.higher_levels = higher_levels
        self.range = range if range is not None else SpellRange()
        self.components = components if components is not None else SpellComponents()
        self.casting_time = casting_time
        self.duration = duration
        self.ritual = ritual
        self.concentration = concentration
        self.damage = damage
        self.save = save
        self.healing = healing
        self.area_of_effect = area_of_effect
        self.school = school if school is not None else ReferenceMagicSchool()
        self.classes = classes
        self.scroll = scroll
        self.enchanting = enchanting

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "Spell", "level", "number")
        strict_validate_optional_prop(props, "Spell", "higherLevels", "string")
        strict_validate_required_object_prop(props, "Spell", "range", SpellRange.strict_validate_props)
        strict_validate_required_object_prop(props, "Spell", "components", SpellComponents.strict_validate_props)
        strict_validate_required_prop(props, "Spell", "castingTime", "string")
        strict_validate_required_prop(props, "Spell", "duration", "string")
        strict_validate_required_prop(props, "Spell", "ritual", "boolean")
        strict_validate_required_prop(props, "Spell", "concentration", "boolean")
        strict_validate_optional_object_prop(props, "Spell", "damage", SpellDamage.strict_validate_props)
        strict_validate_optional_object_prop(props, "Spell", "save", SpellSave.strict_validate_props)
        strict_validate_optional_array_prop(props, "Spell", "healing", "string")
        strict_validate_optional_object_prop(props, "Spell", "areaOfEffect", SpellAreaOfEffect.strict_validate_props)
        strict_validate_required_object_prop(props, "Spell", "school", ReferenceMagicSchool.strict_validate_props)
        strict_validate_optional_array_prop(props, "Spell", "classes", ReferenceClass.strict_validate_props)
        strict_validate_optional_object_prop(props, "Spell", "scroll", SpellScroll.strict_validate_props)
        strict_validate_optional_object_prop(props, "Spell", "enchanting", SpellEnchanting.strict_validate_props)

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        # Cantrips are level 0.
        validate_integer(errs, "Spell", "level", self.level, {"positive": True, "max_value": 9})
        validate_string(errs, "Spell", "higherLevels", self.higher_levels, None, True)
        validate_object(errs, "Spell", "range", self.range, SpellRange.validate_value)
        validate_object(errs, "Spell", "components", self.components, SpellComponents.validate_value)
        validate_string(errs, "Spell", "castingTime", self.casting_time)
        validate_string(errs, "Spell", "duration", self.duration)
        validate_boolean(errs, "Spell", "ritual", self.ritual)
        validate_boolean(errs, "Spell", "concentration", self.concentration)
        validate_object(errs, "Spell", "damage", self.damage, SpellDamage.validate_value, True)
        validate_object(errs, "Spell", "save", self.save, SpellSave.validate_value, True)
        validate_array(errs, "Spell", "healing", self.healing, _dice_entry("Spell.healing"), True)
        validate_object(errs, "Spell", "areaOfEffect", self.area_of_effect, SpellAreaOfEffect.validate_value, True)
        validate_object(
            errs, "Spell", "school", self.school, _prefixed("Spell.school", ReferenceMagicSchool.validate_value)
        )
        validate_array_of_objects(errs, "Spell", "classes", self.classes, ReferenceClass.validate_value, True)
        validate_object(errs, "Spell", "scroll", self.scroll, SpellScroll.validate_value, True)
        validate_object(errs, "Spell", "enchanting", self.enchanting, SpellEnchanting.validate_value, True)
        return errs
