"""
background.py - character backgrounds
=====================================

A background grants proficiencies, starting equipment, a lifestyle and a
feature, and carries the personality roll tables (traits, ideals, bonds and
flaws).

Proficiency and equipment grants share one shape, ``{"starting": [...],
"options": [...]}``: references granted outright plus option groups to pick
from (see :mod:`dndlib.options`).  Languages may additionally grant wildcard
picks of any standard or exotic language.
"""

from __future__ import annotations

from typing import Any, ClassVar, List, Optional, Type

from ..enums import Lifestyle, ResourceType
from ..errors import (
    strict_validate_optional_object_prop,
    strict_validate_optional_prop,
    strict_validate_required_array_prop,
    strict_validate_required_object_prop,
    strict_validate_required_prop,
)
from ..json_object import is_missing
from ..model import Model
from ..options import Options, make_options_array, strict_validate_options_array
from ..reference import Reference, ReferenceItem, ReferenceLanguage, ReferenceSkill
from ..resource import Resource
from ..roll_table import RollTable
from ..text import TextSection
from ..validator import (
    ValidationErrors,
    validate_array_of_objects,
    validate_boolean,
    validate_enum,
    validate_integer,
    validate_object,
)

__all__ = [
    "StartingOptions",
    "StartingSkills",
    "StartingTools",
    "StartingItems",
    "LanguageWildcard",
    "StartingLanguages",
    "BackgroundProficiencies",
    "BackgroundEquipment",
    "Background",
]


# --------------------------------------------------------------------------- #
# Starting grants                                                             #
# --------------------------------------------------------------------------- #

class StartingOptions(Model):
    """References granted outright plus option groups over the same kind."""

    TYPE_NAME = "Background::StartingOptions"
    FIELDS = {"starting": "starting", "options": "options"}
    REFERENCE: ClassVar[Type[Reference]] = Reference

    def __init__(self, starting: Optional[List[Reference]] = None, options: Optional[List[Options]] = None):
        self.starting: List[Reference] = list(starting or [])
        self.options: List[Options] = list(options or [])

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        name = cls.type_name()
        strict_validate_required_array_prop(props, name, "starting", cls.REFERENCE.strict_validate_props)
        if not is_missing(props.get("options")):
            strict_validate_options_array(props["options"], f"{name}.options", cls.REFERENCE.strict_validate_props)

    def _hydrate_field(self, key: str, value: Any) -> Any:
        if key == "starting" and value is not None:
            return [self.REFERENCE.coerce(v) for v in value]
        if key == "options":
            return make_options_array(value, self.REFERENCE)
        return super()._hydrate_field(key, value)

    def validate(self) -> ValidationErrors:
        name = self.type_name()
        errs: ValidationErrors = []
        validate_array_of_objects(errs, name, "starting", self.starting, self.REFERENCE.validate_value)
        validate_array_of_objects(errs, name, "options", self.options, Options.validate_value, True)
        return errs


class StartingSkills(StartingOptions):
    TYPE_NAME = "Background::Skills"
    REFERENCE = ReferenceSkill


class StartingTools(StartingOptions):
    TYPE_NAME = "Background::Tools"
    REFERENCE = Reference


class StartingItems(StartingOptions):
    TYPE_NAME = "Background::Items"
    REFERENCE = ReferenceItem


class LanguageWildcard(Model):
    """Free language picks not tied to a list."""

    TYPE_NAME = "Background::LanguageWildcard"
    FIELDS = {"amount": "amount", "standard": "standard", "exotic": "exotic"}

    def __init__(self, amount: int = 1, standard: bool = True, exotic: bool = False):
        self.amount = amount
        self.standard = standard
        self.exotic = exotic

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "amount", "number")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "standard", "boolean")
        strict_validate_optional_prop(props, cls.TYPE_NAME, "exotic", "boolean")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_integer(errs, self.TYPE_NAME, "amount", self.amount, {"positive": True, "min_value": 1})
        validate_boolean(errs, self.TYPE_NAME, "standard", self.standard, True)
        validate_boolean(errs, self.TYPE_NAME, "exotic", self.exotic, True)
        if not self.standard and not self.exotic:
            errs.append(f"{self.TYPE_NAME} should allow standard or exotic languages, neither is set.")
        return errs


class StartingLanguages(StartingOptions):
    TYPE_NAME = "Background::Languages"
    REFERENCE = ReferenceLanguage
    FIELDS = {**StartingOptions.FIELDS, "wildcard": "wildcard"}
    NESTED = {"wildcard": LanguageWildcard}

    def __init__(self, *args: Any, wildcard: Optional[LanguageWildcard] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.wildcard = wildcard

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_optional_object_prop(props, cls.TYPE_NAME, "wildcard", LanguageWildcard.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        validate_object(errs, self.TYPE_NAME, "wildcard", self.wildcard, LanguageWildcard.validate_value, True)
        return errs


# --------------------------------------------------------------------------- #
# Groupings                                                                   #
# --------------------------------------------------------------------------- #

class BackgroundProficiencies(Model):
    TYPE_NAME = "Background::Proficiencies"
    FIELDS = {"skills": "skills", "tools": "tools", "languages": "languages"}
    NESTED = {"skills": StartingSkills, "tools": StartingTools, "languages": StartingLanguages}

    def __init__(
        self,
        skills: Optional[StartingSkills] = None,
        tools: Optional[StartingTools] = None,
        languages: Optional[StartingLanguages] = None,
    ):
        self.skills = skills
        self.tools = tools
        self.languages = languages

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        for key, nested in cls.NESTED.items():
            strict_validate_optional_object_prop(props, cls.TYPE_NAME, key, nested.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        for key, nested in self.NESTED.items():
            validate_object(errs, self.TYPE_NAME, key, getattr(self, key), nested.validate_value, True)
        return errs


class BackgroundEquipment(Model):
    TYPE_NAME = "Background::Equipment"
    FIELDS = {"coinPouch": "coin_pouch", "clothes": "clothes", "items": "items"}
    NESTED = {"clothes": ReferenceItem, "items": StartingItems}

    def __init__(
        self,
        coin_pouch: int = 0,
        clothes: Optional[Reference] = None,
        items: Optional[StartingItems] = None,
    ):
        self.coin_pouch = coin_pouch
        self.clothes = clothes
        self.items = items

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.TYPE_NAME, "coinPouch", "number")
        strict_validate_required_object_prop(props, cls.TYPE_NAME, "clothes", ReferenceItem.strict_validate_props)
        strict_validate_optional_object_prop(props, cls.TYPE_NAME, "items", StartingItems.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        # Gold pieces in the starting pouch.
        validate_integer(errs, self.TYPE_NAME, "coinPouch", self.coin_pouch, {"positive": True})
        validate_object(errs, self.TYPE_NAME, "clothes", self.clothes, ReferenceItem.validate_value)
        validate_object(errs, self.TYPE_NAME, "items", self.items, StartingItems.validate_value, True)
        return errs


# --------------------------------------------------------------------------- #
# Background                                                                  #
# --------------------------------------------------------------------------- #

_ROLL_TABLES = ("traits", "ideals", "bonds", "flaws")


class Background(Resource):
    RESOURCE_TYPE = ResourceType.BACKGROUND
    URI_BASE = "/background"

    FIELDS = {
        **Resource.FIELDS,
        "proficiencies": "proficiencies",
        "equipment": "equipment",
        "lifestyle": "lifestyle",
        "feature": "feature",
        **{key: key for key in _ROLL_TABLES},
    }
    NESTED = {
        **Resource.NESTED,
        "proficiencies": BackgroundProficiencies,
        "equipment": BackgroundEquipment,
        "feature": TextSection,
        **{key: RollTable for key in _ROLL_TABLES},
    }

    def __init__(
        self,
        *args: Any,
        proficiencies: Optional[BackgroundProficiencies] = None,
        equipment: Optional[BackgroundEquipment] = None,
        lifestyle: Any = None,
        feature: Optional[TextSection] = None,
        traits: Optional[RollTable] = None,
        ideals: Optional[RollTable] = None,
        bonds: Optional[RollTable] = None,
        flaws: Optional[RollTable] = None,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.proficiencies = proficiencies if proficiencies is not None else BackgroundProficiencies()
        self.equipment = equipment if equipment is not None else BackgroundEquipment()
        self.lifestyle = lifestyle
        self.feature = feature
        self.traits = traits
        self.ideals = ideals
        self.bonds = bonds
        self.flaws = flaws

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_object_prop(
            props, "Background", "proficiencies", BackgroundProficiencies.strict_validate_props
        )
        strict_validate_required_object_prop(props, "Background", "equipment", BackgroundEquipment.strict_validate_props)
        strict_validate_optional_prop(props, "Background", "lifestyle", "string")
        strict_validate_optional_object_prop(props, "Background", "feature", TextSection.strict_validate_props)
        for key in _ROLL_TABLES:
            strict_validate_optional_object_prop(props, "Background", key, RollTable.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        validate_object(errs, "Background", "proficiencies", self.proficiencies, BackgroundProficiencies.validate_value)
        validate_object(errs, "Background", "equipment", self.equipment, BackgroundEquipment.validate_value)
        validate_enum(errs, "Background", "lifestyle", self.lifestyle, Lifestyle, True)
        validate_object(errs, "Background", "feature", self.feature, TextSection.validate_value, True)
        for key in _ROLL_TABLES:
            validate_object(
                errs,
                "Background",
                key,
                getattr(self, key),
                lambda table, key=key: [f"Background.{key}: {err}" for err in RollTable.validate_value(table)],
                True,
            )
        return errs
