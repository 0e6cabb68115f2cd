"""
reference.py - soft links between resources
===========================================

A :class:`Reference` names another resource by type and URI, with a display
name copied from the target.  The typed subclasses pin ``type`` so callers
only need to supply ``uri`` and ``name``::

    ReferenceSkill.from_json({"uri": "/skill/athletics", "name": "Athletics"})
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from .enums import ResourceType
from .errors import strict_validate_optional_prop, strict_validate_required_prop
from .model import Model
from .utils import REGEXP_URI
from .validator import ValidationErrors, validate_enum, validate_string

__all__ = [
    "Reference",
    "REFERENCE_CLASSES",
    "reference_class",
    "ReferenceAbilityScore",
    "ReferenceAction",
    "ReferenceBackground",
    "ReferenceClass",
    "ReferenceClassFeature",
    "ReferenceCondition",
    "ReferenceDamageType",
    "ReferenceDeity",
    "ReferenceDisease",
    "ReferenceEquipmentPack",
    "ReferenceFeat",
    "ReferenceHazard",
    "ReferenceItem",
    "ReferenceItemCategory",
    "ReferenceLanguage",
    "ReferenceMagicSchool",
    "ReferenceMonster",
    "ReferenceProficiency",
    "ReferenceRace",
    "ReferenceSkill",
    "ReferenceSpell",
    "ReferenceSubRace",
    "ReferenceTrait",
    "ReferenceTrap",
    "ReferenceVehicle",
    "ReferenceWeaponProperty",
]


class Reference(Model):
    """Link to another resource: ``{"type", "uri", "name"}``."""

    FIELDS = {"type": "type", "uri": "uri", "name": "name"}

    # Set by the typed subclasses.
    PINNED_TYPE: ClassVar[Optional[ResourceType]] = None

    def __init__(self, type: Any = ResourceType.UNKNOWN, uri: str = "/", name: str = "Unknown Reference"):
        self.type = self.PINNED_TYPE or type
        self.uri = uri
        self.name = name

    @classmethod
    def _with_pinned_type(cls, props: Mapping[str, Any]) -> Any:
        if cls.PINNED_TYPE is None or not isinstance(props, dict):
            return props
        return {**props, "type": cls.PINNED_TYPE.value}

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        props = cls._with_pinned_type(props)
        super().strict_validate_props(props)
        strict_validate_required_prop(props, cls.type_name(), "type", "string")
        strict_validate_required_prop(props, cls.type_name(), "uri", "string")
        strict_validate_optional_prop(props, cls.type_name(), "name", "string")

    def assign(self, props: Mapping[str, Any]) -> "Reference":
        super().assign(self._with_pinned_type(props))
        if not self.name:
            self.name = "Unknown Reference"
        return self

    def is_zero_value(self) -> bool:
        return self.type == ResourceType.UNKNOWN and self.uri == "/" and self.name == "Unknown Reference"

    def validate(self) -> ValidationErrors:
        name = self.type_name()
        errs: ValidationErrors = []
        validate_enum(errs, name, "type", self.type, ResourceType)
        validate_string(errs, name, "uri", self.uri, {"regexp": REGEXP_URI})
        validate_string(errs, name, "name", self.name)
        return errs


def _typed(resource_type: ResourceType) -> Type[Reference]:
    """Build the Reference subclass pinned to *resource_type*."""
    class_name = "Reference" + "".join(part.title() for part in resource_type.value.split("_"))
    return type(class_name, (Reference,), {"PINNED_TYPE": resource_type, "__module__": __name__})


REFERENCE_CLASSES: Dict[ResourceType, Type[Reference]] = {
    rt: _typed(rt) for rt in ResourceType if rt not in (ResourceType.UNKNOWN, ResourceType.ANY)
}


def reference_class(resource_type: Any) -> Type[Reference]:
    """Typed Reference subclass for *resource_type*, or :class:`Reference` itself."""
    try:
        return REFERENCE_CLASSES[ResourceType(str(resource_type))]
    except (KeyError, ValueError):
        return Reference


ReferenceAbilityScore = REFERENCE_CLASSES[ResourceType.ABILITY_SCORE]
ReferenceAction = REFERENCE_CLASSES[ResourceType.ACTION]
ReferenceBackground = REFERENCE_CLASSES[ResourceType.BACKGROUND]
ReferenceClass = REFERENCE_CLASSES[ResourceType.CLASS]
ReferenceClassFeature = REFERENCE_CLASSES[ResourceType.CLASS_FEATURE]
ReferenceCondition = REFERENCE_CLASSES[ResourceType.CONDITION]
ReferenceDamageType = REFERENCE_CLASSES[ResourceType.DAMAGE_TYPE]
ReferenceDeity = REFERENCE_CLASSES[ResourceType.DEITY]
ReferenceDisease = REFERENCE_CLASSES[ResourceType.DISEASE]
ReferenceEquipmentPack = REFERENCE_CLASSES[ResourceType.EQUIPMENT_PACK]
ReferenceFeat = REFERENCE_CLASSES[ResourceType.FEAT]
ReferenceHazard = REFERENCE_CLASSES[ResourceType.HAZARD]
ReferenceItem = REFERENCE_CLASSES[ResourceType.ITEM]
ReferenceItemCategory = REFERENCE_CLASSES[ResourceType.ITEM_CATEGORY]
ReferenceLanguage = REFERENCE_CLASSES[ResourceType.LANGUAGE]
ReferenceMagicSchool = REFERENCE_CLASSES[ResourceType.MAGIC_SCHOOL]
ReferenceMonster = REFERENCE_CLASSES[ResourceType.MONSTER]
ReferenceProficiency = REFERENCE_CLASSES[ResourceType.PROFICIENCY]
ReferenceRace = REFERENCE_CLASSES[ResourceType.RACE]
ReferenceSkill = REFERENCE_CLASSES[ResourceType.SKILL]
ReferenceSpell = REFERENCE_CLASSES[ResourceType.SPELL]
ReferenceSubRace = REFERENCE_CLASSES[ResourceType.SUB_RACE]
ReferenceTrait = REFERENCE_CLASSES[ResourceType.TRAIT]
ReferenceTrap = REFERENCE_CLASSES[ResourceType.TRAP]
ReferenceVehicle = REFERENCE_CLASSES[ResourceType.VEHICLE]
ReferenceWeaponProperty = REFERENCE_CLASSES[ResourceType.WEAPON_PROPERTY]
