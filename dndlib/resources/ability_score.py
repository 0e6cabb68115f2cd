"""One of the six ability scores (Strength, Dexterity, ...)."""

from __future__ import annotations

from typing import Any, List, Optional

from ..enums import ResourceType
from ..errors import SchemaError, strict_validate_optional_array_prop, strict_validate_required_prop
from ..json_object import json_type_name
from ..reference import ReferenceSkill
from ..resource import Resource
from ..validator import ValidationErrors, validate_string

__all__ = ["AbilityScore"]


class AbilityScore(Resource):
    RESOURCE_TYPE = ResourceType.ABILITY_SCORE
    URI_BASE = "/ability-score"

    FIELDS = {**Resource.FIELDS, "abbreviation": "abbreviation", "skills": "skills"}
    NESTED = {**Resource.NESTED, "skills": [ReferenceSkill]}

    def __init__(self, *args: Any, abbreviation: str = "UNK", skills: Optional[List[Any]] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.abbreviation = abbreviation
        self.skills: List[Any] = list(skills or [])

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "AbilityScore", "abbreviation", "string")
        strict_validate_optional_array_prop(props, "AbilityScore", "skills", ReferenceSkill.strict_validate_props)

    @classmethod
    def from_shorthand(cls, value: Any) -> "AbilityScore":
        """``"str"`` becomes an AbilityScore abbreviated ``STR``."""
        if not isinstance(value, str):
            raise SchemaError(
                f'AbilityScore shorthand must be an abbreviation string, instead found "{json_type_name(value)}".'
            )
        abbreviation = value.strip().upper()
        return cls(id=abbreviation.lower(), name=abbreviation, abbreviation=abbreviation)

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        validate_string(errs, "AbilityScore", "abbreviation", self.abbreviation, {"exact_length": 3})
        for ind, skill in enumerate(self.skills):
            errs.extend(f"AbilityScore skill[{ind}]: {err}" for err in ReferenceSkill.validate_value(skill))
        return errs
