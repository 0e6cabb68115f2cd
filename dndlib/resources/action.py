"""Actions a creature can take on its turn (or outside it)."""

from __future__ import annotations

from typing import Any, Optional

from ..enums import ResourceType, StringEnum
from ..errors import (
    strict_validate_optional_object_prop,
    strict_validate_required_object_prop,
    strict_validate_required_prop,
)
from ..model import Model
from ..resource import Resource
from ..source import Source
from ..validator import ValidationErrors, validate_boolean, validate_enum, validate_integer, validate_object

__all__ = ["TimingType", "ActionTiming", "Action"]


class TimingType(StringEnum):
    FREE = "FREE"
    BONUS_ACTION = "BONUS_ACTION"
    ACTION = "ACTION"
    REACTION = "REACTION"
    VARIES = "VARIES"


class ActionTiming(Model):
    """How much of the action economy an action costs."""

    TYPE_NAME = "Action::Timing"
    FIELDS = {"type": "type", "count": "count"}

    def __init__(self, type: Any = TimingType.ACTION, count: int = 1):
        self.type = type
        self.count = count

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "Action::Timing", "type", "string")
        strict_validate_required_prop(props, "Action::Timing", "count", "number")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, "Action::Timing", "type", self.type, TimingType)
        validate_integer(errs, "Action::Timing", "count", self.count, {"positive": True, "min_value": 1})
        return errs


class Action(Resource):
    RESOURCE_TYPE = ResourceType.ACTION
    URI_BASE = "/action"

    FIELDS = {**Resource.FIELDS, "isVariant": "is_variant", "variantSource": "variant_source", "timing": "timing"}
    NESTED = {**Resource.NESTED, "variantSource": Source, "timing": ActionTiming}

    def __init__(
        self,
        *args: Any,
        is_variant: bool = False,
        variant_source: Optional[Source] = None,
        timing: Optional[ActionTiming] = None,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.is_variant = is_variant
        self.variant_source = variant_source
        self.timing = timing if timing is not None else ActionTiming()

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "Action", "isVariant", "boolean")
        strict_validate_optional_object_prop(props, "Action", "variantSource", Source.strict_validate_props)
        strict_validate_required_object_prop(props, "Action", "timing", ActionTiming.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        validate_boolean(errs, "Action", "isVariant", self.is_variant)
        if self.is_variant:
            if self.variant_source is None:
                errs.append('Action.variantSource is required if this action is marked as "isVariant".')
            else:
                validate_object(
                    errs,
                    "Action",
                    "variantSource",
                    self.variant_source,
                    lambda src: [f"Action.variantSource: {err}" for err in Source.validate_value(src)],
                )
        validate_object(errs, "Action", "timing", self.timing, ActionTiming.validate_value)
        return errs
