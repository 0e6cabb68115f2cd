"""
options.py - "choose N of the following" groups
================================================

An :class:`Options` group grants ``amount`` picks, either from its listed
``choices`` or, when ``fromAny`` is set, from anything of the right kind.

``make_options`` and ``make_options_array`` are the lenient builders: junk
input gives an empty group rather than an exception, and groups offering
zero picks are dropped from arrays.  ``strict_validate_options_array`` is the
throwing check used by entities before hydration.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Type

from .errors import (
    SchemaError,
    strict_validate_optional_array_prop,
    strict_validate_optional_prop,
    strict_validate_props_parameter,
    strict_validate_required_prop,
)
from .json_object import is_plain_object, json_type_name
from .model import Model
from .utils import test_if_positive_integer
from .validator import (
    ValidationErrors,
    validate_array_of_objects,
    validate_boolean,
    validate_integer,
)

__all__ = [
    "Options",
    "make_options",
    "make_options_array",
    "strict_validate_options_array",
]


class Options(Model):
    FIELDS = {"amount": "amount", "choices": "choices", "fromAny": "from_any"}

    def __init__(
        self,
        amount: int = 0,
        choices: Optional[List[Any]] = None,
        from_any: bool = False,
        choice_class: Optional[Type[Model]] = None,
    ):
        self.amount = amount
        self.choices: List[Any] = list(choices or [])
        self.from_any = from_any
        self.choice_class = choice_class

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "Options", "amount", "number")
        strict_validate_optional_array_prop(props, "Options", "choices", "object")
        strict_validate_optional_prop(props, "Options", "fromAny", "boolean")

    def _hydrate_field(self, key: str, value: Any) -> Any:
        if key == "choices" and self.choice_class is not None and value is not None:
            return [self.choice_class.coerce(v) for v in value]
        return super()._hydrate_field(key, value)

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_integer(errs, "Options", "amount", self.amount, {"positive": True, "min_value": 1})
        validate_boolean(errs, "Options", "fromAny", self.from_any, True)
        if self.choice_class is not None:
            validate_array_of_objects(errs, "Options", "choices", self.choices, self.choice_class.validate_value, True)
        if not self.from_any and not self.choices:
            errs.append("Options requires at least one entry in choices unless fromAny is set.")
        return errs


def make_options(value: Any, choice_class: Optional[Type[Model]] = None) -> Options:
    """Leniently build an :class:`Options` group from a JSON value.

    A non-object gives the empty group.  A non-integer ``amount`` reads as
    zero and non-object ``choices`` entries are skipped.
    """
    opts = Options(choice_class=choice_class)
    if not is_plain_object(value):
        return opts
    amount = value.get("amount")
    if test_if_positive_integer(amount):
        opts.amount = int(amount)
    choices = value.get("choices")
    if isinstance(choices, list):
        picked = [ent for ent in choices if is_plain_object(ent)]
        opts.choices = [choice_class.coerce(ent) for ent in picked] if choice_class else picked
    if value.get("fromAny") is True:
        opts.from_any = True
    return opts


def make_options_array(value: Any, choice_class: Optional[Type[Model]] = None) -> List[Options]:
    """:func:`make_options` over a JSON array, dropping zero-pick groups."""
    if not isinstance(value, list):
        return []
    groups = (make_options(ent, choice_class) for ent in value)
    return [grp for grp in groups if grp.amount != 0]


def strict_validate_options_array(
    value: Any,
    type_name: str,
    choice_checker: Optional[Callable[[Any], None]] = None,
) -> None:
    """Raise :class:`SchemaError` unless *value* is an array of option groups."""
    if not isinstance(value, list):
        raise SchemaError(f'{type_name} options must be an array, instead found "{json_type_name(value)}".')
    for ent in value:
        strict_validate_props_parameter(ent, type_name)
        strict_validate_required_prop(ent, type_name, "amount", "number")
        strict_validate_optional_prop(ent, type_name, "fromAny", "boolean")
        strict_validate_optional_array_prop(ent, type_name, "choices", choice_checker or "object")
