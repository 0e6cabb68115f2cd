"""
validator.py - deferred, error-accumulating validators
=====================================================

Unlike the strict checkers in :mod:`dndlib.errors`, nothing here raises for
bad data.  Each combinator inspects one field and appends human-readable
messages to a caller-owned ``errors`` list.  An empty list after a full pass
is the only success signal.

All combinators share the signature shape::

    validate_x(errors, type_name, field_name, value, <constraints>, optional=False)

Presence is decided by :func:`dndlib.json_object.is_missing`.  A missing
required value appends exactly one "required" message and nothing else; a
missing optional value appends nothing.  A present value is checked
regardless of *optional*.

Composition happens through callbacks.  :func:`validate_object` hands the
value to a :data:`Validator` returning its own list of messages;
:func:`validate_array` does the same per entry with an
:data:`ElementValidator`; :func:`validate_array_of_objects` additionally
prefixes each entry's messages with ``"<type>.<field>[<index>]: "``.
"""

from __future__ import annotations

import abc
import re
from typing import Any, Callable, List, Mapping, Optional, Pattern, TypedDict, Union

from .arrays import in_place_concat
from .enums import UNKNOWN, EnumLike, enum_has, enum_values, enum_values_to_string
from .json_object import is_missing, is_plain_object, json_type_name

__all__ = [
    "ValidationErrors",
    "Validator",
    "ElementValidator",
    "Validatable",
    "StringOptions",
    "IntegerOptions",
    "INTEGER_OPTIONS_D100",
    "is_missing",
    "validate_string",
    "validate_integer",
    "validate_boolean",
    "validate_enum",
    "validate_object",
    "validate_array",
    "validate_array_of_objects",
]

ValidationErrors = List[str]
Validator = Callable[[Any], ValidationErrors]
ElementValidator = Callable[[Any, int], ValidationErrors]


class StringOptions(TypedDict, total=False):
    min_length: int
    max_length: int
    exact_length: int
    regexp: Union[str, Pattern[str]]


class IntegerOptions(TypedDict, total=False):
    positive: bool
    min_value: int
    max_value: int
    multiple: int


# Die results on a percentile table.
INTEGER_OPTIONS_D100: IntegerOptions = {"positive": True, "min_value": 1, "max_value": 100}


class Validatable(abc.ABC):
    """Anything that can report its own semantic errors."""

    @abc.abstractmethod
    def validate(self) -> ValidationErrors:
        """Return every semantic error found; empty means valid."""

    def is_valid(self) -> bool:
        return len(self.validate()) == 0


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _required(errors: ValidationErrors, path: str, kind: str, value: Any, optional: bool) -> bool:
    """Append the "required" message if needed; True when checks should stop."""
    if not is_missing(value):
        return False
    if not optional:
        errors.append(f"{path} is a required {kind}.")
    return True


def _wrong_type(errors: ValidationErrors, path: str, kind: str, value: Any) -> None:
    errors.append(f'{path} should be {"an" if kind[0] in "aeiou" else "a"} {kind} type, instead found "{json_type_name(value)}".')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# --------------------------------------------------------------------------- #
# Primitive combinators                                                       #
# --------------------------------------------------------------------------- #

def validate_string(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    options: Optional[StringOptions] = None,
    optional: bool = False,
) -> None:
    """Validate a string field.

    A failing ``regexp`` suppresses the length checks.  ``exact_length`` and
    the ``min_length``/``max_length`` pair are alternatives: when an exact
    length is given the bounds are ignored.
    """
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "string", value, optional):
        return
    if not isinstance(value, str):
        _wrong_type(errors, path, "string", value)
        return

    opts = options or {}
    regexp = opts.get("regexp")
    if regexp is not None:
        pattern = re.compile(regexp) if isinstance(regexp, str) else regexp
        if pattern.search(value) is None:
            errors.append(f'{path} "{value}" does not pass the regular expression test "{pattern.pattern}".')
            return

    exact = opts.get("exact_length")
    if exact is not None:
        if len(value) != exact:
            errors.append(
                f'{path} "{value}" should have an exact length of {exact}, '
                f"instead it has a length of {len(value)}."
            )
        return

    min_length = opts.get("min_length")
    if min_length is not None and len(value) < min_length:
        errors.append(
            f'{path} "{value}" should have a minimum length of {min_length}, '
            f"instead it has a length of {len(value)}."
        )
    max_length = opts.get("max_length")
    if max_length is not None and len(value) > max_length:
        errors.append(
            f'{path} "{value}" should have a maximum length of {max_length}, '
            f"instead it has a length of {len(value)}."
        )


def validate_integer(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    options: Optional[IntegerOptions] = None,
    optional: bool = False,
) -> None:
    """Validate an integer field.

    Fractional numbers always fail.  The constraints are independent, so one
    value may collect several messages (``-3.5`` with ``positive`` yields two).
    Bounds are inclusive.
    """
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "integer", value, optional):
        return
    if not _is_number(value):
        _wrong_type(errors, path, "integer", value)
        return

    opts = options or {}
    if isinstance(value, float) and not value.is_integer():
        errors.append(f"{path} should be a whole integer number, instead found {value}.")
    if opts.get("positive") and value < 0:
        errors.append(f"{path} should be a positive integer (0 or greater), instead found {value}.")

    min_value = opts.get("min_value")
    if min_value is not None and value < min_value:
        errors.append(f"{path} should be at least {min_value}, instead found {value}.")
    max_value = opts.get("max_value")
    if max_value is not None and value > max_value:
        errors.append(f"{path} should be at most {max_value}, instead found {value}.")
    multiple = opts.get("multiple")
    if multiple and value % multiple != 0:
        errors.append(f"{path} should be a multiple of {multiple}, instead found {value}.")


def validate_boolean(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    optional: bool = False,
) -> None:
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "boolean", value, optional):
        return
    if not isinstance(value, bool):
        _wrong_type(errors, path, "boolean", value)


def validate_enum(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    enum_like: EnumLike,
    optional: bool = False,
) -> None:
    """Validate that *value* is a declared key of *enum_like* other than UNKNOWN."""
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "enum value", value, optional):
        return
    if not isinstance(value, str):
        _wrong_type(errors, path, "string", value)
        return

    valid = enum_values_to_string({v: v for v in enum_values(enum_like) if v != UNKNOWN})
    if not enum_has(enum_like, value):
        errors.append(f'{path} "{value}" is not a valid value, expected one of: {valid}.')
    elif value == UNKNOWN:
        errors.append(f'{path} should not be "UNKNOWN", expected one of: {valid}.')


# --------------------------------------------------------------------------- #
# Higher-order combinators                                                    #
# --------------------------------------------------------------------------- #

def validate_object(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    validator: Validator,
    optional: bool = False,
) -> None:
    """Validate a nested object with *validator*.

    *value* must be a plain JSON object or a :class:`Validatable`.  The
    messages *validator* returns are appended as-is; it supplies its own
    context.
    """
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "object", value, optional):
        return
    if not (is_plain_object(value) or isinstance(value, Validatable)):
        _wrong_type(errors, path, "object", value)
        return
    errors.extend(validator(value))


def validate_array(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    validator: ElementValidator,
    optional: bool = False,
) -> None:
    """Run *validator(entry, index)* over an array, flattening the results in order."""
    path = f"{type_name}.{field_name}"
    if _required(errors, path, "array", value, optional):
        return
    if not isinstance(value, (list, tuple)):
        _wrong_type(errors, path, "array", value)
        return
    in_place_concat(errors, *(validator(ent, ind) for ind, ent in enumerate(value)))


def validate_array_of_objects(
    errors: ValidationErrors,
    type_name: str,
    field_name: str,
    value: Any,
    validator: Validator,
    optional: bool = False,
) -> None:
    """Like :func:`validate_array`, prefixing messages with ``type.field[i]: ``."""
    prefix = f"{type_name}.{field_name}"

    def _entry(ent: Any, ind: int) -> ValidationErrors:
        return [f"{prefix}[{ind}]: {err}" for err in validator(ent)]

    validate_array(errors, type_name, field_name, value, _entry, optional)
