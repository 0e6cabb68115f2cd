"""
errors.py - exceptions and the strict, construction-time checkers
================================================================

The *strict* family runs before a model instance exists.  Each checker looks
at one property of an incoming JSON object and raises :class:`SchemaError` on
the first structural defect it finds: a missing required property, a value of
the wrong primitive type, a malformed nested object or array.  Nothing is
accumulated; semantic problems are left to :mod:`dndlib.validator`.

Public API
----------
SchemaError
    Raised for any structural violation.

strict_validate_props_parameter(props, type_name)
strict_validate_required_prop(props, type_name, prop_name, expected_type)
strict_validate_optional_prop(props, type_name, prop_name, expected_type)
strict_validate_required_object_prop(props, type_name, prop_name, checker)
strict_validate_optional_object_prop(props, type_name, prop_name, checker)
strict_validate_required_array_prop(props, type_name, prop_name, element)
strict_validate_optional_array_prop(props, type_name, prop_name, element)

``expected_type`` is a JSON type name: ``string``, ``number``, ``integer``,
``boolean``, ``object`` or ``array``.  ``element`` is either such a name or a
callable that receives each entry and raises on defect.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from .json_object import is_missing, is_plain_object, json_type_name

__all__ = [
    "DndlibError",
    "SchemaError",
    "matches_type",
    "make_missing_props_error",
    "make_missing_prop_error",
    "make_wrong_type_error",
    "make_array_wrong_type_error",
    "strict_validate_props_parameter",
    "strict_validate_required_prop",
    "strict_validate_optional_prop",
    "strict_validate_required_object_prop",
    "strict_validate_optional_object_prop",
    "strict_validate_required_array_prop",
    "strict_validate_optional_array_prop",
]

StrictChecker = Callable[[Any], None]
StrictElementCheck = Union[str, StrictChecker]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class DndlibError(Exception):
    """Base class for every error raised by this package."""


class SchemaError(DndlibError, TypeError):
    """Raised when incoming data cannot be hydrated into a model."""


# --------------------------------------------------------------------------- #
# Message factories                                                           #
# --------------------------------------------------------------------------- #

def _article(word: str) -> str:
    return f"an {word}" if word[:1] in "aeiou" else f"a {word}"


def make_missing_props_error(type_name: str, props: Any) -> SchemaError:
    return SchemaError(
        f"{type_name}.strict_validate_props requires a plain JSON object to check, "
        f'instead found "{json_type_name(props)}".'
    )


def make_missing_prop_error(type_name: str, prop_name: str) -> SchemaError:
    return SchemaError(f'Missing "{prop_name}" property for {type_name}.')


def make_wrong_type_error(type_name: str, prop_name: str, expected: str, real: str) -> SchemaError:
    return SchemaError(
        f'{type_name} "{prop_name}" property must be {_article(expected)}, instead found "{real}".'
    )


def make_array_wrong_type_error(
    type_name: str, prop_name: str, index: int, expected: str, real: str
) -> SchemaError:
    return SchemaError(
        f'{type_name} "{prop_name}" array property must have index {index} be '
        f'{_article(expected)}, instead found "{real}".'
    )


# --------------------------------------------------------------------------- #
# Type tags                                                                   #
# --------------------------------------------------------------------------- #

def matches_type(value: Any, expected: str) -> bool:
    """Return True iff *value* is of the JSON primitive kind *expected*."""
    if expected == "string":
        return isinstance(value, str)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if expected == "object":
        return is_plain_object(value)
    if expected == "array":
        return isinstance(value, list)
    raise ValueError(f"Unknown expected type '{expected}'")


def _check_elements(props: Mapping[str, Any], type_name: str, prop_name: str, element: StrictElementCheck) -> None:
    if isinstance(element, str):
        for ind, ent in enumerate(props[prop_name]):
            if not matches_type(ent, element):
                raise make_array_wrong_type_error(type_name, prop_name, ind, element, json_type_name(ent))
    else:
        for ent in props[prop_name]:
            element(ent)


# --------------------------------------------------------------------------- #
# Strict checkers                                                             #
# --------------------------------------------------------------------------- #

def strict_validate_props_parameter(props: Any, type_name: str) -> None:
    """Gate every strict pass: *props* must be a plain JSON object."""
    if not is_plain_object(props):
        raise make_missing_props_error(type_name, props)


def strict_validate_required_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, expected_type: str
) -> None:
    """Require ``props[prop_name]`` to be present and of *expected_type*."""
    value = props.get(prop_name)
    if is_missing(value):
        raise make_missing_prop_error(type_name, prop_name)
    if not matches_type(value, expected_type):
        raise make_wrong_type_error(type_name, prop_name, expected_type, json_type_name(value))


def strict_validate_optional_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, expected_type: str
) -> None:
    """Type-check ``props[prop_name]`` only when it is present."""
    value = props.get(prop_name)
    if is_missing(value):
        return
    if not matches_type(value, expected_type):
        raise make_wrong_type_error(type_name, prop_name, expected_type, json_type_name(value))


def strict_validate_required_object_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, checker: StrictChecker
) -> None:
    """Require a nested plain object and hand it to *checker*."""
    value = props.get(prop_name)
    if is_missing(value):
        raise make_missing_prop_error(type_name, prop_name)
    if not is_plain_object(value):
        raise make_wrong_type_error(type_name, prop_name, "object", json_type_name(value))
    checker(value)


def strict_validate_optional_object_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, checker: StrictChecker
) -> None:
    value = props.get(prop_name)
    if is_missing(value):
        return
    if not is_plain_object(value):
        raise make_wrong_type_error(type_name, prop_name, "object", json_type_name(value))
    checker(value)


def strict_validate_required_array_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, element: StrictElementCheck
) -> None:
    """Require an array property and check each entry.

    When *element* is a type name every entry is compared against it; when
    it is a callable it is invoked once per entry, in index order.
    """
    value = props.get(prop_name)
    if is_missing(value):
        raise make_missing_prop_error(type_name, prop_name)
    if not isinstance(value, list):
        raise make_wrong_type_error(type_name, prop_name, "array", json_type_name(value))
    _check_elements(props, type_name, prop_name, element)


def strict_validate_optional_array_prop(
    props: Mapping[str, Any], type_name: str, prop_name: str, element: StrictElementCheck
) -> None:
    value = props.get(prop_name)
    if is_missing(value):
        return
    if not isinstance(value, list):
        raise make_wrong_type_error(type_name, prop_name, "array", json_type_name(value))
    _check_elements(props, type_name, prop_name, element)
