"""Array helpers: in-place concatenation and counted-array strict checks."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, TypeVar

from .errors import (
    SchemaError,
    make_missing_prop_error,
    make_wrong_type_error,
    matches_type,
    strict_validate_props_parameter,
)
from .json_object import is_missing, json_type_name

__all__ = [
    "in_place_concat",
    "strict_validate_counted_array_elem",
    "strict_validate_counted_array",
]

T = TypeVar("T")


def in_place_concat(target: List[T], *arrays: Sequence[T]) -> int:
    """Extend *target* with every array in turn; return its new length."""
    for arr in arrays:
        target.extend(arr)
    return len(target)


def strict_validate_counted_array_elem(props: Any, elem_type: Optional[str] = None) -> None:
    """Check one ``{"type": ..., "count": <number>}`` entry of a counted array.

    When *elem_type* is given the ``type`` member must be of that JSON type.
    """
    strict_validate_props_parameter(props, "CountedArrayElem")

    if is_missing(props.get("type")):
        raise make_missing_prop_error("CountedArrayElem", "type")
    if elem_type and not matches_type(props["type"], elem_type):
        raise make_wrong_type_error("CountedArrayElem", "type", elem_type, json_type_name(props["type"]))

    if is_missing(props.get("count")):
        raise make_missing_prop_error("CountedArrayElem", "count")
    if not matches_type(props["count"], "number"):
        raise make_wrong_type_error("CountedArrayElem", "count", "number", json_type_name(props["count"]))


def strict_validate_counted_array(props: Any, elem_type: Optional[str] = None) -> None:
    if not isinstance(props, list):
        raise SchemaError(
            f'strict_validate_counted_array requires an array, instead found "{json_type_name(props)}".'
        )
    for ent in props:
        strict_validate_counted_array_elem(ent, elem_type)
