"""
json_object.py - predicates for plain, JSON-compatible data.

A *plain value* is one of ``None``, ``bool``, ``int``, ``float``, ``str``, a
``list`` of plain values, or a ``dict`` with string keys and plain values.
Anything else (model instances, dates, functions, sets, tuples, dict
subclasses) is foreign and fails the predicates below.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Set, Union

__all__ = [
    "JSONObject",
    "JSONValue",
    "is_missing",
    "is_plain_object",
    "is_plain_object_member",
    "json_type_name",
]

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JSONObject = Dict[str, JSONValue]

# --------------------------------------------------------------------------- #
# Predicates                                                                  #
# --------------------------------------------------------------------------- #

def _member(value: Any, active: Set[int]) -> bool:
    if value is None:
        return True
    if type(value) in (str, bool, int):
        return True
    if type(value) is float:
        return math.isfinite(value)
    if type(value) is list:
        return _container(value, value, active)
    if type(value) is dict:
        if not all(isinstance(k, str) for k in value):
            return False
        return _container(value, value.values(), active)
    return False


def _container(obj: Any, members: Iterable[Any], active: Set[int]) -> bool:
    # A container already on the current path is a cycle; JSON cannot hold one.
    if id(obj) in active:
        return False
    active.add(id(obj))
    try:
        return all(_member(v, active) for v in members)
    finally:
        active.discard(id(obj))


def is_plain_object_member(value: Any) -> bool:
    """Return True iff *value* may appear inside a plain JSON object."""
    return _member(value, set())


def is_missing(value: Any) -> bool:
    """Presence test shared by the strict checkers and the validators.

    Only ``None`` and the empty string count as missing.  ``0``, ``0.0`` and
    ``False`` are real values, as are empty lists and dicts.
    """
    return value is None or (isinstance(value, str) and value == "")


def is_plain_object(value: Any) -> bool:
    """Return True iff *value* is a bare ``dict`` of plain members.

    Subclasses of ``dict`` count as foreign, the same way an instance of a
    custom class does.  Keys must be strings and every reachable member must
    itself satisfy :func:`is_plain_object_member`.  Self-referencing
    structures are not plain.
    """
    if type(value) is not dict:
        return False
    return _member(value, set())


# --------------------------------------------------------------------------- #
# Display helper                                                              #
# --------------------------------------------------------------------------- #

def json_type_name(value: Any) -> str:
    """Name *value*'s kind using JSON vocabulary (``string``, ``array``, ...).

    Used when composing error messages so that diagnostics read the same no
    matter which Python type produced the offending value.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__
