"""
model.py - the two-phase base shared by every entity
====================================================

An entity moves through two phases:

1. **Hydration.**  :meth:`Model.from_json` runs the class's strict checks
   (:meth:`Model.strict_validate_props`, which raise :class:`SchemaError`)
   and only then builds an instance and copies the properties across.
2. **Validation.**  :meth:`Model.validate` runs the deferred combinators of
   :mod:`dndlib.validator` over the instance and returns every problem as a
   list of strings.

The three ways of obtaining an instance are explicit classmethods:

* ``from_json(props)`` for a plain JSON object,
* ``from_existing(other)`` for a copy of another instance of the same class,
* ``from_shorthand(value)`` on the entities that accept a primitive shorthand.

:meth:`Model.coerce` picks between them and raises for anything else.

Subclasses describe their wire shape with two class attributes:

``FIELDS``
    ``{json_key: attribute_name}`` in serialisation order.
``NESTED``
    ``{json_key: ModelClass}`` for nested objects, or ``{json_key:
    [ModelClass]}`` for arrays of nested objects.
"""

from __future__ import annotations

import copy
import enum
import logging
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar

from .errors import SchemaError, strict_validate_props_parameter
from .json_object import JSONObject, is_plain_object, json_type_name
from .validator import Validatable, ValidationErrors

__all__ = ["Model", "to_plain"]

log = logging.getLogger(__name__)

M = TypeVar("M", bound="Model")


def to_plain(value: Any) -> Any:
    """Recursively turn models and enum members into plain JSON values."""
    if isinstance(value, Model):
        return value.to_json()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


class Model(Validatable):
    """Base class for every hydratable, validatable entity."""

    TYPE_NAME: ClassVar[Optional[str]] = None
    FIELDS: ClassVar[Dict[str, str]] = {}
    NESTED: ClassVar[Dict[str, Any]] = {}

    # ------------------------------------------------------------------ #
    # Hydration                                                          #
    # ------------------------------------------------------------------ #

    @classmethod
    def type_name(cls) -> str:
        """Name used as the subject of strict and validation messages."""
        return cls.TYPE_NAME or cls.__name__

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        """Raise :class:`SchemaError` unless *props* can hydrate this class.

        Subclasses extend this and call ``super()`` first.
        """
        strict_validate_props_parameter(props, cls.type_name())

    @classmethod
    def from_json(cls: Type[M], props: Any) -> M:
        cls.strict_validate_props(props)
        log.debug("Hydrating %s", cls.type_name())
        obj = cls()
        obj.assign(props)
        return obj

    @classmethod
    def from_existing(cls: Type[M], other: Any) -> M:
        """Deep copy of *other*, which must be an instance of *cls*."""
        if not isinstance(other, cls):
            raise SchemaError(
                f"{cls.type_name()}.from_existing requires an instance of {cls.__name__}, "
                f'instead found "{json_type_name(other)}".'
            )
        return cls.from_json(other.to_json())

    @classmethod
    def from_shorthand(cls: Type[M], value: Any) -> M:
        raise SchemaError(f'{cls.type_name()} has no shorthand form, found "{json_type_name(value)}".')

    @classmethod
    def coerce(cls: Type[M], value: Any) -> M:
        """Build an instance from whichever input form *value* is."""
        if isinstance(value, cls):
            return cls.from_existing(value)
        if is_plain_object(value):
            return cls.from_json(value)
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return cls.from_shorthand(value)
        raise SchemaError(
            f'{cls.type_name()} cannot be built from "{json_type_name(value)}", '
            "expected a plain JSON object or an existing instance."
        )

    def assign(self: M, props: Mapping[str, Any]) -> M:
        """Copy every known property of *props* onto this instance."""
        for key, attr in self.FIELDS.items():
            if key in props:
                setattr(self, attr, self._hydrate_field(key, props[key]))
        return self

    def _hydrate_field(self, key: str, value: Any) -> Any:
        if value is None:
            return None
        nested = self.NESTED.get(key)
        if nested is None:
            return copy.deepcopy(value)
        if isinstance(nested, list):
            return [nested[0].coerce(v) for v in value]
        return nested.coerce(value)

    # ------------------------------------------------------------------ #
    # Serialisation                                                      #
    # ------------------------------------------------------------------ #

    def to_json(self) -> JSONObject:
        """Plain JSON form; unset (``None``) attributes are left out."""
        out: JSONObject = {}
        for key, attr in self.FIELDS.items():
            value = getattr(self, attr, None)
            if value is not None:
                out[key] = to_plain(value)
        return out

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_json() == other.to_json()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"

    # ------------------------------------------------------------------ #
    # Validation                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def validate_value(cls, value: Any) -> ValidationErrors:
        """Validator callback for :func:`dndlib.validator.validate_object`.

        Accepts an instance or a plain object; a plain object that cannot be
        hydrated reports the structural message instead of raising.
        """
        if isinstance(value, Validatable):
            return value.validate()
        try:
            return cls.from_json(value).validate()
        except SchemaError as exc:
            return [str(exc)]
