"""
loader.py - read resource JSON from disk and hydrate it.

Public API
----------
load_json(path)            : parsed JSON, with crisp errors on failure
resource_class(type)       : Resource subclass registered for a ResourceType
hydrate(props, cls=None)   : build a resource, dispatching on ``props["type"]``
load_resource(path, cls=None)
load_resources(path)       : a file holding one object or an array of them
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from .enums import ResourceType
from .errors import SchemaError
from .json_object import JSONValue, is_plain_object, json_type_name
from .resource import Resource
from .resources import AbilityScore, Action, Background, Spell

__all__ = [
    "RESOURCE_CLASSES",
    "load_json",
    "resource_class",
    "hydrate",
    "load_resource",
    "load_resources",
]

log = logging.getLogger(__name__)

RESOURCE_CLASSES: Dict[ResourceType, Type[Resource]] = {
    cls.RESOURCE_TYPE: cls for cls in (AbilityScore, Action, Background, Spell)
}

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def load_json(path: str | Path) -> JSONValue:
    """Read & parse a JSON file, raising crisp errors on failure."""
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Resource file not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc


def resource_class(resource_type: Any) -> Type[Resource]:
    """Return the class registered for *resource_type* (e.g. ``"SPELL"``)."""
    if not ResourceType.has(resource_type):
        raise SchemaError(f'"{resource_type}" is not a ResourceType.')
    try:
        return RESOURCE_CLASSES[ResourceType(str(resource_type))]
    except KeyError:
        raise SchemaError(f'No resource class is registered for type "{resource_type}".') from None


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def hydrate(props: Any, cls: Optional[Type[Resource]] = None) -> Resource:
    """Strict-check *props* and build the matching resource.

    Without *cls* the class is picked from the ``type`` property.
    """
    if not is_plain_object(props):
        raise SchemaError(f'A resource must be a plain JSON object, instead found "{json_type_name(props)}".')
    if cls is None:
        cls = resource_class(props.get("type"))
    log.debug("Hydrating %s %r", cls.__name__, props.get("id"))
    return cls.from_json(props)


def load_resource(path: str | Path, cls: Optional[Type[Resource]] = None) -> Resource:
    return hydrate(load_json(path), cls)


def load_resources(path: str | Path, cls: Optional[Type[Resource]] = None) -> List[Resource]:
    """Hydrate every resource in *path*; a single object yields a one-item list."""
    data = load_json(path)
    entries = data if isinstance(data, list) else [data]
    log.debug("Loaded %d resource object(s) from %s", len(entries), path)
    return [hydrate(ent, cls) for ent in entries]
