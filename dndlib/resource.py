"""
resource.py - fields shared by every top-level resource
=======================================================

A resource is an addressable record (a spell, a background, ...) with a
kabob-case ``id``, a ``uri`` under its kind's base path, a display ``name``,
a :class:`~dndlib.text.TextBlock` description, a
:class:`~dndlib.source.Source` and free-form kabob-case ``tags``.

Concrete kinds set two class attributes:

``RESOURCE_TYPE``
    the :class:`~dndlib.enums.ResourceType` every instance carries, whatever
    the incoming JSON says;
``URI_BASE``
    prefix used to derive ``uri`` as ``f"{URI_BASE}/{id}"`` when the JSON
    does not supply one.
"""

from __future__ import annotations

from typing import Any, ClassVar, List, Mapping, Optional

from .enums import ResourceType
from .errors import (
    strict_validate_optional_prop,
    strict_validate_required_array_prop,
    strict_validate_required_object_prop,
    strict_validate_required_prop,
)
from .json_object import is_missing
from .model import Model
from .source import Source
from .text import TextBlock
from .utils import test_kabob, test_uri
from .validator import ValidationErrors

__all__ = ["Resource"]


class Resource(Model):
    FIELDS = {
        "type": "type",
        "id": "id",
        "uri": "uri",
        "name": "name",
        "description": "description",
        "source": "source",
        "tags": "tags",
    }
    NESTED = {"description": TextBlock, "source": Source}

    RESOURCE_TYPE: ClassVar[ResourceType] = ResourceType.UNKNOWN
    URI_BASE: ClassVar[str] = ""

    def __init__(
        self,
        id: str = "unknown",
        uri: Optional[str] = None,
        name: str = "Unknown Resource",
        description: Optional[TextBlock] = None,
        source: Optional[Source] = None,
        tags: Optional[List[str]] = None,
        type: Any = None,
    ):
        self.type = type if type is not None else self.RESOURCE_TYPE
        self.id = id
        self.uri = uri if uri is not None else self._derive_uri(id)
        self.name = name
        self.description = description if description is not None else TextBlock()
        self.source = source if source is not None else Source()
        self.tags: List[str] = list(tags or [])

    @classmethod
    def _derive_uri(cls, resource_id: Any) -> str:
        if cls.URI_BASE and isinstance(resource_id, str) and resource_id:
            return f"{cls.URI_BASE}/{resource_id}"
        return "/"

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "Resource", "type", "string")
        strict_validate_required_prop(props, "Resource", "id", "string")
        strict_validate_optional_prop(props, "Resource", "uri", "string")
        strict_validate_required_prop(props, "Resource", "name", "string")
        strict_validate_required_object_prop(props, "Resource", "description", TextBlock.strict_validate_props)
        strict_validate_required_object_prop(props, "Resource", "source", Source.strict_validate_props)
        strict_validate_required_array_prop(props, "Resource", "tags", "string")

    def assign(self, props: Mapping[str, Any]) -> "Resource":
        super().assign(props)
        if self.RESOURCE_TYPE != ResourceType.UNKNOWN:
            self.type = self.RESOURCE_TYPE
        if is_missing(props.get("uri")):
            self.uri = self._derive_uri(self.id)
        return self

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []

        if not ResourceType.has(self.type):
            errs.append(f'Resource requires a valid "type" ResourceType enum. "{self.type}" is not one of them.')
        elif self.type == ResourceType.UNKNOWN:
            errs.append('Resource should have a valid ResourceType, it is currently "UNKNOWN".')

        if not isinstance(self.id, str) or len(self.id) < 1:
            errs.append('Resource expected "id" to be a string of at least 1 character long.')
        elif not test_kabob(self.id):
            errs.append(f'Resource "id" should be a kabob-case string, instead found "{self.id}".')

        if not isinstance(self.uri, str) or len(self.uri) < 1:
            errs.append("Resource requires a valid (non-empty) URI string.")
        elif not test_uri(self.uri):
            errs.append(
                "Resource URI format is invalid. Check that it starts with a forward slash, "
                "and is only alphanumeric path segments."
            )

        if not isinstance(self.name, str) or len(self.name) < 1:
            errs.append('Resource requires a valid (non-empty) "name" string.')

        errs.extend(TextBlock.validate_value(self.description))
        errs.extend(Source.validate_value(self.source))

        for ind, tag in enumerate(self.tags):
            if not isinstance(tag, str) or len(tag) == 0:
                errs.append(f"Resource tag[{ind}] should be a non-empty string.")
            elif not test_kabob(tag):
                errs.append(f"Resource tag[{ind}] should be a kabob-case string.")
        return errs
