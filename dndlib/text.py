"""Multi-format text: a :class:`TextBlock` and its titled :class:`TextSection`."""

from __future__ import annotations

from typing import Any, List, Optional

from .errors import (
    strict_validate_optional_array_prop,
    strict_validate_optional_prop,
    strict_validate_required_array_prop,
    strict_validate_required_object_prop,
)
from .json_object import json_type_name
from .model import Model
from .validator import ValidationErrors, validate_object, validate_string

__all__ = ["TextBlock", "TextSection"]


class TextBlock(Model):
    """The same text in up to three formats, one paragraph per entry.

    ``plain_text`` is mandatory; ``markdown`` (CommonMark) and ``html``
    (inline formatting elements only) are optional alternates.
    """

    FIELDS = {"plainText": "plain_text", "markdown": "markdown", "html": "html"}

    def __init__(
        self,
        plain_text: Optional[List[str]] = None,
        markdown: Optional[List[str]] = None,
        html: Optional[List[str]] = None,
    ):
        self.plain_text: List[str] = list(plain_text or [])
        self.markdown = list(markdown) if markdown is not None else None
        self.html = list(html) if html is not None else None

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_array_prop(props, "TextBlock", "plainText", "string")
        strict_validate_optional_array_prop(props, "TextBlock", "markdown", "string")
        strict_validate_optional_array_prop(props, "TextBlock", "html", "string")

    @classmethod
    def from_shorthand(cls, value: Any) -> "TextBlock":
        """A bare string becomes a single plain-text paragraph."""
        if isinstance(value, str):
            return cls(plain_text=[value])
        return super().from_shorthand(value)

    def is_zero_value(self) -> bool:
        return not self.plain_text and not self.markdown and not self.html

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        if not self.plain_text:
            errs.append("TextBlock.plainText requires at least one entry, none found.")

        for field, entries in (("plainText", self.plain_text), ("markdown", self.markdown), ("html", self.html)):
            for ind, ent in enumerate(entries or []):
                if not isinstance(ent, str) or not ent:
                    errs.append(f'TextBlock.{field}[{ind}] is a "{json_type_name(ent)}", expected a non-empty string.')
        return errs


class TextSection(Model):
    """A title followed by a :class:`TextBlock` body."""

    FIELDS = {"title": "title", "body": "body"}
    NESTED = {"body": TextBlock}

    def __init__(self, title: str = "", body: Optional[TextBlock] = None):
        self.title = title
        self.body = body if body is not None else TextBlock()

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_optional_prop(props, "TextSection", "title", "string")
        strict_validate_required_object_prop(props, "TextSection", "body", TextBlock.strict_validate_props)

    def is_zero_value(self) -> bool:
        return not self.title and self.body.is_zero_value()

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_string(errs, "TextSection", "title", self.title)
        validate_object(errs, "TextSection", "body", self.body, TextBlock.validate_value)
        return errs
