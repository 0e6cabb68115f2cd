"""Alignment as a single enum value and as its two independent axes."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .enums import StringEnum
from .errors import SchemaError, strict_validate_optional_prop
from .model import Model
from .validator import ValidationErrors, validate_enum

__all__ = ["Alignment", "AlignmentEntropy", "AlignmentMorality", "AlignmentAxes"]


class Alignment(StringEnum):
    UNKNOWN = "UNKNOWN"
    CHAOTIC_GOOD = "CHAOTIC_GOOD"
    GOOD = "GOOD"
    LAWFUL_GOOD = "LAWFUL_GOOD"
    CHAOTIC_NEUTRAL = "CHAOTIC_NEUTRAL"
    NEUTRAL = "NEUTRAL"
    LAWFUL_NEUTRAL = "LAWFUL_NEUTRAL"
    CHAOTIC_EVIL = "CHAOTIC_EVIL"
    EVIL = "EVIL"
    LAWFUL_EVIL = "LAWFUL_EVIL"


class AlignmentEntropy(StringEnum):
    CHAOTIC = "CHAOTIC"
    NEUTRAL = "NEUTRAL"
    LAWFUL = "LAWFUL"


class AlignmentMorality(StringEnum):
    GOOD = "GOOD"
    NEUTRAL = "NEUTRAL"
    EVIL = "EVIL"


_AXES: Dict[Alignment, Tuple[AlignmentEntropy, AlignmentMorality]] = {
    Alignment.CHAOTIC_GOOD: (AlignmentEntropy.CHAOTIC, AlignmentMorality.GOOD),
    Alignment.GOOD: (AlignmentEntropy.NEUTRAL, AlignmentMorality.GOOD),
    Alignment.LAWFUL_GOOD: (AlignmentEntropy.LAWFUL, AlignmentMorality.GOOD),
    Alignment.CHAOTIC_NEUTRAL: (AlignmentEntropy.CHAOTIC, AlignmentMorality.NEUTRAL),
    Alignment.NEUTRAL: (AlignmentEntropy.NEUTRAL, AlignmentMorality.NEUTRAL),
    Alignment.LAWFUL_NEUTRAL: (AlignmentEntropy.LAWFUL, AlignmentMorality.NEUTRAL),
    Alignment.CHAOTIC_EVIL: (AlignmentEntropy.CHAOTIC, AlignmentMorality.EVIL),
    Alignment.EVIL: (AlignmentEntropy.NEUTRAL, AlignmentMorality.EVIL),
    Alignment.LAWFUL_EVIL: (AlignmentEntropy.LAWFUL, AlignmentMorality.EVIL),
}
_FROM_AXES = {axes: alignment for alignment, axes in _AXES.items()}


class AlignmentAxes(Model):
    """An alignment split into entropy (law/chaos) and morality (good/evil)."""

    FIELDS = {"entropy": "entropy", "morality": "morality"}

    def __init__(self, entropy: Any = AlignmentEntropy.NEUTRAL, morality: Any = AlignmentMorality.NEUTRAL):
        self.entropy = entropy
        self.morality = morality

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_optional_prop(props, "AlignmentAxes", "entropy", "string")
        strict_validate_optional_prop(props, "AlignmentAxes", "morality", "string")

    @classmethod
    def from_enum(cls, alignment: Any) -> "AlignmentAxes":
        """Split an :class:`Alignment` value; UNKNOWN or junk raises."""
        if not Alignment.has(alignment) or alignment == Alignment.UNKNOWN:
            raise SchemaError(f'The alignment enumerated value "{alignment}" does not map to a valid Alignment.')
        entropy, morality = _AXES[Alignment(str(alignment))]
        return cls(entropy, morality)

    @classmethod
    def from_shorthand(cls, value: Any) -> "AlignmentAxes":
        return cls.from_enum(value)

    @property
    def is_chaotic(self) -> bool:
        return self.entropy == AlignmentEntropy.CHAOTIC

    @property
    def is_lawful(self) -> bool:
        return self.entropy == AlignmentEntropy.LAWFUL

    @property
    def is_good(self) -> bool:
        return self.morality == AlignmentMorality.GOOD

    @property
    def is_evil(self) -> bool:
        return self.morality == AlignmentMorality.EVIL

    def to_enum(self) -> Optional[Alignment]:
        if not (AlignmentEntropy.has(self.entropy) and AlignmentMorality.has(self.morality)):
            return None
        return _FROM_AXES[(AlignmentEntropy(str(self.entropy)), AlignmentMorality(str(self.morality)))]

    def __str__(self) -> str:
        alignment = self.to_enum()
        return alignment.value if alignment else "UNKNOWN"

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, "AlignmentAxes", "entropy", self.entropy, AlignmentEntropy)
        validate_enum(errs, "AlignmentAxes", "morality", self.morality, AlignmentMorality)
        return errs
