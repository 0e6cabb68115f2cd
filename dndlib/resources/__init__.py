"""Concrete resource kinds."""

from .ability_score import AbilityScore
from .action import Action, ActionTiming, TimingType
from .background import Background
from .spell import Spell, SpellRangeType

__all__ = [
    "AbilityScore",
    "Action",
    "ActionTiming",
    "TimingType",
    "Background",
    "Spell",
    "SpellRangeType",
]
