"""
dndlib - typed data models and validation for D&D reference data.
"""
from .alignment import Alignment, AlignmentAxes, AlignmentEntropy, AlignmentMorality
from .arrays import in_place_concat, strict_validate_counted_array, strict_validate_counted_array_elem
from .currency import Currency
from .enums import (
    CreatureSize,
    DieSize,
    Lifestyle,
    Rarity,
    ResourceType,
    Shape,
    StringEnum,
    enum_has,
    enum_values,
    enum_values_to_string,
)
from .errors import DndlibError, SchemaError
from .json_object import is_missing, is_plain_object, is_plain_object_member
from .loader import hydrate, load_resource, load_resources
from .model import Model
from .options import Options, make_options, make_options_array
from .reference import Reference
from .resource import Resource
from .resources import AbilityScore, Action, Background, Spell
from .roll_table import RollTable, RollTableEntry
from .source import PublicationID, Source
from .text import TextBlock, TextSection
from .validator import Validatable

__all__ = [
    "AbilityScore",
    "Action",
    "Alignment",
    "AlignmentAxes",
    "AlignmentEntropy",
    "AlignmentMorality",
    "Background",
    "CreatureSize",
    "Currency",
    "DieSize",
    "DndlibError",
    "Lifestyle",
    "Model",
    "Options",
    "PublicationID",
    "Rarity",
    "Reference",
    "Resource",
    "ResourceType",
    "RollTable",
    "RollTableEntry",
    "SchemaError",
    "Shape",
    "Source",
    "Spell",
    "StringEnum",
    "TextBlock",
    "TextSection",
    "Validatable",
    "enum_has",
    "enum_values",
    "enum_values_to_string",
    "hydrate",
    "in_place_concat",
    "is_missing",
    "is_plain_object",
    "is_plain_object_member",
    "load_resource",
    "load_resources",
    "make_options",
    "make_options_array",
    "strict_validate_counted_array",
    "strict_validate_counted_array_elem",
]
