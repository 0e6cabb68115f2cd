"""
roll_table.py - die-indexed lookup tables
=========================================

A :class:`RollTable` pairs a die size with a list of :class:`RollTableEntry`
rows.  Each row matches either one exact roll (``value``) or an inclusive
range (``minimumValue``..``maximumValue``), never both.

Tables convert to and from :class:`pandas.DataFrame` so that they can be
edited as spreadsheets.  The frame has one row per entry and the columns
``value``, ``minimumValue``, ``maximumValue``, ``title`` and ``text`` (the
plain-text paragraphs joined with newlines).
"""

from __future__ import annotations

import random
from typing import Any, List, Optional

import pandas as pd

from .enums import DieSize, die_sides
from .errors import (
    strict_validate_optional_prop,
    strict_validate_required_array_prop,
    strict_validate_required_object_prop,
    strict_validate_required_prop,
)
from .json_object import is_missing
from .model import Model
from .text import TextBlock
from .utils import random_int, test_if_integer
from .validator import (
    INTEGER_OPTIONS_D100,
    ValidationErrors,
    validate_array_of_objects,
    validate_enum,
    validate_integer,
    validate_object,
)

__all__ = ["RollTableEntry", "RollTable", "FRAME_COLUMNS"]

FRAME_COLUMNS = ["value", "minimumValue", "maximumValue", "title", "text"]


class RollTableEntry(Model):
    FIELDS = {
        "value": "value",
        "minimumValue": "minimum_value",
        "maximumValue": "maximum_value",
        "title": "title",
        "body": "body",
    }
    NESTED = {"body": TextBlock}

    def __init__(
        self,
        value: Optional[int] = None,
        minimum_value: Optional[int] = None,
        maximum_value: Optional[int] = None,
        title: Optional[str] = None,
        body: Optional[TextBlock] = None,
    ):
        self.value = value
        self.minimum_value = minimum_value
        self.maximum_value = maximum_value
        self.title = title
        self.body = body if body is not None else TextBlock()

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_object_prop(props, "RollTableEntry", "body", TextBlock.strict_validate_props)
        strict_validate_optional_prop(props, "RollTableEntry", "value", "number")
        strict_validate_optional_prop(props, "RollTableEntry", "minimumValue", "number")
        strict_validate_optional_prop(props, "RollTableEntry", "maximumValue", "number")
        strict_validate_optional_prop(props, "RollTableEntry", "title", "string")

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_integer(errs, "RollTableEntry", "value", self.value, INTEGER_OPTIONS_D100, True)
        validate_integer(errs, "RollTableEntry", "minimumValue", self.minimum_value, INTEGER_OPTIONS_D100, True)
        validate_integer(errs, "RollTableEntry", "maximumValue", self.maximum_value, INTEGER_OPTIONS_D100, True)

        if not is_missing(self.value):
            for field, bound in (("minimumValue", self.minimum_value), ("maximumValue", self.maximum_value)):
                if not is_missing(bound):
                    errs.append(
                        "RollTableEntry requires either value or minimum/maximum. "
                        f"Cannot use both, found {field} to be set."
                    )
        else:
            if is_missing(self.minimum_value):
                errs.append("RollTableEntry requires a minimumValue to be set if not using value.")
            if is_missing(self.maximum_value):
                errs.append("RollTableEntry requires a maximumValue to be set if not using value.")
            # Non-integral bounds were already reported above.
            if (
                test_if_integer(self.minimum_value)
                and test_if_integer(self.maximum_value)
                and self.minimum_value > self.maximum_value
            ):
                errs.append(
                    f"RollTableEntry.minimumValue {self.minimum_value} should not be greater "
                    f"than maximumValue {self.maximum_value}."
                )

        validate_object(errs, "RollTableEntry", "body", self.body, TextBlock.validate_value)
        return errs

    def check(self, roll: int) -> bool:
        """True when *roll* lands on this entry."""
        if not is_missing(self.value):
            return roll == self.value
        if not (test_if_integer(self.minimum_value) and test_if_integer(self.maximum_value)):
            return False
        return self.minimum_value <= roll <= self.maximum_value


class RollTable(Model):
    FIELDS = {"die": "die", "results": "results"}
    NESTED = {"results": [RollTableEntry]}

    def __init__(self, die: Any = DieSize.UNKNOWN, results: Optional[List[RollTableEntry]] = None):
        self.die = die
        self.results: List[RollTableEntry] = list(results or [])

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_required_prop(props, "RollTable", "die", "string")
        strict_validate_required_array_prop(props, "RollTable", "results", RollTableEntry.strict_validate_props)

    def validate(self) -> ValidationErrors:
        errs: ValidationErrors = []
        validate_enum(errs, "RollTable", "die", self.die, DieSize)
        if not self.results:
            errs.append("RollTable.results should not be empty.")
        else:
            validate_array_of_objects(errs, "RollTable", "results", self.results, RollTableEntry.validate_value)
        return errs

    def get(self, roll: int) -> Optional[RollTableEntry]:
        """First entry matching *roll*, or None."""
        return next((ent for ent in self.results if ent.check(roll)), None)

    def roll(self, rng: Optional[random.Random] = None) -> Optional[RollTableEntry]:
        """Roll the table's die once and look the result up."""
        sides = die_sides(self.die)
        if sides == 0:
            return None
        return self.get(random_int(1, sides, rng))

    # ------------------------------------------------------------------ #
    # pandas                                                             #
    # ------------------------------------------------------------------ #

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "value": ent.value,
                "minimumValue": ent.minimum_value,
                "maximumValue": ent.maximum_value,
                "title": ent.title,
                "text": "\n".join(ent.body.plain_text),
            }
            for ent in self.results
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)

    @classmethod
    def from_frame(cls, die: Any, frame: pd.DataFrame) -> "RollTable":
        """Build a table from a frame shaped like :meth:`to_frame` output.

        Missing cells (NaN/None) leave the matching attribute unset; numeric
        cells are converted to ``int``.
        """
        if "text" not in frame.columns:
            raise ValueError("RollTable frame is missing the 'text' column.")

        def _cell(row: pd.Series, col: str) -> Any:
            if col not in row.index or pd.isna(row[col]):
                return None
            return row[col]

        results = []
        for _, row in frame.iterrows():
            bounds = [_cell(row, col) for col in ("value", "minimumValue", "maximumValue")]
            value, minimum, maximum = (None if b is None else int(b) for b in bounds)
            text = _cell(row, "text") or ""
            results.append(
                RollTableEntry(
                    value=value,
                    minimum_value=minimum,
                    maximum_value=maximum,
                    title=_cell(row, "title"),
                    body=TextBlock(plain_text=[p for p in str(text).split("\n") if p]),
                )
            )
        return cls(die=die, results=results)
