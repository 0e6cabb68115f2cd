"""
report.py - tabular validation reports
======================================

:func:`validation_frame` runs :meth:`validate` over a batch of models and
lays the results out as a :class:`pandas.DataFrame`, one row per message.
Models without errors still get a single row with a null ``error`` so that
they show up in :func:`summarise`.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import pandas as pd

from .model import Model

__all__ = ["REPORT_COLUMNS", "validation_frame", "summarise", "to_markdown_report"]

REPORT_COLUMNS = ["index", "type", "id", "error"]


def _identify(model: Model) -> tuple[str, str]:
    rtype = getattr(model, "type", None)
    if not isinstance(rtype, str):
        rtype = type(model).__name__
    return str(rtype), str(getattr(model, "id", ""))


def validation_frame(models: Iterable[Model]) -> pd.DataFrame:
    """Validate every model; return columns ``index, type, id, error``."""
    rows: list[dict[str, Any]] = []
    for ind, model in enumerate(models):
        rtype, rid = _identify(model)
        errors = model.validate()
        if not errors:
            rows.append({"index": ind, "type": rtype, "id": rid, "error": None})
        for err in errors:
            rows.append({"index": ind, "type": rtype, "id": rid, "error": err})
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarise(frame: pd.DataFrame) -> pd.DataFrame:
    """Error count per model, in input order (column ``errors``)."""
    if frame.empty:
        return pd.DataFrame(columns=["index", "type", "id", "errors"])
    counts = frame.groupby(["index", "type", "id"], sort=True)["error"].count()
    return counts.rename("errors").reset_index()


def _format_list(values: Sequence[str]) -> str:
    return "\n".join(f"- {v}" for v in values)


def to_markdown_report(frame: pd.DataFrame, *, heading_level: int = 2) -> str:
    """Render *frame* as Markdown: one heading per model, errors as bullets."""
    h = "#" * heading_level
    parts: list[str] = []
    for (ind, rtype, rid), group in frame.groupby(["index", "type", "id"], sort=True):
        parts.append(f"{h} {rtype} `{rid}` (#{ind})")
        errors = [e for e in group["error"] if isinstance(e, str)]
        parts.append(_format_list(errors) if errors else "No errors.")
        parts.append("")
    return "\n".join(parts).rstrip()
