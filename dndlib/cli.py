"""
cli.py - ``dndlib-validate`` command line entry point
=====================================================

Hydrate and validate resource JSON files, then print a report::

    dndlib-validate data/spells.json --format markdown
    dndlib-validate data/fireball.json --type SPELL --verbosity DEBUG

``--config FILE`` names a JSON object whose keys (``type``, ``format``,
``verbosity``) replace the flag defaults; explicit flags still win.

Exit codes: 0 when everything validates, 1 when any validation error is
reported, 2 when a file cannot be loaded or hydrated.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pandas as pd

from .enums import ResourceType
from .errors import DndlibError
from .loader import RESOURCE_CLASSES, load_json, load_resources, resource_class
from .report import summarise, to_markdown_report, validation_frame
from .resource import Resource

__all__ = ["build_arg_parser", "parse_args", "render", "main"]

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2

# --------------------------------------------------------------------------- #
# Argument parsing                                                            #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dndlib-validate",
        description="Hydrate and validate D&D resource JSON files.",
        fromfile_prefix_chars="@",
    )
    p.add_argument("paths", nargs="+", metavar="PATH", help="JSON file holding a resource or an array of them.")
    p.add_argument(
        "--type",
        choices=[rt.value for rt in RESOURCE_CLASSES],
        help="Hydrate every object as this resource type instead of reading each object's \"type\".",
    )
    p.add_argument("--format", choices=["text", "markdown", "csv"], default="text", help="Report format.")
    p.add_argument(
        "--verbosity",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level.",
    )
    p.add_argument("--config", metavar="FILE", help="JSON file whose keys override the flag defaults.")
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse *argv*, folding ``--config`` values in as defaults."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.config:
        cfg_path = Path(args.config)
        if not cfg_path.is_file():
            raise FileNotFoundError(cfg_path)
        config = load_json(cfg_path)
        if not isinstance(config, dict):
            parser.error(f"--config {cfg_path} must hold a JSON object")
        unknown = set(config) - {"type", "format", "verbosity"}
        if unknown:
            parser.error(f"Unknown key(s) in --config {cfg_path}: {sorted(unknown)}")
        # argparse never checks defaults against choices.
        choices = {a.dest: a.choices for a in parser._actions if a.choices is not None}
        for key, value in config.items():
            if value not in choices[key]:
                parser.error(
                    f"--config {cfg_path}: invalid {key} {value!r} (choose from {', '.join(choices[key])})"
                )
        parser.set_defaults(**config)
        args = parser.parse_args(argv)
    return args


# --------------------------------------------------------------------------- #
# Output                                                                      #
# --------------------------------------------------------------------------- #

def render(frame: pd.DataFrame, fmt: str) -> str:
    if fmt == "csv":
        return frame.to_csv(index=False)
    if fmt == "markdown":
        return to_markdown_report(frame)
    lines: List[str] = []
    for _, row in summarise(frame).iterrows():
        status = "ok" if row["errors"] == 0 else f"{row['errors']} error(s)"
        lines.append(f"[{row['index']}] {row['type']} {row['id']}: {status}")
    for _, row in frame.dropna(subset=["error"]).iterrows():
        lines.append(f"  [{row['index']}] {row['error']}")
    return "\n".join(lines)


# --------------------------------------------------------------------------- #
# Entry point                                                                 #
# --------------------------------------------------------------------------- #

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.verbosity, format="%(asctime)s %(levelname)s %(message)s")

    cls: Any = resource_class(ResourceType(args.type)) if args.type else None
    resources: List[Resource] = []
    for path in args.paths:
        try:
            loaded = load_resources(path, cls)
        except (OSError, ValueError, DndlibError) as exc:
            log.error("Could not load %s: %s", path, exc)
            return EXIT_LOAD_ERROR
        log.info("Loaded %d resource(s) from %s", len(loaded), path)
        resources.extend(loaded)

    frame = validation_frame(resources)
    invalid = frame["error"].notna().any()
    if invalid:
        log.warning("%d validation error(s) found", int(frame["error"].notna().sum()))
    print(render(frame, args.format))
    return EXIT_INVALID if invalid else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
