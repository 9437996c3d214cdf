#!/usr/bin/env python3
"""
CLI entrypoint for a WSJF planning run.

Usage examples:
    python -m test_scripts.planning_cli --input backlog.json
    python -m test_scripts.planning_cli --input backlog.json --capacity 40 --log-level DEBUG

Input file: either a JSON list of work items, or an object
    {"items": [...], "dependencies": {"ID": ["DEP", ...]}, "capacity": 40}

Flags:
    --input PATH          JSON file with work items (required)
    --capacity N          Effort budget; overrides any capacity in the file
    --json-logs           Emit JSON log lines instead of plain text
    --log-level LEVEL     Logging level (INFO, DEBUG, etc.)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from release_planner.config import setup_json_logging
from release_planner.jobs.planning_job import run_planning, summarize
from release_planner.schemas.work_item import WorkItem

_items_adapter = TypeAdapter(List[WorkItem])
_deps_adapter = TypeAdapter(Dict[str, List[str]])
_capacity_adapter = TypeAdapter(Optional[float])


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score, sequence and review a backlog of work items.")
    parser.add_argument("--input", type=Path, required=True, help="Path to the work items JSON file.")
    parser.add_argument(
        "--capacity",
        type=float,
        default=None,
        help="Effort budget for the period (job size units).",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG).",
    )
    return parser.parse_args()


def configure_logging(level: str, json_logs: bool) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    if json_logs:
        setup_json_logging(log_level=lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
        stream=sys.stderr,
    )


def load_input(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if isinstance(raw, list):
        raw = {"items": raw}
    if not isinstance(raw, dict):
        raise ValueError("Input must be a JSON list of items or an object with an 'items' list.")
    return {
        "items": _items_adapter.validate_python(raw.get("items") or []),
        "dependencies": _deps_adapter.validate_python(raw.get("dependencies") or {}),
        "capacity": _capacity_adapter.validate_python(raw.get("capacity")),
    }


def main() -> int:
    args = parse_args()
    configure_logging(args.log_level, args.json_logs)
    logger = logging.getLogger(__name__)
    logger.info("planning.cli.start")

    try:
        payload = load_input(args.input)
    except (OSError, ValueError, ValidationError) as e:
        logger.error("planning.cli.bad_input: %s", e)
        return 1

    capacity = args.capacity if args.capacity is not None else payload["capacity"]
    try:
        result = run_planning(
            payload["items"],
            dependencies=payload["dependencies"],
            capacity=capacity,
        )
    except KeyboardInterrupt:
        logger.warning("planning.cli.interrupted")
        return 130
    except Exception:
        logger.exception("planning.cli.error")
        return 1

    print(json.dumps(summarize(result), indent=2))
    logger.info("planning.cli.done", extra={"selected": len(result.sequence)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
