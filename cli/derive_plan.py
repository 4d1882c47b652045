"""Derive a plan from a saved answers file and print it as JSON.

Usage:
    python -m cli.derive_plan answers.json
    python -m cli.derive_plan answers.json --indent 0
    cat answers.json | python -m cli.derive_plan -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from intake import IntakeError, build_answer_record
from plan_engine.engine import PlanEngine
from plan_engine.serialization import to_plan_json_string

from cli.config import JSON_INDENT, LOG_LEVEL

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_INVALID_ANSWERS = 2


def _load_answers(path: str) -> dict:
    """Load the raw answers object from *path* ("-" reads stdin)."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("answers file must contain a JSON object")
    return data


def run(path: str, indent: int = JSON_INDENT) -> int:
    """Execute one derivation: load, validate, derive, print."""
    try:
        raw = _load_answers(path)
    except (OSError, ValueError) as exc:
        logger.error("Could not read answers from %s: %s", path, exc)
        return EXIT_READ_ERROR

    try:
        record = build_answer_record(raw)
    except IntakeError as exc:
        logger.error("Invalid answers: %s", exc)
        return EXIT_INVALID_ANSWERS

    plan = PlanEngine().derive(record)
    logger.info(
        "Derived plan: %d workout days, %d meals",
        len(plan.workout_schedule),
        len(plan.meal_schedule),
    )
    print(to_plan_json_string(plan, indent=indent or None))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Derive a fitness and nutrition plan")
    parser.add_argument("answers", help="Path to a JSON answers file, or - for stdin")
    parser.add_argument(
        "--indent",
        type=int,
        default=JSON_INDENT,
        help="JSON indent (0 for compact output)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run(args.answers, indent=args.indent)


if __name__ == "__main__":
    sys.exit(main())
