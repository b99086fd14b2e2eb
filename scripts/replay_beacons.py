"""Replay a JSONL file of captured beacons and print the resulting records.

Each input line looks like:
    {"kind": "visit", "body": {...}, "user_agent": "...", "project": 7}
``user_agent`` and ``project`` are optional and fall back to the CLI flags.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Iterable

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from beacon.errors import IngestError
from beacon.handlers import handle_beacon
from beacon.resolvers.user_agent import warm_up
from beacon.settings import load_timezones, settings

logger = logging.getLogger("replay")


def _setup_logging() -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(settings.log_level.upper())
    console.setFormatter(logging.Formatter(
        "%(asctime)s │ %(levelname)-7s │ %(name)-28s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    root.addHandler(console)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        ))
        root.addHandler(file_handler)


def replay(lines: Iterable[str], project_id: int, user_agent: str, out: IO[str]) -> tuple[int, int]:
    """Run every beacon line through its handler. Returns (accepted, rejected)."""
    accepted = rejected = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            beacon = json.loads(line)
            if not isinstance(beacon, dict):
                raise TypeError("beacon line must be a JSON object")
            record = handle_beacon(
                beacon["kind"],
                int(beacon.get("project", project_id)),
                beacon.get("body", {}),
                beacon.get("user_agent", user_agent),
            )
        except (KeyError, TypeError, ValueError, ValidationError, IngestError) as exc:
            logger.warning("line %d rejected: %s", lineno, exc)
            rejected += 1
            continue
        out.write(record.model_dump_json() + "\n")
        accepted += 1
    return accepted, rejected


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay captured analytics beacons")
    parser.add_argument("input", type=Path, help="JSONL file, one beacon per line")
    parser.add_argument("--project", type=int, required=True, help="Default project id")
    parser.add_argument("--user-agent", default="", help="Default User-Agent header")
    args = parser.parse_args(argv)

    _setup_logging()
    warm_up()
    logger.info("Timezone table loaded: %d zones", len(load_timezones()))

    with open(args.input, "r", encoding="utf-8") as f:
        accepted, rejected = replay(f, args.project, args.user_agent, sys.stdout)

    logger.info("Replayed %d beacons: %d accepted, %d rejected", accepted + rejected, accepted, rejected)
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
