#!/usr/bin/env python3
"""
List and run catalog examples from a terminal.

    python scripts/run_examples.py --list
    python scripts/run_examples.py --group structural
    python scripts/run_examples.py command.document_processing strategy.conceptual
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.exceptions import PatternsError  # noqa: E402
from app.logging_config import configure_logging  # noqa: E402
from domain.enums import PatternGroup  # noqa: E402
from services import CatalogService  # noqa: E402

logger = logging.getLogger("patterns.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run design pattern examples.")
    p.add_argument(
        "slugs",
        nargs="*",
        help="Examples to run, e.g. command.document_processing (default: all)",
    )
    p.add_argument("--list", action="store_true", help="List examples and exit")
    p.add_argument(
        "--group",
        choices=[g.value for g in PatternGroup],
        help="Only consider examples of this pattern group",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    group = PatternGroup(args.group) if args.group else None
    entries = CatalogService.list_examples(group)

    if args.list:
        for entry in entries:
            print(f"{entry.slug:45} {entry.group.value:11} {entry.title}")
        return 0

    slugs = args.slugs or [e.slug for e in entries]
    exit_code = 0
    for slug in slugs:
        try:
            entry = CatalogService.get_example(slug)
        except PatternsError as exc:
            logger.error("%s", exc)
            exit_code = 1
            continue

        print(f"=== {entry.slug}: {entry.pattern} / {entry.title} ===")
        print(CatalogService.run_example(slug))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
