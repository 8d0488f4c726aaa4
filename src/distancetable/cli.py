"""
DistanceTable CLI entrypoint.

Prints planar and spherical distances from the configured origin (Raleigh, NC by
default) to a latitude/longitude grid across North America.
"""

from __future__ import annotations

import argparse
import json
import logging

from distancetable.config.settings import get_settings
from distancetable.core.logging import configure_logging
from distancetable.table.grid import build_distance_table
from distancetable.table.render import print_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the DistanceTable CLI."""
    parser = argparse.ArgumentParser(
        prog="distancetable",
        description="Print planar and spherical distances (miles) from the origin to a lat/long grid.",
    )
    parser.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m distancetable.cli`."""
    configure_logging()
    args = build_parser().parse_args(argv)

    settings = get_settings()
    table = build_distance_table(settings)
    logger.debug("Computed %d rows", len(table.rows))

    if args.json:
        print(json.dumps(table.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    print_table(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
