"""Generate Markdown reference pages with member summaries from YAML metadata.

Reads ManagedReference-style YAML files describing types and their members
and writes one Markdown page per documented type, each with its member
summary tables and the members it inherits.
"""

import argparse
import logging
from pathlib import Path

from member_summary.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    ap = argparse.ArgumentParser(
        description="Generate Markdown type pages with member summaries.",
    )
    ap.add_argument(
        "yml_dir",
        type=Path,
        help="Directory containing *.yml metadata files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated pages",
    )
    ap.add_argument(
        "--api-root",
        default=None,
        help="Wiki path root for generated pages (default from config: /api)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--include-member-details",
        action="store_true",
        help="Add a member details section below the summary tables",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Load and index the metadata without writing pages",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
