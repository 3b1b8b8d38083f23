"""Orchestration logic for generating type pages from YAML metadata."""

import argparse
import logging

from member_summary.build_index import build_index
from member_summary.build_link_targets import build_link_targets
from member_summary.load_config import load_config
from member_summary.metadata_index import MetadataIndex
from member_summary.write_type_pages import write_type_pages

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    yml_files = sorted(args.yml_dir.rglob("*.yml"))
    if not yml_files:
        msg = f"No .yml files found under: {args.yml_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.api_root:
        config["output"]["api_root"] = args.api_root

    uid_to_item = build_index(yml_files)
    visibility = config["visibility"]
    index = MetadataIndex(
        uid_to_item,
        min_access=visibility["min_access"],
        linkable_external=visibility.get("linkable_external") or [],
    )
    uid_targets = build_link_targets(index, config["output"]["api_root"])
    logger.info(
        "Indexed %d elements from %d files; %d types documented",
        len(uid_to_item),
        len(yml_files),
        len(index.documented_types()),
    )

    if args.dry_run:
        print("Dry run complete. No pages written.")
        return 0

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_type_pages(
        index,
        uid_targets,
        config,
        out_root,
        include_member_details=args.include_member_details,
    )
    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0
