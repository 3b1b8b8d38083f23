"""Logic for writing type pages to disk."""

from pathlib import Path
from typing import Any

from member_summary.link_target import LinkTarget
from member_summary.metadata_index import MetadataIndex
from member_summary.output_file_for_page import output_file_for_page
from member_summary.page_path_for_fullname import page_path_for_fullname
from member_summary.render_type_page import render_type_page


def write_type_pages(
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
    config: dict[str, Any],
    out_root: Path,
    *,
    include_member_details: bool = False,
) -> int:
    """Write one page per documented type and return the number written."""
    api_root = config["output"]["api_root"]
    written = 0
    type_items = index.documented_types()
    total_types = len(type_items)
    print(f"Writing {total_types} type pages...")
    for it in type_items:
        target = uid_targets.get(it.uid)
        if target:
            page_path = target.page_path
        else:
            page_path = page_path_for_fullname(api_root, it.full_name, it.package)

        md = render_type_page(
            it,
            index,
            uid_targets,
            config,
            include_member_details=include_member_details,
            canonical_path=page_path,
        )
        out_file = output_file_for_page(out_root, page_path)
        out_file.write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total_types} types")
    return written
