"""Utility for determining the output file path for a page."""

from pathlib import Path


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Return the Markdown file for a page path, creating its folder."""
    # /api/com/example/Widget -> out_root/api/com/example/Widget.md
    p = out_root / (page_path.split("#", 1)[0].lstrip("/") + ".md")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
