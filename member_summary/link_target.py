"""Data model for link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Where a link to an element points."""

    title: str
    page_path: str  # Wiki path, e.g. /api/com/example/Widget#getx
