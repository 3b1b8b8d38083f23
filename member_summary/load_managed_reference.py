"""Logic for loading ManagedReference-style YAML metadata files."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

YAML_MIME_PREFIX = "### YamlMime:"


def strip_yaml_mime_header(text: str) -> str:
    """Remove the ``### YamlMime:`` header line, if present."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_managed_reference(path: Path) -> dict[str, Any]:
    """Load and parse one metadata YAML file."""
    doc = yaml.safe_load(strip_yaml_mime_header(path.read_text(encoding="utf-8")))
    return doc or {}


def iter_main_items(doc: dict[str, Any]) -> Iterable[dict[str, Any]]:
    """Iterate over the items of a document that carry a uid."""
    for it in doc.get("items") or []:
        if isinstance(it, dict) and it.get("uid"):
            yield it
