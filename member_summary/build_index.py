"""Logic for building an index of program elements from YAML files."""

import logging
from pathlib import Path
from typing import Any

from member_summary.as_text import as_text
from member_summary.item_info import ItemInfo, Parameter
from member_summary.load_managed_reference import (
    iter_main_items,
    load_managed_reference,
)
from member_summary.parse_comment import parse_comment

logger = logging.getLogger(__name__)


def build_index(yml_files: list[Path]) -> dict[str, ItemInfo]:
    """Index all YAML files into a map of uids to elements."""
    uid_to_item: dict[str, ItemInfo] = {}
    for f in yml_files:
        doc = load_managed_reference(f)
        for it in iter_main_items(doc):
            item = item_from_raw(it, f)
            if item.uid in uid_to_item:
                logger.warning("Duplicate uid %s in %s; keeping the last", item.uid, f)
            uid_to_item[item.uid] = item
    _apply_implicit_access(uid_to_item)
    return uid_to_item


def _apply_implicit_access(uid_to_item: dict[str, ItemInfo]) -> None:
    """Members of interfaces and annotation types are public unless stated."""
    for item in uid_to_item.values():
        parent = uid_to_item.get(item.parent or "")
        if (
            parent is not None
            and parent.kind in {"interface", "annotation"}
            and "access" not in item.raw
        ):
            item.access = "public"


def item_from_raw(it: dict[str, Any], f: Path | None = None) -> ItemInfo:
    """Build an ItemInfo from one raw YAML item."""
    uid = str(it.get("uid"))
    kind = str(it.get("type") or "").strip().lower() or "unknown"
    name = it.get("name") or it.get("fullName") or uid
    full_name = it.get("fullName") or it.get("name") or uid
    parent = it.get("parent")
    default = it.get("defaultValue")
    return ItemInfo(
        uid=uid,
        kind=kind,
        name=str(name),
        full_name=str(full_name),
        parent=str(parent) if parent else None,
        package=as_text(it.get("package")),
        access=as_text(it.get("access")).lower() or "package",
        modifiers=tuple(str(m) for m in it.get("modifiers") or []),
        parameters=[_parameter(p) for p in it.get("parameters") or []],
        return_type=as_text(it.get("returns")) or None,
        superclass=as_text(it.get("superclass")) or None,
        interfaces=_uid_list(it.get("interfaces")),
        overrides=_uid_list(it.get("overrides")),
        default_value=None if default is None else str(default),
        comment=parse_comment(it.get("comment")),
        file=f,
        raw=it,
    )


def _parameter(p: Any) -> Parameter:
    if isinstance(p, dict):
        return Parameter(
            name=as_text(p.get("name")),
            type=as_text(p.get("type")),
            type_variable=bool(p.get("typeVariable", False)),
        )
    # Bare type name, e.g. "int"
    return Parameter(name="", type=as_text(p))


def _uid_list(v: Any) -> list[str]:
    if not v:
        return []
    if isinstance(v, (str, dict)):
        v = [v]
    return [str(x.get("uid") if isinstance(x, dict) else x) for x in v]
