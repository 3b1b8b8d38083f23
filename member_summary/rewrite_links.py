"""Logic for rewriting inline ``{@link}`` and ``{@code}`` tags to Markdown."""

import re

from member_summary.item_info import ItemInfo
from member_summary.link_target import LinkTarget
from member_summary.metadata_index import MetadataIndex

INLINE_TAG_RE = re.compile(r"\{@(link|linkplain|code|literal)\s+([^}]*)\}")


def rewrite_links(
    text: str,
    context: ItemInfo | None,
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
) -> str:
    """Rewrite inline tags; ``#member`` references resolve against ``context``."""
    if not text:
        return ""

    def repl(m: re.Match) -> str:
        tag, content = m.group(1), m.group(2).strip()
        if tag in ("code", "literal"):
            return f"`{content}`"
        ref, _, label = content.partition(" ")
        label = label.strip() or ref.lstrip("#").replace("#", ".")
        target = resolve_reference(ref, context, index)
        t = uid_targets.get(target.uid) if target else None
        if not t:
            return f"`{label}`"
        return f"[{label}]({t.page_path})"

    return INLINE_TAG_RE.sub(repl, text)


def resolve_reference(
    ref: str, context: ItemInfo | None, index: MetadataIndex
) -> ItemInfo | None:
    """Resolve ``Type``, ``Type#member`` or ``#member(args)`` to an element."""
    type_part, _, member_part = ref.partition("#")
    if type_part:
        owner = _find_type(type_part, context, index)
    else:
        owner = context
    if not member_part or owner is None:
        return owner

    name, _, args = member_part.partition("(")
    arg_types = [a.strip() for a in args.rstrip(")").split(",") if a.strip()]
    candidates = [m for m in index.members_of(owner) if m.name == name]
    if "(" in member_part:
        exact = [m for m in candidates if [p.type for p in m.parameters] == arg_types]
        candidates = exact or candidates
    return candidates[0] if candidates else None


def _find_type(name: str, context: ItemInfo | None, index: MetadataIndex) -> ItemInfo | None:
    item = index.get(name)
    if item is not None and item.is_type:
        return item
    matches = [it for it in index.uid_to_item.values() if it.is_type and it.name == name]
    if context is not None:
        same_package = [it for it in matches if it.package == context.package]
        matches = same_package or matches
    return matches[0] if matches else None
