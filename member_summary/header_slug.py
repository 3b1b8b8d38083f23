"""Utility for generating anchor slugs for members."""

import re

from member_summary.item_info import ItemInfo


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug: lower, hyphenate non-alnum."""
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    return s or "section"


def member_anchor(member: ItemInfo) -> str:
    """Anchor for a member; executables include their parameter types."""
    if member.is_executable:
        return header_slug(member.name + member.signature)
    return header_slug(member.name)
