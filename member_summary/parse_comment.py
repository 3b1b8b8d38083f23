"""Logic for turning raw YAML comment values into structured comments."""

import re
from typing import Any

from member_summary.as_text import as_text
from member_summary.doc_comment import DocComment, DocTag

BLOCK_TAG_RE = re.compile(r"^\s*@(\w+)\s*(.*)$")


def parse_comment(value: Any) -> DocComment | None:
    """Parse a comment given as javadoc-style text or as a mapping.

    Returns None when the element carries no comment at all.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        comment = _parse_mapping(value)
    else:
        comment = _parse_text(as_text(value))
    if not comment.body and not comment.tags:
        return None
    return comment


def _parse_mapping(value: dict[str, Any]) -> DocComment:
    """Parse ``{body: ..., tags: [{name, text, ref}]}``."""
    tags = []
    for t in value.get("tags") or []:
        if isinstance(t, dict) and t.get("name"):
            ref = t.get("ref")
            tags.append(
                DocTag(
                    name=str(t["name"]),
                    text=as_text(t.get("text")),
                    reference=str(ref) if ref else None,
                )
            )
    return DocComment(body=as_text(value.get("body")), tags=tuple(tags))


def _parse_text(text: str) -> DocComment:
    """Parse javadoc-style text: body lines, then ``@tag text`` lines."""
    body_lines: list[str] = []
    tags: list[list[str]] = []  # [name, text] pairs, text grows on continuation
    for line in text.splitlines():
        m = BLOCK_TAG_RE.match(line)
        if m:
            tags.append([m.group(1), m.group(2).strip()])
        elif tags:
            tags[-1][1] = f"{tags[-1][1]}\n{line.strip()}".strip()
        else:
            body_lines.append(line)
    return DocComment(
        body="\n".join(body_lines).strip(),
        tags=tuple(DocTag(name=n, text=t) for n, t in tags),
    )
