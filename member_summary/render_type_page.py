"""Logic for rendering type reference pages."""

from typing import Any

from member_summary.comment_utils import PROPERTY_DESCRIPTION, CommentUtils
from member_summary.doc_comment import DocTag
from member_summary.item_info import ItemInfo
from member_summary.link_target import LinkTarget
from member_summary.member_summary_builder import MemberSummaryBuilder
from member_summary.metadata_index import MetadataIndex
from member_summary.naming_convention import NamingConvention
from member_summary.rewrite_links import rewrite_links
from member_summary.summary_writer import SummaryWriterFactory

TAG_LABELS = {
    PROPERTY_DESCRIPTION: "Property description",
    "defaultValue": "Default value",
    "since": "Since",
    "see": "See also",
}


def render_type_page(
    item: ItemInfo,
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
    config: dict[str, Any],
    *,
    include_member_details: bool = False,
    canonical_path: str | None = None,
) -> str:
    """Render a type page with its member summary in Markdown."""
    comments = CommentUtils(config["messages"])
    naming = NamingConvention.from_config(config)
    builder = MemberSummaryBuilder.get_instance(
        item,
        index,
        comments,
        SummaryWriterFactory(index, uid_targets, comments, naming),
        naming=naming,
        properties_enabled=config["properties"]["enabled"],
    )

    parts = ["---", f"uid: {item.uid}"]
    if canonical_path:
        parts.append(f"canonical_path: {canonical_path}")
    parts += ["---", "", f"# {item.kind.capitalize()} {item.name}", ""]
    if item.package:
        parts += [f"**Package:** {item.package}", ""]
    parts.extend(_render_type_hierarchy(item, index, uid_targets))

    description = rewrite_links(comments.get_full_body(item), item, index, uid_targets)
    if description:
        parts += [description, ""]

    if builder.has_members_to_document():
        builder.build(parts)
        if include_member_details:
            parts.extend(_render_member_details(builder, comments, index, uid_targets))

    return "\n".join(parts).rstrip() + "\n"


def _render_type_hierarchy(
    item: ItemInfo,
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
) -> list[str]:
    """Render the direct superclass and interfaces."""
    parts = []
    if item.superclass:
        parts.append(f"**Extends:** {_type_link(item.superclass, index, uid_targets)}")
    if item.interfaces:
        links = ", ".join(_type_link(u, index, uid_targets) for u in item.interfaces)
        parts.append(f"**Implements:** {links}")
    if parts:
        parts.append("")
    return parts


def _type_link(uid: str, index: MetadataIndex, uid_targets: dict[str, LinkTarget]) -> str:
    t = uid_targets.get(uid)
    if t:
        return f"[{t.title}]({t.page_path})"
    known = index.get(uid)
    return f"`{known.name if known else uid.split('.')[-1]}`"


def _render_member_details(
    builder: MemberSummaryBuilder,
    comments: CommentUtils,
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
) -> list[str]:
    """Render each own member with the comment installed during the summary build."""
    parts = []
    for kind in builder.variant.kinds:
        for m in builder.members(kind):
            heading = m.name + m.signature if m.is_executable else m.name
            parts += [f"### {heading}", ""]
            donor = comments.get_override_element(m)
            body = comments.get_full_body(m)
            if not body and donor is not None:
                body = comments.get_full_body(donor)
                parts += [f"*Description copied from {_type_link(donor.parent or '', index, uid_targets)}*", ""]
            body = rewrite_links(body, index.enclosing_type(donor or m), index, uid_targets)
            if body:
                parts += [body, ""]
            comment = comments.get_doc_comment(m)
            for tag in comment.tags if comment else ():
                line = _render_tag(tag, m, index, uid_targets)
                if line:
                    parts += [line, ""]
    if parts:
        parts = ["## Member Details", "", *parts]
    return parts


def _render_tag(
    tag: DocTag,
    member: ItemInfo,
    index: MetadataIndex,
    uid_targets: dict[str, LinkTarget],
) -> str:
    label = TAG_LABELS.get(tag.name)
    if label is None or not tag.text:
        return ""
    if tag.name == "see":
        t = uid_targets.get(tag.reference or "")
        text = f"[{tag.text}]({t.page_path})" if t else f"`{tag.text}`"
    else:
        text = rewrite_links(tag.text, index.enclosing_type(member), index, uid_targets)
    return f"**{label}:** {text}"
