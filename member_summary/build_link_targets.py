"""Logic for mapping uids to link targets."""

from member_summary.header_slug import member_anchor
from member_summary.item_info import ItemInfo
from member_summary.link_target import LinkTarget
from member_summary.metadata_index import MetadataIndex
from member_summary.page_path_for_fullname import page_path_for_fullname


def build_link_targets(index: MetadataIndex, api_root: str) -> dict[str, LinkTarget]:
    """Build a map of uids to link targets for every linkable type and its members."""
    targets: dict[str, LinkTarget] = {}
    for item in index.uid_to_item.values():
        if item.is_type and index.is_linkable(item):
            targets[item.uid] = type_target(item, api_root)

    for item in index.uid_to_item.values():
        if not item.is_type and item.parent in targets:
            targets[item.uid] = member_target(targets[item.parent], item)
    return targets


def type_target(item: ItemInfo, api_root: str) -> LinkTarget:
    return LinkTarget(
        title=item.name,
        page_path=page_path_for_fullname(api_root, item.full_name, item.package),
    )


def member_target(type_link: LinkTarget, member: ItemInfo) -> LinkTarget:
    """Anchor on the page of ``type_link``, which may differ from the member's own type."""
    page = type_link.page_path.split("#", 1)[0]
    return LinkTarget(title=member.name, page_path=f"{page}#{member_anchor(member)}")
