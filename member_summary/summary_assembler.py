"""Assembles own and inherited member summaries for one member kind."""

from member_summary.comment_synthesizer import CommentSynthesizer
from member_summary.item_info import ItemInfo
from member_summary.member_kind import MemberKind
from member_summary.metadata_index import MetadataIndex
from member_summary.ordering import sorted_elements
from member_summary.summary_row_group import SummaryRowGroup
from member_summary.summary_writer import MarkdownSummaryWriter
from member_summary.visible_member_table import VisibleMemberTable


class SummaryAssembler:
    """Builds the summary of one type, kind by kind."""

    def __init__(
        self,
        type_elem: ItemInfo,
        table: VisibleMemberTable,
        index: MetadataIndex,
        synthesizer: CommentSynthesizer,
    ) -> None:
        self.type_elem = type_elem
        self.table = table
        self.index = index
        self.synthesizer = synthesizer

    def add_summary(
        self,
        writer: MarkdownSummaryWriter,
        kind: MemberKind,
        show_inherited: bool,
        summary_tree: list[str],
    ) -> list[SummaryRowGroup]:
        """Add the section for ``kind`` to ``summary_tree``; nothing if there are no rows."""
        blocks: list[str] = []
        groups = []
        own = self.build_summary(writer, kind, blocks)
        if own is not None:
            groups.append(own)
        if show_inherited:
            groups.extend(self.build_inherited_summary(writer, kind, blocks))

        if blocks:
            member_tree = writer.get_member_summary_header(self.type_elem, summary_tree)
            for block in blocks:
                member_tree += [block, ""]
            writer.add_member_tree(summary_tree, member_tree)
        return groups

    def build_summary(
        self, writer: MarkdownSummaryWriter, kind: MemberKind, blocks: list[str]
    ) -> SummaryRowGroup | None:
        """Write the table of members declared in the type itself."""
        members = sorted_elements(self.table.get_visible_members(kind))
        if not members:
            return None
        records = []
        for member in members:
            record = self.synthesizer.synthesize(member)
            writer.add_member_summary(self.type_elem, member, record.first_sentence)
            records.append(record)
        blocks.append(writer.get_summary_table_tree(self.type_elem))
        return SummaryRowGroup(
            kind=kind,
            origin=self.type_elem,
            attributed_to=self.type_elem,
            members=tuple(members),
            records=tuple(records),
        )

    def build_inherited_summary(
        self, writer: MarkdownSummaryWriter, kind: MemberKind, blocks: list[str]
    ) -> list[SummaryRowGroup]:
        """Write one block per ancestor that contributes members of ``kind``."""
        inherited = sorted_elements(self.table.get_all_visible_members(kind))
        groups = []
        for ancestor in self.table.get_visible_type_elements():
            if ancestor is self.type_elem:
                continue
            if not (self.index.is_public(ancestor) or self.index.is_linkable(ancestor)):
                continue
            members = [m for m in inherited if m.parent == ancestor.uid]
            if not members:
                continue

            inherited_tree = writer.get_inherited_summary_header(ancestor)
            links_tree = writer.get_inherited_summary_links_tree()
            attributed = self._add_summary_foot_note(ancestor, members, links_tree, writer)
            inherited_tree.append(" ".join(links_tree))
            blocks.append(writer.get_member_tree(inherited_tree))
            groups.append(
                SummaryRowGroup(
                    kind=kind,
                    origin=ancestor,
                    attributed_to=attributed,
                    members=tuple(members),
                    inherited=True,
                )
            )
        return groups

    def _add_summary_foot_note(
        self,
        ancestor: ItemInfo,
        members: list[ItemInfo],
        links_tree: list[str],
        writer: MarkdownSummaryWriter,
    ) -> ItemInfo:
        # Members of a package-private ancestor without a page of its own are
        # linked on the page of the documented type.
        if self.index.is_package_private(ancestor) and not self.index.is_linkable(ancestor):
            attributed = self.type_elem
        else:
            attributed = ancestor
        first, last = members[0], members[-1]
        for member in members:
            writer.add_inherited_member_summary(
                attributed, member, member is first, member is last, links_tree
            )
        return attributed
