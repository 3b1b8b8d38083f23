"""Markdown rendering of member summary tables and inherited member lists."""

from member_summary.build_link_targets import member_target
from member_summary.comment_utils import CommentUtils
from member_summary.header_slug import member_anchor
from member_summary.item_info import ItemInfo
from member_summary.link_target import LinkTarget
from member_summary.md_table import md_table
from member_summary.member_kind import MemberKind
from member_summary.metadata_index import MetadataIndex
from member_summary.naming_convention import NamingConvention
from member_summary.rewrite_links import rewrite_links

TABLE_HEADERS = {
    MemberKind.NESTED_TYPES: ["Modifier and Type", "Class", "Description"],
    MemberKind.ENUM_CONSTANTS: ["Enum Constant", "Description"],
    MemberKind.FIELDS: ["Modifier and Type", "Field", "Description"],
    MemberKind.PROPERTIES: ["Type", "Property", "Description"],
    MemberKind.CONSTRUCTORS: ["Constructor", "Description"],
    MemberKind.METHODS: ["Modifier and Type", "Method", "Description"],
    MemberKind.ANNOTATION_FIELDS: ["Modifier and Type", "Field", "Description"],
    MemberKind.ANNOTATION_REQUIRED_ELEMENTS: ["Modifier and Type", "Required Element", "Description"],
    MemberKind.ANNOTATION_OPTIONAL_ELEMENTS: ["Modifier and Type", "Optional Element", "Description"],
}

# Modifiers worth showing in the first column.
SHOWN_MODIFIERS = ("static", "abstract", "final", "default")


class MarkdownSummaryWriter:
    """Writes the summary section for one member kind of one type.

    Containers are lists of Markdown lines. Rows for the own-member table
    are collected by add_member_summary() and emitted, then cleared, by
    get_summary_table_tree().
    """

    def __init__(
        self,
        kind: MemberKind,
        index: MetadataIndex,
        uid_targets: dict[str, LinkTarget],
        comments: CommentUtils,
        naming: NamingConvention,
    ) -> None:
        self.kind = kind
        self.index = index
        self.uid_targets = uid_targets
        self.comments = comments
        self.naming = naming
        self._rows: list[list[str]] = []

    def get_member_summary_header(self, type_elem: ItemInfo, summary_tree: list[str]) -> list[str]:
        return [f"## {self.comments.get_text(f'{self.kind.value}_summary')}", ""]

    def add_member_summary(self, type_elem: ItemInfo, member: ItemInfo, first_sentence: str) -> None:
        context = self.comments.get_override_element(member) or member
        description = rewrite_links(
            first_sentence, self.index.enclosing_type(context), self.index, self.uid_targets
        )
        cells = [self._member_link(member)]
        if len(TABLE_HEADERS[self.kind]) == 3:
            cells.insert(0, self._type_column(member))
        self._rows.append([*cells, description])

    def get_summary_table_tree(self, type_elem: ItemInfo) -> str:
        table = md_table(TABLE_HEADERS[self.kind], self._rows)
        self._rows = []
        return table

    def get_inherited_summary_header(self, ancestor: ItemInfo) -> list[str]:
        label = "interface" if ancestor.kind in ("interface", "annotation") else "class"
        t = self.uid_targets.get(ancestor.uid)
        name = f"[{ancestor.name}]({t.page_path})" if t else f"`{ancestor.name}`"
        key = f"{self.kind.value}_inherited_from"
        return [f"### {self.comments.get_text(key, label, name)}", ""]

    def get_inherited_summary_links_tree(self) -> list[str]:
        return []

    def add_inherited_member_summary(
        self,
        type_elem: ItemInfo,
        member: ItemInfo,
        is_first: bool,
        is_last: bool,
        links_tree: list[str],
    ) -> None:
        """Add a link to ``member`` as found on the page of ``type_elem``."""
        t = self.uid_targets.get(type_elem.uid)
        title = self._display_name(member)
        link = f"[{title}]({member_target(t, member).page_path})" if t else f"`{title}`"
        links_tree.append(link if is_last else link + ",")

    def get_member_tree(self, tree: list[str]) -> str:
        return "\n".join(tree).rstrip()

    def add_member_tree(self, summary_tree: list[str], member_tree: list[str]) -> None:
        summary_tree.extend(member_tree)
        summary_tree.append("")

    def _member_link(self, member: ItemInfo) -> str:
        title = self._display_name(member)
        if member.is_executable and self.kind is not MemberKind.PROPERTIES:
            params = ", ".join(f"{p.type} {p.name}".strip() for p in member.parameters)
            return f"[{title}](#{member_anchor(member)})({params})"
        return f"[{title}](#{member_anchor(member)})"

    def _display_name(self, member: ItemInfo) -> str:
        if self.kind is MemberKind.PROPERTIES:
            return self.naming.base_name(member)
        return member.name

    def _type_column(self, member: ItemInfo) -> str:
        parts = [m for m in SHOWN_MODIFIERS if m in member.modifiers]
        if member.is_type:
            parts.append(member.kind)
        elif member.return_type:
            parts.append(member.return_type)
        return f"`{' '.join(parts)}`" if parts else ""


class SummaryWriterFactory:
    """Creates one MarkdownSummaryWriter per member kind."""

    def __init__(
        self,
        index: MetadataIndex,
        uid_targets: dict[str, LinkTarget],
        comments: CommentUtils,
        naming: NamingConvention,
    ) -> None:
        self.index = index
        self.uid_targets = uid_targets
        self.comments = comments
        self.naming = naming

    def get_member_summary_writer(self, type_elem: ItemInfo, kind: MemberKind) -> MarkdownSummaryWriter:
        return MarkdownSummaryWriter(kind, self.index, self.uid_targets, self.comments, self.naming)
