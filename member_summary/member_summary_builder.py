"""Entry point for building the member summary section of a type page."""

from collections.abc import Callable
from dataclasses import dataclass

from member_summary.comment_synthesizer import CommentSynthesizer
from member_summary.comment_utils import CommentUtils
from member_summary.doc_finder import DocFinder
from member_summary.item_info import ItemInfo
from member_summary.member_kind import INHERITED_KINDS, MemberKind
from member_summary.metadata_index import MetadataIndex
from member_summary.naming_convention import NamingConvention
from member_summary.ordering import sorted_elements
from member_summary.property_helper import PropertyHelper
from member_summary.summary_assembler import SummaryAssembler
from member_summary.summary_row_group import SummaryRowGroup
from member_summary.summary_writer import MarkdownSummaryWriter, SummaryWriterFactory
from member_summary.visible_member_table import VisibleMemberTable


@dataclass(frozen=True)
class BuilderVariant:
    """Which kinds a type shape shows, in what order, and when it has members."""

    name: str
    kinds: tuple[MemberKind, ...]
    inherited_kinds: frozenset[MemberKind]
    has_members: Callable[["MemberSummaryBuilder"], bool]


GENERAL_TYPE = BuilderVariant(
    name="type",
    kinds=(
        MemberKind.PROPERTIES,
        MemberKind.NESTED_TYPES,
        MemberKind.ENUM_CONSTANTS,
        MemberKind.FIELDS,
        MemberKind.CONSTRUCTORS,
        MemberKind.METHODS,
    ),
    inherited_kinds=INHERITED_KINDS,
    has_members=lambda b: b.table.has_visible_members(),
)

ANNOTATION_TYPE = BuilderVariant(
    name="annotation",
    kinds=(
        MemberKind.ANNOTATION_FIELDS,
        MemberKind.ANNOTATION_REQUIRED_ELEMENTS,
        MemberKind.ANNOTATION_OPTIONAL_ELEMENTS,
    ),
    inherited_kinds=frozenset(),
    has_members=lambda b: bool(b.index.annotation_members(b.type_elem)),
)


def variant_for(type_elem: ItemInfo) -> BuilderVariant:
    return ANNOTATION_TYPE if type_elem.kind == "annotation" else GENERAL_TYPE


class MemberSummaryBuilder:
    """Builds the member summary of one type.

    One builder is created per documented type; its property map and
    writers live as long as the builder.
    """

    def __init__(
        self,
        type_elem: ItemInfo,
        variant: BuilderVariant,
        table: VisibleMemberTable,
        index: MetadataIndex,
        comments: CommentUtils,
        writer_factory: SummaryWriterFactory,
    ) -> None:
        self.type_elem = type_elem
        self.variant = variant
        self.table = table
        self.index = index
        self.comments = comments

        self.property_helper = PropertyHelper(table, comments)
        synthesizer = CommentSynthesizer(
            comments, self.property_helper, DocFinder(index, comments), table.naming
        )
        self.assembler = SummaryAssembler(type_elem, table, index, synthesizer)

        # Only kinds with something to show get a writer.
        self._writers: dict[MemberKind, MarkdownSummaryWriter | None] = {
            kind: (
                writer_factory.get_member_summary_writer(type_elem, kind)
                if table.has_visible_members(kind)
                else None
            )
            for kind in MemberKind
        }

    @classmethod
    def get_instance(
        cls,
        type_elem: ItemInfo,
        index: MetadataIndex,
        comments: CommentUtils,
        writer_factory: SummaryWriterFactory,
        *,
        naming: NamingConvention | None = None,
        properties_enabled: bool = True,
    ) -> "MemberSummaryBuilder":
        """Create a builder with the variant that matches the type's kind."""
        table = VisibleMemberTable(
            type_elem, index, naming, properties_enabled=properties_enabled
        )
        return cls(type_elem, variant_for(type_elem), table, index, comments, writer_factory)

    def build(self, summary_tree: list[str]) -> list[SummaryRowGroup]:
        """Append every summary section to ``summary_tree`` and return the row groups."""
        groups = []
        for kind in self.variant.kinds:
            writer = self._writers[kind]
            if writer is None:
                continue
            groups.extend(
                self.assembler.add_summary(
                    writer, kind, kind in self.variant.inherited_kinds, summary_tree
                )
            )
        return groups

    def has_members_to_document(self) -> bool:
        return self.variant.has_members(self)

    def get_visible_member_table(self) -> VisibleMemberTable:
        return self.table

    def get_member_summary_writer(self, kind: MemberKind) -> MarkdownSummaryWriter | None:
        """Return the writer for a kind; raises KeyError for anything but a MemberKind."""
        return self._writers[kind]

    def members(self, kind: MemberKind) -> list[ItemInfo]:
        """Return the documented members of a kind declared in the type, sorted."""
        return sorted_elements(self.table.get_visible_members(kind))

    def has_members(self, kind: MemberKind) -> bool:
        return bool(self.table.get_visible_members(kind))
