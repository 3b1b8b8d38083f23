"""Data model for a group of summary rows from one originating type."""

from dataclasses import dataclass, field

from member_summary.documentation_record import DocumentationRecord
from member_summary.item_info import ItemInfo
from member_summary.member_kind import MemberKind


@dataclass(frozen=True)
class SummaryRowGroup:
    """Members of one kind declared in one type, in summary order.

    Own-member groups carry a DocumentationRecord per member. Inherited
    groups carry none; their links point at ``attributed_to``.
    """

    kind: MemberKind
    origin: ItemInfo
    attributed_to: ItemInfo
    members: tuple[ItemInfo, ...]
    records: tuple[DocumentationRecord, ...] = field(default_factory=tuple)
    inherited: bool = False
