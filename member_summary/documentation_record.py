"""Data model for the documentation shown for one summary row."""

from dataclasses import dataclass, field

from member_summary.doc_comment import DocTag
from member_summary.item_info import ItemInfo


@dataclass(frozen=True)
class DocumentationRecord:
    """Summary text and block tags decided for a member in one build."""

    member: ItemInfo
    first_sentence: str
    body: str = ""
    tags: tuple[DocTag, ...] = field(default_factory=tuple)
    donor: ItemInfo | None = None  # method the first sentence was inherited from
