"""Read accessors and synthesis helpers for documentation comments."""

from collections.abc import Iterable
from typing import Any

from member_summary.doc_comment import DocComment, DocTag
from member_summary.first_sentence import first_sentence
from member_summary.item_info import ItemInfo

PROPERTY_DESCRIPTION = "propertyDescription"


class CommentUtils:
    """Comment store for one build.

    Original comments stay on the elements. Synthesized comments are kept in
    an overlay keyed by uid, which get_doc_comment() prefers, so that page
    rendering after the summary sees the same text the summary used.
    """

    def __init__(self, messages: dict[str, str]) -> None:
        self.messages = messages
        self._installed: dict[str, DocComment] = {}
        self._override_elements: dict[str, ItemInfo] = {}

    def get_text(self, key: str, *args: Any) -> str:
        """Format a message template; a missing key raises KeyError."""
        return self.messages[key].format(*args)

    def get_original_comment(self, element: ItemInfo) -> DocComment | None:
        return element.comment

    def get_doc_comment(self, element: ItemInfo) -> DocComment | None:
        return self._installed.get(element.uid, element.comment)

    def get_full_body(self, element: ItemInfo) -> str:
        comment = self.get_doc_comment(element)
        return comment.body if comment else ""

    def get_first_sentence(self, element: ItemInfo) -> str:
        return first_sentence(self.get_full_body(element))

    def get_block_tags(self, element: ItemInfo, name: str) -> list[DocTag]:
        comment = self.get_doc_comment(element)
        return comment.block_tags(name) if comment else []

    def make_first_sentence(self, text: str) -> str:
        return " ".join(text.split())

    def make_property_description(self, body: str) -> DocTag:
        return DocTag(name=PROPERTY_DESCRIPTION, text=body)

    def make_see(self, signature: str, element: ItemInfo) -> DocTag:
        """Build a ``@see`` tag pointing at an element, e.g. ``#setX(int)``."""
        return DocTag(name="see", text=signature, reference=element.uid)

    def set_doc_comment(self, element: ItemInfo, body: str, tags: Iterable[DocTag]) -> DocComment:
        comment = DocComment(body=body, tags=tuple(tags))
        self._installed[element.uid] = comment
        return comment

    def set_override_element(self, element: ItemInfo, donor: ItemInfo) -> None:
        """Remember which overridden method an element's comment was copied from."""
        self._override_elements[element.uid] = donor

    def get_override_element(self, element: ItemInfo) -> ItemInfo | None:
        return self._override_elements.get(element.uid)
