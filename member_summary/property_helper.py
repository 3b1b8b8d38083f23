"""Resolves where the documentation of each property accessor comes from."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from member_summary.comment_utils import CommentUtils
from member_summary.item_info import ItemInfo
from member_summary.member_kind import MemberKind
from member_summary.visible_member_table import VisibleMemberTable

logger = logging.getLogger(__name__)


class PropertyHelper:
    """Maps property methods, getters and setters to their comment source.

    The source is the backing field when that field has its own comment,
    otherwise the property method. The map is built once and never changes.
    """

    def __init__(self, table: VisibleMemberTable, comments: CommentUtils) -> None:
        self.table = table
        self.comments = comments
        self._sources: Mapping[str, ItemInfo] = MappingProxyType(self._compute_properties())

    @property
    def sources(self) -> Mapping[str, ItemInfo]:
        """Read-only view of member uid -> comment source."""
        return self._sources

    def get_property_element(self, element: ItemInfo) -> ItemInfo | None:
        """Return the comment source for a member, or None if it is not a property accessor."""
        return self._sources.get(element.uid)

    def get_getter_for_property(self, property_method: ItemInfo) -> ItemInfo | None:
        return self.table.get_property_getter(property_method)

    def get_setter_for_property(self, property_method: ItemInfo) -> ItemInfo | None:
        return self.table.get_property_setter(property_method)

    def _compute_properties(self) -> dict[str, ItemInfo]:
        sources: dict[str, ItemInfo] = {}
        for prop in self.table.get_visible_members(MemberKind.PROPERTIES):
            if not prop.is_executable:
                continue
            getter = self.table.get_property_getter(prop)
            setter = self.table.get_property_setter(prop)
            field = self.table.get_property_field(prop)

            if field is None or self.comments.get_original_comment(field) is None:
                source = prop
            else:
                source = field
            for element in (prop, getter, setter):
                self._add(sources, element, source)
            logger.debug("Property %s documented from %s", prop.uid, source.uid)
        return sources

    def _add(self, sources: dict[str, ItemInfo], element: ItemInfo | None, source: ItemInfo) -> None:
        if element is None:
            return
        # A commented property method stays mapped to itself so its own
        # comment is still found through the map.
        if self.comments.get_original_comment(element) is None or element is source:
            sources[element.uid] = source
