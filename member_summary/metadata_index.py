"""Lookup structure over the loaded program elements."""

import logging
from collections.abc import Iterable

from member_summary.item_info import ACCESS_LEVELS, ItemInfo, access_rank

logger = logging.getLogger(__name__)


class MetadataIndex:
    """Answers structural questions about types and their members."""

    def __init__(
        self,
        uid_to_item: dict[str, ItemInfo],
        *,
        min_access: str = "protected",
        linkable_external: Iterable[str] = (),
    ) -> None:
        self.uid_to_item = uid_to_item
        self.min_access = min_access
        self.linkable_external = set(linkable_external)
        self._children: dict[str, list[ItemInfo]] = {}
        for item in uid_to_item.values():
            if item.parent:
                self._children.setdefault(item.parent, []).append(item)

    def get(self, uid: str | None) -> ItemInfo | None:
        """Return the element for a uid, or None if it is not in the model."""
        if not uid:
            return None
        return self.uid_to_item.get(uid)

    def members_of(self, type_elem: ItemInfo) -> list[ItemInfo]:
        """Return the elements declared directly in a type, in source order."""
        return list(self._children.get(type_elem.uid, []))

    def enclosing_type(self, element: ItemInfo) -> ItemInfo | None:
        return self.get(element.parent)

    def get_base_class(self, uid: str) -> str | None:
        """Return the uid of the immediate superclass."""
        item = self.get(uid)
        return item.superclass if item else None

    def get_interfaces(self, uid: str) -> list[str]:
        """Return the uids of the directly implemented interfaces."""
        item = self.get(uid)
        return list(item.interfaces) if item else []

    def overridden_methods(self, method: ItemInfo) -> list[ItemInfo]:
        """Return the known methods a method overrides or implements, nearest first."""
        found = []
        for uid in method.overrides:
            target = self.get(uid)
            if target is None:
                logger.debug("Overridden method %s of %s is not in the model", uid, method.uid)
            else:
                found.append(target)
        return found

    def annotation_members(self, type_elem: ItemInfo) -> list[ItemInfo]:
        return [m for m in self.members_of(type_elem) if m.kind == "annotation_element"]

    def effective_access(self, element: ItemInfo) -> str:
        """Return the most restrictive access along the enclosing-type chain."""
        rank = access_rank(element.access)
        seen = {element.uid}
        outer = self.enclosing_type(element)
        while outer is not None and outer.uid not in seen:
            seen.add(outer.uid)
            rank = min(rank, access_rank(outer.access))
            outer = self.enclosing_type(outer)
        return ACCESS_LEVELS[rank]

    def is_public(self, element: ItemInfo) -> bool:
        return access_rank(element.access) == access_rank("public")

    def is_package_private(self, element: ItemInfo) -> bool:
        """True when the element is only reachable within its package.

        A public nested type inside a package-private class counts as
        package-private.
        """
        return self.effective_access(element) == "package"

    def is_included(self, element: ItemInfo) -> bool:
        """True when the element is documented at the configured access level."""
        return access_rank(self.effective_access(element)) >= access_rank(self.min_access)

    def is_linkable(self, type_elem: ItemInfo) -> bool:
        """True when the type has a page that links can point to."""
        return type_elem.uid in self.linkable_external or (
            type_elem.is_type and self.is_included(type_elem)
        )

    def documented_types(self) -> list[ItemInfo]:
        """Return every type that gets its own page."""
        return [it for it in self.uid_to_item.values() if it.is_type and self.is_included(it)]
