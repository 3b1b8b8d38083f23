"""Computes which members of a type, local or inherited, are documented."""

import logging
from dataclasses import dataclass

from member_summary.item_info import ItemInfo, access_rank
from member_summary.member_kind import INHERITED_KINDS, MemberKind
from member_summary.metadata_index import MetadataIndex
from member_summary.naming_convention import NamingConvention

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyMembers:
    """The accessors and backing field found for one property method."""

    field: ItemInfo | None
    getter: ItemInfo | None
    setter: ItemInfo | None


class VisibleMemberTable:
    """Visible members of one type, grouped by MemberKind.

    Local members are those declared in the type itself. Inherited members
    come from the supertypes returned by get_visible_type_elements(), nearer
    declarations hiding farther ones.
    """

    def __init__(
        self,
        type_elem: ItemInfo,
        index: MetadataIndex,
        naming: NamingConvention | None = None,
        *,
        properties_enabled: bool = True,
    ) -> None:
        self.type_elem = type_elem
        self.index = index
        self.naming = naming or NamingConvention()
        self.properties_enabled = properties_enabled

        self._local_cache: dict[str, dict[MemberKind, list[ItemInfo]]] = {}
        self._type_elements = self._compute_type_elements()
        self._visible = {
            kind: [m for m in members if self._is_documented(m)]
            for kind, members in self._local_members(type_elem).items()
        }
        self._all_visible = {kind: self._compute_all_visible(kind) for kind in MemberKind}
        self._property_map = self._compute_properties()

    def get_visible_members(self, kind: MemberKind) -> list[ItemInfo]:
        """Return the documented members of a kind declared in this type."""
        return list(self._visible[kind])

    def get_all_visible_members(self, kind: MemberKind) -> list[ItemInfo]:
        """Return the documented members of a kind, local and inherited."""
        return list(self._all_visible[kind])

    def get_visible_type_elements(self) -> list[ItemInfo]:
        """Return the type, its superclasses (nearest first), then its interfaces."""
        return list(self._type_elements)

    def has_visible_members(self, kind: MemberKind | None = None) -> bool:
        if kind is None:
            return any(self._all_visible.values())
        return bool(self._all_visible[kind])

    def get_property_getter(self, property_method: ItemInfo) -> ItemInfo | None:
        members = self._property_map.get(property_method.uid)
        return members.getter if members else None

    def get_property_setter(self, property_method: ItemInfo) -> ItemInfo | None:
        members = self._property_map.get(property_method.uid)
        return members.setter if members else None

    def get_property_field(self, property_method: ItemInfo) -> ItemInfo | None:
        members = self._property_map.get(property_method.uid)
        return members.field if members else None

    def _is_documented(self, member: ItemInfo) -> bool:
        return access_rank(member.access) >= access_rank(self.index.min_access)

    def _compute_type_elements(self) -> list[ItemInfo]:
        result = [self.type_elem]
        seen = {self.type_elem.uid}

        current = self.type_elem
        base_uid = self.index.get_base_class(current.uid)
        while base_uid and base_uid not in seen:
            seen.add(base_uid)
            superclass = self.index.get(base_uid)
            if superclass is None:
                logger.debug("Superclass %s of %s is not in the model", base_uid, current.uid)
                break
            result.append(superclass)
            current = superclass
            base_uid = self.index.get_base_class(current.uid)

        pending = [uid for t in list(result) for uid in self.index.get_interfaces(t.uid)]
        while pending:
            uid = pending.pop(0)
            if uid in seen:
                continue
            seen.add(uid)
            iface = self.index.get(uid)
            if iface is None:
                logger.debug("Interface %s of %s is not in the model", uid, self.type_elem.uid)
                continue
            result.append(iface)
            pending.extend(self.index.get_interfaces(uid))
        return result

    def _local_members(self, type_elem: ItemInfo) -> dict[MemberKind, list[ItemInfo]]:
        """Group the members declared in a type by kind."""
        cached = self._local_cache.get(type_elem.uid)
        if cached is not None:
            return cached

        out: dict[MemberKind, list[ItemInfo]] = {kind: [] for kind in MemberKind}
        for m in self.index.members_of(type_elem):
            kind = self._kind_of(m, type_elem)
            if kind is not None:
                out[kind].append(m)
        self._local_cache[type_elem.uid] = out
        return out

    def _kind_of(self, m: ItemInfo, owner: ItemInfo) -> MemberKind | None:
        if m.is_type:
            return MemberKind.NESTED_TYPES
        if m.kind == "enum_constant":
            return MemberKind.ENUM_CONSTANTS
        if m.kind == "field":
            return MemberKind.ANNOTATION_FIELDS if owner.kind == "annotation" else MemberKind.FIELDS
        if m.kind == "constructor":
            return MemberKind.CONSTRUCTORS
        if m.kind == "annotation_element":
            if m.default_value is None:
                return MemberKind.ANNOTATION_REQUIRED_ELEMENTS
            return MemberKind.ANNOTATION_OPTIONAL_ELEMENTS
        if m.kind == "method":
            if self.properties_enabled and self.naming.is_property_method(m):
                return MemberKind.PROPERTIES
            return MemberKind.METHODS
        logger.debug("Ignoring member %s of unknown kind %r", m.uid, m.kind)
        return None

    def _compute_all_visible(self, kind: MemberKind) -> list[ItemInfo]:
        result = list(self._visible[kind])
        if kind not in INHERITED_KINDS:
            return result

        seen = {self._hiding_key(m) for m in self._local_members(self.type_elem)[kind]}
        for ancestor in self._type_elements[1:]:
            for m in self._local_members(ancestor)[kind]:
                if not self._is_inherited(m, ancestor) or not self._is_documented(m):
                    continue
                key = self._hiding_key(m)
                if key in seen:
                    continue
                seen.add(key)
                result.append(m)
        return result

    def _is_inherited(self, m: ItemInfo, ancestor: ItemInfo) -> bool:
        if m.access == "private":
            return False
        if m.access == "package" and ancestor.package != self.type_elem.package:
            return False
        # Static interface methods are not inherited.
        return not (ancestor.kind == "interface" and m.kind == "method" and m.is_static)

    @staticmethod
    def _hiding_key(m: ItemInfo) -> tuple[str, ...]:
        if m.is_executable:
            return (m.name, *(p.type for p in m.parameters))
        return (m.name,)

    def _compute_properties(self) -> dict[str, PropertyMembers]:
        local = self.index.members_of(self.type_elem)
        result = {}
        for prop in self._visible[MemberKind.PROPERTIES]:
            base = self.naming.base_name(prop)
            field = next((m for m in local if m.kind == "field" and m.name == base), None)
            getter = self._find_method(local, self.naming.getter_names(base), 0)
            setter = self._find_method(local, self.naming.setter_names(base), 1)
            result[prop.uid] = PropertyMembers(field=field, getter=getter, setter=setter)
            if field is None and getter is None and setter is None:
                logger.debug("Property %s has no field, getter or setter", prop.uid)
        return result

    @staticmethod
    def _find_method(local: list[ItemInfo], names: list[str], arity: int) -> ItemInfo | None:
        # Names are tried in convention order, e.g. getX before isX.
        for name in names:
            for m in local:
                if m.kind == "method" and m.name == name and len(m.parameters) == arity:
                    return m
        return None
