"""Ordering used for every list of members shown in a summary."""

from collections.abc import Iterable

from member_summary.item_info import ItemInfo

# Ties on name and signature are broken by kind, in this order.
KIND_ORDER = {
    "field": 0,
    "enum_constant": 1,
    "constructor": 2,
    "method": 3,
    "annotation_element": 4,
    "class": 5,
    "interface": 6,
    "enum": 7,
    "annotation": 8,
    "record": 9,
}


def element_sort_key(e: ItemInfo) -> tuple:
    """Index-style sort key.

    Names compare ignoring case first, then parameter types, then the exact
    name, kind and enclosing type.
    """
    params = tuple(p.type.lower() for p in e.parameters)
    enclosing = e.parent or ""
    return (
        e.name.lower(),
        params,
        e.name,
        tuple(p.type for p in e.parameters),
        KIND_ORDER.get(e.kind, len(KIND_ORDER)),
        enclosing.lower(),
        enclosing,
        e.uid,
    )


def compare_elements(a: ItemInfo, b: ItemInfo) -> int:
    """Three-way comparison matching element_sort_key, for functools.cmp_to_key."""
    ka, kb = element_sort_key(a), element_sort_key(b)
    return (ka > kb) - (ka < kb)


def sorted_elements(elements: Iterable[ItemInfo]) -> list[ItemInfo]:
    """Sort elements and drop repeats of the same uid."""
    unique: dict[str, ItemInfo] = {}
    for e in elements:
        unique.setdefault(e.uid, e)
    return sorted(unique.values(), key=element_sort_key)
