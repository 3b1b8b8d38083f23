"""Naming rules that relate property methods to their getters and setters."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from member_summary.item_info import ItemInfo


class PropertyRole(Enum):
    """How a property-family method relates to its property."""

    GETTER = "getter"
    SETTER = "setter"
    PROPERTY = "property"


@dataclass(frozen=True)
class NamingConvention:
    """Bean-style accessor naming: ``xProperty()``, ``getX()``/``isX()``, ``setX()``."""

    getter_prefixes: tuple[str, ...] = ("get", "is")
    setter_prefixes: tuple[str, ...] = ("set",)
    property_suffix: str = "Property"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "NamingConvention":
        naming = config.get("naming", {})
        return cls(
            getter_prefixes=tuple(naming.get("getter_prefixes", cls.getter_prefixes)),
            setter_prefixes=tuple(naming.get("setter_prefixes", cls.setter_prefixes)),
            property_suffix=naming.get("property_suffix", cls.property_suffix),
        )

    def classify(self, element: ItemInfo) -> PropertyRole:
        """Classify a property-family method by its name."""
        if self._strip_prefix(element.name, self.setter_prefixes) is not None:
            return PropertyRole.SETTER
        if self._strip_prefix(element.name, self.getter_prefixes) is not None:
            return PropertyRole.GETTER
        return PropertyRole.PROPERTY

    def property_name(self, element: ItemInfo) -> str:
        """Return the property an accessor belongs to: ``getFooBar`` -> ``fooBar``."""
        rest = self._strip_prefix(element.name, self.setter_prefixes)
        if rest is None:
            rest = self._strip_prefix(element.name, self.getter_prefixes)
        if not rest:
            return ""
        return rest[0].lower() + rest[1:]

    def is_property_method(self, element: ItemInfo) -> bool:
        """True for ``fooProperty()``: no parameters, name ends in the suffix."""
        name = element.name
        return (
            element.kind == "method"
            and not element.parameters
            and len(name) > len(self.property_suffix)
            and name.endswith(self.property_suffix)
        )

    def base_name(self, property_method: ItemInfo) -> str:
        """Return the property base name: ``fooProperty`` -> ``foo``."""
        name = property_method.name
        if name.endswith(self.property_suffix):
            return name[: -len(self.property_suffix)]
        return name

    def getter_names(self, base_name: str) -> list[str]:
        cap = base_name[:1].upper() + base_name[1:]
        return [p + cap for p in self.getter_prefixes]

    def setter_names(self, base_name: str) -> list[str]:
        cap = base_name[:1].upper() + base_name[1:]
        return [p + cap for p in self.setter_prefixes]

    @staticmethod
    def _strip_prefix(name: str, prefixes: tuple[str, ...]) -> str | None:
        # A prefix only counts at a word boundary: "setX" yes, "settings" no.
        for prefix in sorted(prefixes, key=len, reverse=True):
            if name.startswith(prefix):
                rest = name[len(prefix) :]
                if not rest or not rest[0].islower():
                    return rest
        return None
