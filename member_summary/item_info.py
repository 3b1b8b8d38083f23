"""Data models for representing program elements."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from member_summary.doc_comment import DocComment
from member_summary.member_kind import is_executable_kind, is_type_kind

ACCESS_LEVELS = ("private", "package", "protected", "public")


@dataclass(frozen=True)
class Parameter:
    """A parameter of a method or constructor."""

    name: str
    type: str
    type_variable: bool = False  # True for a free type variable such as ``T``


@dataclass(eq=False)
class ItemInfo:
    """Represents a documented element (type, field, method, etc.).

    Elements compare and hash by identity; the uid is the stable key used in
    lookup tables.
    """

    uid: str
    kind: str  # class/interface/enum/annotation/field/method/constructor/...
    name: str
    full_name: str
    parent: str | None  # uid of the enclosing type
    package: str
    access: str = "package"
    modifiers: tuple[str, ...] = ()
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
    superclass: str | None = None
    interfaces: list[str] = field(default_factory=list)
    overrides: list[str] = field(default_factory=list)  # nearest first
    default_value: str | None = None
    comment: DocComment | None = None
    file: Path | None = None
    raw: dict[str, Any] = field(default_factory=dict)  # original parsed item

    @property
    def is_type(self) -> bool:
        return is_type_kind(self.kind)

    @property
    def is_executable(self) -> bool:
        return is_executable_kind(self.kind)

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers

    @property
    def signature(self) -> str:
        """Return the parameter type signature, e.g. ``(int, String)``."""
        return "(" + ", ".join(p.type for p in self.parameters) + ")"

    def __repr__(self) -> str:
        return f"ItemInfo({self.uid!r})"


def access_rank(access: str) -> int:
    """Rank an access level, private lowest and public highest."""
    try:
        return ACCESS_LEVELS.index(access.lower())
    except ValueError:
        return ACCESS_LEVELS.index("package")
