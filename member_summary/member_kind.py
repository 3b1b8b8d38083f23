"""Member kinds and element kind predicates."""

from enum import Enum

TYPE_KINDS = {"class", "interface", "enum", "annotation", "record"}
EXECUTABLE_KINDS = {"method", "constructor", "annotation_element"}


class MemberKind(Enum):
    """Kinds of members that get their own summary table."""

    NESTED_TYPES = "nested_types"
    ENUM_CONSTANTS = "enum_constants"
    FIELDS = "fields"
    PROPERTIES = "properties"
    CONSTRUCTORS = "constructors"
    METHODS = "methods"
    ANNOTATION_FIELDS = "annotation_fields"
    ANNOTATION_REQUIRED_ELEMENTS = "annotation_required_elements"
    ANNOTATION_OPTIONAL_ELEMENTS = "annotation_optional_elements"


# Kinds whose members can be inherited from supertypes.
INHERITED_KINDS = frozenset(
    {
        MemberKind.NESTED_TYPES,
        MemberKind.FIELDS,
        MemberKind.PROPERTIES,
        MemberKind.METHODS,
    }
)


def is_type_kind(kind: str) -> bool:
    """Check if the kind represents a type (class, interface, etc.)."""
    return kind.lower() in TYPE_KINDS


def is_executable_kind(kind: str) -> bool:
    """Check if the kind represents an executable member."""
    return kind.lower() in EXECUTABLE_KINDS


def is_member_kind(kind: str) -> bool:
    """Check if the kind represents a member (method, field, etc.)."""
    k = kind.lower()
    return k in EXECUTABLE_KINDS or k in {"field", "enum_constant"}
