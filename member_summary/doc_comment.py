"""Data models for structured documentation comments."""

from dataclasses import dataclass, field

# Standard javadoc block tags; anything else is an "unknown" block tag.
KNOWN_BLOCK_TAGS = {
    "author",
    "deprecated",
    "exception",
    "hidden",
    "param",
    "provides",
    "return",
    "see",
    "serial",
    "serialData",
    "serialField",
    "since",
    "throws",
    "uses",
    "version",
}


@dataclass(frozen=True)
class DocTag:
    """A block tag such as ``@since 1.2`` or ``@see #getX()``."""

    name: str
    text: str = ""
    reference: str | None = None  # uid of the referenced element, if any

    @property
    def is_unknown(self) -> bool:
        """Return True for custom block tags like ``@defaultValue``."""
        return self.name not in KNOWN_BLOCK_TAGS


@dataclass(frozen=True)
class DocComment:
    """A parsed documentation comment: body text plus block tags."""

    body: str = ""
    tags: tuple[DocTag, ...] = field(default_factory=tuple)

    def block_tags(self, name: str) -> list[DocTag]:
        """Return the block tags with the given name, in source order."""
        return [t for t in self.tags if t.name == name]
