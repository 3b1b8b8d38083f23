"""Logic for converting YAML values to plain text."""


def as_text(v: object) -> str:
    """Convert a value to a string, joining lists line by line and mapping None to ''."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, (list, tuple)):
        return "\n".join(t for t in (as_text(x) for x in v) if t)
    return str(v).strip()
