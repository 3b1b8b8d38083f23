"""Logic for extracting the summary sentence of a comment body."""

import re

# A sentence ends at '.', '!' or '?' followed by whitespace or end of text.
SENTENCE_END_RE = re.compile(r"[.!?](?=\s|$)")
# Block markup and blank lines also terminate the first sentence.
BLOCK_BREAK_RE = re.compile(
    r"\n\s*\n|<(?:p|pre|ul|ol|dl|table|h[1-6]|blockquote)\b", re.IGNORECASE
)


def first_sentence(text: str) -> str:
    """Return the first sentence of a comment body with whitespace collapsed."""
    text = text.strip()
    if not text:
        return ""
    brk = BLOCK_BREAK_RE.search(text)
    if brk and brk.start() > 0:
        text = text[: brk.start()]
    m = SENTENCE_END_RE.search(text)
    if m:
        text = text[: m.end()]
    return " ".join(text.split())
