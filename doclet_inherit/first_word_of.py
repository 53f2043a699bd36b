"""Utility for extracting the target name of a tag value."""

import re

FIRST_WORD_RE = re.compile(r"^(\S+)")


def first_word_of(text: str | None) -> str:
    """Return the first whitespace-delimited word of `text`, or ''."""
    if not text:
        return ""
    m = FIRST_WORD_RE.match(text.strip())
    return m.group(1) if m else ""
