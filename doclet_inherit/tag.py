"""Data model for a documentation tag attached to a doclet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """Represents a raw tag as found in a doc comment."""

    title: str
    value: str | None = None  # raw text after the tag title
