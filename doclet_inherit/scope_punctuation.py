"""Logic for joining a member name onto its parent's longname."""

from typing import Any


def scope_punctuation(scope: str | None, config: dict[str, Any]) -> str:
    """Return the separator used between a class and a member of `scope`."""
    mapping = config.get("scope_punctuation", {})
    return mapping.get(scope or "", config.get("default_scope_punctuation", "#"))
