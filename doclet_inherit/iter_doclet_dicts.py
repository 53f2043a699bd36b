"""Utility for iterating over the doclet objects in a dump."""

from collections.abc import Iterable
from typing import Any


def iter_doclet_dicts(doc: Any) -> Iterable[dict[str, Any]]:
    """Iterate over the doclets of a `jsdoc -X` dump or a {doclets: [...]} map."""
    items = doc.get("doclets") if isinstance(doc, dict) else doc
    for it in items or []:
        if isinstance(it, dict):
            yield it
