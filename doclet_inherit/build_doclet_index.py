"""Logic for building a nested index of namespaces and classes."""

from collections.abc import Iterable
from typing import Any

from doclet_inherit.doclet import Doclet


def build_doclet_index(
    doclets: Iterable[Doclet], kinds: Iterable[str] = ("class", "namespace")
) -> dict[str, Any]:
    """Nest doclets of the given kinds by the dotted parts of their longname.

    Every entry carries a `link` to its page; children are stored beside it
    under their own short name.
    """
    wanted = set(kinds)
    items = sorted(
        (d for d in doclets if d.kind in wanted and d.longname),
        key=lambda d: d.longname,
    )

    index: dict[str, Any] = {}
    for doclet in items:
        *parts, item_name = doclet.longname.split(".")
        parent = index
        for part in parts:
            parent = parent.setdefault(part, {})
        parent.setdefault(item_name, {})["link"] = doclet.longname + ".html"
    return index
