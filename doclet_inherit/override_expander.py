"""Logic for turning an override declaration into concrete ancestors."""

import logging
from typing import Any

from doclet_inherit.dependency_registry import DependencyRegistry
from doclet_inherit.doclet import Doclet
from doclet_inherit.pending_ancestor import InheritMode
from doclet_inherit.scope_punctuation import scope_punctuation

logger = logging.getLogger(__name__)


class OverrideExpander:
    """Derives the superclass members an overriding member inherits from.

    Only the immediate superclasses declared on the enclosing class are
    considered. If the direct parent does not document the member itself,
    nothing is inherited from further up the chain.
    """

    def __init__(self, registry: DependencyRegistry, config: dict[str, Any]) -> None:
        """Initialize the expander with the run registry and config."""
        self.registry = registry
        self.config = config
        self.dropped: list[dict[str, str | None]] = []

    def wants_expansion(self, doclet: Doclet) -> bool:
        """Return True if an override tag was recorded for `doclet`."""
        code_id = doclet.code_id
        return bool(code_id) and code_id in self.registry.pending_overrides

    def expand(self, doclet: Doclet) -> None:
        """Record a FULL dependency on `Super<punct>name` for each superclass."""
        self.registry.pending_overrides.discard(doclet.code_id or "")

        enclosing = self.registry.find(doclet.memberof) if doclet.memberof else None
        if enclosing is None:
            logger.warning(
                "Could not find enclosing class %r for override on %s; ignoring",
                doclet.memberof,
                doclet.longname or doclet.name,
            )
            self.dropped.append(
                {"doclet": doclet.longname or doclet.name, "memberof": doclet.memberof}
            )
            return

        doclet.enclosing_class = enclosing
        punct = scope_punctuation(doclet.scope, self.config)
        for superclass in enclosing.superclasses:
            parent_member = f"{superclass}{punct}{doclet.name}"
            self.registry.record_dependency(doclet, parent_member, InheritMode.FULL)
            if parent_member not in doclet.see and self.config.get(
                "add_see_links", True
            ):
                doclet.see.append(parent_member)
