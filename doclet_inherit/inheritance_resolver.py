"""Resolution of inherited documentation as doclets arrive."""

import logging
from typing import Any

from doclet_inherit.dependency_registry import DependencyRegistry
from doclet_inherit.doclet import Doclet
from doclet_inherit.merge_inherited import merge_inherited
from doclet_inherit.override_expander import OverrideExpander

logger = logging.getLogger(__name__)


class InheritanceResolver:
    """Merges ancestor documentation into doclets, deferring when needed.

    Doclets arrive in source order, which need not be dependency order. A
    doclet whose ancestor has not completed yet is parked in the registry
    and picked up again the moment that ancestor completes.
    """

    def __init__(
        self,
        registry: DependencyRegistry,
        config: dict[str, Any],
        expander: OverrideExpander | None = None,
    ) -> None:
        """Initialize the resolver with the run registry and config."""
        self.registry = registry
        self.config = config
        self.expander = expander or OverrideExpander(registry, config)
        self.placeholder = config.get("placeholder_description", "undocumented")

    def on_new_doclet(self, doclet: Doclet) -> None:
        """Handle the arrival of a documented doclet from the parser."""
        if self.expander.wants_expansion(doclet):
            self.expander.expand(doclet)

        if self.registry.is_complete(doclet):
            self.mark_complete(doclet)
        else:
            self.process_inherits(doclet)

    def process_inherits(self, doclet: Doclet) -> None:
        """Resolve as many outstanding ancestors of `doclet` as possible.

        Ancestors are visited last-declared first, so parameters and returns
        come from the latest declaration that documents them. Prose fields
        are ranked by declaration instead and end up with the earliest.
        """
        pending = doclet.pending_ancestors
        for i in range(len(pending) - 1, -1, -1):
            entry = pending[i]
            ancestor = self.registry.completed.get(entry.identity)
            if ancestor is None:
                self.registry.enqueue_wait(doclet, entry.identity)
                continue
            logger.debug(
                "Merging %s into %s",
                entry.identity,
                doclet.longname or doclet.code_id,
            )
            merge_inherited(
                ancestor, doclet, entry.mode, self.placeholder, rank=entry.rank
            )
            del pending[i]

        if self.registry.is_complete(doclet):
            self.mark_complete(doclet)

    def mark_complete(self, doclet: Doclet) -> None:
        """Mark `doclet` complete and resolve every doclet waiting on it."""
        self.registry.mark_complete(doclet, self.process_inherits)
