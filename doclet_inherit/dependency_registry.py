"""Bookkeeping for doclets that inherit documentation from other doclets."""

import logging
from collections.abc import Callable

from doclet_inherit.doclet import Doclet
from doclet_inherit.pending_ancestor import InheritMode, PendingAncestor

logger = logging.getLogger(__name__)


class DependencyRegistry:
    """Tracks completed doclets and the doclets still waiting on ancestors.

    One registry instance holds the state of a single resolution run. Call
    `begin()` before the first doclet arrives and `end()` once the run is
    over so identities never leak from one run into the next.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.completed: dict[str, Doclet] = {}  # longname -> doclet
        self.waiting_for: dict[str, list[Doclet]] = {}  # ancestor -> dependents
        self.waiting: dict[str, Doclet] = {}  # longname -> blocked doclet
        self.pending_overrides: set[str] = set()  # meta.code.id values
        self.active = False

    def begin(self) -> None:
        """Start a resolution run with empty tables."""
        self._reset()
        self.active = True

    def end(self) -> None:
        """Finish the resolution run and drop all state."""
        if self.waiting_for:
            logger.debug(
                "Run ended with %d unresolved ancestor(s): %s",
                len(self.waiting_for),
                ", ".join(sorted(self.waiting_for)),
            )
        self._reset()
        self.active = False

    def _reset(self) -> None:
        self.completed.clear()
        self.waiting_for.clear()
        self.waiting.clear()
        self.pending_overrides.clear()

    def record_dependency(
        self, doclet: Doclet, ancestor: str, mode: InheritMode
    ) -> None:
        """Mark `doclet` as requiring documentation from `ancestor`.

        The ancestor is not validated; one that never completes leaves the
        doclet pending for the rest of the run.
        """
        rank = doclet.declared_ancestors
        doclet.declared_ancestors += 1
        doclet.pending_ancestors.append(PendingAncestor(ancestor, mode, rank))
        logger.debug(
            "%s inherits (%s) from %s",
            doclet.longname or doclet.code_id,
            mode.value,
            ancestor,
        )

    def is_complete(self, doclet: Doclet) -> bool:
        """Return True if `doclet` has no unresolved ancestors left."""
        return not doclet.pending_ancestors

    def enqueue_wait(self, doclet: Doclet, ancestor: str) -> None:
        """Park `doclet` until `ancestor` completes."""
        waiters = self.waiting_for.setdefault(ancestor, [])
        if not any(w is doclet for w in waiters):
            waiters.append(doclet)
        if doclet.longname:
            self.waiting[doclet.longname] = doclet

    def mark_complete(
        self, doclet: Doclet, resolve: Callable[[Doclet], None]
    ) -> None:
        """Register `doclet` as complete and re-run `resolve` on its dependents.

        Anonymous doclets complete without being registered: their identity
        is unstable, so nothing may inherit from them.
        """
        if not doclet.longname:
            logger.debug("Anonymous doclet %s completed", doclet.code_id)
            return

        logger.debug("Completed: %s", doclet.longname)
        self.completed[doclet.longname] = doclet
        if self.waiting.get(doclet.longname) is doclet:
            del self.waiting[doclet.longname]

        for waiter in self.waiting_for.pop(doclet.longname, []):
            logger.debug(
                "%s was waiting on %s",
                waiter.longname or waiter.code_id,
                doclet.longname,
            )
            resolve(waiter)

    def find(self, longname: str) -> Doclet | None:
        """Return the doclet called `longname` if it has arrived yet.

        Completed doclets are searched first, then doclets still waiting on
        their own ancestors.
        """
        return self.completed.get(longname) or self.waiting.get(longname)
