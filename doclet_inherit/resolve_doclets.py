"""Logic for running one inheritance resolution pass over a doclet stream."""

from typing import Any

from doclet_inherit.dependency_registry import DependencyRegistry
from doclet_inherit.doclet import Doclet
from doclet_inherit.inherit_tags import define_inherit_tags
from doclet_inherit.inheritance_resolver import InheritanceResolver
from doclet_inherit.resolution_report import ResolutionReport
from doclet_inherit.tag_dictionary import TagDictionary


def resolve_doclets(
    doclets: list[Doclet],
    config: dict[str, Any],
    report: ResolutionReport | None = None,
) -> list[Doclet]:
    """Resolve inheritance across `doclets`, given in source order.

    The doclets are updated in place and returned. All bookkeeping is
    discarded when the run ends.
    """
    registry = DependencyRegistry()
    dictionary = TagDictionary()
    define_inherit_tags(dictionary, registry, config)
    resolver = InheritanceResolver(registry, config)
    skip_undocumented = config.get("skip_undocumented", True)

    registry.begin()
    try:
        for doclet in doclets:
            if doclet.undocumented and skip_undocumented:
                continue
            dictionary.apply(doclet)
            resolver.on_new_doclet(doclet)

        if report is not None:
            report.add_run(
                doclets,
                completed=len(registry.completed),
                dropped_overrides=resolver.expander.dropped,
                ignored_tags=dictionary.ignored,
            )
    finally:
        registry.end()
    return doclets
