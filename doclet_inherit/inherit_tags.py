"""Definitions of the @inheritparams, @inheritdoc and @override tags.

The handlers only record which ancestors a doclet wants. Merging happens
later, when the finished doclet reaches the resolver.
"""

import logging
from typing import Any

from doclet_inherit.dependency_registry import DependencyRegistry
from doclet_inherit.doclet import Doclet
from doclet_inherit.first_word_of import first_word_of
from doclet_inherit.pending_ancestor import InheritMode
from doclet_inherit.tag import Tag
from doclet_inherit.tag_dictionary import TagDefinition, TagDictionary

logger = logging.getLogger(__name__)


def define_inherit_tags(
    dictionary: TagDictionary, registry: DependencyRegistry, config: dict[str, Any]
) -> None:
    """Register the inheritance tags on `dictionary`."""
    titles = config.get("tags", {})
    add_see_links = config.get("add_see_links", True)

    def on_inheritparams(doclet: Doclet, tag: Tag) -> None:
        ancestor = first_word_of(tag.value)
        if not ancestor:
            return
        registry.record_dependency(doclet, ancestor, InheritMode.PARAMS_ONLY)
        doclet.inherit_params_only = True

    def on_inheritdoc(doclet: Doclet, tag: Tag) -> None:
        ancestor = first_word_of(tag.value)
        if not ancestor:
            return
        registry.record_dependency(doclet, ancestor, InheritMode.FULL)
        doclet.inherit_params_only = False
        if add_see_links and ancestor not in doclet.see:
            doclet.see.append(ancestor)

    def on_override(doclet: Doclet, tag: Tag) -> None:
        # The longname may not be known yet, so key on the code id.
        if not doclet.code_id:
            return
        logger.debug("@%s found: %s (%s)", tag.title, doclet.name, doclet.code_id)
        doclet.inherit_params_only = False
        registry.pending_overrides.add(doclet.code_id)

    dictionary.define_tag(
        titles.get("inheritparams", "inheritparams"),
        TagDefinition(on_inheritparams, must_have_value=True),
    )
    dictionary.define_tag(
        titles.get("inheritdoc", "inheritdoc"),
        TagDefinition(on_inheritdoc, must_have_value=True),
    )
    dictionary.define_tag(
        titles.get("override", "override"),
        TagDefinition(on_override, must_not_have_value=True),
    )
