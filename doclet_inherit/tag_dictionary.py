"""Registry of tag handlers fired while a doclet is being built."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from doclet_inherit.doclet import Doclet
from doclet_inherit.tag import Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagDefinition:
    """Describes how a tag is validated and what happens when it is found."""

    on_tagged: Callable[[Doclet, Tag], None]
    must_have_value: bool = False
    must_not_have_value: bool = False


class TagDictionary:
    """Maps tag titles to their definitions."""

    def __init__(self) -> None:
        """Initialize an empty dictionary."""
        self.definitions: dict[str, TagDefinition] = {}
        self.ignored: list[dict[str, str | None]] = []

    def define_tag(self, title: str, definition: TagDefinition) -> None:
        """Register `definition` under `title` (case-insensitive)."""
        self.definitions[title.lower()] = definition

    def lookup(self, title: str) -> TagDefinition | None:
        """Return the definition registered for `title`, if any."""
        return self.definitions.get(title.lower())

    def apply(self, doclet: Doclet) -> None:
        """Fire the handler of every known tag on `doclet`, in order.

        Malformed tags are logged and skipped.
        """
        for tag in doclet.tags:
            definition = self.lookup(tag.title)
            if definition is None:
                continue

            has_value = bool(tag.value and tag.value.strip())
            problem = None
            if definition.must_have_value and not has_value:
                problem = "requires a value"
            elif definition.must_not_have_value and has_value:
                problem = "does not take a value"

            if problem:
                name = doclet.longname or doclet.name or doclet.code_id
                logger.warning("@%s on %s %s; ignoring", tag.title, name, problem)
                self.ignored.append(
                    {"doclet": name, "tag": tag.title, "reason": problem}
                )
                continue

            definition.on_tagged(doclet, tag)
