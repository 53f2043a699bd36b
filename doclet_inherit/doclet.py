"""Data model for representing doclets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from doclet_inherit.param_doc import ParamDoc, ReturnDoc
from doclet_inherit.pending_ancestor import PendingAncestor
from doclet_inherit.tag import Tag


@dataclass(eq=False)
class Doclet:
    """Represents the documentation record of one named code entity.

    Doclets compare and hash by identity: the same longname may be produced
    more than once and each record is tracked on its own.
    """

    longname: str = ""  # empty for anonymous entities
    name: str = ""
    kind: str = ""
    memberof: str | None = None
    scope: str | None = None  # static/instance/inner
    code_id: str | None = None  # meta.code.id, known before the longname
    description: str | None = None
    summary: str | None = None
    classdesc: str | None = None
    params: list[ParamDoc] = field(default_factory=list)
    returns: list[ReturnDoc] | None = None
    see: list[str] = field(default_factory=list)
    superclasses: list[str] = field(default_factory=list)  # @augments/@extends
    param_names: list[str] = field(default_factory=list)  # signature order
    tags: list[Tag] = field(default_factory=list)
    undocumented: bool = False
    inherit_params_only: bool = False
    pending_ancestors: list[PendingAncestor] = field(default_factory=list)
    declared_ancestors: int = 0
    scalar_sources: dict[str, int] = field(default_factory=dict)  # attr -> rank
    enclosing_class: Doclet | None = field(default=None, repr=False)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    def find_param(self, name: str) -> ParamDoc | None:
        """Return the documented parameter called `name`, if any."""
        for param in self.params:
            if param.name == name:
                return param
        return None
