"""Logic for copying documentation from an ancestor doclet into a dependent."""

import dataclasses

from doclet_inherit.doclet import Doclet
from doclet_inherit.param_doc import ParamDoc
from doclet_inherit.pending_ancestor import InheritMode

INHERITED_SCALARS = ("description", "summary", "classdesc")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def merge_inherited(
    ancestor: Doclet,
    doclet: Doclet,
    mode: InheritMode,
    placeholder: str = "undocumented",
    rank: int = 0,
) -> None:
    """Fill the blanks of `doclet` from `ancestor`.

    Returns are copied only when `doclet` documents none. Parameters follow
    the signature of `doclet`: explicit entries are kept, synthesized ones
    are replaced by the ancestor's, and missing ones are taken from the
    ancestor or synthesized with `placeholder`.

    In FULL mode the prose fields are copied too, where `doclet` leaves them
    blank. `rank` is the position of the ancestor's declaration on `doclet`;
    prose inherited from a later declaration gives way to an earlier one,
    while prose written on `doclet` itself is never replaced.
    """
    if not doclet.returns:
        doclet.returns = (
            list(ancestor.returns) if ancestor.returns is not None else None
        )

    if ancestor.params:
        _merge_params(ancestor, doclet, placeholder)

    if mode is InheritMode.PARAMS_ONLY:
        return

    for attr in INHERITED_SCALARS:
        inherited = getattr(ancestor, attr)
        if _is_blank(inherited):
            continue
        source = doclet.scalar_sources.get(attr)
        outranked = source is not None and rank < source
        if _is_blank(getattr(doclet, attr)) or outranked:
            setattr(doclet, attr, inherited)
            doclet.scalar_sources[attr] = rank


def _merge_params(ancestor: Doclet, doclet: Doclet, placeholder: str) -> None:
    for name in doclet.param_names:
        inherited = ancestor.find_param(name)
        existing = doclet.find_param(name)

        if existing is not None:
            # Only an "undocumented" placeholder gives way to a real entry.
            if existing.synthesized and inherited is not None:
                index = doclet.params.index(existing)
                doclet.params[index] = dataclasses.replace(inherited)
        elif inherited is not None:
            doclet.params.append(dataclasses.replace(inherited))
        else:
            doclet.params.append(
                ParamDoc(name=name, description=placeholder, synthesized=True)
            )
