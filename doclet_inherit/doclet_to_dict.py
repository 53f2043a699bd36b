"""Logic for writing resolved doclets back to their dump format."""

from typing import Any

from doclet_inherit.doclet import Doclet
from doclet_inherit.param_doc import ParamDoc, ReturnDoc


def _param_to_dict(param: ParamDoc) -> dict[str, Any]:
    out = dict(param.raw)
    out["name"] = param.name
    if param.description is not None:
        out["description"] = param.description
    if param.synthesized:
        out["synthesized"] = True
    return out


def _return_to_dict(ret: ReturnDoc) -> dict[str, Any]:
    out = dict(ret.raw)
    if ret.description is not None:
        out["description"] = ret.description
    return out


def doclet_to_dict(doclet: Doclet) -> dict[str, Any]:
    """Return the doclet's original fields overlaid with resolved documentation."""
    out = dict(doclet.raw)
    for attr in ("description", "summary", "classdesc"):
        value = getattr(doclet, attr)
        if value is not None:
            out[attr] = value
    if doclet.params:
        out["params"] = [_param_to_dict(p) for p in doclet.params]
    if doclet.returns is not None:
        out["returns"] = [_return_to_dict(r) for r in doclet.returns]
    if doclet.see:
        out["see"] = list(doclet.see)
    if doclet.inherit_params_only:
        out["inheritParamsOnly"] = True
    if doclet.pending_ancestors:
        out["unresolvedInherits"] = [p.identity for p in doclet.pending_ancestors]
    return out
