"""Logic for loading doclet dumps into Doclet records."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from doclet_inherit.doclet import Doclet
from doclet_inherit.iter_doclet_dicts import iter_doclet_dicts
from doclet_inherit.param_doc import ParamDoc, ReturnDoc
from doclet_inherit.tag import Tag

logger = logging.getLogger(__name__)


def _optional_text(v: object) -> str | None:
    if v is None:
        return None
    return str(v)


def _strings(v: object) -> list[str]:
    if not v:
        return []
    if isinstance(v, (list, tuple)):
        return [str(x) for x in v]
    return [str(v)]


def _params(raw_params: list[Any], longname: str) -> list[ParamDoc]:
    params: list[ParamDoc] = []
    seen: set[str] = set()
    for p in raw_params or []:
        if not isinstance(p, dict) or not p.get("name"):
            continue
        name = str(p["name"])
        if name in seen:
            logger.debug("Duplicate @param %s on %s dropped", name, longname)
            continue
        seen.add(name)
        params.append(
            ParamDoc(
                name=name,
                description=_optional_text(p.get("description")),
                synthesized=bool(p.get("synthesized", False)),
                raw=p,
            )
        )
    return params


def _returns(raw_returns: Any) -> list[ReturnDoc] | None:
    if raw_returns is None:
        return None
    return [
        ReturnDoc(description=_optional_text(r.get("description")), raw=r)
        for r in raw_returns
        if isinstance(r, dict)
    ]


def _tags(raw: dict[str, Any], code_id: Any) -> list[Tag]:
    tags = []
    for t in raw.get("tags") or []:
        if isinstance(t, dict) and t.get("title"):
            value = t.get("value", t.get("text"))
            tags.append(Tag(str(t["title"]), _optional_text(value)))

    # jsdoc knows @override itself: it sets `override: true` instead of
    # listing the tag.
    if raw.get("override") is True and code_id:
        if not any(t.title.lower() == "override" for t in tags):
            tags.append(Tag("override"))
    return tags


def doclet_from_dict(raw: dict[str, Any]) -> Doclet:
    """Build a Doclet from one entry of a `jsdoc -X` dump."""
    code = (raw.get("meta") or {}).get("code") or {}
    longname = str(raw.get("longname") or "")
    code_id = code.get("id")
    return Doclet(
        longname=longname,
        name=str(raw.get("name") or ""),
        kind=str(raw.get("kind") or ""),
        memberof=_optional_text(raw.get("memberof")),
        scope=_optional_text(raw.get("scope")),
        code_id=str(code_id) if code_id else None,
        description=_optional_text(raw.get("description")),
        summary=_optional_text(raw.get("summary")),
        classdesc=_optional_text(raw.get("classdesc")),
        params=_params(raw.get("params") or [], longname),
        returns=_returns(raw.get("returns")),
        see=_strings(raw.get("see")),
        superclasses=_strings(raw.get("augments")),
        param_names=_strings(code.get("paramnames")),
        tags=_tags(raw, code_id),
        undocumented=bool(raw.get("undocumented", False)),
        raw=raw,
    )


def load_doclets(path: Path) -> list[Doclet]:
    """Load a doclet dump (JSON from `jsdoc -X`, or YAML) in source order."""
    text = path.read_text(encoding="utf-8")
    doc = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    return [doclet_from_dict(it) for it in iter_doclet_dicts(doc)]
