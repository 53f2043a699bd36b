"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from doclet_inherit.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    # Tag titles as they appear in doc comments. Rename to avoid clashing
    # with tools that give @inheritDoc/@override a different meaning.
    # Under `jsdoc -X` the built-in @inheritdoc rejects a value, so
    # `@inheritdoc Name` needs an alias here (e.g. "inheritfrom").
    "tags": {
        "inheritparams": "inheritparams",
        "inheritdoc": "inheritdoc",
        "override": "override",
    },
    "placeholder_description": "undocumented",
    "scope_punctuation": {
        "static": ".",
        "inner": "~",
        "instance": "#",
    },
    "default_scope_punctuation": "#",
    "skip_undocumented": True,
    "add_see_links": True,
    "index_kinds": [
        "class",
        "namespace",
    ],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
