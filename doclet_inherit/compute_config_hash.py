"""Logic for fingerprinting the configuration a resolution ran with."""

import hashlib
import json
from typing import Any

# Keys that only shape output written after resolution.
OUTPUT_ONLY_KEYS = frozenset({"index_kinds"})


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a sha256 over the settings that change resolved doclets.

    Two reports with the same hash resolved their doclets identically,
    whatever their index settings were. Keys are sorted, so the order in
    the config file does not matter.
    """
    relevant = {k: v for k, v in config.items() if k not in OUTPUT_ONLY_KEYS}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
