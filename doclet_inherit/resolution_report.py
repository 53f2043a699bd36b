"""Logic for generating reports on inheritance resolution runs."""

import json
import time
from pathlib import Path
from typing import Any

from doclet_inherit.doclet import Doclet


class ResolutionReport:
    """Collects what each resolution run resolved and what it left behind."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.runs = 0
        self.doclets_seen = 0
        self.completed = 0
        self.unresolved: list[dict[str, Any]] = []
        self.dropped_overrides: list[dict[str, str | None]] = []
        self.ignored_tags: list[dict[str, str | None]] = []
        self.start_time = time.time()

    def add_run(
        self,
        doclets: list[Doclet],
        completed: int,
        dropped_overrides: list[dict[str, str | None]],
        ignored_tags: list[dict[str, str | None]],
    ) -> None:
        """Add the outcome of one resolution run to the report."""
        self.runs += 1
        self.doclets_seen += len(doclets)
        self.completed += completed
        self.unresolved.extend(
            {
                "doclet": d.longname or d.code_id,
                "waiting_on": [p.identity for p in d.pending_ancestors],
            }
            for d in doclets
            if d.pending_ancestors
        )
        self.dropped_overrides.extend(dropped_overrides)
        self.ignored_tags.extend(ignored_tags)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "runs": self.runs,
                "total_doclets": self.doclets_seen,
            },
            "unresolved": self.unresolved,
            "dropped_overrides": self.dropped_overrides,
            "ignored_tags": self.ignored_tags,
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        missing: dict[str, int] = {}
        for entry in self.unresolved:
            for ancestor in entry["waiting_on"]:
                missing[ancestor] = missing.get(ancestor, 0) + 1

        return {
            "completed": self.completed,
            "pending": len(self.unresolved),
            "dropped_overrides": len(self.dropped_overrides),
            "ignored_tags": len(self.ignored_tags),
            # ancestor -> number of doclets blocked on it
            "missing_ancestors": missing,
        }
