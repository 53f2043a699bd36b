"""Orchestration logic for resolving inherited documentation in doclet dumps."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from doclet_inherit.build_doclet_index import build_doclet_index
from doclet_inherit.collect_doclet_files import collect_doclet_files
from doclet_inherit.compute_config_hash import compute_config_hash
from doclet_inherit.doclet import Doclet
from doclet_inherit.doclet_to_dict import doclet_to_dict
from doclet_inherit.load_config import load_config
from doclet_inherit.load_doclets import load_doclets
from doclet_inherit.resolution_report import ResolutionReport
from doclet_inherit.resolve_doclets import resolve_doclets

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Execute the full resolution pipeline."""
    files = collect_doclet_files(args.inputs)
    if not files:
        msg = "No doclet dumps found under: " + ", ".join(str(p) for p in args.inputs)
        raise SystemExit(msg)

    config = load_config(args.config)
    report = ResolutionReport(compute_config_hash(config))

    # One run spans every input unless files are isolated from each other.
    groups = [[f] for f in files] if args.isolate_files else [files]
    resolved: list[Doclet] = []
    for group in groups:
        doclets = [d for f in group for d in load_doclets(f)]
        logger.info("Resolving %d doclets from %d file(s)", len(doclets), len(group))
        resolved.extend(resolve_doclets(doclets, config, report))

    _write_json(args.out_file, [doclet_to_dict(d) for d in resolved])

    if args.report:
        report.generate_report(str(args.report))
    if args.index:
        _write_json(args.index, build_doclet_index(resolved, config["index_kinds"]))

    pending = len(report.unresolved)
    print(f"Resolved {len(resolved)} doclets into: {args.out_file}")
    if pending:
        print(f"{pending} doclet(s) still wait on undocumented ancestors")
    return 0


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
