"""Resolve @inheritparams, @inheritdoc and @override across JSDoc doclets.

Reads the doclet dump written by `jsdoc -X`, copies inherited parameter,
return and description documentation into the doclets that ask for it, and
writes the resolved doclets back out in the same shape.
"""

import argparse
import logging
from pathlib import Path

from doclet_inherit.run_resolution import run_resolution


def main(argv: list[str] | None = None) -> int:
    """Run the resolution process."""
    ap = argparse.ArgumentParser(
        description="Resolve documentation inheritance in `jsdoc -X` doclet dumps.",
    )
    ap.add_argument(
        "inputs",
        type=Path,
        nargs="+",
        help="Doclet dump files (*.json, *.yml) or directories containing them",
    )
    ap.add_argument(
        "-o",
        "--out-file",
        type=Path,
        required=True,
        help="Where to write the resolved doclets (JSON)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of unresolved and ignored declarations",
    )
    ap.add_argument(
        "--index",
        type=Path,
        help="Write a nested namespace/class index (JSON)",
    )
    ap.add_argument(
        "--isolate-files",
        action="store_true",
        help="Resolve each input file on its own instead of as one run",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every dependency and merge",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
