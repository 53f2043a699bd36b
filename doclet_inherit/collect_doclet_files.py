"""Utility for finding doclet dump files on disk."""

from pathlib import Path

DOCLET_SUFFIXES = (".json", ".yml", ".yaml")


def collect_doclet_files(inputs: list[Path]) -> list[Path]:
    """Expand files and directories into a sorted list of dump files."""
    files: list[Path] = []
    for p in inputs:
        if p.is_dir():
            files.extend(
                sorted(f for f in p.rglob("*") if f.suffix.lower() in DOCLET_SUFFIXES)
            )
        elif p.is_file():
            files.append(p)
    return files
