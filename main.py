"""Main orchestration script for dumping JSDoc doclets and resolving inheritance."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(
    cmd_list: Sequence[str | Path],
    cwd: Path | str | None = None,
    stdout_path: Path | None = None,
) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        if stdout_path is None:
            subprocess.run(cmd_list, check=True, cwd=cwd)
        else:
            stdout_path.parent.mkdir(parents=True, exist_ok=True)
            with stdout_path.open("w", encoding="utf-8") as out:
                subprocess.run(cmd_list, check=True, cwd=cwd, stdout=out)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full doclet dump and resolution pipeline."""
    parser = argparse.ArgumentParser(
        description="Dump JSDoc doclets and resolve documentation inheritance."
    )
    parser.add_argument(
        "source_dir",
        type=Path,
        help="JavaScript source tree to document",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("doclets_out"),
        help="Directory for the raw dump, resolved doclets and report",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--jsdoc-config",
        help="JSDoc configuration file (must allow unknown tags)",
    )
    args = parser.parse_args()

    out_dir = args.out_dir
    raw_dump = out_dir / "doclets.raw.json"

    # 1. Dump doclets with jsdoc's explain mode
    print("--- Step 1: Dumping doclets with jsdoc -X ---")
    jsdoc_cmd: list[str | Path] = ["jsdoc", "-X", "-r", args.source_dir]
    if args.jsdoc_config:
        jsdoc_cmd.extend(["-c", args.jsdoc_config])
    run_command(jsdoc_cmd, stdout_path=raw_dump)

    # 2. Resolve inheritance
    print("\n--- Step 2: Resolving inherited documentation ---")
    cmd: list[str | Path] = [
        sys.executable,
        "-m",
        "doclet_inherit.resolve_inheritance",
        raw_dump,
        "--out-file",
        out_dir / "doclets.json",
        "--report",
        out_dir / "resolution_report.json",
        "--index",
        out_dir / "index.json",
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Resolved doclets written to {out_dir}")


if __name__ == "__main__":
    main()
