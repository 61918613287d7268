#!/usr/bin/env python3
"""Lint and format script for feed-core using Ruff.

Runs `ruff format` and then `ruff check --fix` over the given paths.
"""

import argparse
import glob
import os
import subprocess
import sys

DEFAULT_PATHS = [
    "src",
    "tests",
    "run_tests.py",
    "setup.py",
    "lint.py",
]


def collect_files(paths):
    """Expand directories and glob patterns into a sorted list of Python files."""
    all_paths = []
    for path_pattern in paths:
        if os.path.isdir(path_pattern):
            all_paths.extend(glob.glob(os.path.join(path_pattern, "**", "*.py"), recursive=True))
        elif os.path.isfile(path_pattern) and path_pattern.endswith(".py"):
            all_paths.append(path_pattern)
        else:
            all_paths.extend(glob.glob(path_pattern, recursive=True))
    return sorted({f for f in all_paths if os.path.isfile(f)})


def run_ruff(command):
    """Run a ruff command, echo its output, and return its exit code."""
    print(f"Running: {' '.join(command)}")
    result = subprocess.run(command, capture_output=True, text=True)
    print(result.stdout)
    if result.stderr:
        print(result.stderr, file=sys.stderr)
    return result.returncode


def main():
    """Parse arguments and run the formatter and linter."""
    parser = argparse.ArgumentParser(description="Run Ruff formatter and linter on the codebase")
    parser.add_argument(
        "--paths",
        nargs="+",
        default=DEFAULT_PATHS,
        help="Paths to format and lint (default: src tests *.py)",
    )
    parser.add_argument(
        "--statistics", action="store_true", help="Show statistics during check phase"
    )
    args = parser.parse_args()

    target_files = collect_files(args.paths)
    if not target_files:
        print("No Python files found to format or lint based on provided paths.")
        return 0

    print("\n--- Running Ruff Formatter ---")
    if run_ruff(["ruff", "format"] + target_files) != 0:
        print("\nFormatter failed.", file=sys.stderr)

    print("\n--- Running Ruff Linter (with fixes) ---")
    check_command = ["ruff", "check", "--fix"] + target_files
    if args.statistics:
        check_command.append("--statistics")

    if run_ruff(check_command) != 0:
        print("\nRuff check found errors (even after attempting fixes).", file=sys.stderr)
        return 1

    print("\nRuff format and check passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
