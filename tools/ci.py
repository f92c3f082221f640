#!/usr/bin/env python3
# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the gqlgen CI checks locally: format, lint, tests, doctests and build.

Pass ``--fast`` to skip the package build step.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=gqlgen", "--cov-report=term-missing"]),
    (
        "Doctests",
        ["uv", "run", "pytest", "--doctest-modules", "src/gqlgen/compiler/mapper.py", "src/gqlgen/compiler/parser.py"],
    ),
    ("Build", ["uv", "build"]),
]

SLOW_STEPS = frozenset({"Build"})


def main(argv: list[str] | None = None) -> int:
    """Run the CI steps and print a summary; return 1 if any step failed."""
    args = sys.argv[1:] if argv is None else argv
    fast = "--fast" in args
    steps = [(name, cmd) for name, cmd in STEPS if not (fast and name in SLOW_STEPS)]

    results: list[tuple[str, bool, float]] = []
    for name, cmd in steps:
        _print_banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_banner("  Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())
