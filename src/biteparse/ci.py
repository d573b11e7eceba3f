"""Local CI runner: lint, format check, type check and tests with coverage."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

PACKAGE_DIR = "src/biteparse"


def _run(command: list[str], cwd: Path) -> None:
    print("+", " ".join(command), flush=True)
    subprocess.run(command, check=True, cwd=cwd)


def build_commands(
    python: str, skip_install: bool = False, tests_only: bool = False
) -> list[list[str]]:
    """Commands in run order; the first failure stops the run."""
    commands: list[list[str]] = []
    if not skip_install:
        commands.append([python, "-m", "pip", "install", "-e", ".[dev]"])
    if not tests_only:
        commands.append([python, "-m", "ruff", "check", "src", "tests"])
        commands.append([python, "-m", "black", "--check", "src", "tests"])
        commands.append([python, "-m", "mypy", "src"])
    commands.append(
        [python, "-m", "pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing"]
    )
    return commands


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="biteparse-ci")
    parser.add_argument("--skip-install", action="store_true", help="Assume dev deps are present.")
    parser.add_argument("--tests-only", action="store_true", help="Run pytest without linters.")
    args = parser.parse_args(argv)

    cwd = Path.cwd()
    for command in build_commands(sys.executable, args.skip_install, args.tests_only):
        try:
            _run(command, cwd)
        except subprocess.CalledProcessError as exc:
            return exc.returncode
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
