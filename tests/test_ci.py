"""Tests for the local CI command list."""

from biteparse.ci import build_commands


def test_build_commands_installs_first() -> None:
    commands = build_commands("python")

    assert commands[0] == ["python", "-m", "pip", "install", "-e", ".[dev]"]
    assert [c[2] for c in commands[1:]] == ["ruff", "black", "mypy", "pytest"]
    assert "--cov=src/biteparse" in commands[-1]


def test_build_commands_skip_install() -> None:
    commands = build_commands("python", skip_install=True)

    assert all("pip" not in command for command in commands)


def test_build_commands_tests_only() -> None:
    commands = build_commands("python", skip_install=True, tests_only=True)

    assert commands == [
        ["python", "-m", "pytest", "--cov=src/biteparse", "--cov-report=term-missing"]
    ]
