"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

import typer

from mobrel.collaborators import FlutterAnalyzer, JsonKeyCoverage
from mobrel.core.config import ReleaseConfig
from mobrel.output.console import ConsoleProtocol
from mobrel.validation import ValidationCheck, default_checks


def project_checks(project_root: Path, config: ReleaseConfig) -> list[ValidationCheck]:
    """The pre-release checks with the default comparator and analyzer."""
    validation = config.validation
    return default_checks(
        project_root=project_root,
        config=validation,
        comparator=JsonKeyCoverage(
            baseline_locale=validation.baseline_locale,
            file_glob=validation.file_glob,
        ),
        analyzer=FlutterAnalyzer(),
    )


def print_steps(console: ConsoleProtocol, title: str, steps: Sequence[str]) -> None:
    if not steps:
        return
    console.newline()
    console.header(title)
    for number, step in enumerate(steps, start=1):
        console.print(f"{number}. {step}")


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
