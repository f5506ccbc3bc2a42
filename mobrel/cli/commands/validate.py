"""Validate command - run the pre-release checks on their own."""

from __future__ import annotations

from pathlib import Path

import typer

from mobrel.cli.commands._helpers import exit_with_code, project_checks
from mobrel.cli.context import build_context
from mobrel.core.config import RunOptions
from mobrel.core.errors import ErrorCode
from mobrel.validation import ValidationGate


def validate(
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept warnings without prompting"),
    project: Path | None = typer.Option(
        None, "--project", help="Project directory (default: auto-detect)", show_default=False
    ),
) -> None:
    """Run translation and static-analysis checks."""
    ctx = build_context(project_dir=project, options=RunOptions(assume_yes=yes))

    ctx.console.header("Pre-release validation")
    report = ValidationGate(
        project_checks(ctx.project.root, ctx.config),
        confirmer=ctx.confirmer,
        console=ctx.console,
    ).run()

    if not report.passed:
        names = ", ".join(r.name for r in report.blocking)
        ctx.console.error(f"validation failed: {names}")
        exit_with_code(int(ErrorCode.VALIDATION_ERROR))

    ctx.console.success("all validation checks passed")
