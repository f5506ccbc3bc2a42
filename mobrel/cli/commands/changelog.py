"""Changelog command - preview the next changelog section."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import typer

from mobrel.cli.commands._helpers import exit_with_code
from mobrel.cli.context import build_context
from mobrel.core.errors import ErrorCode
from mobrel.core.result import Err
from mobrel.git import Repository
from mobrel.output.console import Style
from mobrel.output.errors import bump_error_exit_code, print_bump_error
from mobrel.services.bump import BumpService
from mobrel.services.changelog import collect_entry, print_preview
from mobrel.version import parse_version


def changelog(
    version: str | None = typer.Option(
        None,
        "--version",
        help="Version for the heading (default: the current pubspec version)",
        show_default=False,
    ),
    project: Path | None = typer.Option(
        None, "--project", help="Project directory (default: auto-detect)", show_default=False
    ),
) -> None:
    """Show the changelog section generated from recent commits."""
    ctx = build_context(project_dir=project)
    console = ctx.console

    if ctx.project.git_root is None:
        console.error("not a git repository; no commit history to read")
        exit_with_code(int(ErrorCode.ENV_ERROR))

    if version is not None:
        parsed = parse_version(version)
        if isinstance(parsed, Err):
            console.error(parsed.error.message)
            if parsed.error.hint:
                console.print(f"hint: {parsed.error.hint}", Style.DIM)
            exit_with_code(int(ErrorCode.USER_ERROR))
        target = parsed.value
    else:
        current = BumpService(
            project=ctx.project,
            config=ctx.config,
            console=console,
            confirmer=ctx.confirmer,
        ).current_version()
        if isinstance(current, Err):
            print_bump_error(current.error, console)
            exit_with_code(bump_error_exit_code(current.error))
        target = current.value

    entry = collect_entry(
        repo=Repository(ctx.project.git_root),
        version=target,
        config=ctx.config.changelog,
        today=date.today(),
        console=console,
    )
    if isinstance(entry, Err):
        console.error(f"git {entry.error.command} failed: {entry.error.message}")
        exit_with_code(int(ErrorCode.ENV_ERROR))

    if entry.value.buckets.is_empty:
        console.print("no categorized commits found", Style.DIM)
        return
    print_preview(entry.value, console)
