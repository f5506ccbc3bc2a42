"""Bump command - advance the version, update the changelog, optionally release."""

from __future__ import annotations

from pathlib import Path

import typer

from mobrel.cli.commands._helpers import exit_with_code, print_steps, project_checks
from mobrel.cli.context import build_context
from mobrel.core.config import RunOptions
from mobrel.core.errors import ErrorCode
from mobrel.core.result import Err
from mobrel.output.console import ConsoleProtocol, Style
from mobrel.output.errors import bump_error_exit_code, print_bump_error
from mobrel.release import ReleaseReport, TrackOutcome, default_tracks
from mobrel.services.bump import BumpService
from mobrel.version import parse_bump_kind


def bump(
    kind: str = typer.Argument(..., help="major, minor, patch, build or X.Y.Z+B"),
    release: bool = typer.Option(
        False, "--release", help="Build and upload after the bump (creates a tag)"
    ),
    skip_ios: bool = typer.Option(False, "--skip-ios", help="Skip the iOS track"),
    skip_android: bool = typer.Option(False, "--skip-android", help="Skip the Android track"),
    skip_submit: bool = typer.Option(
        False, "--skip-submit", help="Upload to App Store Connect without submitting for review"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview changes without modifying"),
    no_tag: bool = typer.Option(False, "--no-tag", help="Skip git tag creation"),
    push_tag: bool = typer.Option(False, "--push-tag", help="Create and push the git tag"),
    commit: bool = typer.Option(False, "--commit", help="Commit the version changes"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Answer yes to every confirmation"),
    project: Path | None = typer.Option(
        None, "--project", help="Project directory (default: auto-detect)", show_default=False
    ),
) -> None:
    """Bump the app version."""
    parsed = parse_bump_kind(kind)
    if isinstance(parsed, Err):
        typer.echo(f"error: {parsed.error.message}", err=True)
        if parsed.error.hint:
            typer.echo(f"hint: {parsed.error.hint}", err=True)
        exit_with_code(int(ErrorCode.USER_ERROR))

    options = RunOptions(
        release=release,
        dry_run=dry_run,
        skip_ios=skip_ios,
        skip_android=skip_android,
        skip_submit=skip_submit,
        create_tag=(not no_tag) or push_tag or release,
        push_tag=push_tag,
        auto_commit=commit,
        assume_yes=yes,
    )
    ctx = build_context(project_dir=project, options=options)
    console = ctx.console

    if dry_run:
        console.preview("no files will be modified")

    service = BumpService(
        project=ctx.project,
        config=ctx.config,
        console=console,
        confirmer=ctx.confirmer,
        checks=project_checks(ctx.project.root, ctx.config) if release else (),
        tracks=(
            default_tracks(config=ctx.config, project_root=ctx.project.root, base_env=ctx.env)
            if release
            else ()
        ),
    )

    result = service.run(parsed.value)
    if isinstance(result, Err):
        print_bump_error(result.error, console)
        exit_with_code(bump_error_exit_code(result.error))

    outcome = result.value
    if dry_run:
        console.newline()
        console.success(f"dry run complete: {outcome.previous} -> {outcome.version}")
        return

    if outcome.release is None:
        console.newline()
        console.success(f"version bump complete: {outcome.version}")
        print_steps(console, "Next steps", outcome.next_steps)
        console.print(f"or run the full release: mobrel bump {kind} --release", Style.DIM)
        return

    _print_release_summary(outcome.release, console)
    if outcome.release.failed:
        exit_with_code(int(ErrorCode.RELEASE_ERROR))


def _print_release_summary(release: ReleaseReport, console: ConsoleProtocol) -> None:
    console.newline()
    console.header("Release summary")
    for stage in release.stages:
        if stage.skipped:
            console.print(f"{stage.platform}: skipped", Style.DIM)
            continue
        match stage.outcome:
            case TrackOutcome.SUCCEEDED:
                console.success(f"{stage.platform}: uploaded")
            case TrackOutcome.MANUAL:
                console.warning(f"{stage.platform}: manual upload needed ({stage.artifact})")
            case TrackOutcome.FAILED:
                console.error(f"{stage.platform}: {stage.reason}")
            case TrackOutcome.NOT_RUN:
                console.print(f"{stage.platform}: not run", Style.DIM)

    if release.follow_ups:
        print_steps(console, "Next steps", release.follow_ups)
    else:
        console.success("all done: both stores handled, commits and tag pushed")
