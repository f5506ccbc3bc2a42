from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from mobrel.core.config import ReleaseConfig, RunOptions, load_config
from mobrel.core.errors import ErrorCode
from mobrel.core.project import Project, detect_project
from mobrel.core.result import Err
from mobrel.output.console import ConsoleProtocol, RichConsole
from mobrel.platform.prompt import Confirmer, FixedConfirmer, TerminalConfirmer


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: ReleaseConfig
    console: ConsoleProtocol
    confirmer: Confirmer
    env: Mapping[str, str]


def build_context(
    *,
    project_dir: Path | None = None,
    options: RunOptions | None = None,
) -> CLIContext:
    """Resolve the project, configuration and terminal capabilities.

    This is the only place the process environment is read.
    """
    project_result = detect_project(project_dir)
    if isinstance(project_result, Err):
        e = project_result.error
        typer.echo(f"error: {e.message}", err=True)
        if e.searched_from is not None:
            typer.echo(f"searched from: {e.searched_from}", err=True)
        if e.hint:
            typer.echo(f"hint: {e.hint}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    project = project_result.value
    env = dict(os.environ)

    config_result = load_config(project.config_path, env=env, options=options)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    config = config_result.value

    confirmer: Confirmer = (
        FixedConfirmer(answer=True) if config.options.assume_yes else TerminalConfirmer()
    )

    return CLIContext(
        project=project,
        config=config,
        console=RichConsole(),
        confirmer=confirmer,
        env=env,
    )
