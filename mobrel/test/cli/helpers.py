"""Shared CLI test context."""

from __future__ import annotations

from pathlib import Path

from mobrel.cli.context import CLIContext
from mobrel.core.config import ReleaseConfig, RunOptions
from mobrel.core.project import Project
from mobrel.output.console import MockConsole
from mobrel.platform.prompt import FixedConfirmer

PUBSPEC = "name: my_app\nversion: 1.13.0+31\n"


def make_ctx(
    tmp_path: Path,
    *,
    options: RunOptions | None = None,
    git: bool = True,
    answer: bool = True,
) -> CLIContext:
    (tmp_path / "pubspec.yaml").write_text(PUBSPEC, encoding="utf-8")
    return CLIContext(
        project=Project(root=tmp_path, name="my_app", git_root=tmp_path if git else None),
        config=ReleaseConfig().with_options(options or RunOptions()),
        console=MockConsole(),
        confirmer=FixedConfirmer(answer=answer),
        env={},
    )
