"""Flutter project discovery.

A project is the directory holding ``pubspec.yaml``. Discovery walks up from
the starting directory, also probing the ``mobile/``, ``app/`` and
``flutter/`` subdirectories at each level, since many repos keep the app
next to a backend.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from mobrel.git.repository import find_git_root

from .config import CONFIG_FILE_NAME
from .result import Err, Ok, Result

__all__ = ["Project", "ProjectError", "detect_project", "PUBSPEC"]

PUBSPEC = "pubspec.yaml"
PROJECT_SUBDIRS = ("mobile", "app", "flutter")

_NAME_RE = re.compile(r"^name:[ \t]*(?P<name>\S+)", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class ProjectError:
    message: str
    searched_from: Path | None = None
    hint: str | None = "run inside a Flutter project or pass --project"


@dataclass(frozen=True, slots=True)
class Project:
    """A detected Flutter project.

    ``git_root`` may be an ancestor of ``root`` (app inside a monorepo) or
    None when the project is not under version control.
    """

    root: Path
    name: str
    git_root: Path | None = None

    @property
    def pubspec(self) -> Path:
        return self.root / PUBSPEC

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    def changelog_path(self, file_name: str) -> Path | None:
        """The changelog lives at the git root; without git there is none."""
        if self.git_root is None:
            return None
        return self.git_root / file_name


def _find_pubspec_dir(start: Path) -> Path | None:
    for candidate in (start, *start.parents):
        if (candidate / PUBSPEC).is_file():
            return candidate
        for sub in PROJECT_SUBDIRS:
            if (candidate / sub / PUBSPEC).is_file():
                return candidate / sub
    return None


def _read_name(pubspec: Path) -> str:
    try:
        text = pubspec.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return pubspec.parent.name
    m = _NAME_RE.search(text)
    return m.group("name").strip("'\"") if m else pubspec.parent.name


def detect_project(start: Path | None = None) -> Result[Project, ProjectError]:
    """Locate the project enclosing ``start`` (default: the current directory)."""
    origin = (start or Path.cwd()).expanduser().resolve()
    root = _find_pubspec_dir(origin)
    if root is None:
        return Err(ProjectError(f"could not find {PUBSPEC}", searched_from=origin))

    return Ok(Project(root=root, name=_read_name(root / PUBSPEC), git_root=find_git_root(root)))
