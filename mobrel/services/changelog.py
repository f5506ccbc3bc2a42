from __future__ import annotations

from datetime import date
from pathlib import Path

from mobrel.changelog.classifier import classify
from mobrel.changelog.document import ChangelogEntry, NoInsertionPoint, merge, render
from mobrel.core.config import ChangelogConfig
from mobrel.core.result import Err, Ok, Result
from mobrel.git.repository import GitError, Repository
from mobrel.output.console import ConsoleProtocol, Style
from mobrel.platform.files import atomic_write_text
from mobrel.version.identifier import VersionIdentifier

PREVIEW_MAX_LINES = 20


def collect_entry(
    *,
    repo: Repository,
    version: VersionIdentifier,
    config: ChangelogConfig,
    today: date,
    console: ConsoleProtocol,
) -> Result[ChangelogEntry, GitError]:
    """Classify commits since the last version tag (or a recent window)."""
    last_tag = repo.last_version_tag()
    if isinstance(last_tag, Err):
        return last_tag

    if last_tag.value is not None:
        console.print(f"last release: {last_tag.value}", Style.DIM)
    else:
        console.print(
            f"no previous version tag found, using the last {config.commit_window} commits",
            Style.WARNING,
        )

    subjects = repo.commit_subjects(since=last_tag.value, window=config.commit_window)
    if isinstance(subjects, Err):
        return subjects

    return Ok(ChangelogEntry(version=version, date=today, buckets=classify(subjects.value)))


def print_preview(entry: ChangelogEntry, console: ConsoleProtocol) -> None:
    console.header("Changelog preview")
    for line in render(entry).splitlines()[:PREVIEW_MAX_LINES]:
        console.print(line)


def update_changelog_file(path: Path, entry: ChangelogEntry) -> Result[None, NoInsertionPoint]:
    """Merge ``entry`` into the changelog at ``path``.

    Raises:
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    merged = merge(path.read_text(encoding="utf-8"), render(entry))
    if isinstance(merged, Err):
        return merged
    atomic_write_text(path, merged.value)
    return Ok(None)
