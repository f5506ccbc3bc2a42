"""Rendering changelog entries and merging them into CHANGELOG.md."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from mobrel.changelog.classifier import ChangelogBuckets
from mobrel.core.result import Err, Ok, Result
from mobrel.version.identifier import VersionIdentifier

__all__ = [
    "ChangelogEntry",
    "NoInsertionPoint",
    "TAG_MESSAGE_MAX_LINES",
    "merge",
    "render",
    "tag_message",
]

TAG_MESSAGE_MAX_LINES = 20


@dataclass(frozen=True, slots=True)
class NoInsertionPoint:
    message: str = "changelog has no top-level '# ' heading to insert after"
    hint: str | None = "add a title line such as '# Changelog'"


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    version: VersionIdentifier
    date: date
    buckets: ChangelogBuckets

    @property
    def heading(self) -> str:
        return f"## [{self.version}] - {self.date.isoformat()}"


def render(entry: ChangelogEntry) -> str:
    """Render ``entry`` as a markdown block ending in a newline.

    Example:
        ## [1.13.1+32] - 2026-03-01

        ### Added
        - add login
    """
    lines = [entry.heading]
    for section, items in entry.buckets.sections():
        lines.append("")
        lines.append(f"### {section.value}")
        lines.extend(f"- {item}" for item in items)
    return "\n".join(lines) + "\n"


def merge(document: str, rendered: str) -> Result[str, NoInsertionPoint]:
    """Insert ``rendered`` right after the first ``# `` heading of ``document``.

    Everything else is kept byte-identical. A version that is already present
    is not detected; merging it again adds a second heading.
    """
    lines = document.splitlines(keepends=True)
    for index, line in enumerate(lines):
        if not line.startswith("# "):
            continue

        heading = line if line.endswith("\n") else line + "\n"
        block = "\n" + rendered + "\n"
        return Ok("".join(lines[:index]) + heading + block + "".join(lines[index + 1 :]))

    return Err(NoInsertionPoint())


def tag_message(entry: ChangelogEntry, *, tag: str) -> str:
    """Annotated-tag message: a title plus the entry's non-blank body lines."""
    body = [
        line
        for line in render(entry).splitlines()
        if line.strip() and line != entry.heading
    ][:TAG_MESSAGE_MAX_LINES]
    if not body:
        return f"Release {tag}"
    return f"Release {tag}\n\n" + "\n".join(body)
