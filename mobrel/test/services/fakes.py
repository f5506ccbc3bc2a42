"""In-memory git repository for service and CLI tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.git.repository import GitError


@dataclass
class FakeRepository:
    last_tag: str | None = "v1.13.0+31"
    subjects: list[str] = field(default_factory=lambda: ["feat(auth): add login", "fix: crash"])
    existing_tags: set[str] = field(default_factory=set)
    history_error: GitError | None = None
    commit_error: GitError | None = None
    commits: list[tuple[list[Path], str]] = field(default_factory=list)
    tags: list[tuple[str, str]] = field(default_factory=list)
    pushed_tags: list[str] = field(default_factory=list)
    pushes: int = 0

    def last_version_tag(self) -> Result[str | None, GitError]:
        if self.history_error is not None:
            return Err(self.history_error)
        return Ok(self.last_tag)

    def commit_subjects(self, *, since: str | None, window: int) -> Result[list[str], GitError]:
        return Ok(self.subjects)

    def tag_exists(self, tag: str) -> bool:
        return tag in self.existing_tags

    def commit_files(self, paths: list[Path], *, message: str) -> Result[None, GitError]:
        if self.commit_error is not None:
            return Err(self.commit_error)
        self.commits.append((paths, message))
        return Ok(None)

    def create_annotated_tag(self, tag: str, *, message: str) -> Result[None, GitError]:
        self.tags.append((tag, message))
        return Ok(None)

    def push_tag(self, tag: str, *, remote: str = "origin") -> Result[None, GitError]:
        self.pushed_tags.append(tag)
        return Ok(None)

    def push(self) -> Result[None, GitError]:
        self.pushes += 1
        return Ok(None)

