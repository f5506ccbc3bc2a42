"""Git plumbing used by the release flow.

``Repository`` wraps the handful of git commands the tool needs: finding
the last version tag, listing commit subjects, committing the bumped files,
tagging and pushing. All methods that can fail return Result types.

Usage:
    repo = Repository(git_root)
    match repo.commit_subjects(since="v1.2.0+4", window=20):
        case Ok(subjects):
            ...
        case Err(e):
            print(e.message)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.platform.process import ProcessError
from mobrel.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

VERSION_TAG_RE = re.compile(r"^v?\d+\.\d+\.\d+")

__all__ = ["GitError", "Repository", "VERSION_TAG_RE", "find_git_root"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def find_git_root(start: Path) -> Path | None:
    """Nearest directory at or above ``start`` that contains ``.git``."""
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


class Repository:
    """A git working tree.

    Attributes:
        path: Repository root (containing .git)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def last_version_tag(self) -> Result[str | None, GitError]:
        """Highest version-sorted tag that looks like ``[v]X.Y.Z...``."""
        result = self._git("tag", ["tag", "--sort=-v:refname"])
        if isinstance(result, Err):
            return result
        for line in result.value.splitlines():
            tag = line.strip()
            if VERSION_TAG_RE.match(tag):
                return Ok(tag)
        return Ok(None)

    def commit_subjects(
        self, *, since: str | None, window: int
    ) -> Result[list[str], GitError]:
        """Non-merge commit subjects, newest first.

        With ``since`` set, returns everything in ``since..HEAD``; otherwise the
        ``window`` most recent commits.
        """
        args = ["log", "--pretty=format:%s", "--no-merges"]
        if since is not None:
            args.insert(1, f"{since}..HEAD")
        else:
            args.append(f"--max-count={window}")

        result = self._git("log", args)
        if isinstance(result, Err):
            return result
        return Ok([line for line in result.value.splitlines() if line.strip()])

    def tag_exists(self, tag: str) -> bool:
        result = self._git("rev-parse", ["rev-parse", "--verify", "--quiet", f"refs/tags/{tag}"])
        return isinstance(result, Ok)

    def commit_files(self, paths: list[Path], *, message: str) -> Result[None, GitError]:
        add = self._git("add", ["add", "--", *(str(p) for p in paths)])
        if isinstance(add, Err):
            return add
        commit = self._git("commit", ["commit", "-m", message])
        if isinstance(commit, Err):
            return commit
        return Ok(None)

    def create_annotated_tag(self, tag: str, *, message: str) -> Result[None, GitError]:
        result = self._git("tag", ["tag", "-a", tag, "-m", message])
        if isinstance(result, Err):
            return result
        return Ok(None)

    def push_tag(self, tag: str, *, remote: str = "origin") -> Result[None, GitError]:
        result = self._git("push", ["push", remote, tag], timeout=_GIT_NETWORK_TIMEOUT_SECONDS)
        if isinstance(result, Err):
            return result
        return Ok(None)

    def push(self) -> Result[None, GitError]:
        result = self._git("push", ["push"], timeout=_GIT_NETWORK_TIMEOUT_SECONDS)
        if isinstance(result, Err):
            return result
        return Ok(None)

    def _git(
        self,
        command: str,
        args: list[str],
        *,
        timeout: float = _GIT_TIMEOUT_SECONDS,
    ) -> Result[str, GitError]:
        result = run_process(["git", *args], cwd=self.path, timeout=timeout)
        match result:
            case Ok(stdout):
                return Ok(stdout)
            case Err(e):
                return Err(_to_git_error(command, e))


def _to_git_error(command: str, error: ProcessError) -> GitError:
    message = error.stderr.strip() or error.stdout.strip() or f"git {command} failed"
    return GitError(command=command, message=message, returncode=error.returncode)
