# SPDX-License-Identifier: MIT
"""Contracts for the external tools the release flow delegates to.

Every collaborator answers with ``Result``: ``Ok`` carries the useful
output, ``Err(CollaboratorError)`` says whether the tool is simply not
available (``kind="unavailable"``) or ran and failed (``kind="failed"``).
Callers decide what each kind means; an unavailable uploader degrades a
release track to a manual step, a failed build fails it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, Protocol

from mobrel.core.result import Result
from mobrel.version.identifier import VersionIdentifier

__all__ = [
    "AnalysisReport",
    "ArtifactBuilder",
    "ArtifactUploader",
    "CollaboratorError",
    "CoverageComparator",
    "Credentials",
    "Platform",
    "ReviewSubmitter",
    "StaticAnalyzer",
]

Credentials = Mapping[str, str]


class Platform(Enum):
    """Release platforms, in the order their tracks run."""

    IOS = "iOS"
    ANDROID = "Android"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CollaboratorError:
    kind: Literal["unavailable", "failed"]
    message: str
    output: str = ""
    hint: str | None = None

    @property
    def unavailable(self) -> bool:
        return self.kind == "unavailable"

    @classmethod
    def missing(cls, message: str, hint: str | None = None) -> CollaboratorError:
        return cls(kind="unavailable", message=message, hint=hint)

    @classmethod
    def failure(cls, message: str, output: str = "", hint: str | None = None) -> CollaboratorError:
        return cls(kind="failed", message=message, output=output, hint=hint)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Error-severity findings from a static analyzer; warnings are not counted."""

    error_count: int
    errors: tuple[str, ...] = ()


class ArtifactBuilder(Protocol):
    def build(self, platform: Platform) -> Result[Path, CollaboratorError]:
        """Build the store artifact and return its path."""
        ...


class ArtifactUploader(Protocol):
    def upload(
        self,
        platform: Platform,
        artifact: Path,
        credentials: Credentials,
        *,
        version: VersionIdentifier,
    ) -> Result[str, CollaboratorError]: ...


class ReviewSubmitter(Protocol):
    def submit(
        self,
        platform: Platform,
        version: VersionIdentifier,
        project_root: Path,
    ) -> Result[str, CollaboratorError]: ...


class CoverageComparator(Protocol):
    def compare(self, translations_dir: Path) -> Result[dict[str, int], CollaboratorError]:
        """Missing-key counts per locale, relative to a baseline locale."""
        ...


class StaticAnalyzer(Protocol):
    def analyze(self, project_root: Path) -> Result[AnalysisReport, CollaboratorError]: ...
