from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from mobrel.core.result import Err, Ok, Result

__all__ = [
    "BumpKind",
    "BumpPart",
    "Explicit",
    "FormatError",
    "VersionIdentifier",
    "bump",
    "parse_bump_kind",
    "parse_version",
]

EXPECTED_FORMAT = "MAJOR.MINOR.PATCH+BUILD (e.g. 1.14.0+31)"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)\+(\d+)$")

BumpPart = Literal["major", "minor", "patch", "build"]
BUMP_PARTS: tuple[BumpPart, ...] = ("major", "minor", "patch", "build")


@dataclass(frozen=True, slots=True)
class FormatError:
    message: str
    hint: str | None = f"expected {EXPECTED_FORMAT}"


@dataclass(frozen=True, slots=True, order=True)
class VersionIdentifier:
    """A ``major.minor.patch+build`` version as used by pubspec.yaml."""

    major: int
    minor: int
    patch: int
    build: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "build"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}+{self.build}"

    @property
    def release(self) -> str:
        """The version without its build number."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def tag(self, prefix: str = "v") -> str:
        return f"{prefix}{self}"


@dataclass(frozen=True, slots=True)
class Explicit:
    """Bump straight to ``version``; no ordering against the current one."""

    version: VersionIdentifier


type BumpKind = BumpPart | Explicit


def parse_version(text: str) -> Result[VersionIdentifier, FormatError]:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return Err(FormatError(f"invalid version: {text!r}"))
    major, minor, patch, build = (int(g) for g in m.groups())
    return Ok(VersionIdentifier(major, minor, patch, build))


def parse_bump_kind(text: str) -> Result[BumpKind, FormatError]:
    """Parse a CLI bump argument: a part name or a full explicit version."""
    value = text.strip()
    if value in BUMP_PARTS:
        return Ok(value)  # type: ignore[arg-type]

    parsed = parse_version(value)
    if isinstance(parsed, Err):
        return Err(
            FormatError(
                f"invalid bump type: {text!r}",
                hint=f"use major, minor, patch, build or {EXPECTED_FORMAT}",
            )
        )
    return Ok(Explicit(parsed.value))


def bump(current: VersionIdentifier, kind: BumpKind) -> VersionIdentifier:
    """Return the successor of ``current``; every semantic bump also bumps the build."""
    match kind:
        case "major":
            return VersionIdentifier(current.major + 1, 0, 0, current.build + 1)
        case "minor":
            return VersionIdentifier(current.major, current.minor + 1, 0, current.build + 1)
        case "patch":
            return VersionIdentifier(
                current.major, current.minor, current.patch + 1, current.build + 1
            )
        case "build":
            return VersionIdentifier(current.major, current.minor, current.patch, current.build + 1)
        case Explicit(version=version):
            return version
        case _:
            raise AssertionError(f"unexpected bump kind: {kind}")
