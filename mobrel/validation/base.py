# SPDX-License-Identifier: MIT
"""Base types for pre-release checks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol


class CheckStatus(Enum):
    """Outcome of a single check."""

    PASS = auto()
    """Check passed."""

    SKIPPED = auto()
    """Check did not apply (nothing to check or its tool is unavailable)."""

    WARN = auto()
    """Issues found that the operator may accept for this run."""

    FAIL = auto()
    """Release must not proceed."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single check.

    Attributes:
        name: Check identifier (e.g. "static analysis")
        status: Outcome
        message: One-line summary
        details: Offending items (file names, locales, analyzer lines)
        hint: Optional fix suggestion
        confirmed: For WARN only; the operator's answer once asked
    """

    name: str
    status: CheckStatus
    message: str
    details: tuple[str, ...] = ()
    hint: str | None = None
    confirmed: bool | None = None

    @property
    def ok(self) -> bool:
        """True if this result does not block the release."""
        if self.status == CheckStatus.WARN:
            return self.confirmed is True
        return self.status != CheckStatus.FAIL

    @property
    def needs_confirmation(self) -> bool:
        return self.status == CheckStatus.WARN and self.confirmed is None

    def with_confirmation(self, answer: bool) -> CheckResult:
        return dataclasses.replace(self, confirmed=answer)

    @classmethod
    def passed(cls, name: str, message: str) -> CheckResult:
        return cls(name=name, status=CheckStatus.PASS, message=message)

    @classmethod
    def skipped(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.SKIPPED, message=message, hint=hint)

    @classmethod
    def warning(
        cls,
        name: str,
        message: str,
        details: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> CheckResult:
        return cls(name=name, status=CheckStatus.WARN, message=message, details=details, hint=hint)

    @classmethod
    def failed(
        cls,
        name: str,
        message: str,
        details: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> CheckResult:
        return cls(name=name, status=CheckStatus.FAIL, message=message, details=details, hint=hint)


class ValidationCheck(Protocol):
    name: str

    def run(self) -> CheckResult: ...
