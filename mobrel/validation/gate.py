"""Pre-release validation gate.

Runs checks in order, asks the operator about each warning, and reduces
the results to a single go/no-go. Every check runs even after a failure so
the report lists everything that needs fixing.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mobrel.output.console import ConsoleProtocol, Style
from mobrel.platform.prompt import Confirmer

from .base import CheckResult, CheckStatus, ValidationCheck

__all__ = ["ValidationGate", "ValidationReport"]


@dataclass(frozen=True, slots=True)
class ValidationReport:
    results: tuple[CheckResult, ...]

    @property
    def passed(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def blocking(self) -> tuple[CheckResult, ...]:
        """Failed checks and declined warnings."""
        return tuple(r for r in self.results if not r.ok)


class ValidationGate:
    def __init__(
        self,
        checks: Sequence[ValidationCheck],
        *,
        confirmer: Confirmer,
        console: ConsoleProtocol,
    ) -> None:
        self._checks = tuple(checks)
        self._confirmer = confirmer
        self._console = console

    def run(self) -> ValidationReport:
        results: list[CheckResult] = []
        for check in self._checks:
            result = check.run()
            self._print(result)
            if result.needs_confirmation:
                answer = self._confirmer.confirm(
                    f"Proceed with release despite {result.name} issues?"
                )
                result = result.with_confirmation(answer)
                if answer:
                    self._console.print(f"proceeding despite {result.name} issues", Style.DIM)
                else:
                    self._console.error(f"release blocked by {result.name} issues")
            results.append(result)
        return ValidationReport(results=tuple(results))

    def _print(self, result: CheckResult) -> None:
        line = f"{result.name}: {result.message}"
        match result.status:
            case CheckStatus.PASS:
                self._console.success(line)
            case CheckStatus.SKIPPED:
                self._console.print(f"{line} (skipped)", Style.DIM)
            case CheckStatus.WARN:
                self._console.warning(line)
            case CheckStatus.FAIL:
                self._console.error(line)

        for detail in result.details:
            self._console.print(f"  {detail}", Style.DIM)
        if result.hint and result.status != CheckStatus.PASS:
            self._console.print(f"hint: {result.hint}", Style.DIM)
