# SPDX-License-Identifier: MIT
"""The pre-release checks, in the order the gate runs them.

1. translation syntax: every translation file parses as a JSON object
2. translation coverage: locales missing baseline keys (warning)
3. static analysis: error-severity analyzer findings (failure)

Checks 1 and 2 are skipped when the project has no translations directory.
"""

from __future__ import annotations

import json
from pathlib import Path

from mobrel.collaborators.base import CoverageComparator, StaticAnalyzer
from mobrel.core.config import ValidationConfig
from mobrel.core.result import Err
from mobrel.core.structured import as_str_dict

from .base import CheckResult, ValidationCheck

__all__ = [
    "StaticAnalysisCheck",
    "TranslationCoverageCheck",
    "TranslationSyntaxCheck",
    "default_checks",
]

MAX_REPORTED_ERRORS = 5


class TranslationSyntaxCheck:
    """Parses every matching file; all files are checked before reporting."""

    name = "translation syntax"

    def __init__(self, directory: Path, *, file_glob: str = "*.json") -> None:
        self._dir = directory
        self._glob = file_glob

    def run(self) -> CheckResult:
        if not self._dir.is_dir():
            return CheckResult.skipped(self.name, f"no translations directory ({self._dir})")

        files = sorted(self._dir.glob(self._glob))
        problems: list[str] = []
        for path in files:
            problem = _parse_problem(path)
            if problem is not None:
                problems.append(f"{path.name}: {problem}")

        if problems:
            return CheckResult.failed(
                self.name,
                f"{len(problems)} file(s) have syntax errors",
                details=tuple(problems),
            )
        return CheckResult.passed(self.name, f"{len(files)} file(s) valid")


def _parse_problem(path: Path) -> str | None:
    try:
        obj: object = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return str(e)
    except (OSError, UnicodeDecodeError) as e:
        return f"unreadable ({e})"
    if as_str_dict(obj) is None:
        return "root must be a JSON object"
    return None


class TranslationCoverageCheck:
    name = "translation coverage"

    def __init__(self, directory: Path, comparator: CoverageComparator) -> None:
        self._dir = directory
        self._comparator = comparator

    def run(self) -> CheckResult:
        if not self._dir.is_dir():
            return CheckResult.skipped(self.name, f"no translations directory ({self._dir})")

        result = self._comparator.compare(self._dir)
        if isinstance(result, Err):
            error = result.error
            if error.unavailable:
                return CheckResult.skipped(
                    self.name, f"coverage checker unavailable: {error.message}", hint=error.hint
                )
            return CheckResult.warning(
                self.name,
                f"coverage check failed: {error.message}",
                details=tuple(error.output.splitlines()),
            )

        missing = {locale: n for locale, n in sorted(result.value.items()) if n > 0}
        total = sum(missing.values())
        if total == 0:
            return CheckResult.passed(self.name, "all locales have full key coverage")

        return CheckResult.warning(
            self.name,
            f"{total} missing key(s) across {len(missing)} locale(s)",
            details=tuple(f"{locale}: {n} missing" for locale, n in missing.items()),
        )


class StaticAnalysisCheck:
    """Fails on any error-severity finding; analyzer warnings never fail."""

    name = "static analysis"

    def __init__(self, project_root: Path, analyzer: StaticAnalyzer) -> None:
        self._root = project_root
        self._analyzer = analyzer

    def run(self) -> CheckResult:
        result = self._analyzer.analyze(self._root)
        if isinstance(result, Err):
            error = result.error
            return CheckResult.failed(
                self.name, f"static analysis could not run: {error.message}", hint=error.hint
            )

        report = result.value
        if report.error_count > 0:
            return CheckResult.failed(
                self.name,
                f"{report.error_count} error(s) found",
                details=report.errors[:MAX_REPORTED_ERRORS],
            )
        return CheckResult.passed(self.name, "no errors")


def default_checks(
    *,
    project_root: Path,
    config: ValidationConfig,
    comparator: CoverageComparator,
    analyzer: StaticAnalyzer,
) -> list[ValidationCheck]:
    translations = project_root / config.translations_dir
    return [
        TranslationSyntaxCheck(translations, file_glob=config.file_glob),
        TranslationCoverageCheck(translations, comparator),
        StaticAnalysisCheck(project_root, analyzer),
    ]
