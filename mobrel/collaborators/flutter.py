# SPDX-License-Identifier: MIT
"""Flutter SDK collaborators: artifact builds and ``flutter analyze``."""

from __future__ import annotations

import re
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.platform.process import run as run_process
from mobrel.platform.process import which

from .base import AnalysisReport, CollaboratorError, Platform

__all__ = ["FlutterAnalyzer", "FlutterBuilder", "artifact_dir"]

_OUTPUT_TAIL_LINES = 15

_BUILD_COMMANDS: dict[Platform, list[str]] = {
    Platform.IOS: ["flutter", "build", "ipa"],
    Platform.ANDROID: ["flutter", "build", "appbundle", "--release"],
}

_ARTIFACT_DIRS: dict[Platform, tuple[str, ...]] = {
    Platform.IOS: ("build", "ios", "ipa"),
    Platform.ANDROID: ("build", "app", "outputs", "bundle", "release"),
}

_ARTIFACT_GLOBS: dict[Platform, str] = {
    Platform.IOS: "*.ipa",
    Platform.ANDROID: "*.aab",
}

_ANALYZE_ERROR_RE = re.compile(r"^\s*error\s+[•-]\s")

_FLUTTER_HINT = "install the Flutter SDK and make sure `flutter` is on PATH"


def artifact_dir(project_root: Path, platform: Platform) -> Path:
    return project_root.joinpath(*_ARTIFACT_DIRS[platform])


def _tail(text: str) -> str:
    return "\n".join(text.strip().splitlines()[-_OUTPUT_TAIL_LINES:])


class FlutterBuilder:
    """Builds the IPA / app bundle with the Flutter CLI."""

    def __init__(self, project_root: Path) -> None:
        self._root = project_root

    def build(self, platform: Platform) -> Result[Path, CollaboratorError]:
        if which("flutter") is None:
            return Err(CollaboratorError.missing("flutter not found", hint=_FLUTTER_HINT))

        cmd = _BUILD_COMMANDS[platform]
        result = run_process(cmd, cwd=self._root)
        if isinstance(result, Err):
            e = result.error
            return Err(CollaboratorError.failure(f"{' '.join(cmd)} failed", output=_tail(e.output)))

        return self._locate_artifact(platform)

    def _locate_artifact(self, platform: Platform) -> Result[Path, CollaboratorError]:
        out_dir = artifact_dir(self._root, platform)
        matches = sorted(out_dir.glob(_ARTIFACT_GLOBS[platform])) if out_dir.is_dir() else []
        if matches:
            return Ok(matches[0])
        if platform == Platform.ANDROID and out_dir.is_dir():
            return Ok(out_dir)
        return Err(CollaboratorError.failure(f"build produced no artifact in {out_dir}"))


class FlutterAnalyzer:
    """Runs ``flutter analyze`` and keeps only error-severity findings."""

    def analyze(self, project_root: Path) -> Result[AnalysisReport, CollaboratorError]:
        if which("flutter") is None:
            return Err(CollaboratorError.missing("flutter not found", hint=_FLUTTER_HINT))

        # analyze exits non-zero whenever it reports anything, warnings included.
        result = run_process(["flutter", "analyze"], cwd=project_root)
        match result:
            case Ok(stdout):
                output = stdout
            case Err(e):
                if e.not_started:
                    return Err(CollaboratorError.missing(e.stderr, hint=_FLUTTER_HINT))
                output = e.output

        errors = tuple(
            line.strip() for line in output.splitlines() if _ANALYZE_ERROR_RE.match(line)
        )
        return Ok(AnalysisReport(error_count=len(errors), errors=errors))
