"""Tests for mobrel.collaborators.flutter."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest

import mobrel.collaborators.flutter as flutter
from mobrel.collaborators import FlutterAnalyzer, FlutterBuilder, Platform, artifact_dir
from mobrel.core.result import Err, Ok, Result
from mobrel.platform.process import ProcessError


class FakeRun:
    def __init__(self, result: Result[str, ProcessError]) -> None:
        self.result = result
        self.calls: list[list[str]] = []

    def __call__(
        self,
        cmd: list[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        self.calls.append(cmd)
        return self.result


def _install(monkeypatch: pytest.MonkeyPatch, result: Result[str, ProcessError]) -> FakeRun:
    fake = FakeRun(result)
    monkeypatch.setattr(flutter, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(flutter, "run_process", fake)
    return fake


class TestFlutterBuilder:
    def test_flutter_missing(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(flutter, "which", lambda name: None)

        result = FlutterBuilder(tmp_path).build(Platform.IOS)

        assert isinstance(result, Err)
        assert result.error.unavailable

    def test_ios_finds_ipa(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        fake = _install(monkeypatch, Ok(""))
        out = artifact_dir(tmp_path, Platform.IOS)
        out.mkdir(parents=True)
        (out / "Runner.ipa").write_bytes(b"")

        result = FlutterBuilder(tmp_path).build(Platform.IOS)

        assert result == Ok(out / "Runner.ipa")
        assert fake.calls == [["flutter", "build", "ipa"]]

    def test_android_falls_back_to_directory(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        fake = _install(monkeypatch, Ok(""))
        out = artifact_dir(tmp_path, Platform.ANDROID)
        out.mkdir(parents=True)

        result = FlutterBuilder(tmp_path).build(Platform.ANDROID)

        assert result == Ok(out)
        assert fake.calls == [["flutter", "build", "appbundle", "--release"]]

    def test_no_artifact(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _install(monkeypatch, Ok(""))

        result = FlutterBuilder(tmp_path).build(Platform.IOS)

        assert isinstance(result, Err)
        assert result.error.kind == "failed"
        assert "no artifact" in result.error.message

    def test_build_failure_keeps_output_tail(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        lines = "\n".join(f"line {i}" for i in range(40))
        _install(monkeypatch, Err(ProcessError(("flutter",), 1, lines, "")))

        result = FlutterBuilder(tmp_path).build(Platform.ANDROID)

        assert isinstance(result, Err)
        assert result.error.kind == "failed"
        output = result.error.output.splitlines()
        assert len(output) == 15
        assert output[-1] == "line 39"


ANALYZE_OUTPUT = """\
Analyzing my_app...

   info - Prefer const constructors - lib/main.dart:3:5 - prefer_const_constructors
warning - Unused import - lib/a.dart:1:8 - unused_import
  error - Undefined name 'foo' - lib/b.dart:10:3 - undefined_identifier
  error • Missing return - lib/c.dart:4:1 • missing_return

4 issues found.
"""


class TestFlutterAnalyzer:
    def test_counts_only_errors(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _install(monkeypatch, Err(ProcessError(("flutter", "analyze"), 1, ANALYZE_OUTPUT, "")))

        result = FlutterAnalyzer().analyze(tmp_path)

        assert isinstance(result, Ok)
        assert result.value.error_count == 2
        assert result.value.errors[0].startswith("error - Undefined name")

    def test_clean(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _install(monkeypatch, Ok("Analyzing my_app...\nNo issues found!\n"))

        result = FlutterAnalyzer().analyze(tmp_path)

        assert isinstance(result, Ok)
        assert result.value.error_count == 0

    def test_flutter_missing(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(flutter, "which", lambda name: None)

        result = FlutterAnalyzer().analyze(tmp_path)

        assert isinstance(result, Err)
        assert result.error.unavailable

    def test_not_started(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        _install(monkeypatch, Err(ProcessError(("flutter",), -1, "", "No such file")))

        result = FlutterAnalyzer().analyze(tmp_path)

        assert isinstance(result, Err)
        assert result.error.unavailable
