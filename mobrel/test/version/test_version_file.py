"""Tests for mobrel.version.version_file module."""

from __future__ import annotations

from pathlib import Path

from mobrel.core.result import Err, Ok
from mobrel.version.version_file import read_version, write_version

PUBSPEC = """\
name: my_app
description: A Flutter app.
# version: 0.0.1+1 is commented out here
version: 1.13.0+31

environment:
  sdk: ">=3.0.0 <4.0.0"
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pubspec.yaml"
    path.write_bytes(text.encode("utf-8"))
    return path


class TestReadVersion:
    def test_reads_version_line(self, tmp_path: Path) -> None:
        assert read_version(_write(tmp_path, PUBSPEC)) == Ok("1.13.0+31")

    def test_strips_quotes(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'name: a\nversion: "1.0.0+1"\n')
        assert read_version(path) == Ok("1.0.0+1")

    def test_crlf(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: a\r\nversion: 1.0.0+1\r\n")
        assert read_version(path) == Ok("1.0.0+1")

    def test_missing_line(self, tmp_path: Path) -> None:
        result = read_version(_write(tmp_path, "name: a\n"))
        assert isinstance(result, Err)
        assert "could not read version" in result.error.message

    def test_missing_file(self, tmp_path: Path) -> None:
        result = read_version(tmp_path / "pubspec.yaml")
        assert isinstance(result, Err)
        assert "failed to read" in result.error.message

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "pubspec.yaml"
        path.write_bytes(b"name: caf\xe9\nversion: 1.0.0+1\n")

        result = read_version(path)

        assert isinstance(result, Err)
        assert "failed to read pubspec.yaml" in result.error.message


class TestWriteVersion:
    def test_rewrites_only_version_line(self, tmp_path: Path) -> None:
        path = _write(tmp_path, PUBSPEC)

        result = write_version(path, "1.13.1+32")

        assert isinstance(result, Ok)
        assert path.read_text(encoding="utf-8") == PUBSPEC.replace(
            "version: 1.13.0+31", "version: 1.13.1+32"
        )

    def test_keeps_crlf_line_endings(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: a\r\nversion: 1.0.0+1\r\nflutter:\r\n")

        assert isinstance(write_version(path, "1.0.0+2"), Ok)
        assert path.read_bytes() == b"name: a\r\nversion: 1.0.0+2\r\nflutter:\r\n"

    def test_no_version_line(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: a\n")

        result = write_version(path, "1.0.0+2")

        assert isinstance(result, Err)
        assert path.read_text(encoding="utf-8") == "name: a\n"
