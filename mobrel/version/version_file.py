"""Reading and rewriting the ``version:`` line of pubspec.yaml.

Only that one line is touched; the rest of the file is preserved byte for
byte, comments and formatting included.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.platform.files import atomic_write_text

__all__ = ["VersionFileError", "read_version", "write_version"]

_VERSION_LINE_RE = re.compile(r"^version:[ \t]*(?P<value>[^\r\n]*?)[ \t]*(?=\r?$)", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class VersionFileError:
    message: str
    hint: str | None = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1].strip()
    return value


def _read(path: Path) -> Result[str, VersionFileError]:
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(VersionFileError(f"failed to read {path.name}: {e}", hint=str(path)))


def read_version(path: Path) -> Result[str, VersionFileError]:
    """Return the raw version string (quotes stripped, not yet validated)."""
    text = _read(path)
    if isinstance(text, Err):
        return text

    m = _VERSION_LINE_RE.search(text.value)
    if m is None or not _unquote(m.group("value")):
        return Err(VersionFileError(f"could not read version from {path.name}", hint=str(path)))
    return Ok(_unquote(m.group("value")))


def write_version(path: Path, version: str) -> Result[None, VersionFileError]:
    """Rewrite the first ``version:`` line and verify the result by reading it back."""
    text = _read(path)
    if isinstance(text, Err):
        return text

    updated, count = _VERSION_LINE_RE.subn(f"version: {version}", text.value, count=1)
    if count == 0:
        return Err(VersionFileError(f"no version line in {path.name}", hint=str(path)))

    try:
        atomic_write_text(path, updated)
    except OSError as e:
        return Err(VersionFileError(f"failed to write {path.name}: {e}", hint=str(path)))

    check = read_version(path)
    if isinstance(check, Err):
        return check
    if check.value != version:
        return Err(
            VersionFileError(
                f"failed to update version in {path.name}",
                hint=f"expected {version}, found {check.value}",
            )
        )
    return Ok(None)
