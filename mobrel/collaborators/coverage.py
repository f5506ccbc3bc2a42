# SPDX-License-Identifier: MIT
"""Translation key coverage against a baseline locale."""

from __future__ import annotations

import json
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.core.structured import StrDict, as_str_dict

from .base import CollaboratorError

__all__ = ["JsonKeyCoverage", "flatten_keys"]


def flatten_keys(data: StrDict, prefix: str = "") -> set[str]:
    """Dotted paths of every leaf key, e.g. ``{"a": {"b": 1}}`` -> ``{"a.b"}``."""
    keys: set[str] = set()
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else key
        nested = as_str_dict(value)
        if nested:
            keys |= flatten_keys(nested, path)
        else:
            keys.add(path)
    return keys


def _load(path: Path) -> StrDict | None:
    try:
        obj: object = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    return as_str_dict(obj)


class JsonKeyCoverage:
    """Counts, per locale file, the baseline keys it lacks.

    Files that do not parse are left out; the syntax check reports them.
    """

    def __init__(self, *, baseline_locale: str = "en-US", file_glob: str = "*.json") -> None:
        self._baseline = baseline_locale
        self._glob = file_glob

    def compare(self, translations_dir: Path) -> Result[dict[str, int], CollaboratorError]:
        baseline_path = translations_dir / f"{self._baseline}.json"
        baseline = _load(baseline_path)
        if baseline is None:
            return Err(
                CollaboratorError.missing(
                    f"baseline locale file missing or unreadable: {baseline_path.name}"
                )
            )

        expected = flatten_keys(baseline)
        missing: dict[str, int] = {}
        for path in sorted(translations_dir.glob(self._glob)):
            if path == baseline_path:
                continue
            data = _load(path)
            if data is None:
                continue
            missing[path.stem] = len(expected - flatten_keys(data))
        return Ok(missing)
