"""Tests for mobrel.collaborators.coverage."""

from __future__ import annotations

import json
from pathlib import Path

from mobrel.collaborators.coverage import JsonKeyCoverage, flatten_keys
from mobrel.core.result import Err, Ok


def _locale(directory: Path, name: str, data: object) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


def test_flatten_keys() -> None:
    assert flatten_keys({"a": {"b": 1, "c": {"d": "x"}}, "e": "y"}) == {"a.b", "a.c.d", "e"}


def test_counts_missing_keys_per_locale(tmp_path: Path) -> None:
    _locale(tmp_path, "en-US", {"home": {"title": "Home", "cta": "Go"}, "bye": "Bye"})
    _locale(tmp_path, "fr-FR", {"home": {"title": "Accueil"}, "bye": "Salut"})
    _locale(tmp_path, "de-DE", {"home": {"title": "Start", "cta": "Los"}, "bye": "Tschüss"})

    result = JsonKeyCoverage().compare(tmp_path)

    assert result == Ok({"de-DE": 0, "fr-FR": 1})


def test_unparseable_locale_is_left_out(tmp_path: Path) -> None:
    _locale(tmp_path, "en-US", {"a": "A"})
    (tmp_path / "es-ES.json").write_text("{broken", encoding="utf-8")

    assert JsonKeyCoverage().compare(tmp_path) == Ok({})


def test_missing_baseline_is_unavailable(tmp_path: Path) -> None:
    _locale(tmp_path, "fr-FR", {"a": "A"})

    result = JsonKeyCoverage().compare(tmp_path)

    assert isinstance(result, Err)
    assert result.error.unavailable
    assert "en-US.json" in result.error.message


def test_custom_baseline(tmp_path: Path) -> None:
    _locale(tmp_path, "fr-FR", {"a": "A", "b": "B"})
    _locale(tmp_path, "en-US", {"a": "A"})

    assert JsonKeyCoverage(baseline_locale="fr-FR").compare(tmp_path) == Ok({"en-US": 1})
