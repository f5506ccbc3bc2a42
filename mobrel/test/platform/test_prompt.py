"""Tests for mobrel.platform.prompt module."""

from __future__ import annotations

import pytest

from mobrel.platform.prompt import FixedConfirmer, TerminalConfirmer


def test_fixed_confirmer_records_prompts() -> None:
    confirmer = FixedConfirmer(answer=False)

    assert confirmer.confirm("Update version to 1.0.1+2?") is False
    assert confirmer.prompts == ["Update version to 1.0.1+2?"]


def test_terminal_confirmer_uses_typer(monkeypatch: pytest.MonkeyPatch) -> None:
    import typer

    asked: list[tuple[str, bool]] = []

    def fake_confirm(text: str, default: bool = False) -> bool:
        asked.append((text, default))
        return True

    monkeypatch.setattr(typer, "confirm", fake_confirm)

    assert TerminalConfirmer().confirm("Proceed?") is True
    assert asked == [("Proceed?", False)]


def test_terminal_confirmer_treats_abort_as_no(monkeypatch: pytest.MonkeyPatch) -> None:
    import typer

    def fake_confirm(text: str, default: bool = False) -> bool:
        raise typer.Abort()

    monkeypatch.setattr(typer, "confirm", fake_confirm)

    assert TerminalConfirmer().confirm("Update version to 1.0.1+2?") is False


def test_terminal_confirmer_reads_eof_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert TerminalConfirmer().confirm("Proceed?") is False
