"""Operator confirmation.

The release flow blocks on a yes/no answer in two places: the version
update and a translation-coverage warning. Both receive a ``Confirmer`` so
automation and tests can answer without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["Confirmer", "FixedConfirmer", "TerminalConfirmer"]


class Confirmer(Protocol):
    def confirm(self, prompt: str) -> bool:
        """Ask ``prompt`` and return True for an affirmative answer."""
        ...


class TerminalConfirmer:
    """Interactive confirmation on stdin via typer.

    End of input and Ctrl-C count as a "no".
    """

    def confirm(self, prompt: str) -> bool:
        import typer

        try:
            return typer.confirm(prompt, default=False)
        except typer.Abort:
            return False


def _empty_prompts() -> list[str]:
    return []


@dataclass
class FixedConfirmer:
    """Non-interactive confirmer that always gives ``answer``.

    Used for ``--yes`` and in tests; ``prompts`` records every question asked.
    """

    answer: bool
    prompts: list[str] = field(default_factory=_empty_prompts)

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer
