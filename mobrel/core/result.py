"""Result type for explicit error handling.

Fallible operations return ``Ok(value)`` or ``Err(error)`` instead of raising,
so every caller decides what a failure means at its own level (abort the run,
degrade a release track, print a warning).

Usage:
    def parse_build(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Err(f"not a build number: {text}")
        return Ok(int(text))

    match parse_build("31"):
        case Ok(value):
            print(value + 1)
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
