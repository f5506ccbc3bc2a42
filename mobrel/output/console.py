"""Console output abstraction.

Services report progress through ``ConsoleProtocol`` and never print
directly. ``RichConsole`` renders to the terminal; ``MockConsole`` records
everything so tests can assert on what the operator would have seen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    BOLD = auto()
    HEADER = auto()
    PREVIEW = auto()  # dry-run "would ..." lines

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Styled console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def preview(self, message: str) -> None:
        """Report a side effect that dry-run mode suppressed."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Production console backed by rich."""

    def __init__(self) -> None:
        # Import lazily so the rest of the package stays rich-free.
        from rich.console import Console
        from rich.text import Text

        self._console = Console(highlight=False)
        self._text = Text
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.BOLD: "bold",
            Style.HEADER: "magenta bold",
            Style.PREVIEW: "cyan",
        }

    def _labelled(self, label: str, label_style: str, message: str) -> None:
        # Messages carry versions like "[1.2.0+5]", so they are never parsed as markup.
        self._console.print(self._text.assemble((label, label_style), " ", message))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        self._console.print(self._text(message, style=rich_style))

    def success(self, message: str) -> None:
        self._labelled("OK", "green", message)

    def error(self, message: str) -> None:
        self._labelled("error:", "red bold", message)

    def warning(self, message: str) -> None:
        self._labelled("warning:", "yellow", message)

    def info(self, message: str) -> None:
        self._labelled("info:", "cyan", message)

    def header(self, message: str) -> None:
        self._console.print()
        self._console.rule(self._text(message, style="magenta bold"), align="left")

    def preview(self, message: str) -> None:
        self._labelled("[DRY RUN]", "cyan", message)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def preview(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"[DRY RUN] {message}", Style.PREVIEW))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helpers

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def with_style(self, style: Style) -> list[str]:
        return [o.message for o in self.outputs if o.style == style]
