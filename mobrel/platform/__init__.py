"""Process, filesystem and terminal adapters."""

from .files import atomic_write_text
from .process import ProcessError, run, which
from .prompt import Confirmer, FixedConfirmer, TerminalConfirmer

__all__ = [
    "Confirmer",
    "FixedConfirmer",
    "ProcessError",
    "TerminalConfirmer",
    "atomic_write_text",
    "run",
    "which",
]
