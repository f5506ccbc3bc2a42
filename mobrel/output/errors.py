"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mobrel.core.errors import ErrorCode
from mobrel.output.console import Style

if TYPE_CHECKING:
    from mobrel.output.console import ConsoleProtocol
    from mobrel.services.bump import BumpError

__all__ = ["bump_error_exit_code", "print_bump_error"]


def print_bump_error(error: BumpError, console: ConsoleProtocol) -> None:
    """Print a bump failure with its hint."""
    if error.kind == "aborted":
        console.warning(error.message)
    else:
        console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def bump_error_exit_code(error: BumpError) -> int:
    """Get exit code for a bump failure."""
    match error.kind:
        case "invalid_version":
            return int(ErrorCode.USER_ERROR)
        case "version_file" | "git_failed":
            return int(ErrorCode.ENV_ERROR)
        case "validation_failed":
            return int(ErrorCode.VALIDATION_ERROR)
        case "aborted":
            return int(ErrorCode.ABORTED)
        case "write_failed":
            return int(ErrorCode.IO_ERROR)
