"""Application services for the mobrel CLI.

Services coordinate the domain packages (version, changelog, validation,
release) with git and the project files.
"""

from mobrel.services.bump import BumpError, BumpOutcome, BumpService, bump_next_steps
from mobrel.services.changelog import collect_entry, print_preview, update_changelog_file

__all__ = [
    "BumpError",
    "BumpOutcome",
    "BumpService",
    "bump_next_steps",
    "collect_entry",
    "print_preview",
    "update_changelog_file",
]
