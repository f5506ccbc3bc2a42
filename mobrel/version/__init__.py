from .identifier import (
    BumpKind,
    Explicit,
    FormatError,
    VersionIdentifier,
    bump,
    parse_bump_kind,
    parse_version,
)
from .version_file import VersionFileError, read_version, write_version

__all__ = [
    "BumpKind",
    "Explicit",
    "FormatError",
    "VersionFileError",
    "VersionIdentifier",
    "bump",
    "parse_bump_kind",
    "parse_version",
    "read_version",
    "write_version",
]
