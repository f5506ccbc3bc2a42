"""Process exit codes.

Every command maps its outcome to one of these values. They are part of the
tool's scripting interface and must stay stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success (a release track degraded to a manual step still counts)
    - 1: User error (malformed version, bad arguments)
    - 2: Environment error (no project found, unreadable config/version file)
    - 3: Validation error (pre-release gate failed)
    - 4: Release error (at least one platform track failed)
    - 5: Aborted (operator declined a required confirmation)
    - 6: I/O error (writing project files failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    VALIDATION_ERROR = 3
    RELEASE_ERROR = 4
    ABORTED = 5
    IO_ERROR = 6
