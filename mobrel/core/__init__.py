"""Core types shared by every layer: results, exit codes, configuration."""

from .config import ConfigError, ReleaseConfig, RunOptions, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "Err",
    "ErrorCode",
    "Ok",
    "ReleaseConfig",
    "Result",
    "RunOptions",
    "load_config",
]
