# SPDX-License-Identifier: MIT
"""Pre-release validation gate and its checks."""

from .base import CheckResult, CheckStatus, ValidationCheck
from .checks import (
    StaticAnalysisCheck,
    TranslationCoverageCheck,
    TranslationSyntaxCheck,
    default_checks,
)
from .gate import ValidationGate, ValidationReport

__all__ = [
    "CheckResult",
    "CheckStatus",
    "StaticAnalysisCheck",
    "TranslationCoverageCheck",
    "TranslationSyntaxCheck",
    "ValidationCheck",
    "ValidationGate",
    "ValidationReport",
    "default_checks",
]
