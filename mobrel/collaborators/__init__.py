# SPDX-License-Identifier: MIT
"""External collaborators (build, upload, submit, coverage, analysis)."""

from .base import (
    AnalysisReport,
    ArtifactBuilder,
    ArtifactUploader,
    CollaboratorError,
    CoverageComparator,
    Credentials,
    Platform,
    ReviewSubmitter,
    StaticAnalyzer,
)
from .coverage import JsonKeyCoverage
from .flutter import FlutterAnalyzer, FlutterBuilder, artifact_dir
from .stores import AppStoreSubmitter, AppStoreUploader, GooglePlayUploader

__all__ = [
    "AnalysisReport",
    "AppStoreSubmitter",
    "AppStoreUploader",
    "ArtifactBuilder",
    "ArtifactUploader",
    "CollaboratorError",
    "CoverageComparator",
    "Credentials",
    "FlutterAnalyzer",
    "FlutterBuilder",
    "GooglePlayUploader",
    "JsonKeyCoverage",
    "Platform",
    "ReviewSubmitter",
    "StaticAnalyzer",
    "artifact_dir",
]
