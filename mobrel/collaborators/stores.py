# SPDX-License-Identifier: MIT
"""Store collaborators: App Store Connect and Google Play.

Uploads and review submission are optional automation. Whenever the
underlying tool, script or credential file is absent the collaborator
answers ``unavailable`` rather than failing, so the release can fall back
to a manual upload.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path

from mobrel.core.result import Err, Ok, Result
from mobrel.platform.process import run as run_process
from mobrel.platform.process import which
from mobrel.version.identifier import VersionIdentifier

from .base import CollaboratorError, Credentials, Platform

__all__ = ["AppStoreSubmitter", "AppStoreUploader", "GooglePlayUploader"]

SERVICE_ACCOUNT_ENV = "GOOGLE_PLAY_SERVICE_ACCOUNT"


def _script_missing(script: Path) -> CollaboratorError:
    return CollaboratorError.missing(f"script not found: {script}")


def _wrong_platform(expected: Platform, got: Platform) -> CollaboratorError:
    return CollaboratorError.failure(f"{expected} collaborator cannot handle {got}")


class AppStoreUploader:
    """Uploads an IPA with ``xcrun altool`` using an App Store Connect API key."""

    def __init__(self, project_root: Path) -> None:
        self._root = project_root

    def upload(
        self,
        platform: Platform,
        artifact: Path,
        credentials: Credentials,
        *,
        version: VersionIdentifier,
    ) -> Result[str, CollaboratorError]:
        if platform != Platform.IOS:
            return Err(_wrong_platform(Platform.IOS, platform))
        if which("xcrun") is None:
            return Err(
                CollaboratorError.missing(
                    "xcrun not found", hint="install the Xcode command line tools"
                )
            )

        key_id = credentials.get("api_key_id", "")
        issuer_id = credentials.get("issuer_id", "")
        if not key_id or not issuer_id:
            return Err(CollaboratorError.failure("App Store Connect API key is not configured"))

        cmd = [
            "xcrun",
            "altool",
            "--upload-app",
            "--type",
            "ios",
            "-f",
            str(artifact),
            "--apiKey",
            key_id,
            "--apiIssuer",
            issuer_id,
        ]
        result = run_process(cmd, cwd=self._root)
        if isinstance(result, Err):
            e = result.error
            return Err(CollaboratorError.failure(f"upload of {version} failed", output=e.output))
        return Ok(result.value)


class AppStoreSubmitter:
    """Submits an uploaded build for review via the project's submission script."""

    def __init__(self, script: Path, *, python: str = sys.executable) -> None:
        self._script = script
        self._python = python

    def submit(
        self,
        platform: Platform,
        version: VersionIdentifier,
        project_root: Path,
    ) -> Result[str, CollaboratorError]:
        if platform != Platform.IOS:
            return Err(_wrong_platform(Platform.IOS, platform))
        if not self._script.is_file():
            return Err(_script_missing(self._script))

        cmd = [self._python, str(self._script), str(version), "--project-path", str(project_root)]
        result = run_process(cmd, cwd=project_root)
        if isinstance(result, Err):
            e = result.error
            return Err(
                CollaboratorError.failure(
                    "submission script reported a problem",
                    output=e.output,
                    hint="check the build status in App Store Connect",
                )
            )
        return Ok(result.value)


class GooglePlayUploader:
    """Uploads the app bundle via the project's Google Play script.

    ``base_env`` is the environment handed to the script; the service account
    path from ``credentials`` is added to it.
    """

    def __init__(
        self,
        project_root: Path,
        script: Path,
        *,
        base_env: Mapping[str, str],
        python: str = sys.executable,
    ) -> None:
        self._root = project_root
        self._script = script
        self._base_env = dict(base_env)
        self._python = python

    def upload(
        self,
        platform: Platform,
        artifact: Path,
        credentials: Credentials,
        *,
        version: VersionIdentifier,
    ) -> Result[str, CollaboratorError]:
        if platform != Platform.ANDROID:
            return Err(_wrong_platform(Platform.ANDROID, platform))
        if not self._script.is_file():
            return Err(_script_missing(self._script))

        service_account = credentials.get("service_account", "")
        if not service_account or not Path(service_account).is_file():
            return Err(
                CollaboratorError.missing(
                    "Google Play service account not configured",
                    hint=f"save the service account JSON and point {SERVICE_ACCOUNT_ENV} at it",
                )
            )

        env = {**self._base_env, SERVICE_ACCOUNT_ENV: service_account}
        cmd = [self._python, str(self._script), str(version), "--project-path", str(self._root)]
        result = run_process(cmd, cwd=self._root, env=env)
        if isinstance(result, Err):
            e = result.error
            return Err(
                CollaboratorError.failure(
                    f"Google Play upload of {artifact.name} failed", output=e.output
                )
            )
        return Ok(result.value)
