"""Default release tracks wired from configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from mobrel.collaborators import (
    AppStoreSubmitter,
    AppStoreUploader,
    FlutterBuilder,
    GooglePlayUploader,
    Platform,
)
from mobrel.core.config import ReleaseConfig

from .pipeline import Track

__all__ = ["default_tracks"]


def default_tracks(
    *,
    config: ReleaseConfig,
    project_root: Path,
    base_env: Mapping[str, str],
) -> list[Track]:
    """iOS then Android, each honouring its ``--skip-*`` flag.

    iOS requires App Store Connect credentials up front. Android has no
    required credentials; a missing service account only disables the upload.
    """
    options = config.options
    builder = FlutterBuilder(project_root)

    ios = Track(
        platform=Platform.IOS,
        builder=builder,
        uploader=AppStoreUploader(project_root),
        credentials={
            "api_key_id": config.ios.api_key_id or "",
            "issuer_id": config.ios.issuer_id or "",
        },
        missing_credentials=config.ios.missing_credentials(),
        submitter=AppStoreSubmitter(project_root / config.ios.submit_script),
        skip=options.skip_ios,
        skip_submit=options.skip_submit,
    )

    android = Track(
        platform=Platform.ANDROID,
        builder=builder,
        uploader=GooglePlayUploader(
            project_root,
            project_root / config.android.upload_script,
            base_env=base_env,
        ),
        credentials={"service_account": str(config.android.service_account)},
        skip=options.skip_android,
    )

    return [ios, android]
