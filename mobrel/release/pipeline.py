"""Platform release tracks.

Each track (iOS, Android) goes build -> upload -> optional review
submission. Tracks are independent: a failure is recorded on its stage and
the next track still runs. An upload tool that is not installed or not
configured degrades the track to ``MANUAL`` and the built artifact is
reported for a manual upload.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from mobrel.collaborators.base import (
    ArtifactBuilder,
    ArtifactUploader,
    CollaboratorError,
    Credentials,
    Platform,
    ReviewSubmitter,
)
from mobrel.core.result import Err
from mobrel.output.console import ConsoleProtocol, Style
from mobrel.version.identifier import VersionIdentifier

__all__ = [
    "ReleasePipeline",
    "ReleaseReport",
    "ReleaseStage",
    "Track",
    "TrackOutcome",
    "follow_up_steps",
]


class TrackOutcome(Enum):
    NOT_RUN = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    MANUAL = auto()


@dataclass(frozen=True, slots=True)
class ReleaseStage:
    """Final state of one platform track.

    ``submitted`` is None for tracks without a review-submission step.
    """

    platform: Platform
    skipped: bool = False
    outcome: TrackOutcome = TrackOutcome.NOT_RUN
    reason: str | None = None
    artifact: Path | None = None
    submitted: bool | None = None


def _empty_credentials() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Track:
    """Everything one platform track needs, resolved before the run starts."""

    platform: Platform
    builder: ArtifactBuilder
    uploader: ArtifactUploader
    credentials: Credentials = field(default_factory=_empty_credentials)
    missing_credentials: tuple[str, ...] = ()
    submitter: ReviewSubmitter | None = None
    skip: bool = False
    skip_submit: bool = False


@dataclass(frozen=True, slots=True)
class ReleaseReport:
    version: VersionIdentifier
    stages: tuple[ReleaseStage, ...]
    follow_ups: tuple[str, ...] = ()

    @property
    def failed(self) -> tuple[ReleaseStage, ...]:
        return tuple(s for s in self.stages if s.outcome == TrackOutcome.FAILED)

    def stage(self, platform: Platform) -> ReleaseStage | None:
        for s in self.stages:
            if s.platform == platform:
                return s
        return None


def follow_up_steps(
    stages: Sequence[ReleaseStage],
    *,
    version: VersionIdentifier,
    tag_prefix: str,
    create_tag: bool,
    push_tag: bool,
) -> tuple[str, ...]:
    """Manual steps left after the run, derived only from final states and flags."""
    steps: list[str] = []
    tag = version.tag(tag_prefix)

    for stage in stages:
        if stage.skipped:
            continue
        unfinished = stage.outcome != TrackOutcome.SUCCEEDED
        match stage.platform:
            case Platform.IOS:
                if unfinished:
                    steps.append("Upload iOS build to App Store Connect")
                elif stage.submitted is False:
                    steps.append("Submit iOS build for review in App Store Connect")
            case Platform.ANDROID:
                if unfinished:
                    steps.append("Upload Android App Bundle to Google Play Console")

    if not create_tag:
        steps.append(f"Tag: git tag {tag}")
    if not push_tag:
        steps.append(f"Push tag: git push origin {tag}")
        steps.append("Push commits: git push")
    return tuple(steps)


class ReleasePipeline:
    def __init__(
        self,
        tracks: Sequence[Track],
        *,
        console: ConsoleProtocol,
        tag_prefix: str = "v",
        create_tag: bool = True,
        push_tag: bool = False,
    ) -> None:
        self._tracks = tuple(tracks)
        self._console = console
        self._tag_prefix = tag_prefix
        self._create_tag = create_tag
        self._push_tag = push_tag

    def run(self, version: VersionIdentifier, *, project_root: Path) -> ReleaseReport:
        """Run every track in order; one stage per track plus the follow-up list."""
        stages = tuple(self._run_track(t, version, project_root) for t in self._tracks)
        return ReleaseReport(
            version=version,
            stages=stages,
            follow_ups=follow_up_steps(
                stages,
                version=version,
                tag_prefix=self._tag_prefix,
                create_tag=self._create_tag,
                push_tag=self._push_tag,
            ),
        )

    def _run_track(
        self, track: Track, version: VersionIdentifier, project_root: Path
    ) -> ReleaseStage:
        console = self._console
        platform = track.platform

        if track.skip:
            console.print(f"Skipping {platform}", Style.WARNING)
            return ReleaseStage(platform=platform, skipped=True)

        console.header(f"{platform} release")

        if track.missing_credentials:
            names = ", ".join(track.missing_credentials)
            console.error(f"missing configuration for {platform} release: {names}")
            return ReleaseStage(
                platform=platform,
                outcome=TrackOutcome.FAILED,
                reason=f"missing configuration: {names}",
            )

        console.info(f"building {platform} artifact...")
        built = track.builder.build(platform)
        if isinstance(built, Err):
            self._report_error(built.error)
            return ReleaseStage(
                platform=platform,
                outcome=TrackOutcome.FAILED,
                reason=f"build failed: {built.error.message}",
            )
        artifact = built.value
        console.success(f"{platform} build complete: {artifact}")

        console.info(f"uploading {artifact.name}...")
        uploaded = track.uploader.upload(platform, artifact, track.credentials, version=version)
        if isinstance(uploaded, Err):
            self._report_error(uploaded.error)
            if uploaded.error.unavailable:
                console.warning(f"upload automation unavailable; artifact ready at {artifact}")
                return ReleaseStage(
                    platform=platform,
                    outcome=TrackOutcome.MANUAL,
                    reason=uploaded.error.message,
                    artifact=artifact,
                )
            return ReleaseStage(
                platform=platform,
                outcome=TrackOutcome.FAILED,
                reason=f"upload failed: {uploaded.error.message}",
                artifact=artifact,
            )
        console.success(f"{platform} upload complete")

        return ReleaseStage(
            platform=platform,
            outcome=TrackOutcome.SUCCEEDED,
            artifact=artifact,
            submitted=self._submit(track, version, project_root),
        )

    def _submit(self, track: Track, version: VersionIdentifier, project_root: Path) -> bool | None:
        if track.submitter is None:
            return None
        if track.skip_submit:
            self._console.print("skipping automatic submission (--skip-submit)", Style.WARNING)
            return False

        self._console.info("submitting for review...")
        submitted = track.submitter.submit(track.platform, version, project_root)
        if isinstance(submitted, Err):
            # The build is uploaded; a failed submission only leaves a manual step.
            self._console.warning(f"automatic submission skipped: {submitted.error.message}")
            if submitted.error.hint:
                self._console.print(f"hint: {submitted.error.hint}", Style.DIM)
            return False
        self._console.success("submitted for review")
        return True

    def _report_error(self, error: CollaboratorError) -> None:
        if error.unavailable:
            self._console.warning(error.message)
        else:
            self._console.error(error.message)
        for line in error.output.splitlines():
            self._console.print(f"  {line}", Style.DIM)
        if error.hint:
            self._console.print(f"hint: {error.hint}", Style.DIM)
