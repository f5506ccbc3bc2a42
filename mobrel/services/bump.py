from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Literal

from mobrel.changelog.document import ChangelogEntry, tag_message
from mobrel.core.config import ReleaseConfig
from mobrel.core.project import PUBSPEC, Project
from mobrel.core.result import Err, Ok, Result
from mobrel.git.repository import Repository
from mobrel.output.console import ConsoleProtocol, Style
from mobrel.platform.prompt import Confirmer
from mobrel.release.pipeline import ReleasePipeline, ReleaseReport, Track
from mobrel.services.changelog import collect_entry, print_preview, update_changelog_file
from mobrel.validation.base import ValidationCheck
from mobrel.validation.gate import ValidationGate, ValidationReport
from mobrel.version.identifier import BumpKind, VersionIdentifier, bump, parse_version
from mobrel.version.version_file import read_version, write_version


@dataclass(frozen=True, slots=True)
class BumpError:
    kind: Literal[
        "version_file",
        "invalid_version",
        "validation_failed",
        "aborted",
        "write_failed",
        "git_failed",
    ]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class BumpOutcome:
    previous: VersionIdentifier
    version: VersionIdentifier
    entry: ChangelogEntry | None = None
    validation: ValidationReport | None = None
    release: ReleaseReport | None = None
    next_steps: tuple[str, ...] = ()


def commit_message(version: VersionIdentifier, *, tag_prefix: str = "v") -> str:
    return (
        f"chore: bump version to {version.tag(tag_prefix)}\n\n"
        f"- Updated version in {PUBSPEC}\n"
        "- Generated changelog from git commits"
    )


def bump_next_steps(
    version: VersionIdentifier,
    *,
    tag_prefix: str,
    auto_commit: bool,
    create_tag: bool,
    push_tag: bool,
    has_git: bool,
    changelog_name: str = "CHANGELOG.md",
) -> tuple[str, ...]:
    """Manual steps after a plain (non-release) bump."""
    tag = version.tag(tag_prefix)
    steps = [f"Review changes in {PUBSPEC} and {changelog_name}"]
    if not auto_commit:
        steps.append(f'Commit: git add . && git commit -m "chore: bump version to {tag}"')
    if not create_tag:
        steps.append(f"Tag: git tag {tag}")
    if not push_tag and has_git:
        steps.append(f"Push: git push && git push origin {tag}")
    else:
        steps.append("Push: git push")
    return tuple(steps)


class BumpService:
    """Version bump, changelog, git side effects and (optionally) a release.

    Mutations happen only after the validation gate (when releasing) and the
    update confirmation. The version file and changelog are never rolled back
    once written.
    """

    def __init__(
        self,
        *,
        project: Project,
        config: ReleaseConfig,
        console: ConsoleProtocol,
        confirmer: Confirmer,
        checks: Sequence[ValidationCheck] = (),
        tracks: Sequence[Track] = (),
        today: date | None = None,
    ) -> None:
        self._project = project
        self._config = config
        self._console = console
        self._confirmer = confirmer
        self._checks = tuple(checks)
        self._tracks = tuple(tracks)
        self._today = today or date.today()
        self._repo = Repository(project.git_root) if project.git_root is not None else None

    def current_version(self) -> Result[VersionIdentifier, BumpError]:
        raw = read_version(self._project.pubspec)
        if isinstance(raw, Err):
            return Err(BumpError(kind="version_file", message=raw.error.message, hint=raw.error.hint))

        parsed = parse_version(raw.value)
        if isinstance(parsed, Err):
            return Err(
                BumpError(
                    kind="invalid_version",
                    message=f"{PUBSPEC}: {parsed.error.message}",
                    hint=parsed.error.hint,
                )
            )
        return parsed

    def run(self, kind: BumpKind) -> Result[BumpOutcome, BumpError]:
        options = self._config.options
        console = self._console

        current = self.current_version()
        if isinstance(current, Err):
            return current
        previous = current.value
        version = bump(previous, kind)

        console.print(f"project: {self._project.name} ({self._project.root})", Style.DIM)
        console.print(f"current version: {previous}")
        console.print(f"new version:     {version}", Style.SUCCESS)

        entry = self._changelog_entry(version)

        validation: ValidationReport | None = None
        if options.release:
            console.header("Pre-release validation")
            validation = ValidationGate(
                self._checks, confirmer=self._confirmer, console=console
            ).run()
            if not validation.passed:
                names = ", ".join(r.name for r in validation.blocking)
                return Err(
                    BumpError(
                        kind="validation_failed",
                        message=f"validation failed: {names}",
                        hint="fix the issues above and run again; no files were changed",
                    )
                )
            console.success("all validation checks passed")

        if options.dry_run:
            self._announce(version)
            return Ok(
                BumpOutcome(previous=previous, version=version, entry=entry, validation=validation)
            )

        if not options.assume_yes and not self._confirmer.confirm(
            f"Update version to {version}?"
        ):
            return Err(BumpError(kind="aborted", message="version update cancelled"))

        written = write_version(self._project.pubspec, str(version))
        if isinstance(written, Err):
            return Err(
                BumpError(kind="write_failed", message=written.error.message, hint=written.error.hint)
            )
        console.success(f"updated {PUBSPEC} to {version}")

        changelog = self._write_changelog(entry)

        git = self._git_side_effects(version, entry, changelog)
        if isinstance(git, Err):
            return git

        if not options.release:
            return Ok(
                BumpOutcome(
                    previous=previous,
                    version=version,
                    entry=entry,
                    next_steps=bump_next_steps(
                        version,
                        tag_prefix=self._config.changelog.tag_prefix,
                        auto_commit=options.auto_commit,
                        create_tag=options.create_tag,
                        push_tag=options.push_tag,
                        has_git=self._repo is not None,
                        changelog_name=self._config.changelog.file_name,
                    ),
                )
            )

        release = ReleasePipeline(
            self._tracks,
            console=console,
            tag_prefix=self._config.changelog.tag_prefix,
            create_tag=options.create_tag,
            push_tag=options.push_tag,
        ).run(version, project_root=self._project.root)

        if options.push_tag and self._repo is not None:
            console.info("pushing commits...")
            pushed = self._repo.push()
            if isinstance(pushed, Err):
                console.warning(f"git push failed: {pushed.error.message}")
            else:
                console.success("commits pushed")

        return Ok(
            BumpOutcome(
                previous=previous,
                version=version,
                entry=entry,
                validation=validation,
                release=release,
                next_steps=release.follow_ups,
            )
        )

    def _changelog_entry(self, version: VersionIdentifier) -> ChangelogEntry | None:
        if self._repo is None:
            self._console.warning("not a git repository; changelog, commit and tag are disabled")
            return None

        entry = collect_entry(
            repo=self._repo,
            version=version,
            config=self._config.changelog,
            today=self._today,
            console=self._console,
        )
        if isinstance(entry, Err):
            self._console.warning(f"could not read git history: {entry.error.message}")
            return None

        if entry.value.buckets.is_empty:
            self._console.print("no categorized commits found", Style.DIM)
        else:
            print_preview(entry.value, self._console)
        return entry.value

    def _changelog_file(self) -> Path | None:
        return self._project.changelog_path(self._config.changelog.file_name)

    def _announce(self, version: VersionIdentifier) -> None:
        options = self._config.options
        console = self._console
        tag = version.tag(self._config.changelog.tag_prefix)

        console.newline()
        console.preview(f"would update {PUBSPEC} to {version}")
        changelog = self._changelog_file()
        if changelog is not None and changelog.is_file():
            console.preview(f"would update {changelog.name}")
        if self._repo is not None:
            if options.commits_changes:
                console.preview(f"would commit: chore: bump version to {tag}")
            if options.create_tag:
                console.preview(f"would create git tag: {tag}")
                if options.push_tag:
                    console.preview("would push tag to remote")
        if options.release:
            platforms = ", ".join(str(t.platform) for t in self._tracks if not t.skip)
            console.preview(f"would run release process ({platforms or 'no platforms'})")

    def _write_changelog(self, entry: ChangelogEntry | None) -> Path | None:
        path = self._changelog_file()
        if entry is None or path is None:
            return None
        if not path.is_file():
            self._console.print(f"no {path.name} found, skipping changelog update", Style.DIM)
            return None

        try:
            merged = update_changelog_file(path, entry)
        except (OSError, UnicodeDecodeError) as e:
            self._console.warning(f"could not update {path.name}: {e}")
            return None
        if isinstance(merged, Err):
            self._console.warning(f"{path.name} not updated: {merged.error.message}")
            if merged.error.hint:
                self._console.print(f"hint: {merged.error.hint}", Style.DIM)
            return None

        self._console.success(f"updated {path.name}")
        return path

    def _git_side_effects(
        self,
        version: VersionIdentifier,
        entry: ChangelogEntry | None,
        changelog: Path | None,
    ) -> Result[None, BumpError]:
        repo = self._repo
        if repo is None:
            return Ok(None)

        options = self._config.options
        tag_prefix = self._config.changelog.tag_prefix
        tag = version.tag(tag_prefix)

        if options.commits_changes:
            paths = [self._project.pubspec]
            if changelog is not None:
                paths.append(changelog)
            committed = repo.commit_files(paths, message=commit_message(version, tag_prefix=tag_prefix))
            if isinstance(committed, Err):
                return Err(
                    BumpError(
                        kind="git_failed",
                        message=f"git commit failed: {committed.error.message}",
                        hint="the version file was updated; commit manually and rerun the release",
                    )
                )
            self._console.success("changes committed")

        if not options.create_tag:
            return Ok(None)

        if repo.tag_exists(tag):
            self._console.warning(f"tag {tag} already exists, skipping")
            return Ok(None)

        message = tag_message(entry, tag=tag) if entry is not None else f"Release {tag}"
        created = repo.create_annotated_tag(tag, message=message)
        if isinstance(created, Err):
            return Err(
                BumpError(kind="git_failed", message=f"git tag failed: {created.error.message}")
            )
        self._console.success(f"created tag {tag}")

        if options.push_tag:
            pushed = repo.push_tag(tag)
            if isinstance(pushed, Err):
                self._console.warning(f"could not push tag {tag}: {pushed.error.message}")
            else:
                self._console.success("tag pushed to remote")
        return Ok(None)
