"""Typed release configuration.

A single immutable ``ReleaseConfig`` is built once at the CLI edge from
defaults, an optional ``mobrel.toml`` in the project root, the process
environment (store credentials) and command-line flags. It is then passed
explicitly to every service; nothing below the CLI reads the environment.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "AndroidConfig",
    "ChangelogConfig",
    "ConfigError",
    "CONFIG_FILE_NAME",
    "IosConfig",
    "ReleaseConfig",
    "RunOptions",
    "ValidationConfig",
    "load_config",
]

CONFIG_FILE_NAME = "mobrel.toml"

ENV_APP_STORE_KEY_ID = "APP_STORE_API_KEY_ID"
ENV_APP_STORE_ISSUER_ID = "APP_STORE_ISSUER_ID"
ENV_GOOGLE_PLAY_SERVICE_ACCOUNT = "GOOGLE_PLAY_SERVICE_ACCOUNT"

DEFAULT_SERVICE_ACCOUNT = "~/.google-play/service-account.json"
DEFAULT_SUBMIT_SCRIPT = "scripts/submit_to_app_store.py"
DEFAULT_UPLOAD_SCRIPT = "scripts/submit_to_google_play.py"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Per-invocation switches, normally straight from CLI flags."""

    release: bool = False
    dry_run: bool = False
    skip_ios: bool = False
    skip_android: bool = False
    skip_submit: bool = False
    create_tag: bool = True
    push_tag: bool = False
    auto_commit: bool = False
    assume_yes: bool = False

    @property
    def commits_changes(self) -> bool:
        # A release needs a committed tree for the tag to point at.
        return self.auto_commit or self.release


@dataclass(frozen=True, slots=True)
class IosConfig:
    """App Store Connect settings."""

    api_key_id: str | None = None
    issuer_id: str | None = None
    submit_script: str = DEFAULT_SUBMIT_SCRIPT

    def missing_credentials(self) -> tuple[str, ...]:
        """Names of the environment variables that still need a value."""
        missing: list[str] = []
        if not self.api_key_id:
            missing.append(ENV_APP_STORE_KEY_ID)
        if not self.issuer_id:
            missing.append(ENV_APP_STORE_ISSUER_ID)
        return tuple(missing)


def _default_service_account() -> Path:
    return Path(DEFAULT_SERVICE_ACCOUNT).expanduser()


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """Google Play settings."""

    service_account: Path = field(default_factory=_default_service_account)
    upload_script: str = DEFAULT_UPLOAD_SCRIPT


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Pre-release gate settings (paths relative to the project root)."""

    translations_dir: str = "assets/translations"
    file_glob: str = "*.json"
    baseline_locale: str = "en-US"


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    file_name: str = "CHANGELOG.md"
    commit_window: int = 20
    tag_prefix: str = "v"


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Main configuration container."""

    options: RunOptions = field(default_factory=RunOptions)
    ios: IosConfig = field(default_factory=IosConfig)
    android: AndroidConfig = field(default_factory=AndroidConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)

    def with_options(self, options: RunOptions) -> ReleaseConfig:
        return dataclasses.replace(self, options=options)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, object],
        *,
        env: Mapping[str, str] | None = None,
    ) -> ReleaseConfig:
        """Create a config from parsed TOML, letting ``env`` override credentials."""
        env = env or {}
        ios: StrDict = get_table(data, "ios") or {}
        android: StrDict = get_table(data, "android") or {}
        validation: StrDict = get_table(data, "validation") or {}
        changelog: StrDict = get_table(data, "changelog") or {}

        service_account = (
            _env_value(env, ENV_GOOGLE_PLAY_SERVICE_ACCOUNT)
            or get_str(android, "service_account")
            or DEFAULT_SERVICE_ACCOUNT
        )

        return cls(
            ios=IosConfig(
                api_key_id=_env_value(env, ENV_APP_STORE_KEY_ID) or get_str(ios, "api_key_id"),
                issuer_id=_env_value(env, ENV_APP_STORE_ISSUER_ID) or get_str(ios, "issuer_id"),
                submit_script=get_str(ios, "submit_script") or DEFAULT_SUBMIT_SCRIPT,
            ),
            android=AndroidConfig(
                service_account=Path(service_account).expanduser(),
                upload_script=get_str(android, "upload_script") or DEFAULT_UPLOAD_SCRIPT,
            ),
            validation=ValidationConfig(
                translations_dir=get_str(validation, "translations_dir") or "assets/translations",
                file_glob=get_str(validation, "file_glob") or "*.json",
                baseline_locale=get_str(validation, "baseline_locale") or "en-US",
            ),
            changelog=ChangelogConfig(
                file_name=get_str(changelog, "file") or "CHANGELOG.md",
                commit_window=get_int(changelog, "commit_window") or 20,
                tag_prefix=get_str(changelog, "tag_prefix") or "v",
            ),
        )


def _env_value(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key, "").strip()
    return value or None


# Known keys per table and the TOML type each must have. Unknown keys are ignored.
_SCHEMA: dict[str, dict[str, type]] = {
    "ios": {"api_key_id": str, "issuer_id": str, "submit_script": str},
    "android": {"service_account": str, "upload_script": str},
    "validation": {"translations_dir": str, "file_glob": str, "baseline_locale": str},
    "changelog": {"file": str, "commit_window": int, "tag_prefix": str},
}

_TYPE_NAMES = {str: "a string", int: "an integer"}


def _type_error(data: StrDict) -> str | None:
    """Describe the first setting whose type does not match, or None."""
    for section, keys in _SCHEMA.items():
        if section not in data:
            continue
        table = get_table(data, section)
        if table is None:
            return f"[{section}] must be a table"
        for key, expected in keys.items():
            if key not in table:
                continue
            value = table[key]
            if isinstance(value, bool) or not isinstance(value, expected):
                return (
                    f"{section}.{key} must be {_TYPE_NAMES[expected]}, "
                    f"got {type(value).__name__} ({value!r})"
                )

    changelog = get_table(data, "changelog") or {}
    window = get_int(changelog, "commit_window")
    if window is not None and window < 1:
        return f"changelog.commit_window must be at least 1, got {window}"
    return None


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(
    path: Path | None,
    *,
    env: Mapping[str, str],
    options: RunOptions | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Load configuration.

    Args:
        path: Path to ``mobrel.toml``; None or a missing file means defaults.
        env: Environment mapping consulted for store credentials.
        options: Run switches to embed in the result.

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) if the file is malformed.
    """
    data: StrDict = {}
    if path is not None and path.exists():
        parsed = _parse_toml(path)
        if isinstance(parsed, Err):
            return parsed
        data = parsed.value

        problem = _type_error(data)
        if problem is not None:
            return Err(ConfigError(f"Invalid config: {problem}", path=path))

    config = ReleaseConfig.from_dict(data, env=env)
    if options is not None:
        config = config.with_options(options)
    return Ok(config)
