"""Tests for mobrel.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from mobrel.core.config import (
    ConfigError,
    IosConfig,
    ReleaseConfig,
    RunOptions,
    load_config,
)
from mobrel.core.result import Err, Ok


class TestRunOptions:
    def test_defaults(self) -> None:
        options = RunOptions()
        assert options.release is False
        assert options.dry_run is False
        assert options.create_tag is True
        assert options.push_tag is False
        assert options.commits_changes is False

    def test_release_commits_changes(self) -> None:
        assert RunOptions(release=True).commits_changes is True
        assert RunOptions(auto_commit=True).commits_changes is True


class TestIosConfig:
    def test_missing_credentials_lists_env_names(self) -> None:
        assert IosConfig().missing_credentials() == (
            "APP_STORE_API_KEY_ID",
            "APP_STORE_ISSUER_ID",
        )
        assert IosConfig(api_key_id="K").missing_credentials() == ("APP_STORE_ISSUER_ID",)
        assert IosConfig(api_key_id="K", issuer_id="I").missing_credentials() == ()


class TestReleaseConfigFromDict:
    def test_empty_uses_defaults(self) -> None:
        config = ReleaseConfig.from_dict({})
        assert config.validation.translations_dir == "assets/translations"
        assert config.validation.baseline_locale == "en-US"
        assert config.changelog.file_name == "CHANGELOG.md"
        assert config.changelog.commit_window == 20
        assert config.changelog.tag_prefix == "v"
        assert config.ios.submit_script == "scripts/submit_to_app_store.py"
        assert config.android.upload_script == "scripts/submit_to_google_play.py"
        assert config.android.service_account.name == "service-account.json"

    def test_tables_are_read(self) -> None:
        config = ReleaseConfig.from_dict(
            {
                "ios": {"api_key_id": "KEY", "issuer_id": "ISSUER"},
                "android": {"service_account": "/keys/play.json"},
                "validation": {"translations_dir": "lib/l10n", "baseline_locale": "fr-FR"},
                "changelog": {"file": "HISTORY.md", "commit_window": 50},
            }
        )
        assert config.ios.api_key_id == "KEY"
        assert config.ios.issuer_id == "ISSUER"
        assert config.android.service_account == Path("/keys/play.json")
        assert config.validation.translations_dir == "lib/l10n"
        assert config.validation.baseline_locale == "fr-FR"
        assert config.changelog.file_name == "HISTORY.md"
        assert config.changelog.commit_window == 50

    def test_env_overrides_file_credentials(self) -> None:
        config = ReleaseConfig.from_dict(
            {"ios": {"api_key_id": "FILE"}},
            env={
                "APP_STORE_API_KEY_ID": "ENV",
                "APP_STORE_ISSUER_ID": "ISS",
                "GOOGLE_PLAY_SERVICE_ACCOUNT": "/env/sa.json",
            },
        )
        assert config.ios.api_key_id == "ENV"
        assert config.ios.issuer_id == "ISS"
        assert config.android.service_account == Path("/env/sa.json")

    def test_blank_env_values_are_ignored(self) -> None:
        config = ReleaseConfig.from_dict(
            {"ios": {"api_key_id": "FILE"}}, env={"APP_STORE_API_KEY_ID": "  "}
        )
        assert config.ios.api_key_id == "FILE"

    def test_with_options(self) -> None:
        config = ReleaseConfig().with_options(RunOptions(release=True))
        assert config.options.release is True


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "mobrel.toml", env={})
        assert isinstance(result, Ok)
        assert result.value.changelog.file_name == "CHANGELOG.md"

    def test_none_path_gives_defaults(self) -> None:
        result = load_config(None, env={}, options=RunOptions(dry_run=True))
        assert isinstance(result, Ok)
        assert result.value.options.dry_run is True

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mobrel.toml"
        path.write_text('[changelog]\ntag_prefix = "release-"\n', encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Ok)
        assert result.value.changelog.tag_prefix == "release-"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "mobrel.toml"
        path.write_text("[changelog\n", encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    @pytest.mark.parametrize(
        ("toml", "expected"),
        [
            ('[changelog]\ncommit_window = "30"\n', "changelog.commit_window must be an integer"),
            ("[changelog]\ncommit_window = 0\n", "changelog.commit_window must be at least 1"),
            ("[changelog]\ncommit_window = true\n", "changelog.commit_window must be an integer"),
            (
                "[validation]\ntranslations_dir = 5\n",
                "validation.translations_dir must be a string",
            ),
            ('ios = "key"\n', "[ios] must be a table"),
        ],
    )
    def test_wrong_types_are_reported(self, tmp_path: Path, toml: str, expected: str) -> None:
        path = tmp_path / "mobrel.toml"
        path.write_text(toml, encoding="utf-8")

        result = load_config(path, env={})

        assert isinstance(result, Err)
        assert expected in result.error.message
        assert result.error.path == path

    def test_unknown_keys_are_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "mobrel.toml"
        path.write_text(
            "[changelog]\ncommit_window = 50\nextra = 1\n[other]\nx = 1\n", encoding="utf-8"
        )

        result = load_config(path, env={})

        assert isinstance(result, Ok)
        assert result.value.changelog.commit_window == 50
