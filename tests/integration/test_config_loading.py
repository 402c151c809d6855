"""Integration tests for configuration loading with layered precedence.

Tests the real load_config() function with actual YAML files, environment
variables, and CLI overrides to verify precedence: defaults < YAML < ENV < CLI.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from catalogarr.domain.entities.catalog import Locale
from catalogarr.infrastructure.config.load import load_config

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CATALOGARR_LOG_LEVEL",
        "CATALOGARR_ENVIRONMENT",
        "CATALOGARR_PAGE_SIZE",
        "CATALOGARR_LOCALE",
        "CATALOGARR_ACCESS_TOKEN",
        "CATALOGARR_HTTP_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def yaml_config(tmp_path: Path) -> Path:
    """Write a minimal YAML config and return its path."""
    config = {
        "app_name": "catalogarr-test",
        "environment": "test",
        "http": {
            "base_url": "https://catalog.example.test",
            "timeout_seconds": 15.0,
            "user_agent": "TestAgent/1.0",
        },
        "logging": {"level": "DEBUG", "format": "console"},
        "catalog": {"page_size": 50, "locale": "de-DE"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config), encoding="utf-8")
    return path


class TestDefaultsOnly:
    """Load with no YAML, no ENV, no CLI: pure defaults."""

    def test_defaults_produce_valid_config(self) -> None:
        config = load_config()
        assert config.app_name == "catalogarr"
        assert config.environment == "dev"
        assert config.http_base_url == "https://www.crunchyroll.com"
        assert config.http_timeout_seconds == 30.0
        assert config.log_level == "INFO"
        assert config.log_format == "console"  # dev → console
        assert config.catalog.page_size == 20
        assert config.catalog.locale is None
        assert config.catalog.access_token is None

    def test_defaults_derive_log_format_from_environment(self) -> None:
        config = load_config(cli_overrides={"environment": "prod"})
        assert config.log_format == "json"


class TestYamlOverrides:
    """YAML values override defaults."""

    def test_yaml_overrides_defaults(self, yaml_config: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert config.app_name == "catalogarr-test"
        assert config.environment == "test"
        assert config.http_base_url == "https://catalog.example.test"
        assert config.http_user_agent == "TestAgent/1.0"
        assert config.log_level == "DEBUG"
        assert config.catalog.page_size == 50
        assert config.catalog.locale is Locale.DE_DE

    def test_yaml_file_not_found_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nonexistent.yaml")

    def test_yaml_partial_override_preserves_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text(yaml.dump({"catalog": {"page_size": 5}}), encoding="utf-8")

        config = load_config(config_path=path)
        assert config.catalog.page_size == 5
        assert config.catalog.locale is None  # default preserved
        assert config.app_name == "catalogarr"  # default preserved

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path=path)

    def test_unknown_locale_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump({"catalog": {"locale": "xx-XX"}}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_config(config_path=path)

    def test_zero_page_size_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump({"catalog": {"page_size": 0}}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_config(config_path=path)


class TestEnvOverrides:
    """Environment variables override YAML and defaults."""

    def test_env_overrides_yaml(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CATALOGARR_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("CATALOGARR_PAGE_SIZE", "7")
        monkeypatch.setenv("CATALOGARR_LOCALE", "ja-JP")

        config = load_config(config_path=yaml_config)
        assert config.log_level == "WARNING"
        assert config.catalog.page_size == 7
        assert config.catalog.locale is Locale.JA_JP
        # YAML values not overridden by ENV stay
        assert config.app_name == "catalogarr-test"

    def test_env_access_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOGARR_ACCESS_TOKEN", "secret")

        assert load_config().catalog.access_token == "secret"

    def test_dotenv_file(self, tmp_path: Path) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("CATALOGARR_HTTP_BASE_URL=https://dotenv.example.test\n")

        try:
            config = load_config(dotenv_path=dotenv)
        finally:
            os.environ.pop("CATALOGARR_HTTP_BASE_URL", None)
        assert config.http_base_url == "https://dotenv.example.test"

    def test_dotenv_not_found_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(dotenv_path=tmp_path / "missing.env")


class TestCliOverrides:
    """CLI overrides beat everything (highest precedence)."""

    def test_cli_overrides_yaml_and_env(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CATALOGARR_LOG_LEVEL", "WARNING")

        config = load_config(
            config_path=yaml_config,
            cli_overrides={"log_level": "ERROR", "page_size": 3},
        )
        assert config.log_level == "ERROR"
        assert config.catalog.page_size == 3

    def test_sectioned_dump_roundtrips(self, yaml_config: Path, tmp_path: Path) -> None:
        config = load_config(config_path=yaml_config)
        path = tmp_path / "dump.yaml"
        path.write_text(yaml.dump(config.to_sectioned_dict()), encoding="utf-8")

        reloaded = load_config(config_path=path)
        assert reloaded == config
