"""Validated configuration models.

``AppConfig`` accepts both the sectioned YAML shape (``http.base_url``) and
the flat field names (``http_base_url``). Environment variables are read
separately by ``EnvOverrides`` so that ``load_config`` controls precedence.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    PositiveFloat,
    PositiveInt,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalogarr.domain.entities.catalog import Locale
from catalogarr.domain.entities.pagination import DEFAULT_PAGE_SIZE

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _section_alias(flat: str, section: str, key: str) -> AliasChoices:
    return AliasChoices(flat, AliasPath(section, key))


class CatalogConfig(BaseModel):
    """``catalog.*``: paging, locale hook and credentials."""

    page_size: PositiveInt = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Items requested per page by every pagination engine.",
    )
    locale: Optional[Locale] = Field(
        default=None,
        description="Locale tag appended to search requests, e.g. 'en-US'.",
    )
    preferred_audio_language: Optional[Locale] = Field(
        default=None,
        description="Preferred audio locale appended to search requests.",
    )
    access_token: Optional[str] = Field(
        default=None,
        description="Bearer token sent with every catalog request.",
    )


class AppConfig(BaseModel):
    """Final application configuration, built by ``load_config``."""

    app_name: str = "catalogarr"
    environment: Environment = Field(
        default="dev",
        description="Selects the default log format (json in prod).",
    )

    http_base_url: str = Field(
        default="https://www.crunchyroll.com",
        validation_alias=_section_alias("http_base_url", "http", "base_url"),
        description="Scheme and host of the catalog service.",
    )
    http_timeout_seconds: PositiveFloat = Field(
        default=30.0,
        validation_alias=_section_alias(
            "http_timeout_seconds", "http", "timeout_seconds"
        ),
        description="Per-request timeout.",
    )
    http_user_agent: str = Field(
        default="Catalogarr/0.1.0",
        validation_alias=_section_alias("http_user_agent", "http", "user_agent"),
    )

    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=_section_alias("log_level", "logging", "level"),
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=_section_alias("log_format", "logging", "format"),
        description="console or json; derived from environment when unset.",
    )

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    @model_validator(mode="after")
    def _default_log_format(self) -> "AppConfig":
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """Dump in the same sectioned shape ``config.yaml`` uses."""
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "base_url": self.http_base_url,
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "catalog": self.catalog.model_dump(mode="json"),
        }


class EnvOverrides(BaseSettings):
    """Flat ``CATALOGARR_*`` environment variables, all optional.

    e.g. ``CATALOGARR_PAGE_SIZE=50``, ``CATALOGARR_LOCALE=de-DE``,
    ``CATALOGARR_HTTP_BASE_URL=...``. Values are validated later as part of
    ``AppConfig``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOGARR_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[str] = None
    http_base_url: Optional[str] = None
    http_timeout_seconds: Optional[str] = None
    http_user_agent: Optional[str] = None
    log_level: Optional[str] = None
    log_format: Optional[str] = None
    page_size: Optional[str] = None
    locale: Optional[str] = None
    preferred_audio_language: Optional[str] = None
    access_token: Optional[str] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Only the variables that are actually set."""
        return self.model_dump(exclude_none=True)
