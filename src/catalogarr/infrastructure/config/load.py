"""Layered configuration loading: defaults < YAML < environment < CLI."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

log = structlog.get_logger(__name__)

_TOP_LEVEL_KEYS = ("app_name", "environment")

# Flat override key -> (section, key inside section).
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "http_base_url": ("http", "base_url"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_user_agent": ("http", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "page_size": ("catalog", "page_size"),
    "locale": ("catalog", "locale"),
    "preferred_audio_language": ("catalog", "preferred_audio_language"),
    "access_token": ("catalog", "access_token"),
}

_SECTIONS = frozenset(section for section, _ in _FLAT_KEYS.values())


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Merge *layer* into *target* in place; nested mappings merge key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring a layer into the sectioned shape of ``config.yaml``.

    Layers may mix both spellings, e.g. ``{"catalog": {...}, "page_size": 5}``;
    a flat key wins over the same key given inside its section.
    """
    shaped: dict[str, Any] = {
        key: layer[key] for key in _TOP_LEVEL_KEYS if key in layer
    }
    for section in _SECTIONS:
        block = layer.get(section)
        if isinstance(block, Mapping):
            shaped[section] = dict(block)

    for flat_key, (section, key) in _FLAT_KEYS.items():
        if flat_key in layer:
            shaped.setdefault(section, {})[key] = layer[flat_key]
    return shaped


def _yaml_layer(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Build the validated ``AppConfig`` from every configuration source.

    A ``.env`` file only fills variables that are not already set in the
    process environment. Missing explicit paths raise ``FileNotFoundError``.
    Nothing is written to disk.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    layers: list[Mapping[str, Any]] = [deepcopy(DEFAULT_CONFIG)]
    if config_path is not None:
        layers.append(_yaml_layer(config_path))
    layers.append(EnvOverrides().to_update_dict())
    layers.append(cli_overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        _merge_into(merged, _sectioned(layer))

    log.debug(
        "config_layers_merged",
        config_path=str(config_path) if config_path else None,
        dotenv_path=str(dotenv_path) if dotenv_path else None,
        cli_keys=sorted(cli_overrides or {}),
    )
    return AppConfig.model_validate(merged)
