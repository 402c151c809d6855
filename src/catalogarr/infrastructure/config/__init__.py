from __future__ import annotations

from .load import load_config
from .schema import AppConfig, CatalogConfig, EnvOverrides

__all__ = ["AppConfig", "CatalogConfig", "EnvOverrides", "load_config"]
