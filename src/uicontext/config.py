"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (UICONTEXT__SERVER__TRANSPORT=http)
  2. uicontext.yaml         (searched in cwd, then ~/.config/uicontext/)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR: str = platformdirs.user_data_dir("uicontext")


def _find_config_file() -> str | None:
    """Return the path of the first uicontext.yaml found, or None."""
    candidates = [
        Path("uicontext.yaml"),
        Path.home() / ".config" / "uicontext" / "uicontext.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


def _default_content_dir() -> str:
    """``./content`` when it exists, otherwise the per-user data directory."""
    local = Path("content")
    if local.is_dir():
        return str(local.resolve())
    return str(Path(_DEFAULT_DATA_DIR) / "content")


class ServerSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8080


class ContentSettings(BaseModel):
    """Content layout. Relative paths are resolved against ``base_dir``."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = _default_content_dir()
    nextjs_docs: str = "docs/nextjs/nextjs-full.txt"
    tailwind_docs: str = "docs/tailwind/tailwind-docs-full.txt"
    components_dir: str = "components/catalyst"
    patterns_dir: str = "patterns"
    libraries_dir: str = "libraries"
    templates_file: str = "templates/templates.json"
    summary_file: str = "content-summary.json"

    def resolve(self, relative: str) -> Path:
        return Path(self.base_dir).expanduser() / relative


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ttl_seconds: float = 300.0
    max_entries: int = 256


class LimitSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_file_bytes: int = 1 * 1024 * 1024  # components, patterns, library docs
    large_file_bytes: int = 5 * 1024 * 1024  # full documentation dumps


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: UICONTEXT__CACHE__TTL_SECONDS=60
        env_prefix="UICONTEXT__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    server: ServerSettings = ServerSettings()
    content: ContentSettings = ContentSettings()
    cache: CacheSettings = CacheSettings()
    limits: LimitSettings = LimitSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
