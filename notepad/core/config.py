"""
Configuration.

Two sources, kept apart on purpose:

- `Settings` holds the secrets (JWT_SECRET, DB_PASSWORD). They come from the
  process environment or config/.env and are never written to YAML.
- `AppConfig` holds everything else, one YAML file per section under
  config/settings/, each parsed into its strict schema from config_schema.

Both are cached; tests call `cache_clear()` on the getters to reload.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notepad.core.config_schema import (
    ApplicationSchema,
    ConcurrencySchema,
    DatabaseSchema,
    FeaturesSchema,
    LoggingSchema,
    SecuritySchema,
)

ROOT_MARKER = ".project_root"


def find_project_root() -> Path:
    """Walk up from the working directory to the directory holding `.project_root`."""
    for directory in (Path.cwd(), *Path.cwd().parents):
        if (directory / ROOT_MARKER).exists():
            return directory
    raise RuntimeError(f"Project root not found: no {ROOT_MARKER} above {Path.cwd()}")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Parse config/settings/<filename>; an empty file yields an empty dict."""
    path = find_project_root() / "config" / "settings" / filename
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return yaml.safe_load(path.read_text()) or {}


class Settings(BaseSettings):
    """Secrets. DB_PASSWORD may stay empty for SQLite."""

    jwt_secret: str
    db_password: str = ""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


SECTIONS: dict[str, type[BaseModel]] = {
    "application": ApplicationSchema,
    "database": DatabaseSchema,
    "logging": LoggingSchema,
    "features": FeaturesSchema,
    "security": SecuritySchema,
    "concurrency": ConcurrencySchema,
}


class AppConfig:
    """All YAML sections, validated. Attribute name = file stem."""

    application: ApplicationSchema
    database: DatabaseSchema
    logging: LoggingSchema
    features: FeaturesSchema
    security: SecuritySchema
    concurrency: ConcurrencySchema

    def __init__(self) -> None:
        for section, schema in SECTIONS.items():
            setattr(self, section, self._load_section(section, schema))

    @staticmethod
    def _load_section(section: str, schema: type[BaseModel]) -> BaseModel:
        filename = f"{section}.yaml"
        try:
            return schema(**load_yaml_config(filename))
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=str(find_project_root() / "config" / ".env"))


@lru_cache
def get_app_config() -> AppConfig:
    return AppConfig()


def get_database_url() -> str:
    """
    The SQLAlchemy URL of the note store.

    `database.url` is used as is when set (SQLite deployments and tests).
    Otherwise an asyncpg URL is built from the connection fields and
    the DB_PASSWORD secret.
    """
    db = get_app_config().database
    if db.url:
        return db.url
    password = get_settings().db_password
    return f"postgresql+asyncpg://{db.user}:{password}@{db.host}:{db.port}/{db.name}"
