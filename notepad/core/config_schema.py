"""
Typed shape of every file in config/settings/.

A model per file, named after it (database.yaml -> DatabaseSchema). Unknown
keys are rejected so a misspelled setting fails at startup instead of being
silently ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ServerSchema(_Section):
    host: str
    port: int = Field(ge=1, le=65535)


class CorsSchema(_Section):
    # "*" means any origin, served without credentials
    origins: list[str]


class ApplicationSchema(_Section):
    name: str
    version: str
    description: str
    environment: str
    debug: bool
    api_prefix: str
    docs_enabled: bool
    server: ServerSchema
    cors: CorsSchema


class DatabaseSchema(_Section):
    """Connection fields are ignored when `url` is set."""

    url: str | None = None
    host: str
    port: int
    name: str
    user: str
    ssl: bool = False
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(ge=1)
    pool_recycle: int
    echo: bool
    init_on_startup: bool


class ConsoleHandlerSchema(_Section):
    enabled: bool


class FileHandlerSchema(_Section):
    enabled: bool
    path: str
    max_bytes: int = Field(ge=1)
    backup_count: int = Field(ge=0)


class HandlersSchema(_Section):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_Section):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema


class FeaturesSchema(_Section):
    security_startup_checks_enabled: bool


class JwtSchema(_Section):
    algorithm: str
    access_token_expire_minutes: int = Field(ge=1)
    audience: str


class PasswordSchema(_Section):
    # bcrypt accepts 4..31
    bcrypt_rounds: int = Field(ge=4, le=31)


class SecretsValidationSchema(_Section):
    jwt_secret_min_length: int


class SecuritySchema(_Section):
    jwt: JwtSchema
    password: PasswordSchema
    secrets_validation: SecretsValidationSchema


class ThreadPoolSchema(_Section):
    max_workers: int = Field(ge=1)


class ConcurrencySchema(_Section):
    thread_pool: ThreadPoolSchema
