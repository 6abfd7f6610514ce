"""
Logging.

structlog renders every record, including the ones uvicorn and SQLAlchemy
emit through the standard library, so both end up in the same handlers with
the same fields. Inside a request the middleware binds request_id, method and
path, and the bearer guard adds user_id once the token checks out.

Passwords, password hashes and tokens are never passed to a logger.

    setup_logging()                   # once, from the app lifespan or run.py
    logger = get_logger(__name__)
    logger.info("Note archived", extra={"note_id": note_id})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from notepad.core.config import find_project_root, get_app_config
from notepad.core.config_schema import FileHandlerSchema

# Chatty below WARNING: uvicorn logs every request, SQLAlchemy every statement
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _file_handler(settings: FileHandlerSchema, formatter: logging.Formatter) -> RotatingFileHandler:
    """JSON lines file; relative paths are taken from the project root."""
    path = Path(settings.path)
    if not path.is_absolute():
        path = find_project_root() / path
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        path,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Replace the root logger's handlers with the ones logging.yaml asks for.

    Each argument that is not None wins over its logging.yaml value; run.py
    uses this for -v/-d and a console renderer.
    """
    config = get_app_config().logging
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=pre_chain,
    )
    if (format_type or config.format) == "console":
        stream_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=pre_chain,
        )
    else:
        stream_formatter = json_formatter

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel((level or config.level).upper())

    if config.handlers.console.enabled if enable_console is None else enable_console:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(stream_formatter)
        root.addHandler(stream_handler)

    if config.handlers.file.enabled if enable_file_logging is None else enable_file_logging:
        root.addHandler(_file_handler(config.handlers.file, json_formatter))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def bind_user_context(user_id: str) -> None:
    """Tag the rest of the current request's records with the caller's id."""
    structlog.contextvars.bind_contextvars(user_id=user_id)
