"""
Refuse to serve with an unsafe configuration.

The lifespan calls `run_startup_checks()` before the app takes traffic
(unless features.security_startup_checks_enabled is off). Every problem is
collected first, so one failed start reports all of them.
"""

from notepad.core.config import AppConfig, Settings, get_app_config, get_settings
from notepad.core.logging import get_logger

logger = get_logger(__name__)


class StartupSecurityError(RuntimeError):
    pass


def _secret_problems(config: AppConfig, settings: Settings) -> list[str]:
    minimum = config.security.secrets_validation.jwt_secret_min_length
    length = len(settings.jwt_secret)
    if length < minimum:
        return [f"JWT_SECRET is {length} chars, at least {minimum} required"]
    return []


def _production_problems(config: AppConfig) -> list[str]:
    app = config.application
    if app.environment != "production":
        return []

    problems = []
    if app.debug:
        problems.append("debug is true in production")
    if app.docs_enabled:
        problems.append("docs_enabled is true in production")
    local = [origin for origin in app.cors.origins if "localhost" in origin]
    if local:
        problems.append(f"CORS allows localhost in production: {local}")
    return problems


def run_startup_checks() -> None:
    """
    Raises:
        StartupSecurityError: Listing every failed check
    """
    config = get_app_config()
    problems = _secret_problems(config, get_settings()) + _production_problems(config)

    if problems:
        for problem in problems:
            logger.error("Unsafe configuration", extra={"problem": problem})
        raise StartupSecurityError(
            f"Startup blocked by {len(problems)} security check(s):\n"
            + "\n".join(f"  - {problem}" for problem in problems)
        )

    logger.info(
        "Startup security checks passed",
        extra={"environment": config.application.environment},
    )
