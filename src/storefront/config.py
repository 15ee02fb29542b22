"""Environment-driven settings.

Persistence and messaging are configured in ``domain.toml`` (overlay chosen by
``PROTEAN_ENV``); the values here cover what protean does not: logging and the
bearer-token signing parameters.
"""

import os

_DEFAULT_JWT_SECRET = "storefront-dev-secret-change-me"


def get_environment() -> str:
    """Return the deployment environment name, lower-cased."""
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Get log level based on environment."""
    level_map = {
        "production": "INFO",
        "staging": "INFO",
        "development": "DEBUG",
        "test": "WARNING",
    }

    return os.getenv("LOG_LEVEL", level_map.get(get_environment(), "INFO"))


def get_log_dir() -> str | None:
    """Directory for rotating log files; ``LOG_DIR=""`` disables file logging."""
    log_dir = os.getenv("LOG_DIR", "logs")
    return log_dir or None


def get_jwt_secret() -> str:
    return os.getenv("JWT_SECRET", _DEFAULT_JWT_SECRET)


def get_jwt_expiry_days() -> int:
    try:
        return int(os.getenv("JWT_EXPIRY_DAYS", "7"))
    except ValueError:
        return 7
