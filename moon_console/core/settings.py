from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from moon_console.core.errors import ConfigError

LOGIN_IDENTIFIERS = ("ssn", "username")

DEV_DATABASE_URL = "sqlite:///./moon_console.db"
DEV_DB_USER = "dev"
DEV_DB_PASS = "dev"


def _env_str(*keys: str) -> Optional[str]:
    """First non-empty (trimmed) value among the given env vars, else None."""
    for key in keys:
        raw = os.getenv(key)
        if raw is not None and raw.strip():
            return raw.strip()
    return None


def _env_bool(key: str, default: str = "0") -> bool:
    return os.getenv(key, default).strip().lower() not in ("0", "false", "no", "off", "")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True, slots=True)
class Settings:
    # Database. Explicit constructor values win over the environment.
    database_url: Optional[str] = field(default_factory=lambda: _env_str("APP_DB_URL", "APP_JDBC_URL"))
    db_user: Optional[str] = field(default_factory=lambda: _env_str("APP_DB_USER"))
    db_password: Optional[str] = field(default_factory=lambda: _env_str("APP_DB_PASS"))
    db_echo: bool = field(default_factory=lambda: _env_bool("DB_ECHO", "0"))

    # Login: which account column the identifier prompt checks (ssn|username).
    login_identifier: str = field(default_factory=lambda: (_env_str("APP_LOGIN_IDENTIFIER") or "ssn").lower())

    # Dev mode creates + seeds the schema on start and falls back to a local SQLite file.
    dev_mode: bool = field(default_factory=lambda: _env_bool("DEV_MODE", "0"))

    log_level: str = field(default_factory=lambda: (_env_str("LOG_LEVEL") or "WARNING").upper())

    def __post_init__(self) -> None:
        if self.login_identifier not in LOGIN_IDENTIFIERS:
            raise ValueError(
                f"login_identifier must be one of {', '.join(LOGIN_IDENTIFIERS)}, got {self.login_identifier!r}"
            )

    def require_database(self) -> Tuple[str, str, str]:
        """Return (url, user, password), trimmed, or raise ConfigError naming what is missing."""
        # An explicit but blank value still falls back to the environment.
        url = _clean(self.database_url) or _env_str("APP_DB_URL", "APP_JDBC_URL")
        user = _clean(self.db_user) or _env_str("APP_DB_USER")
        password = _clean(self.db_password) or _env_str("APP_DB_PASS")

        if self.dev_mode:
            url = url or DEV_DATABASE_URL
            user = user or DEV_DB_USER
            password = password or DEV_DB_PASS

        missing = [
            key
            for key, value in (("APP_DB_URL", url), ("APP_DB_USER", user), ("APP_DB_PASS", password))
            if value is None
        ]
        if missing:
            raise ConfigError(missing)
        return url, user, password
