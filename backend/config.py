"""
Application configuration.

Values come from environment variables (a local .env is loaded by main.py
before this module is imported). APP_ENV picks the environment:

  APP_ENV=development   default, uses a fixed dev session secret
  APP_ENV=test          same as development
  APP_ENV=production    SESSION_SECRET must be set

Example .env:
  APP_ENV=development
  SESSION_SECRET=change-me
  PORT=4567

Empty variables are treated as unset.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

DEV_SECRET = "dev-only-session-secret"
INSECURE_ENVS = ("development", "test")

TWO_WEEKS = 14 * 24 * 60 * 60

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# env var -> Settings field
ENV_VARS = {
    "APP_ENV": "app_env",
    "SESSION_SECRET": "session_secret",
    "SESSION_COOKIE": "session_cookie",
    "SESSION_MAX_AGE": "session_max_age",
    "SESSION_HTTPS_ONLY": "session_https_only",
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}


class ConfigError(ValueError):
    pass


class Settings(BaseModel):
    app_env: str = "development"
    session_secret: str = DEV_SECRET
    session_cookie: str = "session"
    session_max_age: int = TWO_WEEKS
    session_https_only: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @field_validator("app_env", mode="before")
    @classmethod
    def _normalize_env(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def reload(self) -> bool:
        return self.app_env == "development"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from a mapping of environment variables (os.environ by default)."""
    if environ is None:
        environ = os.environ

    values = {field: environ[key] for key, field in ENV_VARS.items() if environ.get(key)}

    try:
        settings = Settings(**values)
    except ValidationError as exc:
        fields = {field: key for key, field in ENV_VARS.items()}
        bad = ", ".join(
            f"{fields.get(err['loc'][0], err['loc'][0])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"Invalid configuration ({bad})") from exc

    if "session_secret" not in values and settings.app_env not in INSECURE_ENVS:
        raise ConfigError(f"SESSION_SECRET is required when APP_ENV={settings.app_env!r}")

    return settings
