"""
Configuration read from environment variables.

Values may also come from a ``.env`` file, which
``hybrid_api.launcher.main`` loads with ``python-dotenv`` before any
settings are read.  Nothing here is read at import time.

Settings are split by consumer so that a bad value only affects the
part of the process that uses it:

* ``Settings`` (``get_settings``) holds what the launcher and the
  calculator service need at startup.
* ``SdkSettings`` (``get_sdk_settings``) holds what the calculator SDK
  needs.  The remote SDK variant re‑reads only the service URL on every
  call through ``get_service_url``.

Malformed numeric values raise ``ConfigurationError`` naming the
variable.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from hybrid_api.core.errors import ConfigurationError


T = TypeVar("T")

SERVICE_URL_VARIABLE = "CALCULATOR_SERVICE_URL"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_number(name: str, cast: Callable[[str], T], default: Optional[T] = None) -> Optional[T]:
    value = _env(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None


@dataclass
class Settings:
    """Process settings: logging, launcher and calculator server."""

    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE"))

    # Comma‑separated list of units to start, e.g.
    # TARGET_SERVICES="calculator-svc".  Required by the launcher.
    target_services: Optional[str] = field(default_factory=lambda: _env("TARGET_SERVICES"))

    calculator_host: str = field(default_factory=lambda: _env("CALCULATOR_HOST", "0.0.0.0"))
    calculator_port: int = field(default_factory=lambda: _env_number("CALCULATOR_PORT", int, 8080))


@dataclass
class SdkSettings:
    """Calculator SDK settings."""

    # Base URL of a running calculator service.  Only the remote
    # variant needs it, and only at call time.
    calculator_service_url: Optional[str] = field(default_factory=lambda: get_service_url())
    calculator_sdk_mode: str = field(default_factory=lambda: _env("CALCULATOR_SDK_MODE", "local"))
    # Seconds; unset means the remote call waits indefinitely.
    calculator_sdk_timeout: Optional[float] = field(
        default_factory=lambda: _env_number("CALCULATOR_SDK_TIMEOUT", float)
    )


def get_settings() -> Settings:
    """Return process settings reflecting the current environment."""
    return Settings()


def get_sdk_settings() -> SdkSettings:
    """Return SDK settings reflecting the current environment."""
    return SdkSettings()


def get_service_url() -> Optional[str]:
    return _env(SERVICE_URL_VARIABLE)
