# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the Customer.io track client."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_API_ENDPOINT = "https://track.customer.io/api"
DEFAULT_USER_AGENT = f"customerio-track/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class HttpSettings:
    """Transport defaults applied to any request option the caller leaves unset."""

    api_endpoint: str = DEFAULT_API_ENDPOINT
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("CUSTOMERIO_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        max_body_bytes = _int_env("CUSTOMERIO_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            api_endpoint=_str_env("CUSTOMERIO_API_ENDPOINT", cls.api_endpoint).rstrip("/"),
            timeout=timeout,
            user_agent=_str_env("CUSTOMERIO_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("CUSTOMERIO_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("CUSTOMERIO_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
