# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Transport options layered onto every request.

Options come from up to three places, merged in this order (later wins):

1. ``HttpSettings`` defaults (environment-backed),
2. options given to ``CustomerIOClient`` at construction,
3. options given to a single operation call.

Scalar fields left as ``None`` do not override earlier layers. Headers merge per
header name, case-insensitively.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Union

from .config import HttpSettings
from .http.headers import merge_headers


@dataclass(frozen=True)
class RequestOptions:
    """Immutable set of transport options; ``None`` means "not set here"."""

    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float | None = None
    proxy: str | None = None
    verify_ssl: bool | None = None
    allow_redirects: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(merge_headers(self.headers)))
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RequestOptions:
        """Build options from a plain dict, rejecting keys that are not transport options."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise TypeError(f"Unknown request option(s): {', '.join(unknown)}")
        values = {key: value for key, value in data.items() if value is not None}
        if "headers" in values and not isinstance(values["headers"], Mapping):
            raise TypeError("headers option must be a mapping")
        return cls(**values)

    @classmethod
    def from_settings(cls, settings: HttpSettings) -> RequestOptions:
        """Base layer carrying the settings-level defaults."""
        return cls(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
            allow_redirects=settings.allow_redirects,
        )


OptionsLike = Union[RequestOptions, Mapping[str, Any], None]


def coerce_options(value: OptionsLike) -> RequestOptions:
    """Accept RequestOptions, a plain mapping, or None."""
    if value is None:
        return RequestOptions()
    if isinstance(value, RequestOptions):
        return value
    if isinstance(value, Mapping):
        return RequestOptions.from_mapping(value)
    raise TypeError(f"options must be RequestOptions or a mapping, not {type(value).__name__}")


def merge_options(*layers: OptionsLike) -> RequestOptions:
    """Merge option layers left to right; the last layer that sets a field wins."""
    resolved = [coerce_options(layer) for layer in layers]
    merged: dict[str, Any] = {
        "headers": merge_headers(*(layer.headers for layer in resolved)),
    }
    for f in fields(RequestOptions):
        if f.name == "headers":
            continue
        for layer in resolved:
            value = getattr(layer, f.name)
            if value is not None:
                merged[f.name] = value
    return RequestOptions(**merged)


__all__ = ["OptionsLike", "RequestOptions", "coerce_options", "merge_options"]
