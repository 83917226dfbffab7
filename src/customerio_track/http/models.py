# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by transports and the API client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .headers import normalize_headers

Headers = dict[str, str]


@dataclass(frozen=True)
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    auth: tuple[str, str] | None = field(default=None, repr=False)
    timeout: float | None = None
    allow_redirects: bool = True
    verify_ssl: bool = True
    proxy: str | None = None


@dataclass(frozen=True)
class HttpResponse:
    """
    Outcome of one dispatched request.

    ``ok`` reports whether the exchange completed at the transport layer; it says
    nothing about the HTTP status. ``errors`` is the raw transport error list.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_code: str | None = None
    error_type: str | None = None
    errors: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> HttpResponse:
        """Helper to normalize dictionary-like responses (e.g., canned test fixtures)."""
        raw_headers: Any = data.get("headers") or {}
        headers: Headers = normalize_headers(raw_headers) if isinstance(raw_headers, Mapping) else {}

        raw_body = data.get("body")
        content: bytes = b""
        text: str = ""
        if isinstance(raw_body, (bytes, bytearray, memoryview)):
            content = bytes(raw_body)
            text = content.decode("utf-8", errors="replace")
        elif isinstance(raw_body, str):
            text = raw_body
            content = raw_body.encode("utf-8")

        raw_errors = data.get("errors") or ()
        if isinstance(raw_errors, str):
            raw_errors = (raw_errors,)

        return cls(
            ok=bool(data.get("ok")),
            status_code=data.get("status_code"),
            headers=headers,
            text=text,
            content=content,
            url=data.get("url"),
            error_message=data.get("error_message"),
            error_code=data.get("error_code"),
            error_type=data.get("error_type"),
            errors=tuple(str(item) for item in raw_errors),
        )
