# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests and offline development.

    Responses are keyed by ``(method, url)`` or by ``url`` alone; every request is
    recorded on ``requests`` so callers can assert on what would have been sent.
    """

    def __init__(self, responses: Mapping[Any, HttpResponse] | None = None, default: HttpResponse | None = None):
        self._responses: dict[Any, HttpResponse] = dict(responses or {})
        self._default = default
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Mapping[str, Any], *, method: str | None = None) -> None:
        if not isinstance(response, HttpResponse):
            response = HttpResponse.from_mapping(response)
        key: Any = (method.upper(), url) if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in ((request.method.upper(), request.url), request.url):
            if key in self._responses:
                return self._responses[key]
        if self._default is not None:
            return self._default
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message="No stubbed response configured",
            error_code="UNKNOWN_ERROR",
            errors=("No stubbed response configured",),
        )

    @property
    def last_request(self) -> HttpRequest | None:
        return self.requests[-1] if self.requests else None

    def close(self) -> None:
        self.closed = True
