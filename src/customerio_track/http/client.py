# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport protocol the track client dispatches through, and its default factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    import httpx

    from .httpx_client import HttpxClient


class HttpClient(Protocol):
    """
    Anything that can carry one HttpRequest to the API.

    ``request`` must not raise for transport problems: a DNS, TLS, timeout or
    connection failure comes back as ``HttpResponse(ok=False, ...)`` so the
    classifier can turn it into a NetworkError. ``close`` releases pooled
    connections; CustomerIOClient only calls it on transports it created itself.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(
    settings: HttpSettings | None = None,
    client: httpx.Client | None = None,
) -> HttpxClient:
    """Build the httpx transport CustomerIOClient uses when none is injected."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings(), client=client)
