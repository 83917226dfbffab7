# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
from contextlib import ExitStack

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    httpx fixes proxy and TLS verification per ``httpx.Client``. When this wrapper
    builds its own client, a request asking for a different proxy or verification
    mode is sent through a short-lived client built for it. An injected client is
    always used as given, so such a request is rejected with ValueError instead.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._owns_client = client is None
        self._verify_ssl = self.settings.verify_ssl
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self._verify_ssl,
        )

    def _needs_dedicated_client(self, request: HttpRequest) -> bool:
        if request.proxy is None and request.verify_ssl == self._verify_ssl:
            return False
        if not self._owns_client:
            raise ValueError(
                "proxy/verify_ssl request options cannot be applied to an injected httpx.Client; "
                "configure them on that client instead"
            )
        return True

    def _open_dedicated_client(self, request: HttpRequest, stack: ExitStack) -> httpx.Client:
        return stack.enter_context(
            httpx.Client(
                proxy=request.proxy,
                verify=request.verify_ssl,
                timeout=self.settings.timeout,
            )
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        dedicated = self._needs_dedicated_client(request)
        headers = dict(request.headers or {})
        if not any(key.lower() == "user-agent" for key in headers):
            headers["User-Agent"] = self.settings.user_agent

        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = HttpSettings.max_body_bytes

        try:
            with ExitStack() as stack:
                client = self._open_dedicated_client(request, stack) if dedicated else self._client
                with client.stream(
                    request.method,
                    request.url,
                    headers=headers,
                    content=request.body,
                    auth=request.auth,
                    timeout=timeout,
                    follow_redirects=request.allow_redirects,
                ) as resp:
                    content = bytearray()
                    for chunk in resp.iter_bytes():
                        if not chunk:
                            continue
                        remaining = max_body_bytes - len(content)
                        if len(chunk) > remaining:
                            content.extend(chunk[:remaining])
                            logger.debug("Response body from %s truncated at %d bytes", request.url, max_body_bytes)
                            break
                        content.extend(chunk)

                    encoding = resp.encoding or "utf-8"
                    try:
                        text = bytes(content).decode(encoding, errors="replace")
                    except LookupError:
                        text = bytes(content).decode("utf-8", errors="replace")

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                text=text,
                content=bytes(content),
                url=request.url,
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_code=category.value,
                error_type=type(exc).__name__,
                errors=(str(exc) or type(exc).__name__,),
            )

    def close(self) -> None:
        self._client.close()
