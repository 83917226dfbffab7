# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Customer.io track API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

from .classify import process_response
from .config import HttpSettings, load_http_settings
from .encoding import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, form_encode, json_encode
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest
from .http.url import build_api_url
from .options import OptionsLike, RequestOptions, coerce_options, merge_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Site id / secret key pair sent as HTTP Basic auth on every request."""

    site_id: str
    secret_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.site_id:
            raise ValueError("site_id is required")
        if not self.secret_key:
            raise ValueError("secret_key is required")

    @property
    def basic_auth(self) -> tuple[str, str]:
        return (self.site_id, self.secret_key)


def _require(value: str, name: str) -> str:
    if value is None or str(value) == "":
        raise ValueError(f"{name} is required")
    return str(value)


def customer_payload(email: str, attributes: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Attributes plus email; the explicit email replaces any ``email`` attribute."""
    payload = dict(attributes or {})
    payload["email"] = email
    return payload


def event_payload(event_name: str, metadata: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Event name, with metadata nested under ``data`` only when there is some."""
    payload: dict[str, Any] = {"name": event_name}
    if metadata:
        payload["data"] = dict(metadata)
    return payload


class CustomerIOClient:
    """
    Client for the Customer.io track API.

    Every operation performs one synchronous request, returns True when the API
    answers HTTP 200, and raises NetworkError or ClientError otherwise. The client
    keeps no per-call state, so one instance can be shared between threads when
    its transport allows it (the default httpx transport does).

    A transport passed as ``http_client`` belongs to the caller and is not closed
    by ``close()``; the default transport is created and owned by the client.
    """

    def __init__(
        self,
        site_id: str,
        secret_key: str,
        options: OptionsLike = None,
        *,
        http_client: HttpClient | None = None,
        settings: HttpSettings | None = None,
    ):
        self.credentials = Credentials(site_id, secret_key)
        self.settings = settings or load_http_settings()
        self.options = coerce_options(options)
        self._owns_http_client = http_client is None
        self.http_client = http_client or create_default_http_client(self.settings)

    @property
    def api_endpoint(self) -> str:
        return self.settings.api_endpoint

    def _customer_url(self, customer_id: str, *extra: str) -> str:
        return build_api_url(self.api_endpoint, "v1", "customers", _require(customer_id, "customer_id"), *extra)

    def _build_request(
        self,
        method: str,
        url: str,
        *,
        body: str | None = None,
        content_type: str | None = None,
        options: OptionsLike = None,
    ) -> HttpRequest:
        layers: list[OptionsLike] = [RequestOptions.from_settings(self.settings), self.options, options]
        if content_type:
            layers.append(RequestOptions(headers={"Content-Type": content_type}))
        merged = merge_options(*layers)
        return HttpRequest(
            url=url,
            method=method,
            headers=dict(merged.headers),
            body=body,
            auth=self.credentials.basic_auth,
            timeout=merged.timeout,
            allow_redirects=bool(merged.allow_redirects),
            verify_ssl=bool(merged.verify_ssl),
            proxy=merged.proxy,
        )

    def _send(self, request: HttpRequest) -> bool:
        logger.debug("%s %s", request.method, request.url)
        response = self.http_client.request(request)
        return process_response(response)

    def create_customer(
        self,
        customer_id: str,
        email: str,
        attributes: Mapping[str, Any] | None = None,
        *,
        options: OptionsLike = None,
    ) -> bool:
        """Create (upsert) a customer with a form-encoded body."""
        request = self._build_request(
            "PUT",
            self._customer_url(customer_id),
            body=form_encode(customer_payload(email, attributes)),
            content_type=FORM_CONTENT_TYPE,
            options=options,
        )
        return self._send(request)

    def update_customer(
        self,
        customer_id: str,
        email: str,
        attributes: Mapping[str, Any] | None = None,
        *,
        options: OptionsLike = None,
    ) -> bool:
        """Update (upsert) a customer with a JSON body; same endpoint as create_customer."""
        request = self._build_request(
            "PUT",
            self._customer_url(customer_id),
            body=json_encode(customer_payload(email, attributes)),
            content_type=JSON_CONTENT_TYPE,
            options=options,
        )
        return self._send(request)

    def delete_customer(self, customer_id: str, *, options: OptionsLike = None) -> bool:
        """Delete a customer and everything attached to it."""
        request = self._build_request("DELETE", self._customer_url(customer_id), options=options)
        return self._send(request)

    def track_event(
        self,
        customer_id: str,
        event_name: str,
        metadata: Mapping[str, Any] | None = None,
        *,
        options: OptionsLike = None,
    ) -> bool:
        """Record a named event for a customer."""
        url = self._customer_url(customer_id, "events")
        request = self._build_request(
            "POST",
            url,
            body=form_encode(event_payload(_require(event_name, "event_name"), metadata)),
            content_type=FORM_CONTENT_TYPE,
            options=options,
        )
        return self._send(request)

    def close(self) -> None:
        if not self._owns_http_client:
            return
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> CustomerIOClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

    def __repr__(self) -> str:
        return f"CustomerIOClient(site_id={self.credentials.site_id!r}, api_endpoint={self.api_endpoint!r})"


__all__ = ["Credentials", "CustomerIOClient", "customer_payload", "event_payload"]
