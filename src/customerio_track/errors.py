# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception types raised by the track client."""

from __future__ import annotations

import socket
import ssl
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .http.models import HttpResponse

UNKNOWN_RESPONSE_MESSAGE = "unknown response"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROXY_ERROR = "PROXY_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx transport exceptions to ErrorCategory.

    httpx wraps the underlying socket/ssl error, so the cause chain is walked
    before falling back to the httpx exception class.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    cause: BaseException | None = exc
    seen: set[int] = set()
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        if isinstance(cause, (ssl.SSLError, ssl.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(cause, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        cause = cause.__cause__ or cause.__context__

    if isinstance(exc, httpx.ProxyError):
        return ErrorCategory.PROXY_ERROR
    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError)):
        return ErrorCategory.PROTOCOL_ERROR
    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class CustomerIOError(Exception):
    """Base class for failures reported by CustomerIOClient operations."""

    def __init__(self, message: str | None, response: HttpResponse | None = None):
        self.message = message
        self.response = response
        super().__init__(message)


class NetworkError(CustomerIOError):
    """The HTTP exchange did not complete at the transport layer."""

    def __init__(self, response: HttpResponse):
        self.error_code = response.error_code
        self.url = response.url
        super().__init__(response.error_message, response)

    def __str__(self) -> str:
        return f"Customer.io network error: {self.message or 'transport failure'}"


class ClientError(CustomerIOError):
    """The exchange completed but the API did not answer with HTTP 200."""

    def __init__(self, response: HttpResponse, message: str, data: Any = None):
        self.status_code = response.status_code
        self.errors = list(response.errors)
        self.data = data if data is not None else {}
        super().__init__(message or UNKNOWN_RESPONSE_MESSAGE, response)

    def __str__(self) -> str:
        return f"Customer.io client error: {self.message}"


__all__ = [
    "ClientError",
    "CustomerIOError",
    "ErrorCategory",
    "NetworkError",
    "UNKNOWN_RESPONSE_MESSAGE",
    "categorize_exception",
]
