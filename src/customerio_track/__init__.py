# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Customer.io track API client.

``CustomerIOClient`` creates, updates and deletes customer records and tracks
customer events. HTTP behavior is abstracted behind an injectable client
interface (httpx by default), and failures surface as two exception types:
``NetworkError`` when the exchange never completed and ``ClientError`` when the
API answered with anything other than HTTP 200.
"""

from .classify import extract_error_message, parse_response_data, process_response
from .client import Credentials, CustomerIOClient
from .config import HttpSettings, load_http_settings
from .errors import ClientError, CustomerIOError, ErrorCategory, NetworkError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .options import RequestOptions, merge_options
from .version import __version__

__all__ = [
    "ClientError",
    "Credentials",
    "CustomerIOClient",
    "CustomerIOError",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "NetworkError",
    "RequestOptions",
    "StubHttpClient",
    "create_default_http_client",
    "extract_error_message",
    "load_http_settings",
    "merge_options",
    "parse_response_data",
    "process_response",
    "setup_logging",
    "__version__",
]
