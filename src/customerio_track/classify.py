# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn an HttpResponse into success or one of the two failure kinds."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .errors import UNKNOWN_RESPONSE_MESSAGE, ClientError, NetworkError
from .http.models import HttpResponse

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200


def parse_response_data(text: str | bytes | None) -> Any:
    """Decode a JSON response body; unreadable or empty bodies decode to ``{}``."""
    if not text:
        return {}
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return {}


def extract_error_message(data: Any) -> str | None:
    """Return ``meta.error`` from a decoded error body, if it is there."""
    if not isinstance(data, Mapping):
        return None
    meta = data.get("meta")
    if not isinstance(meta, Mapping):
        return None
    error = meta.get("error")
    if error is None or error == "":
        return None
    return str(error)


def process_response(response: HttpResponse) -> bool:
    """
    Classify one response.

    Raises NetworkError when the exchange did not complete, ClientError for any
    status other than 200 (201 and 204 included), and returns True otherwise.
    """
    if not response.ok:
        logger.debug("Network failure for %s: %s (%s)", response.url, response.error_message, response.error_code)
        raise NetworkError(response)

    if response.status_code != SUCCESS_STATUS:
        data = parse_response_data(response.text)
        message = extract_error_message(data) or UNKNOWN_RESPONSE_MESSAGE
        logger.debug("Client failure for %s: HTTP %s %s", response.url, response.status_code, message)
        raise ClientError(response, message, data)

    return True


__all__ = ["SUCCESS_STATUS", "extract_error_message", "parse_response_data", "process_response"]
