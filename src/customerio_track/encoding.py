# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request body encoders for the two payload formats the track API accepts."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def _form_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _flatten(prefix: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, out)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, out)
        return
    out.append((prefix, _form_scalar(value)))


def form_pairs(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """
    Flatten a payload into form fields using bracket notation.

    ``{"name": "x", "data": {"plan": "pro", "tags": ["a"]}}`` becomes
    ``name=x``, ``data[plan]=pro``, ``data[tags][0]=a``. Booleans become ``1``/``0``
    and ``None`` values (and empty containers) are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(str(key), value, pairs)
    return pairs


def form_encode(params: Mapping[str, Any]) -> str:
    """Encode a payload as application/x-www-form-urlencoded."""
    return urlencode(form_pairs(params))


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_encode(params: Mapping[str, Any]) -> str:
    """Encode a payload as compact JSON."""
    return json.dumps(dict(params), separators=(",", ":"), default=_json_default)


__all__ = [
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "form_encode",
    "form_pairs",
    "json_encode",
]
