# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for API endpoints."""

from __future__ import annotations

from urllib.parse import quote


def quote_path_segment(value: object) -> str:
    """Percent-encode one path segment, including `/`, so ids cannot escape their slot."""
    return quote(str(value), safe="")


def build_api_url(base_url: str, *segments: object) -> str:
    """
    Join an API base URL with path segments, encoding each segment.

    Example:
      build_api_url("https://track.customer.io/api", "v1", "customers", "a/b")
        -> https://track.customer.io/api/v1/customers/a%2Fb
    """
    base = str(base_url or "").rstrip("/")
    path = "/".join(quote_path_segment(segment) for segment in segments)
    return f"{base}/{path}" if path else base


__all__ = ["build_api_url", "quote_path_segment"]
