# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for the Customer.io track client."""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "customerio_track"
DEFAULT_LOG_LEVEL = os.getenv("CUSTOMERIO_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [customerio-track] %(name)s: %(message)s"

# The library only logs at DEBUG; handlers are left to the host application.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: str | None = None, *, logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Surface the client's own log records.

    The level is set on ``logger_name`` (the package logger by default) rather than
    the root logger, so turning on DEBUG here does not also unmute httpx/httpcore.
    A root handler is installed only if the application has none yet.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(format=LOG_FORMAT)
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, effective_level, logging.WARNING))
    return logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "setup_logging"]
