# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import unittest
from unittest.mock import patch

from customerio_track.log import LOG_FORMAT, PACKAGE_LOGGER, setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self._saved_levels = {
            name: logging.getLogger(None if name == "root" else name).level for name in (PACKAGE_LOGGER, "customerio_track.client", "root")
        }

    def tearDown(self):
        for name, level in self._saved_levels.items():
            logging.getLogger(None if name == "root" else name).setLevel(level)

    def test_level_applies_to_package_logger_only(self):
        root_level = logging.getLogger().level
        with patch("customerio_track.log.logging.basicConfig") as basic_config:
            logger = setup_logging("debug")
        basic_config.assert_called_once_with(format=LOG_FORMAT)
        self.assertEqual(logger.name, PACKAGE_LOGGER)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logging.getLogger().level, root_level)

    def test_named_logger_and_unknown_level(self):
        with patch("customerio_track.log.logging.basicConfig"):
            logger = setup_logging("chatty", logger_name="customerio_track.client")
        self.assertEqual(logger.name, "customerio_track.client")
        self.assertEqual(logger.level, logging.WARNING)

    def test_format_names_the_package(self):
        self.assertIn("customerio-track", LOG_FORMAT)

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        self.assertTrue(any(isinstance(handler, logging.NullHandler) for handler in handlers))


if __name__ == "__main__":
    unittest.main()
