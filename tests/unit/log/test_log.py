"""Tests for diagnostic logging setup."""

from __future__ import annotations

import io
import logging
import sys
import unittest

from repotree.log import LOGGER_NAME, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(stream=sys.stderr)

    def test_warnings_go_to_stream_with_level_prefix(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)

        logging.getLogger(f"{LOGGER_NAME}.tree_model.build").warning("Permission denied: Could not read directory %s", "/x")
        logging.getLogger(f"{LOGGER_NAME}.tree_model.build").info("hidden")

        self.assertEqual(stream.getvalue(), "WARNING: Permission denied: Could not read directory /x\n")

    def test_repeated_configuration_does_not_duplicate_handlers(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=io.StringIO())
        logger = configure_logging(verbose=True, stream=stream)

        logger.debug("once")

        self.assertEqual(stream.getvalue(), "DEBUG: once\n")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_logging_does_not_propagate_to_root(self) -> None:
        logger = configure_logging(stream=io.StringIO())

        self.assertFalse(logger.propagate)
        self.assertEqual(len([h for h in logger.handlers if isinstance(h, logging.StreamHandler)]), 1)


if __name__ == "__main__":
    unittest.main()
