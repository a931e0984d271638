"""Tests for logging configuration."""
import logging
import os
import unittest
from unittest import mock

from tex_renderer.utils import logger as logger_module


class LoggerConfigTest(unittest.TestCase):
    def test_default_level(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(logger_module._configured_level(), logging.INFO)

    def test_env_override(self) -> None:
        with mock.patch.dict(os.environ, {"TEX_RENDERER_LOG_LEVEL": "debug"}):
            self.assertEqual(logger_module._configured_level(), logging.DEBUG)

    def test_invalid_env_value_falls_back(self) -> None:
        with mock.patch.dict(os.environ, {"TEX_RENDERER_LOG_LEVEL": "chatty"}):
            self.assertEqual(logger_module._configured_level(), logging.INFO)

    def test_named_logger(self) -> None:
        self.assertEqual(logger_module.get_logger("tex_renderer.tests").name, "tex_renderer.tests")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
