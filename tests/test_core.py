from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from acmatch.core import logger as logger_module
from acmatch.core.config import Settings
from acmatch.core.exceptions import AcMatchError, InvalidArgumentError


class SettingsTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        self.assertEqual(s.LOG_LEVEL, "INFO")
        self.assertEqual(s.LOG_FILE, "")
        self.assertFalse(s.IGNORE_CASE)
        self.assertEqual(s.MASK_PATTERN, "*")
        self.assertFalse(s.REMOVE_OVERLAPS)

    def test_env_prefix(self) -> None:
        env = {"ACMATCH_IGNORE_CASE": "true", "ACMATCH_MASK_PATTERN": "#", "IGNORE_CASE": "false"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)
        self.assertTrue(s.IGNORE_CASE)
        self.assertEqual(s.MASK_PATTERN, "#")


class LoggerSetupTestCase(unittest.TestCase):
    def test_console_only(self) -> None:
        with patch.object(logger_module, "logger") as mock_logger:
            logger_module.setup_logger(level="DEBUG", log_file="")
        mock_logger.remove.assert_called_once_with()
        self.assertEqual(mock_logger.add.call_count, 1)
        self.assertEqual(mock_logger.add.call_args.kwargs["level"], "DEBUG")

    def test_with_log_file(self) -> None:
        with patch.object(logger_module, "logger") as mock_logger:
            logger_module.setup_logger(level="WARNING", log_file="acmatch.log")
        self.assertEqual(mock_logger.add.call_count, 2)
        file_call = mock_logger.add.call_args_list[1]
        self.assertEqual(file_call.args[0], "acmatch.log")
        self.assertEqual(file_call.kwargs["rotation"], "100 MB")
        self.assertEqual(file_call.kwargs["level"], "WARNING")

    def test_falls_back_to_settings(self) -> None:
        with patch.object(logger_module.settings, "LOG_LEVEL", "ERROR"), patch.object(
            logger_module.settings, "LOG_FILE", ""
        ), patch.object(logger_module, "logger") as mock_logger:
            logger_module.setup_logger()
        self.assertEqual(mock_logger.add.call_count, 1)
        self.assertEqual(mock_logger.add.call_args.kwargs["level"], "ERROR")


class ExceptionsTestCase(unittest.TestCase):
    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(InvalidArgumentError, AcMatchError))
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))


if __name__ == "__main__":
    unittest.main()
