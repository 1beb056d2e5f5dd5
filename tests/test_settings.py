"""
Tests for environment settings and logging setup.
"""

import logging
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from infix.config.logging import configure_logging
from infix.config.settings import Settings, load_settings, settings_summary
from infix.parser.errors import ErrorKind
from infix.parser.recognizer import Recognizer


CLEAN_ENV = {k: v for k, v in os.environ.items() if not k.startswith("INFIX_")}


@mock.patch.dict(Settings.model_config, {"env_file": None})
@mock.patch.dict(os.environ, CLEAN_ENV, clear=True)
class TestSettings(unittest.TestCase):
    """Test cases for loading settings from the environment."""

    def test_defaults(self):
        settings = load_settings()
        self.assertEqual(settings.delimiter, " ")
        self.assertEqual(settings.max_nesting_depth, 256)
        self.assertFalse(settings.chain_operators)
        self.assertEqual(settings.log_level, "WARNING")

    def test_environment_values(self):
        with mock.patch.dict(os.environ, {
            "INFIX_CHAIN_OPERATORS": "true",
            "INFIX_MAX_NESTING_DEPTH": "8",
            "INFIX_LOG_LEVEL": "debug",
        }):
            settings = load_settings()
        self.assertTrue(settings.chain_operators)
        self.assertEqual(settings.max_nesting_depth, 8)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_local_env_file_is_not_read(self):
        """A .env in the working directory stays out of these tests."""
        saved_cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, ".env"), "w", encoding="utf-8") as f:
                f.write("INFIX_CHAIN_OPERATORS=true\nINFIX_MAX_NESTING_DEPTH=3\n")
            os.chdir(tmp)
            try:
                settings = load_settings()
            finally:
                os.chdir(saved_cwd)
        self.assertFalse(settings.chain_operators)
        self.assertEqual(settings.max_nesting_depth, 256)

    def test_overrides_win(self):
        with mock.patch.dict(os.environ, {"INFIX_CHAIN_OPERATORS": "false"}):
            settings = load_settings(chain_operators=True)
        self.assertTrue(settings.chain_operators)

    def test_invalid_values(self):
        for env in ({"INFIX_MAX_NESTING_DEPTH": "0"},
                    {"INFIX_MAX_NESTING_DEPTH": "100000"},
                    {"INFIX_LOG_LEVEL": "chatty"},
                    {"INFIX_DELIMITER": ""}):
            with mock.patch.dict(os.environ, env):
                with self.assertRaises(RuntimeError, msg=str(env)):
                    load_settings()

    def test_recognizer_from_settings(self):
        recognizer = Recognizer.from_settings(Settings(chain_operators=True, max_nesting_depth=2))
        self.assertTrue(recognizer.validate("1 + 2 + 3").ok)
        error = recognizer.validate("1 + ( 1 + ( 1 + ( 1 + 1 ) ) )").error
        self.assertEqual(error.kind, ErrorKind.NESTING_TOO_DEEP)

    def test_summary(self):
        summary = settings_summary(Settings(delimiter=","))
        self.assertIn("delimiter=','", summary)
        self.assertIn("chain_operators=False", summary)


class TestConfigureLogging(unittest.TestCase):

    def test_sets_root_level(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, root.handlers[:]
        try:
            root.handlers = []
            configure_logging("debug")
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


if __name__ == '__main__':
    unittest.main()
