"""Tests for strategy detection and environment configuration."""

import os
import unittest
from unittest import mock

from tree_killer.config import env_milliseconds
from tree_killer.strategy import KillStrategy, detect_strategy


class TestDetectStrategy(unittest.TestCase):
    def test_windows_uses_native_tree_kill(self):
        self.assertIs(detect_strategy("win32"), KillStrategy.NATIVE_TREE_KILL)

    def test_posix_enumerates(self):
        for platform in ("linux", "darwin", "freebsd14"):
            with self.subTest(platform=platform):
                self.assertIs(detect_strategy(platform), KillStrategy.ENUMERATE_AND_SIGNAL)


class TestEnvMilliseconds(unittest.TestCase):
    """Test reading millisecond settings from the environment."""

    def test_unset_uses_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(env_milliseconds("TREE_KILLER_TEST_MS", 50), 50)

    def test_valid_value(self):
        with mock.patch.dict(os.environ, {"TREE_KILLER_TEST_MS": "120"}):
            self.assertEqual(env_milliseconds("TREE_KILLER_TEST_MS", 50), 120)

    def test_invalid_values_fall_back(self):
        for raw in ("abc", "0", "-10", "  "):
            with self.subTest(raw=raw), mock.patch.dict(os.environ, {"TREE_KILLER_TEST_MS": raw}):
                self.assertEqual(env_milliseconds("TREE_KILLER_TEST_MS", 50), 50)


if __name__ == "__main__":
    unittest.main()
