"""Tests for Settings, the bound validators and the command line."""

import logging
import os
import tempfile
import unittest

from config import Settings, valid_size, valid_delay, DEFAULT_SIZE, DEFAULT_DELAY_MS
from logging_config import setup_logging
from main import parse_settings


class TestBounds(unittest.TestCase):

    def test_size_bounds(self):
        self.assertFalse(valid_size(4))
        self.assertTrue(valid_size(5))
        self.assertTrue(valid_size(50))
        self.assertFalse(valid_size(51))

    def test_delay_bounds(self):
        self.assertFalse(valid_delay(9))
        self.assertTrue(valid_delay(10))
        self.assertTrue(valid_delay(1000))
        self.assertFalse(valid_delay(1001))

    def test_rejected_values_leave_settings_unchanged(self):
        s = Settings()
        self.assertFalse(s.set_size(51))
        self.assertFalse(s.set_delay(5))
        self.assertEqual((s.size, s.delay_ms), (DEFAULT_SIZE, DEFAULT_DELAY_MS))
        self.assertTrue(s.set_size(5))
        self.assertEqual(s.size, 5)

    def test_for_tests_disables_pacing(self):
        s = Settings.for_tests(size=7)
        self.assertEqual(s.delay_ms, 0)
        self.assertEqual(s.intro_pause_ms, 0)
        self.assertFalse(s.clear_screen)
        self.assertFalse(s.pause_after_action)
        self.assertEqual(s.size, 7)


class TestCommandLine(unittest.TestCase):

    def test_defaults(self):
        args = parse_settings([])
        self.assertEqual(args.size, DEFAULT_SIZE)
        self.assertEqual(args.delay, DEFAULT_DELAY_MS)
        self.assertIsNone(args.seed)
        self.assertFalse(args.no_clear)

    def test_flags(self):
        args = parse_settings(["--size", "50", "--delay", "10", "--seed", "3", "--no-clear"])
        self.assertEqual((args.size, args.delay, args.seed, args.no_clear), (50, 10, 3, True))

    def test_out_of_bounds_flags_exit(self):
        for argv in (["--size", "4"], ["--size", "51"], ["--delay", "9"], ["--delay", "1001"]):
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit):
                    parse_settings(argv)


class TestLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        for h in root.handlers:
            h.close()
        root.handlers = self._saved[1]
        root.setLevel(self._saved[0])

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "run.log")
            setup_logging(level=logging.DEBUG, log_file=path)
            logging.getLogger("engine.runner").info("hello")
            for h in logging.getLogger().handlers:
                h.flush()
            with open(path, encoding="utf-8") as f:
                self.assertIn("engine.runner - INFO - hello", f.read())
            for h in logging.getLogger().handlers:
                h.close()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":
    unittest.main()
