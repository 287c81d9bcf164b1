"""Tests for structured JSON logging."""

import json
import logging
import unittest
from unittest.mock import patch

from utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):

    def make_record(self, **extra):
        record = logging.LogRecord(
            name="services.translator_service", level=logging.INFO, pathname=__file__,
            lineno=1, msg="Sentence %s", args=("translated",), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_core_fields(self):
        data = json.loads(JSONFormatter().format(self.make_record()))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.translator_service")
        self.assertEqual(data["message"], "Sentence translated")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_includes_extra_fields(self):
        data = json.loads(JSONFormatter().format(self.make_record(language="english", reverse=True)))

        self.assertEqual(data["language"], "english")
        self.assertTrue(data["reverse"])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger()
        self._handlers = self.root.handlers[:]
        self._level = self.root.level

    def tearDown(self):
        self.root.handlers = self._handlers
        self.root.setLevel(self._level)

    def test_installs_json_handler(self):
        setup_structured_logging("DEBUG")

        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(len(self.root.handlers), 1)
        self.assertIsInstance(self.root.handlers[0].formatter, JSONFormatter)

    @patch.dict('os.environ', {'LOG_LEVEL': 'warning'})
    def test_level_from_env(self):
        setup_structured_logging()

        self.assertEqual(self.root.level, logging.WARNING)

    def test_unknown_level_defaults_to_info(self):
        setup_structured_logging("LOUD")

        self.assertEqual(self.root.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
