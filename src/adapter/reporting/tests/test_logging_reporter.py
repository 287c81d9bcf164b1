"""Unit tests for LoggingErrorReporter."""

import unittest

from adapter.reporting.logging_reporter import LoggingErrorReporter
from domain.model.errors import ConfigurationError


class TestLoggingErrorReporter(unittest.TestCase):

    def setUp(self):
        self.reporter = LoggingErrorReporter()

    def test_log_error_logs_warning_and_returns(self):
        with self.assertLogs('adapter.reporting.logging_reporter', level='WARNING') as logs:
            self.reporter.log_error("The language was not found, defaulting to english")
        self.assertIn("defaulting to english", logs.output[0])
        self.assertTrue(logs.output[0].startswith("WARNING"))

    def test_throw_logs_error_and_raises(self):
        with self.assertLogs('adapter.reporting.logging_reporter', level='ERROR'):
            with self.assertRaises(ConfigurationError) as ctx:
                self.reporter.throw("Invalid Config Provided")
        self.assertEqual(str(ctx.exception), "Invalid Config Provided")


if __name__ == '__main__':
    unittest.main()
