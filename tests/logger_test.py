#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, TreeLog, CodingProgressStep, EncodedSymbolLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is an error", self.captured_output.getvalue())

    def test_info_is_recorded_silently(self):
        self.logger.log(TreeLog(5, 3))
        self.assertEqual(self.captured_output.getvalue(), "")
        self.assertEqual(self.logger.get_logs(TreeLog)[0].depth, 3)

    def test_get_logs_by_type(self):
        self.logger.log(TreeLog(2, 1))
        self.logger.log(EncodedSymbolLog(65, "01"))
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.assertEqual([log.code for log in self.logger.get_logs(EncodedSymbolLog)], ["01"])

    def test_progress_interval(self):
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding", 4))
        printed = self.captured_output.getvalue()
        self.assertIn("Encoding (2/4)", printed)
        self.assertIn("Encoding (4/4)", printed)
        self.assertNotIn("Encoding (1/4)", printed)
        self.assertEqual(self.logger.logs, [])

    def test_plain_progress_log(self):
        self.logger.log(Log("Progress", LogLevel.PROGRESS, "halfway"))
        self.assertEqual(self.logger.logs, [])
        self.assertIn("halfway", self.captured_output.getvalue())

        self.logger.record_progress = True
        self.logger.log(Log("Progress", LogLevel.PROGRESS, "done"))
        self.assertEqual([log.message for log in self.logger.logs], ["done"])
        self.assertEqual(self.logger.coding_progress_count, 0)

    def test_save(self):
        self.logger.log(TreeLog(2, 1))
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            path = temp_file.name
        try:
            self.logger.save(path)
            with open(path) as f:
                self.assertIn("Leaves: 2, Depth: 1", f.read())
        finally:
            os.remove(path)

if __name__ == '__main__':
    unittest.main()
