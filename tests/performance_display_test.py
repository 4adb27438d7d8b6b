import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from huffcodec.codecs import HuffCodec
from huffcodec.logger import Logger
from huffcodec.performance_display import PerformanceDisplay
from huffcodec.settings import DEBUG_HIGH


class TestPerformanceDisplay(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        HuffCodec(DEBUG_HIGH).compress(b"abracadabra, hocus pocus" * 10, self.logger)
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_plot_code_lengths(self):
        path = os.path.join(self.temp_dir.name, "code_lengths.png")
        self.assertTrue(PerformanceDisplay(self.logger.logs).plot_code_lengths(save_path=path))
        self.assertTrue(os.path.exists(path))

    def test_plot_coding_log(self):
        path = os.path.join(self.temp_dir.name, "coding_log.png")
        self.assertTrue(PerformanceDisplay(self.logger.logs).plot_coding_log(save_path=path))
        self.assertTrue(os.path.exists(path))

    def test_no_data(self):
        self.assertFalse(PerformanceDisplay([]).plot_code_lengths())
        self.assertFalse(PerformanceDisplay([]).plot_coding_log())

    def test_invalid_window(self):
        display = PerformanceDisplay(self.logger.logs, moving_avg_window=0)
        with self.assertRaises(ValueError):
            display.plot_code_lengths()


if __name__ == '__main__':
    unittest.main()
