import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from huffcodec.experiments import HuffExperiment
from huffcodec.settings import DEBUG_HIGH


class TestHuffExperiment(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.temp_dir.name, "input.txt")
        with open(self.input_path, "wb") as f:
            f.write(b"Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 20)
        self.output_root = os.path.join(self.temp_dir.name, "out")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            HuffExperiment("missing", self.input_path + ".missing", self.output_root)

    def test_run(self):
        experiment = HuffExperiment("lorem", self.input_path, self.output_root, DEBUG_HIGH)
        experiment.run()
        self.assertTrue(experiment.integrity_preserved)
        self.assertGreater(experiment.compression_ratio, 1.0)
        self.assertEqual(experiment.decompressed_file_size, experiment.input_file_size)
        self.assertIn("integrity preserved", experiment.summary())

        report_path = os.path.join(experiment.experiment_folder_path, "lorem.txt")
        experiment.save_report_in_text(report_path)
        with open(report_path) as f:
            self.assertIn("Experiment name: lorem", f.read())

        experiment.display_graphs()
        self.assertTrue(os.path.exists(os.path.join(experiment.experiment_folder_path, "lorem_code_lengths.png")))

    def test_report_before_run(self):
        experiment = HuffExperiment("early", self.input_path, self.output_root)
        with self.assertRaises(RuntimeError):
            experiment.save_report_in_text(os.path.join(experiment.experiment_folder_path, "early.txt"))
        with self.assertRaises(RuntimeError):
            experiment.display_graphs()


if __name__ == '__main__':
    unittest.main()
