import io
import os
import sys
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from huffcodec.experiments import HuffmanFileExperiment, run_sample_experiments
from huffcodec.statistics import packed_size


class TestHuffmanFileExperiment(unittest.TestCase):
    def setUp(self):
        self.folder = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.folder.name, "input.txt")
        with open(self.input_path, "w", encoding="utf-8") as file:
            file.write("aaaabbc" * 100)
        self.output_path = os.path.join(self.folder.name, "out")

    def tearDown(self):
        self.folder.cleanup()

    def test_run(self):
        experiment = HuffmanFileExperiment("test_run", self.input_path, self.output_path, 1.5)
        result = experiment.run()
        self.assertEqual(result.original_size, 700)
        self.assertEqual(result.compressed_size, 125)
        self.assertEqual(result.unique_characters, 3)
        self.assertEqual(result.original_file_name, "input.txt")
        self.assertTrue(experiment.round_trip_ok)
        self.assertTrue(experiment.passed)
        self.assertTrue(os.path.exists(experiment.compressed_file_path))

    def test_compressed_size_is_packed_bits(self):
        experiment = HuffmanFileExperiment("test_packed", self.input_path, self.output_path)
        result = experiment.run()
        encoded_bits = experiment.compressor.get_session().encoded_length()
        self.assertEqual(encoded_bits, 1000)
        self.assertEqual(result.compressed_size, packed_size(encoded_bits))

    def test_ratio_below_expected(self):
        experiment = HuffmanFileExperiment("test_ratio", self.input_path, self.output_path, 100.0)
        experiment.run()
        self.assertFalse(experiment.ratio_ok)
        self.assertFalse(experiment.passed)

    def test_report_and_graphs(self):
        experiment = HuffmanFileExperiment("test_report", self.input_path, self.output_path)
        experiment.run()
        report_path = os.path.join(experiment.experiment_folder_path, "report.txt")
        experiment.save_report_in_text(report_path)
        with open(report_path, encoding="utf-8") as file:
            report = file.read()
        self.assertIn("Experiment name: test_report", report)
        self.assertIn("Round trip: PASS", report)
        self.assertIn("Encoded bits: 1000", report)
        self.assertIn("Entropy: ", report)
        self.assertIn("Average code length: 1.42", report)
        self.assertIn("Coding efficiency: ", report)
        experiment.display_graphs()
        self.assertTrue(os.path.exists(os.path.join(experiment.experiment_folder_path, "test_report_frequencies.png")))
        self.assertTrue(os.path.exists(os.path.join(experiment.experiment_folder_path, "test_report_code_lengths.png")))

    def test_not_run(self):
        experiment = HuffmanFileExperiment("test_not_run", self.input_path, self.output_path)
        with self.assertRaises(RuntimeError):
            experiment.save_report_in_text(os.path.join(experiment.experiment_folder_path, "report.txt"))
        with self.assertRaises(RuntimeError):
            experiment.display_graphs()
        with self.assertRaises(RuntimeError):
            _ = experiment.passed

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            HuffmanFileExperiment("missing", os.path.join(self.folder.name, "nope.txt"), self.output_path)

    def test_failing_sample_is_skipped(self):
        with open(os.path.join(self.folder.name, "broken.txt"), "wb") as file:
            file.write(b"\xff\xfe\xfa")
        open(os.path.join(self.folder.name, "empty.txt"), "w").close()
        samples = [
            ("broken.txt", "Invalid UTF-8", 1.0),
            ("missing.txt", "Missing file", 1.0),
            ("empty.txt", "Empty file", 1.0),
            ("input.txt", "Skewed text", 1.5),
        ]
        saved_stdout = sys.stdout
        sys.stdout = io.StringIO()
        try:
            results = run_sample_experiments(samples, self.folder.name, self.output_path)
            printed_output = sys.stdout.getvalue()
        finally:
            sys.stdout = saved_stdout
        self.assertEqual([name for name, _ in results], ["empty.txt", "input.txt"])
        self.assertEqual(results[0][1].compressed_size, 0)
        self.assertEqual(results[1][1].compressed_size, 125)
        self.assertIn("Test failed", printed_output)
        self.assertIn("File not found", printed_output)

if __name__ == '__main__':
    unittest.main()
