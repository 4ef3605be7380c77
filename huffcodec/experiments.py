#experiments.py
import os
import time

from .codecs import HuffmanCompressor
from .display import CompressionDisplay
from .file_handler import CompressedFile, read_text_file
from .logger import Logger
from .statistics import CompressionResult, average_code_length, coding_efficiency, packed_size, shannon_entropy


class HuffmanFileExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path, expected_min_ratio: float = 1.0):

        self.name = name

        #validate that input file exists and can be read
        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path
        self.input_file_name = os.path.basename(input_file_path)

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{self.input_file_name}.huf")

        self.expected_min_ratio = expected_min_ratio
        self.logger = Logger()
        self.compressor = HuffmanCompressor(logger=self.logger)
        self.result = None

    def run(self) -> CompressionResult:
        text = read_text_file(self.input_file_path)

        self.compression_start_time = time.time()
        bits = self.compressor.compress(text)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        decompressed = self.compressor.decompress(bits)
        self.decompression_end_time = time.time()
        self.round_trip_ok = decompressed == text

        CompressedFile().write(self.compressed_file_path, bits)
        compressed_size = packed_size(len(bits))

        self.result = CompressionResult(
            original_size=len(text.encode('utf-8')),
            compressed_size=compressed_size,
            compression_time_ms=(self.compression_end_time - self.compression_start_time) * 1000,
            unique_characters=len(self.compressor.get_frequency_table()),
            original_file_name=self.input_file_name,
        )
        return self.result

    def _require_run(self) -> None:
        if self.result is None:
            raise RuntimeError("The experiment has not been run yet.")

    @property
    def ratio_ok(self) -> bool:
        self._require_run()
        return self.result.compression_ratio >= self.expected_min_ratio

    @property
    def passed(self) -> bool:
        self._require_run()
        return self.round_trip_ok and self.ratio_ok

    def save_report_in_text(self, file_path: str):
        if not os.path.exists(os.path.dirname(file_path)):
            raise FileNotFoundError(f"Folder {os.path.dirname(file_path)} not found.")
        if not os.access(os.path.dirname(file_path), os.W_OK):
            raise PermissionError(f"Folder {os.path.dirname(file_path)} is not writable.")

        self._require_run()

        display = CompressionDisplay()
        session = self.compressor.get_session()
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(f"Experiment name: {self.name}\n")
            f.write(f"Input file size: {self.result.original_size}\n")
            f.write(f"Compression time: {self.compression_end_time - self.compression_start_time}\n")
            f.write(f"Decompression time: {self.decompression_end_time - self.decompression_start_time}\n")
            f.write(f"Compressed file size: {self.result.compressed_size}\n")
            f.write(f"Compression ratio: {self.result.compression_ratio}\n")
            f.write(f"Space savings: {self.result.space_savings}\n")
            f.write(f"Unique characters: {self.result.unique_characters}\n")
            f.write(f"Round trip: {'PASS' if self.round_trip_ok else 'FAIL'}\n")
            f.write(f"Ratio check: {'PASS' if self.ratio_ok else 'FAIL'} (expected >= {self.expected_min_ratio:.2f})\n")
            if session is not None:
                frequency_table = session.get_frequency_table()
                code_table = session.get_code_table()
                f.write(f"Encoded bits: {session.encoded_length()}\n")
                f.write(f"Entropy: {shannon_entropy(frequency_table)}\n")
                f.write(f"Average code length: {average_code_length(frequency_table, code_table)}\n")
                f.write(f"Coding efficiency: {coding_efficiency(frequency_table, code_table)}\n")
                f.write("\n" + display.format_frequency_table(frequency_table) + "\n")
                f.write("\n" + display.format_code_table(code_table) + "\n")

    def display_graphs(self):
        self._require_run()

        session = self.compressor.get_session()
        if session is None:
            return
        display = CompressionDisplay()
        display.plot_frequencies(session.get_frequency_table(),
                                 save_path=os.path.join(self.experiment_folder_path, f"{self.name}_frequencies.png"))
        display.plot_code_lengths(session.get_code_table(),
                                  save_path=os.path.join(self.experiment_folder_path, f"{self.name}_code_lengths.png"))


def run_sample_experiments(samples, samples_path, experiment_root_folder_path):
    """
    Run one experiment per (file name, description, expected ratio) sample.

    A sample that is missing or fails is reported and skipped.

    Returns:
        List of (file name, CompressionResult) for the samples that ran.
    """
    display = CompressionDisplay()
    results = []
    for number, (file_name, description, expected_min_ratio) in enumerate(samples, start=1):
        print(f"\n=== TEST {number}: Compressing {file_name} ({description}) ===\n")
        input_path = os.path.join(samples_path, file_name)
        if not os.path.exists(input_path):
            print(f"File not found: {input_path} (run experiments_data/samples/sample_gen.py first)")
            continue

        experiment_name = f"experiment_{os.path.splitext(file_name)[0]}_{time.strftime('%Y%m%d_%H%M%S')}"
        try:
            experiment = HuffmanFileExperiment(experiment_name, input_path, experiment_root_folder_path,
                                               expected_min_ratio)
            result = experiment.run()
            experiment.save_report_in_text(os.path.join(experiment.experiment_folder_path, f"{experiment_name}.txt"))
            experiment.display_graphs()
        except (ValueError, OSError) as e:
            print(f"Test failed: {e}")
            continue

        print(f"Decompression correctness: {'PASS' if experiment.round_trip_ok else 'FAIL'}")
        print(f"Compression ratio check: {'PASS' if experiment.ratio_ok else 'FAIL'} "
              f"(expected >= {expected_min_ratio:.2f}x, got {result.compression_ratio:.2f}x)")

        session = experiment.compressor.get_session()
        if session is not None:
            print()
            print(display.format_frequency_table(session.get_frequency_table()))
            print()
            print(display.format_code_table(session.get_code_table()))
        results.append((file_name, result))
    return results
