#experiments.py
import os
import time

from .codecs import HuffCodecFile
from .logger import Logger
from .performance_display import PerformanceDisplay
from .settings import VERSION


class HuffExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path, debug: int = 0):

        self.name = name

        #validate that input file exists and can be read
        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        os.makedirs(self.experiment_folder_path, exist_ok=True)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.hf")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.compression_logger = Logger()
        self.decompression_logger = Logger()
        self.codec = HuffCodecFile(debug)

    def run(self):
        self.input_file_size = os.path.getsize(self.input_file_path)

        self.compression_start_time = time.time()
        self.compression_result = self.codec.compress(self.input_file_path, self.compressed_file_path, self.compression_logger)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.decompression_logger)
        self.decompression_end_time = time.time()

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.decompressed_file_size = os.path.getsize(self.decompressed_file_path)

        self.compression_ratio = self.input_file_size / self.compressed_file_size

        with open(self.input_file_path, "rb") as original, open(self.decompressed_file_path, "rb") as restored:
            self.integrity_preserved = original.read() == restored.read()

    def summary(self) -> str:
        return (f"{self.name}: {self.input_file_size} -> {self.compressed_file_size} bytes "
                f"(ratio {self.compression_ratio:.3f}), "
                f"compress {self.compression_end_time - self.compression_start_time:.3f}s, "
                f"decompress {self.decompression_end_time - self.decompression_start_time:.3f}s, "
                f"integrity {'preserved' if self.integrity_preserved else 'compromised'}")

    def save_report_in_text(self, file_path: str):
        if not os.path.exists(os.path.dirname(file_path)):
            raise FileNotFoundError(f"Folder {os.path.dirname(file_path)} not found.")
        if not os.access(os.path.dirname(file_path), os.W_OK):
            raise PermissionError(f"Folder {os.path.dirname(file_path)} is not writable.")

        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        with open(file_path, 'w') as f:
            f.write(f"Experiment name: {self.name}\n")
            f.write(f"huffcodec version: {VERSION}\n")
            f.write(f"Input file size: {self.input_file_size}\n")
            f.write(f"Header bits: {self.compression_result.header_bits}\n")
            f.write(f"Compression time: {self.compression_end_time - self.compression_start_time}\n")
            f.write(f"Decompression time: {self.decompression_end_time - self.decompression_start_time}\n")
            f.write(f"Compressed file size: {self.compressed_file_size}\n")
            f.write(f"Decompressed file size: {self.decompressed_file_size}\n")
            f.write(f"Compression ratio: {self.compression_ratio}\n")
            f.write(f"Integrity preserved: {self.integrity_preserved}\n")

    def display_graphs(self):
        if not hasattr(self, 'compression_start_time'):
            raise RuntimeError("The experiment has not been run yet.")

        display = PerformanceDisplay(self.compression_logger.logs)
        display.plot_coding_log(save_path=os.path.join(self.experiment_folder_path, f"{self.name}_coding_log.png"))
        # code lengths are only logged at DEBUG_HIGH
        display.plot_code_lengths(save_path=os.path.join(self.experiment_folder_path, f"{self.name}_code_lengths.png"))
