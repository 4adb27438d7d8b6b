#experiments.py
import os
import time

from huffcodec.experiments import HuffExperiment
from huffcodec.settings import DEBUG_HIGH

PATTERN_FILE_SIZE = 1000
PATTERNS_FOLDER = 'experiments_data/patterns'


def generate_pattern_files(folder_path, file_size=PATTERN_FILE_SIZE):
    """Write a few byte patterns with very different symbol distributions."""
    os.makedirs(folder_path, exist_ok=True)

    evolving = bytearray()
    group = 1
    while len(evolving) < file_size:
        evolving.extend(range(group))
        group = group + 1 if group < 256 else 1

    patterns = {
        'file1_ones.bin': b'\x01' * file_size,
        'file2_pattern123.bin': (bytes([1, 2, 3]) * (file_size // 3 + 1))[:file_size],
        'file3_growing_pattern.bin': bytes(evolving[:file_size]),
        'file4_random.bin': os.urandom(file_size),
        'file5_empty.bin': b'',
    }

    paths = []
    for file_name, data in patterns.items():
        path = os.path.join(folder_path, file_name)
        with open(path, 'wb') as f:
            f.write(data)
        paths.append(path)
    return paths


if __name__ == '__main__':
    experiments_output_path = 'experiments_out'

    for input_path in generate_pattern_files(PATTERNS_FOLDER):
        pattern_name = os.path.splitext(os.path.basename(input_path))[0]
        experiment_name = f"huffman_{pattern_name}_{time.strftime('%Y%m%d_%H%M%S')}"
        experiment = HuffExperiment(experiment_name, input_path, experiments_output_path, DEBUG_HIGH)
        experiment.run()
        experiment.save_report_in_text(os.path.join(experiments_output_path, experiment_name, f"{experiment_name}.txt"))
        experiment.display_graphs()
        print(experiment.summary())
