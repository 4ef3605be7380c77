#experiments.py
import os

from huffcodec.display import CompressionDisplay
from huffcodec.experiments import run_sample_experiments


SAMPLES = [
    ("sample1.txt", "Algorithmic text", 1.5),
    ("sample2.txt", "Repeated characters", 1.6),
    ("sample3.txt", "English text", 1.5),
    ("sample4.txt", "Uniform distribution", 1.2),
]


if __name__ == '__main__':
    experiments_output_path = 'experiments_out'
    samples_path = os.path.join('experiments_data', 'samples')

    results = run_sample_experiments(SAMPLES, samples_path, experiments_output_path)

    print("\n=== SUMMARY: Compression Results for All Files ===\n")
    print(CompressionDisplay().format_comparison(results))
