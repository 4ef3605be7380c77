"""
statistics.py

Compression results and information measures of a frequency table.
"""


import math
from typing import Dict

import numpy as np

from .models import FrequencyTable, Symbol


class CompressionResult:
    """Sizes and timing of one compression run."""

    def __init__(self,
                 original_size: int,
                 compressed_size: int,
                 compression_time_ms: float = 0.0,
                 unique_characters: int = 0,
                 original_file_name: str = "") -> None:
        if original_size < 0 or compressed_size < 0:
            raise ValueError("Sizes must be non-negative")
        self.original_size = original_size
        self.compressed_size = compressed_size
        self.compression_time_ms = compression_time_ms
        self.unique_characters = unique_characters
        self.original_file_name = original_file_name

    @property
    def compression_ratio(self) -> float:
        if self.original_size == 0 or self.compressed_size == 0:
            return 0.0
        return self.original_size / self.compressed_size

    @property
    def space_savings(self) -> float:
        """Percentage of the original size saved by compression."""
        if self.original_size == 0:
            return 0.0
        return (1 - self.compressed_size / self.original_size) * 100

    def __repr__(self) -> str:
        return (f"CompressionResult({self.original_file_name!r}, original={self.original_size}, "
                f"compressed={self.compressed_size}, ratio={self.compression_ratio:.2f})")


def packed_size(bit_length: int) -> int:
    """Number of bytes needed to hold bit_length bits."""
    return math.ceil(bit_length / 8)


def _probabilities(frequency_table: FrequencyTable) -> np.ndarray:
    counts = np.array([count for _, count in frequency_table.items()], dtype=np.float64)
    return counts / counts.sum()


def shannon_entropy(frequency_table: FrequencyTable) -> float:
    """
    Entropy of the symbol distribution in bits per symbol.

    Args:
        frequency_table (FrequencyTable): The symbol counts.

    Returns:
        float: The entropy, 0.0 for an empty or single-symbol table.
    """
    if frequency_table.get_size() == 0:
        return 0.0
    probs = _probabilities(frequency_table)
    return float(np.sum(probs * np.log2(1.0 / probs)))


def average_code_length(frequency_table: FrequencyTable, code_table: Dict[Symbol, str]) -> float:
    """
    Expected code length in bits per symbol.

    Raises:
        KeyError: If a counted symbol has no code.
    """
    if frequency_table.get_size() == 0:
        return 0.0
    probs = _probabilities(frequency_table)
    lengths = np.array([len(code_table[symbol]) for symbol, _ in frequency_table.items()], dtype=np.float64)
    return float(np.dot(probs, lengths))


def coding_efficiency(frequency_table: FrequencyTable, code_table: Dict[Symbol, str]) -> float:
    """Entropy divided by average code length; 0.0 when nothing was coded."""
    average = average_code_length(frequency_table, code_table)
    if average == 0:
        return 0.0
    return shannon_entropy(frequency_table) / average
