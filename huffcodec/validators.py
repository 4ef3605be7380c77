"""
validators.py

Shared codes for input validation in huffcodec.
"""


import os
from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_bit_string(bits: str, name: str = "Bit string") -> None:
    """Validate that bits is a string made only of '0' and '1' characters."""
    validate_type(bits, name, str)
    if set(bits) - {"0", "1"}:
        raise ValueError(f"{name} must contain only '0' and '1' characters")


__all__ = ["validate_type", "validate_file_exists", "validate_bit_string"]
