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
    if not os.path.isfile(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_bit_count(count: int, max_bits: int) -> None:
    """Validate a bit count for the bit stream helpers."""
    validate_type(count, "Bit count", int)
    if count < 1 or count > max_bits:
        raise ValueError(f"Bit count must be between 1 and {max_bits}, got {count}")


def validate_distinct_files(input_path: str, output_path: str) -> None:
    """Validate that the output path does not point at the input file."""
    if os.path.exists(output_path) and os.path.samefile(input_path, output_path):
        raise ValueError(f"Output file must differ from input file: {output_path}")
