"""
errors.py

Exceptions raised while reading compressed data.
"""

from typing import Any, Optional


class FormatError(ValueError):
    """
    Raised when compressed input is malformed: wrong magic number,
    truncated or corrupt tree header, or a body that ends before PSEUDO_EOF.
    """

    def __init__(self, message: str, expected: Optional[Any] = None, found: Optional[Any] = None) -> None:
        self.expected = expected
        self.found = found
        if expected is not None or found is not None:
            message = f"{message} (expected: {expected}, found: {found})"
        super().__init__(message)
