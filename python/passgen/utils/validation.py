"""
Input validation utilities for passgen.

These are caller-facing policy limits enforced by the CLI. The generator
itself only enforces the minimum length needed for the active classes.
"""

from ..charsets import minimum_length

DEFAULT_LENGTH = 12
DEFAULT_COUNT = 1

MIN_LENGTH = 3
MAX_LENGTH = 128
MIN_COUNT = 1
MAX_COUNT = 100


def validate_length(length: int, include_special: bool = False) -> bool:
    """
    Validate a requested password length.

    Args:
        length: The requested length
        include_special: Whether special characters are requested

    Returns:
        True if length is valid, False otherwise
    """
    if not isinstance(length, int):
        return False

    return max(MIN_LENGTH, minimum_length(include_special)) <= length <= MAX_LENGTH


def validate_count(count: int) -> bool:
    """Validate the number of passwords to generate."""
    if not isinstance(count, int):
        return False

    return MIN_COUNT <= count <= MAX_COUNT


def get_length_error_message(length: int, include_special: bool = False) -> str:
    """
    Get a descriptive error message for an invalid length.

    Args:
        length: The invalid length
        include_special: Whether special characters are requested

    Returns:
        Error message describing why the length is invalid
    """
    if not isinstance(length, int):
        return "Password length must be an integer"

    if length < MIN_LENGTH:
        return f"Password length must be at least {MIN_LENGTH}"

    if length > MAX_LENGTH:
        return f"Password length cannot exceed {MAX_LENGTH}"

    required = minimum_length(include_special)
    if length < required:
        return f"Password length must be at least {required} when using special characters"

    return "Password length is invalid"


def get_count_error_message(count: int) -> str:
    """Get a descriptive error message for an invalid count."""
    if not isinstance(count, int):
        return "Count must be an integer"

    if count < MIN_COUNT:
        return f"Count must be at least {MIN_COUNT}"

    if count > MAX_COUNT:
        return f"Count cannot exceed {MAX_COUNT}"

    return "Count is invalid"
