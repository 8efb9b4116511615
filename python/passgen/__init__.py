"""
passgen - random passwords without visually ambiguous characters.
"""

from .exceptions import PassgenException, ValidationError, EntropySourceError
from .generator import PasswordGenerator, generate_password

__all__ = [
    'PassgenException',
    'ValidationError',
    'EntropySourceError',
    'PasswordGenerator',
    'generate_password',
]
