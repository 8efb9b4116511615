"""
Secure password generation.
"""

import logging
from typing import List, Optional

from .charsets import active_classes, describe_classes, minimum_length
from .exceptions import ValidationError
from .random_source import RandomSource, get_random_source


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords with at least one character of every active class."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize password generator.

        Args:
            random_source: Source of random integers. Defaults to the
                platform CSPRNG; substitute only in tests.
        """
        self.random_source = random_source or get_random_source()

    def generate(self, length: int, include_special: bool = False) -> str:
        """
        Generate a password.

        One character from each active class is placed first, the rest of
        the buffer is filled by picking a class with equal probability and
        then a character from it, and finally the whole buffer is shuffled.

        Args:
            length: Password length (at least 3, or 4 with special characters)
            include_special: Include special characters

        Returns:
            Generated password string

        Raises:
            ValidationError: If length is below the minimum for the options
            EntropySourceError: If the secure random source fails
        """
        min_length = minimum_length(include_special)
        if length < min_length:
            raise ValidationError(f"Password length must be at least {min_length}")

        classes = active_classes(include_special)
        password: List[str] = [""] * length
        pos = 0

        # Guarantee one character from each required class
        for char_class in classes:
            password[pos] = self.random_source.choice(char_class.characters)
            pos += 1

        # Fill remaining positions randomly
        for i in range(pos, length):
            char_class = self.random_source.choice(classes)
            password[i] = self.random_source.choice(char_class.characters)

        # Shuffle the password to randomize character positions
        self.shuffle(password)

        logger.debug(f"Generated {length}-character password using: {describe_classes(include_special)}")
        return "".join(password)

    def shuffle(self, buffer: List[str]) -> None:
        """Shuffle buffer in place (Fisher-Yates, last index down to 1)."""
        for i in range(len(buffer) - 1, 0, -1):
            j = self.random_source.uniform_int(i + 1)
            buffer[i], buffer[j] = buffer[j], buffer[i]

    def generate_many(self, count: int, length: int, include_special: bool = False) -> List[str]:
        """
        Generate several independent passwords.

        Args:
            count: Number of passwords
            length: Length of each password
            include_special: Include special characters

        Returns:
            Passwords in generation order
        """
        return [self.generate(length, include_special) for _ in range(count)]

    def get_charset_info(self, include_special: bool = False) -> str:
        """
        Get human-readable description of character sets.

        Returns:
            Description of active character classes
        """
        return describe_classes(include_special)


def generate_password(length: int = 12, include_special: bool = False) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (at least 3, or 4 with special characters)
        include_special: Include special characters

    Returns:
        Generated password string
    """
    generator = PasswordGenerator()
    return generator.generate(length, include_special)
