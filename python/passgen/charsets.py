"""
Fixed character classes used for password generation.

Each class is an immutable, ordered alphabet. Visually ambiguous
characters (0, O, 1, l, I) are removed from the letter and digit classes;
the special class is used as-is.
"""

import string
from typing import NamedTuple, Tuple


# Characters that are easy to confuse when read back
AMBIGUOUS_CHARS = frozenset("0O1lI")


class CharacterClass(NamedTuple):
    """One category of allowed password characters."""
    name: str
    characters: str


def _without_ambiguous(chars: str) -> str:
    return "".join(c for c in chars if c not in AMBIGUOUS_CHARS)


UPPERCASE = CharacterClass("Uppercase", _without_ambiguous(string.ascii_uppercase))
LOWERCASE = CharacterClass("Lowercase", _without_ambiguous(string.ascii_lowercase))
DIGITS = CharacterClass("Numbers", _without_ambiguous(string.digits))
SPECIAL = CharacterClass("Special characters", "!@#$%^&*()_+-=[]{}|;:,.<>?")

# Seeding order: one guaranteed character per class, in this order
REQUIRED_CLASSES: Tuple[CharacterClass, ...] = (UPPERCASE, LOWERCASE, DIGITS)


def active_classes(include_special: bool) -> Tuple[CharacterClass, ...]:
    """
    Get the character classes that take part in a generation request.

    Args:
        include_special: Whether the special class participates

    Returns:
        Classes in seeding order
    """
    if include_special:
        return REQUIRED_CLASSES + (SPECIAL,)
    return REQUIRED_CLASSES


def minimum_length(include_special: bool) -> int:
    """Smallest length that leaves room for one character of every active class."""
    return len(active_classes(include_special))


def describe_classes(include_special: bool) -> str:
    """Human-readable list of the active classes, e.g. for a CLI banner."""
    return ", ".join(c.name for c in active_classes(include_special))
