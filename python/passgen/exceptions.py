"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class ValidationError(PassgenException):
    """Requested length or count does not meet the required bounds."""

    pass


class EntropySourceError(PassgenException):
    """The secure random source could not supply a value."""

    pass
