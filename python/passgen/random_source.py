"""
Random integer sources for password generation.

Production code always draws from the operating system CSPRNG through
``secrets``. The ``RandomSource`` interface is kept narrow so tests can
substitute a deterministic source.
"""

import logging
import secrets
from typing import Sequence, TypeVar

from .exceptions import EntropySourceError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource:
    """Produces uniformly distributed integers in ``[0, bound)``."""

    def uniform_int(self, bound: int) -> int:
        raise NotImplementedError

    def choice(self, sequence: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""
        return sequence[self.uniform_int(len(sequence))]


class SecureRandomSource(RandomSource):
    """
    Random source backed by the platform CSPRNG.

    ``secrets.randbelow`` reads from ``os.urandom``, which is safe to call
    from several threads at once. A failure to read entropy is raised as
    EntropySourceError; there is no weaker fallback.
    """

    def uniform_int(self, bound: int) -> int:
        """
        Draw an integer uniformly from ``[0, bound)``.

        Args:
            bound: Exclusive upper bound, must be positive

        Returns:
            Random integer in ``[0, bound)``

        Raises:
            ValueError: If bound is not positive
            EntropySourceError: If the OS entropy source fails
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        try:
            return secrets.randbelow(bound)
        except (OSError, NotImplementedError) as e:
            logger.debug(f"Secure random source unavailable: {e}")
            raise EntropySourceError(f"Secure random source unavailable: {e}") from e


def get_random_source() -> SecureRandomSource:
    """
    Get the default random source.

    SecureRandomSource holds no state of its own, so instances are
    interchangeable and may be shared between threads.

    Returns:
        SecureRandomSource instance
    """
    return SecureRandomSource()
