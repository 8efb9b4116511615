"""
Unit tests for the secure random source.
"""

import logging
import threading
from collections import Counter
from unittest.mock import patch

import pytest

from passgen.exceptions import EntropySourceError, PassgenException
from passgen.random_source import SecureRandomSource, get_random_source


class TestSecureRandomSource:
    """Test SecureRandomSource."""

    def test_values_within_bound(self):
        source = SecureRandomSource()
        for bound in [1, 2, 3, 8, 24, 26, 129]:
            for _ in range(200):
                value = source.uniform_int(bound)
                assert 0 <= value < bound

    def test_bound_of_one_is_always_zero(self):
        source = SecureRandomSource()
        assert all(source.uniform_int(1) == 0 for _ in range(50))

    def test_every_value_reachable(self):
        """All values of a small range appear over many draws."""
        source = SecureRandomSource()
        counts = Counter(source.uniform_int(4) for _ in range(2000))
        assert set(counts) == {0, 1, 2, 3}
        # Each bucket expects 500; 300 is far outside normal variation
        assert min(counts.values()) > 300

    @pytest.mark.parametrize("bound", [0, -1])
    def test_non_positive_bound_rejected(self, bound):
        with pytest.raises(ValueError):
            SecureRandomSource().uniform_int(bound)

    def test_choice(self):
        source = SecureRandomSource()
        for _ in range(100):
            assert source.choice("xyz") in "xyz"

    @patch('passgen.random_source.secrets.randbelow')
    def test_os_failure_raises_entropy_error(self, mock_randbelow):
        """OS entropy failures surface as EntropySourceError."""
        mock_randbelow.side_effect = OSError("getrandom failed")

        with pytest.raises(EntropySourceError) as exc_info:
            SecureRandomSource().uniform_int(10)

        assert isinstance(exc_info.value, PassgenException)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert "getrandom failed" in str(exc_info.value)

    @patch('passgen.random_source.secrets.randbelow')
    def test_entropy_failure_not_logged_as_error(self, mock_randbelow, caplog):
        """The caller reports the failure; the source only leaves a debug record."""
        mock_randbelow.side_effect = OSError("getrandom failed")

        with caplog.at_level(logging.DEBUG, logger="passgen.random_source"):
            with pytest.raises(EntropySourceError):
                SecureRandomSource().uniform_int(10)

        assert caplog.records
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    @patch('passgen.random_source.secrets.randbelow')
    def test_not_implemented_raises_entropy_error(self, mock_randbelow):
        mock_randbelow.side_effect = NotImplementedError("no urandom")

        with pytest.raises(EntropySourceError):
            SecureRandomSource().uniform_int(10)

    def test_concurrent_use(self):
        """Several threads can draw from one source."""
        source = get_random_source()
        results = []
        errors = []

        def worker():
            try:
                results.extend(source.uniform_int(26) for _ in range(500))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(results) == 4000
        assert all(0 <= r < 26 for r in results)

    def test_get_random_source(self):
        assert isinstance(get_random_source(), SecureRandomSource)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
