"""
CryptoRandomSource Tests

Same output domains and argument checks as XorShiftRandom.
"""

import pytest

from saikoro import CryptoRandomSource, InvalidArgumentError, RandomSource
from saikoro.constants import INT32_MAX, INT32_MIN, UINT32_MAX, UINT64_MAX


@pytest.fixture
def source() -> CryptoRandomSource:
    return CryptoRandomSource()


class TestCryptoRandomSource:
    """Tests for CryptoRandomSource."""

    def test_is_random_source(self, source):
        """Test it is substitutable for any RandomSource."""
        assert isinstance(source, RandomSource)

    def test_integer_domains(self, source):
        """Test integer outputs stay in their domains."""
        for _ in range(1000):
            assert 0 <= source.next() < INT32_MAX
            assert 0 <= source.next_int() <= INT32_MAX
            assert 0 <= source.next_uint() <= UINT32_MAX
            assert 0 <= source.next_ulong() <= UINT64_MAX
            assert 0 <= source.next_byte() <= 255
            assert 0 <= source.next_below(7) < 7
            assert -3 <= source.next_range(-3, 3) < 3

    def test_float_domains(self, source):
        """Test float outputs stay in their intervals."""
        for _ in range(1000):
            assert 0.0 <= source.next_double() < 1.0
            assert 0.0 < source.next_double_non_zero() < 1.0
            assert 0.0 <= source.next_float() < 1.0

    def test_bool_both_values(self, source):
        """Test next_bool() produces both values."""
        assert {source.next_bool() for _ in range(200)} == {True, False}

    def test_empty_bounds(self, source):
        """Test empty ranges return their lower bound."""
        assert source.next_below(0) == 0
        assert source.next_range(5, 5) == 5

    def test_invalid_bounds_fail(self, source):
        """Test argument checks match XorShiftRandom."""
        with pytest.raises(InvalidArgumentError):
            source.next_below(-1)
        with pytest.raises(InvalidArgumentError):
            source.next_range(5, 4)
        with pytest.raises(InvalidArgumentError):
            source.next_range(INT32_MIN - 1, 0)

    def test_next_bytes(self, source):
        """Test next_bytes() fills the buffer in place."""
        buffer = bytearray(1023)
        source.next_bytes(buffer)

        assert len(buffer) == 1023
        assert len(set(buffer)) > 200

    def test_readonly_buffer_fails(self, source):
        """Test an immutable buffer is rejected."""
        with pytest.raises(TypeError):
            source.next_bytes(b"1234")
