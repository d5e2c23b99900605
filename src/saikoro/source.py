"""
Abstract Base Classes for Random Sources

Defines the capability interface callers program against, so that generator
implementations can be swapped at construction time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import INT32_MAX, INT32_MIN
from .errors import InvalidArgumentError


def check_max_value(max_value: int) -> None:
    """Validate the exclusive upper bound of next_below().

    Raises:
        InvalidArgumentError: If max_value is not in [0, INT32_MAX].
    """
    _check_int(max_value, "max_value")
    if max_value < 0:
        raise InvalidArgumentError(f"max_value ({max_value}) must be >= 0")
    if max_value > INT32_MAX:
        raise InvalidArgumentError(f"max_value ({max_value}) must be <= {INT32_MAX}")


def check_range(min_value: int, max_value: int) -> None:
    """Validate the bounds of next_range().

    Raises:
        InvalidArgumentError: If min_value > max_value or either bound
            falls outside the signed 32-bit range.
    """
    _check_int(min_value, "min_value")
    _check_int(max_value, "max_value")
    if min_value > max_value:
        raise InvalidArgumentError(
            f"max_value ({max_value}) must be >= min_value ({min_value})"
        )
    if min_value < INT32_MIN or max_value > INT32_MAX:
        raise InvalidArgumentError(
            f"bounds [{min_value}, {max_value}) must lie within [{INT32_MIN}, {INT32_MAX}]"
        )


def _check_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


class RandomSource(ABC):
    """
    Abstract base class for random sources.

    Implementations:
    - XorShiftRandom: fast, seedable, reproducible xorshift128
    - CryptoRandomSource: operating system CSPRNG, not reproducible

    Instances are not thread-safe. Use one instance per thread or task.
    """

    @abstractmethod
    def next(self) -> int:
        """Generate an int over [0, INT32_MAX), i.e. exclusive of INT32_MAX."""
        pass

    @abstractmethod
    def next_below(self, max_value: int) -> int:
        """
        Generate an int over [0, max_value).

        Args:
            max_value: Exclusive upper bound, in [0, INT32_MAX]. Zero yields zero.

        Raises:
            InvalidArgumentError: If max_value is negative or too large.
        """
        pass

    @abstractmethod
    def next_range(self, min_value: int, max_value: int) -> int:
        """
        Generate an int over [min_value, max_value).

        Args:
            min_value: Inclusive lower bound, may be negative.
            max_value: Exclusive upper bound, must be >= min_value.

        Raises:
            InvalidArgumentError: If min_value > max_value.
        """
        pass

    @abstractmethod
    def next_double(self) -> float:
        """Generate a float over [0, 1)."""
        pass

    @abstractmethod
    def next_double_non_zero(self) -> float:
        """Generate a float over (0, 1), exclusive of both 0.0 and 1.0."""
        pass

    @abstractmethod
    def next_float(self) -> float:
        """Generate a single precision value over [0, 1), 24 bits of resolution."""
        pass

    @abstractmethod
    def next_uint(self) -> int:
        """Generate an int over [0, 2^32 - 1]."""
        pass

    @abstractmethod
    def next_int(self) -> int:
        """Generate an int over [0, INT32_MAX], i.e. inclusive of INT32_MAX."""
        pass

    @abstractmethod
    def next_ulong(self) -> int:
        """Generate an int over [0, 2^64 - 1]."""
        pass

    @abstractmethod
    def next_bool(self) -> bool:
        """Generate a single random bit."""
        pass

    @abstractmethod
    def next_byte(self) -> int:
        """Generate an int over [0, 255]."""
        pass

    @abstractmethod
    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """
        Fill a writable byte buffer with random bytes, in place.

        Args:
            buffer: Any writable buffer; zero length is allowed.

        Raises:
            TypeError: If buffer is read-only.
        """
        pass


class SeedableRandomSource(RandomSource):
    """
    A random source whose sequence is fully determined by a 64-bit seed.

    The seed is an opaque identifier for a sequence: equal seeds give equal
    sequences on every platform.
    """

    @property
    @abstractmethod
    def seed(self) -> int | None:
        """The seed of the current sequence, or None if restored from state."""
        pass

    @abstractmethod
    def reseed(self, seed: int) -> None:
        """
        Replace the whole state with one derived from seed.

        Raises:
            InvalidArgumentError: If seed is not in [0, 2^64 - 1].
        """
        pass
