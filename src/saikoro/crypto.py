"""
CryptoRandomSource - Operating System CSPRNG

A drop-in RandomSource backed by the secrets module. Same output domains and
argument checks as XorShiftRandom, but not seedable and not reproducible.
"""

from __future__ import annotations

import secrets

from .constants import (
    DOUBLE_NON_ZERO_MASK,
    DOUBLE_UNIT_INCR,
    FLOAT_UNIT_INCR,
    INT32_MAX,
)
from .source import RandomSource, check_max_value, check_range


class CryptoRandomSource(RandomSource):
    """Random source drawing every value from the operating system CSPRNG.

    Slower than XorShiftRandom. Use it where outputs must be unpredictable.
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def next(self) -> int:
        return secrets.randbelow(INT32_MAX)

    def next_below(self, max_value: int) -> int:
        check_max_value(max_value)
        if max_value == 0:
            return 0
        return secrets.randbelow(max_value)

    def next_range(self, min_value: int, max_value: int) -> int:
        check_range(min_value, max_value)
        if min_value == max_value:
            return min_value
        return min_value + secrets.randbelow(max_value - min_value)

    def next_double(self) -> float:
        return secrets.randbits(32) * DOUBLE_UNIT_INCR

    def next_double_non_zero(self) -> float:
        return ((secrets.randbits(32) & DOUBLE_NON_ZERO_MASK) + 1) * DOUBLE_UNIT_INCR

    def next_float(self) -> float:
        return secrets.randbits(24) * FLOAT_UNIT_INCR

    def next_uint(self) -> int:
        return secrets.randbits(32)

    def next_int(self) -> int:
        return secrets.randbits(31)

    def next_ulong(self) -> int:
        return secrets.randbits(64)

    def next_bool(self) -> bool:
        return secrets.randbits(1) == 0

    def next_byte(self) -> int:
        return secrets.randbits(8)

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("buffer must be writable")
        view = view.cast("B")
        view[:] = secrets.token_bytes(view.nbytes)
