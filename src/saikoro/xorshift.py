"""
XorShiftRandom - Fast Seedable Random Source

TigerStyle: All randomness is seeded and reproducible. The same seed gives
the same sequence for the same calls, on every platform.

Key points:
- xorshift128 core with period 2^128 - 1 (Marsaglia, 2003)
- Re-seeding is cheap: two SplitMix64 steps, no warm-up
- Every derived output avoids modulo bias (float scaling or rejection)
- Not thread-safe and not cryptographically secure
"""

from __future__ import annotations

import struct

from .constants import (
    BOOL_BIT_MASK,
    BYTE_MASK,
    BYTE_SHIFT_BITS,
    DOUBLE_NON_ZERO_MASK,
    DOUBLE_UNIT_INCR,
    FLOAT_DISCARD_BITS,
    FLOAT_UNIT_INCR,
    INT32_MAX,
    UINT32_MAX,
    XORSHIFT_SHIFT_A,
    XORSHIFT_SHIFT_B,
    XORSHIFT_SHIFT_C,
    XORSHIFT_WORD_BYTES,
)
from .defaults import get_seed
from .source import SeedableRandomSource, check_max_value, check_range
from .state import XorShiftState


class XorShiftRandom(SeedableRandomSource):
    """Xorshift128 random source.

    TigerStyle:
    - State is one XorShiftState record owned by this instance
    - Preconditions are checked before any state is touched
    - fork() hands out independent streams, one per thread or task

    Usage:
        rng = XorShiftRandom(12345)
        rng.next_below(6)
        rng.reseed(12345)  # same sequence again
    """

    def __init__(self, seed: int | None = None) -> None:
        """Create a generator from seed, or from the default seed source.

        Args:
            seed: 64-bit unsigned seed. None draws one from the default
                seed source.
        """
        if seed is None:
            seed = get_seed()
        self._seed: int | None = None
        self._state: XorShiftState
        self.reseed(seed)

    @classmethod
    def from_state(cls, state: XorShiftState) -> XorShiftRandom:
        """Create a generator that continues from a copy of state.

        The new generator has no seed.
        """
        rng = cls.__new__(cls)
        rng._seed = None
        rng._state = state.copy()
        return rng

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"

    # =========================================================================
    # Seeding
    # =========================================================================

    @property
    def seed(self) -> int | None:
        """Get the seed of the current sequence."""
        return self._seed

    @property
    def state(self) -> XorShiftState:
        """Get a copy of the current state."""
        return self._state.copy()

    def reseed(self, seed: int) -> None:
        """Re-initialise the state from seed.

        All four words are replaced at once. Raises InvalidArgumentError for
        a seed outside [0, 2^64 - 1], leaving the state unchanged.
        """
        self._state = XorShiftState.from_seed(seed)
        self._seed = seed

    def fork(self) -> XorShiftRandom:
        """Create an independent generator seeded from this one.

        Consumes one next_ulong() from this generator.
        """
        return XorShiftRandom(self.next_ulong())

    # =========================================================================
    # Integers
    # =========================================================================

    def next(self) -> int:
        # INT32_MAX is outside the range; resampling keeps the rest uniform.
        while True:
            value = self._state.step() & INT32_MAX
            if value != INT32_MAX:
                return value

    def next_below(self, max_value: int) -> int:
        check_max_value(max_value)
        # A double holds 53 bits, so scaling 32 random bits is exact and
        # reaches every int in range without bias.
        return int(self._state.step() * DOUBLE_UNIT_INCR * max_value)

    def next_range(self, min_value: int, max_value: int) -> int:
        check_range(min_value, max_value)
        # The range is at most 2^32 - 1 (INT32_MIN to INT32_MAX) and the
        # unit double has 2^32 distinct values, so the full span is covered.
        return int(self._state.step() * DOUBLE_UNIT_INCR * (max_value - min_value)) + min_value

    def next_uint(self) -> int:
        return self._state.step()

    def next_int(self) -> int:
        # Shift rather than mask: the high bits are the better bits.
        return self._state.step() >> 1

    def next_ulong(self) -> int:
        return self._state.step64()

    # =========================================================================
    # Floating point
    # =========================================================================

    def next_double(self) -> float:
        # Max is 1 - 2^-32.
        return self._state.step() * DOUBLE_UNIT_INCR

    def next_double_non_zero(self) -> float:
        # [0, 0xFFFF_FFFE] even values, plus one: [1, 2^32 - 1] * 2^-32.
        return ((self._state.step() & DOUBLE_NON_ZERO_MASK) + 1) * DOUBLE_UNIT_INCR

    def next_float(self) -> float:
        # Top 24 bits only; a float32 mantissa holds 24. Max is 1 - 2^-24.
        return (self._state.step() >> FLOAT_DISCARD_BITS) * FLOAT_UNIT_INCR

    # =========================================================================
    # Bits and bytes
    # =========================================================================

    def next_bool(self) -> bool:
        return (self._state.step() & BOOL_BIT_MASK) == 0

    def next_byte(self) -> int:
        return (self._state.step64() >> BYTE_SHIFT_BITS) & BYTE_MASK

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill buffer with random bytes, in place.

        Bytes are written in groups of four, one core step per group, each
        32-bit output little-endian. A trailing 1-3 bytes take the low bytes
        of one more step, shifting w right 8 bits per byte; the shifted w
        is what gets committed to the state.

        Raises:
            TypeError: If buffer is not a writable buffer.
        """
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("buffer must be writable")
        view = view.cast("B")
        length = view.nbytes

        # Work on local copies; committed once the loop is done. Both steps
        # below inline XorShiftState.step(), the canonical form; keep in sync.
        x, y, z, w = self._state.words()

        group_count = length // XORSHIFT_WORD_BYTES
        words = [0] * group_count
        for i in range(group_count):
            t = (x ^ (x << XORSHIFT_SHIFT_A)) & UINT32_MAX
            x, y, z = y, z, w
            w = (w ^ (w >> XORSHIFT_SHIFT_C)) ^ (t ^ (t >> XORSHIFT_SHIFT_B))
            words[i] = w

        if group_count:
            struct.pack_into(f"<{group_count}I", view, 0, *words)

        i = group_count * XORSHIFT_WORD_BYTES
        if i < length:
            t = (x ^ (x << XORSHIFT_SHIFT_A)) & UINT32_MAX
            x, y, z = y, z, w
            w = (w ^ (w >> XORSHIFT_SHIFT_C)) ^ (t ^ (t >> XORSHIFT_SHIFT_B))

            # w itself is consumed a byte at a time and committed shifted.
            while i < length:
                view[i] = w & BYTE_MASK
                w >>= 8
                i += 1

        self._state.x = x
        self._state.y = y
        self._state.z = z
        self._state.w = w
