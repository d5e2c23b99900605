"""
XorShiftState - Generator State and Core Stepper

TigerStyle: The whole generator state is four 32-bit words held in one value
record. The all-zero state is a fixed point of xorshift and is rejected.

Reference:
    Marsaglia, George. (2003). Xorshift RNGs.
    Journal of Statistical Software 8(14). Period 2^128 - 1.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import (
    UINT32_MAX,
    XORSHIFT_SHIFT_A,
    XORSHIFT_SHIFT_B,
    XORSHIFT_SHIFT_C,
    XORSHIFT_WORD_BITS,
)
from .errors import InvalidArgumentError
from .splitmix import SplitMix64


@dataclass
class XorShiftState:
    """Four-word xorshift128 state.

    TigerStyle:
    - Words are unsigned 32-bit, validated on construction
    - At least one word is non-zero at all times
    - Owned by exactly one generator; use copy() to hand it out

    Not thread-safe. Concurrent step() calls on one record are a caller error.
    """

    x: int
    y: int
    z: int
    w: int

    def __post_init__(self) -> None:
        """Validate the state words.

        Raises:
            InvalidArgumentError: If a word is out of range or all are zero.
        """
        for name, word in zip("xyzw", self.words()):
            if isinstance(word, bool) or not isinstance(word, int):
                raise InvalidArgumentError(f"state word {name} must be an int")
            if not 0 <= word <= UINT32_MAX:
                raise InvalidArgumentError(
                    f"state word {name} ({word}) must be in [0, {UINT32_MAX}]"
                )
        if self.is_zero():
            raise InvalidArgumentError("state must have at least one non-zero word")

    @classmethod
    def from_seed(cls, seed: int) -> XorShiftState:
        """Expand a 64-bit seed into a well-mixed state.

        Two SplitMix64 outputs over one accumulator: the first gives x (low
        32 bits) and y (high 32 bits), the second gives z and w likewise.

        Raises:
            InvalidArgumentError: If seed is not in [0, 2^64 - 1].
        """
        mixer = SplitMix64(seed)

        t = mixer.next_uint64()
        x = t & UINT32_MAX
        y = t >> XORSHIFT_WORD_BITS

        t = mixer.next_uint64()
        z = t & UINT32_MAX
        w = t >> XORSHIFT_WORD_BITS

        # SplitMix64 never outputs zero twice in a row.
        assert x or y or z or w, "seed expansion produced the all-zero state"

        return cls(x, y, z, w)

    def step(self) -> int:
        """Advance one xorshift128 step and return the 32-bit output."""
        x = self.x
        t = (x ^ (x << XORSHIFT_SHIFT_A)) & UINT32_MAX
        w = self.w

        self.x = self.y
        self.y = self.z
        self.z = w
        self.w = (w ^ (w >> XORSHIFT_SHIFT_C)) ^ (t ^ (t >> XORSHIFT_SHIFT_B))
        return self.w

    def step64(self) -> int:
        """Advance two steps; first output in the low word, second in the high."""
        low = self.step()
        return low | (self.step() << XORSHIFT_WORD_BITS)

    def is_zero(self) -> bool:
        """Check whether every word is zero."""
        return not (self.x or self.y or self.z or self.w)

    def words(self) -> tuple[int, int, int, int]:
        """Get the state words as an (x, y, z, w) tuple."""
        return (self.x, self.y, self.z, self.w)

    def copy(self) -> XorShiftState:
        """Get an independent copy of this state."""
        return replace(self)
