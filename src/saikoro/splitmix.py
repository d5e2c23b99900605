"""
SplitMix64 - Seed Expansion

TigerStyle: A raw seed used directly as xorshift state gives a first output
strongly correlated with the seed's low bits. SplitMix64 hashes the seed first.

SplitMix64 is equidistributed: once it outputs zero it will not output zero
again for another 2^64 outputs, so two consecutive zero outputs never occur.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    SPLITMIX64_INCREMENT,
    SPLITMIX64_MULTIPLIER_1,
    SPLITMIX64_MULTIPLIER_2,
    SPLITMIX64_SHIFT_1,
    SPLITMIX64_SHIFT_2,
    SPLITMIX64_SHIFT_3,
    UINT64_MAX,
)
from .errors import InvalidArgumentError


def check_seed(seed: int) -> None:
    """Validate a 64-bit unsigned seed.

    Raises:
        InvalidArgumentError: If seed is not an int in [0, 2^64 - 1].
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidArgumentError(f"seed must be an int, got {type(seed).__name__}")
    if not 0 <= seed <= UINT64_MAX:
        raise InvalidArgumentError(f"seed ({seed}) must be in [0, {UINT64_MAX}]")


@dataclass
class SplitMix64:
    """SplitMix64 generator over a mutable 64-bit accumulator.

    TigerStyle:
    - Each call advances the accumulator by a fixed odd increment
    - Output is a pure function of the post-increment accumulator
    """

    _state: int

    def __post_init__(self) -> None:
        check_seed(self._state)

    @property
    def state(self) -> int:
        """Get the current accumulator value."""
        return self._state

    def next_uint64(self) -> int:
        """Advance the accumulator and return 64 well-mixed bits."""
        self._state = (self._state + SPLITMIX64_INCREMENT) & UINT64_MAX
        z = self._state
        z = ((z ^ (z >> SPLITMIX64_SHIFT_1)) * SPLITMIX64_MULTIPLIER_1) & UINT64_MAX
        z = ((z ^ (z >> SPLITMIX64_SHIFT_2)) * SPLITMIX64_MULTIPLIER_2) & UINT64_MAX
        return z ^ (z >> SPLITMIX64_SHIFT_3)
