"""
DefaultSeedSource - Process-Wide Seed Supplier

TigerStyle: Unseeded generators still get reproducible seeds. The root seed is
always logged, so any run can be replayed with SAIKORO_SEED=<root seed>.
"""

from __future__ import annotations

import logging
import secrets
import threading
from functools import lru_cache

from .config import get_settings
from .constants import SEED_BITS, SEED_ENV_VAR
from .splitmix import SplitMix64

logger = logging.getLogger(__name__)


class DefaultSeedSource:
    """Supplies 64-bit seeds from a SplitMix64 stream.

    Distinct calls return distinct seeds for 2^64 calls, because SplitMix64
    is equidistributed. next_seed() is safe to call from any thread.
    """

    def __init__(self, root_seed: int | None = None):
        """Create a seed source.

        Args:
            root_seed: Seed of the stream. None draws 64 bits of OS entropy.
        """
        generated = root_seed is None
        if generated:
            root_seed = secrets.randbits(SEED_BITS)

        self._mixer = SplitMix64(root_seed)
        self._root_seed = root_seed
        self._seeds_count = 0
        self._lock = threading.Lock()

        if generated:
            logger.info(f"Generated random root seed (replay with {SEED_ENV_VAR}={root_seed})")
        else:
            logger.info(f"Using root seed: {root_seed}")

    @property
    def root_seed(self) -> int:
        """Get the seed of the stream."""
        return self._root_seed

    def next_seed(self) -> int:
        """Get the next 64-bit seed."""
        with self._lock:
            self._seeds_count += 1
            return self._mixer.next_uint64()

    def seeds_count(self) -> int:
        """Get the number of seeds handed out."""
        return self._seeds_count


@lru_cache
def get_seed_source() -> DefaultSeedSource:
    """Get the process-wide seed source, rooted at the configured seed."""
    return DefaultSeedSource(get_settings().seed)


def get_seed() -> int:
    """Get one seed from the process-wide seed source."""
    return get_seed_source().next_seed()
