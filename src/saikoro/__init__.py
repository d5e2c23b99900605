"""
Saikoro (サイコロ) - Fast Deterministic Random Numbers

A xorshift128 pseudo-random number generator:
- Reproducible: a 64-bit seed fully determines the output sequence
- Cheap to re-seed: SplitMix64 seed expansion, no warm-up
- Unbiased derived outputs: bounded ints, doubles, floats, bools, bytes

Usage:
    from saikoro import XorShiftRandom

    rng = XorShiftRandom(12345)
    rng.next_below(6)
    rng.next_double()

Replay an unseeded run:
    SAIKORO_SEED=12345 python app.py
"""

__version__ = "0.1.0"

from .errors import RandomSourceError, InvalidArgumentError
from .splitmix import SplitMix64
from .state import XorShiftState
from .source import RandomSource, SeedableRandomSource
from .xorshift import XorShiftRandom
from .crypto import CryptoRandomSource
from .config import Settings, SourceKind, get_settings
from .defaults import DefaultSeedSource, get_seed, get_seed_source
from .factory import create_source

__all__ = [
    "__version__",
    # Errors
    "RandomSourceError",
    "InvalidArgumentError",
    # Primitives
    "SplitMix64",
    "XorShiftState",
    # Sources
    "RandomSource",
    "SeedableRandomSource",
    "XorShiftRandom",
    "CryptoRandomSource",
    "create_source",
    # Config
    "Settings",
    "SourceKind",
    "get_settings",
    # Default seeds
    "DefaultSeedSource",
    "get_seed",
    "get_seed_source",
]
