"""
Random Source Factory

Callers pick the implementation when they construct the source; everything
downstream programs against RandomSource.
"""

from __future__ import annotations

import logging

from .config import SourceKind, get_settings
from .crypto import CryptoRandomSource
from .errors import InvalidArgumentError
from .source import RandomSource
from .xorshift import XorShiftRandom

logger = logging.getLogger(__name__)


def create_source(
    kind: SourceKind | str | None = None,
    seed: int | None = None,
) -> RandomSource:
    """Create a random source.

    Args:
        kind: Implementation to use. None uses the configured default.
        seed: Seed for a seedable source. None uses the default seed source.

    Raises:
        InvalidArgumentError: If kind is unknown, or a seed is given for a
            source that cannot be seeded.

    Usage:
        rng = create_source()  # configured default
        rng = create_source("xorshift", seed=12345)
        rng = create_source(SourceKind.CRYPTO)
    """
    if kind is None:
        kind = get_settings().source

    try:
        kind = SourceKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(f"unknown source kind: {kind!r}") from e

    logger.debug(f"Creating {kind.value} random source")

    if kind is SourceKind.CRYPTO:
        if seed is not None:
            raise InvalidArgumentError("crypto source cannot be seeded")
        return CryptoRandomSource()

    return XorShiftRandom(seed)
