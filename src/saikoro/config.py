"""
Saikoro Configuration

Loads configuration from environment variables and an optional .env file.
Replay any unseeded run by setting SAIKORO_SEED=<root seed>.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import SEED_ENV_PREFIX, UINT64_MAX


class SourceKind(str, Enum):
    """Random source implementations selectable at construction time."""

    XORSHIFT = "xorshift"  # Fast, seedable, reproducible
    CRYPTO = "crypto"  # OS CSPRNG, not reproducible


class Settings(BaseSettings):
    """Saikoro settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=SEED_ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Root seed of the default seed source; None means OS entropy
    seed: int | None = Field(default=None, ge=0, le=UINT64_MAX)

    # Implementation returned by create_source() when no kind is given
    source: SourceKind = SourceKind.XORSHIFT


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
