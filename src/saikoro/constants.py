"""
Saikoro Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: INT32_MAX not MAX_INT.
"""

# =============================================================================
# Integer Limits
# =============================================================================

UINT32_MAX: int = 0xFFFF_FFFF
UINT64_MAX: int = 0xFFFF_FFFF_FFFF_FFFF
INT32_MAX: int = 0x7FFF_FFFF
INT32_MIN: int = -0x8000_0000

# =============================================================================
# Unit Interval Scaling
# =============================================================================

DOUBLE_UNIT_INCR: float = 1.0 / (1 << 32)  # 32 random bits -> [0, 1)
FLOAT_UNIT_INCR: float = 1.0 / (1 << 24)  # 24 random bits -> [0, 1)
FLOAT_DISCARD_BITS: int = 8  # low bits dropped for float output
DOUBLE_NON_ZERO_MASK: int = 0xFFFF_FFFE  # even values only, then +1

# =============================================================================
# SplitMix64 (seed expansion)
# =============================================================================

SPLITMIX64_INCREMENT: int = 0x9E37_79B9_7F4A_7C15
SPLITMIX64_MULTIPLIER_1: int = 0xBF58_476D_1CE4_E5B9
SPLITMIX64_MULTIPLIER_2: int = 0x94D0_49BB_1331_11EB
SPLITMIX64_SHIFT_1: int = 30
SPLITMIX64_SHIFT_2: int = 27
SPLITMIX64_SHIFT_3: int = 31

# =============================================================================
# Xorshift128
# =============================================================================

XORSHIFT_SHIFT_A: int = 11  # left shift of x
XORSHIFT_SHIFT_B: int = 8  # right shift of t
XORSHIFT_SHIFT_C: int = 19  # right shift of w
XORSHIFT_WORD_BITS: int = 32
XORSHIFT_WORD_BYTES: int = 4

# =============================================================================
# Derived Outputs
# =============================================================================

BOOL_BIT_MASK: int = 0x8000  # bit 15; clear means True
BYTE_SHIFT_BITS: int = 24
BYTE_MASK: int = 0xFF

# =============================================================================
# Configuration
# =============================================================================

SEED_ENV_PREFIX: str = "SAIKORO_"
SEED_ENV_VAR: str = "SAIKORO_SEED"
SEED_BITS: int = 64
