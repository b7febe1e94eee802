"""
detrand Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: SEED_VALUE_MAX not MAX_SEED.
"""

# =============================================================================
# Word Widths
# =============================================================================

WORD32_MASK: int = 0xFFFF_FFFF
WORD32_SIGN_BIT: int = 0x8000_0000
WORD64_MASK: int = 0xFFFF_FFFF_FFFF_FFFF

# =============================================================================
# Seed Limits
# =============================================================================

SEED_VALUE_MIN: int = 0
SEED_VALUE_MAX: int = WORD64_MASK
SEED_DIGEST_BYTES_COUNT: int = 8  # Digest prefix read as the 64-bit seed
SEED_TEXT_ENCODING: str = "utf-8"

# =============================================================================
# Float Conversion
# =============================================================================

FLOAT_MANTISSA_BITS_COUNT: int = 53  # IEEE 754 double precision
FLOAT_HIGH_BITS_MASK: int = (1 << (FLOAT_MANTISSA_BITS_COUNT - 32)) - 1  # Low 21 bits
FLOAT_SCALE: float = 2.0 ** -FLOAT_MANTISSA_BITS_COUNT

# =============================================================================
# Full-Entropy Mixing
# =============================================================================

FULL_INT_ROTATE_BITS_COUNT: int = 16  # Swaps halves of a 32-bit word

# =============================================================================
# xorshift128+ Parameters
# =============================================================================

XORSHIFT_SHIFT_A: int = 23
XORSHIFT_SHIFT_B: int = 17
XORSHIFT_SHIFT_C: int = 26
XORSHIFT_STATE_BYTES_COUNT: int = 16
XORSHIFT_STATE_FALLBACK: int = 0x9E37_79B9_7F4A_7C15  # Replaces an all-zero state

# SplitMix64 seed expansion
SPLITMIX_INCREMENT: int = 0x9E37_79B9_7F4A_7C15
SPLITMIX_MULTIPLIER_A: int = 0xBF58_476D_1CE4_E5B9
SPLITMIX_MULTIPLIER_B: int = 0x94D0_49BB_1331_11EB

# =============================================================================
# Galois LFSR Parameters
# =============================================================================

LFSR_TAPS_MASK: int = 0x8020_0003  # x^32 + x^22 + x^2 + x + 1
LFSR_STATE_BYTES_COUNT: int = 4
LFSR_SEED_FALLBACK: int = 0x1D87_2B41  # Replaces a zero register

# =============================================================================
# Entropy Limits
# =============================================================================

ENTROPY_FALLBACK_ROUNDS_DEFAULT: int = 100
ENTROPY_FALLBACK_ROUNDS_MAX: int = 10_000
ENTROPY_FALLBACK_SLEEP_SECS: float = 0.00001  # 10us per round
