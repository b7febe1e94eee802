"""
detrand Core Data Models

These models define the configuration passed to the Random façade:
- GeneratorKind: the registered bit generator algorithms
- RandomConfig: explicit seed/generator choice with documented defaults
"""

from enum import Enum

from pydantic import BaseModel, Field

from detrand.constants import SEED_VALUE_MAX, SEED_VALUE_MIN


# =============================================================================
# Enums
# =============================================================================


class GeneratorKind(str, Enum):
    """Bit generator algorithms available to Random."""

    XORSHIFT128_PLUS = "xorshift128+"  # Default, full-width output
    LFSR = "lfsr"  # Galois LFSR, output needs mixing


# =============================================================================
# Configuration Models
# =============================================================================


class RandomConfig(BaseModel):
    """Construction parameters for Random.

    A missing seed means "derive one from system entropy".
    """

    seed: int | None = Field(default=None, ge=SEED_VALUE_MIN, le=SEED_VALUE_MAX)
    generator: GeneratorKind = GeneratorKind.XORSHIFT128_PLUS
