"""
Random - Deterministic Random Façade

Turns the raw 32-bit output of any Generator into higher-level values:
full-entropy integers, floats in [0, 1), bounded integers, element choice
and in-place shuffling.

TigerStyle: Same seed + same generator = same sequence, on every platform.

Usage:
    from detrand import Random

    rng = Random(42)
    rng.random_int(1, 6)
    rng.shuffle(deck)
"""

from __future__ import annotations

import hashlib
import logging
import math
from typing import Any, MutableSequence, Optional, Sequence

from detrand.constants import (
    ENTROPY_FALLBACK_ROUNDS_DEFAULT,
    FLOAT_HIGH_BITS_MASK,
    FLOAT_SCALE,
    FULL_INT_ROTATE_BITS_COUNT,
    SEED_DIGEST_BYTES_COUNT,
    SEED_TEXT_ENCODING,
    WORD32_MASK,
)
from detrand.core.config import Settings, get_settings
from detrand.core.models import RandomConfig
from detrand.entropy import system_seed
from detrand.errors import EmptyInputError, RangeError
from detrand.generators import Generator, XorShift128Plus, create_generator
from detrand.generators.base import to_int32

logger = logging.getLogger(__name__)


class Random:
    """Deterministic random number façade over a swappable Generator.

    The façade owns its generator for its whole lifetime. Every operation
    mutates only the generator's state. Not thread-safe: callers sharing
    an instance across threads must serialize access.
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[Generator] = None):
        """Create a Random.

        Args:
            seed: 64-bit seed. Derived from system entropy if omitted.
            generator: Bit generator to own. XorShift128Plus if omitted.
        """
        self._generator = generator if generator is not None else XorShift128Plus()
        if seed is None:
            seed = system_seed()
            logger.debug(f"Generated seed from system entropy (replay with seed={seed})")
        self._generator.seed = seed

    @classmethod
    def from_config(
        cls,
        config: RandomConfig,
        entropy_fallback_rounds: int = ENTROPY_FALLBACK_ROUNDS_DEFAULT,
    ) -> Random:
        """Create a Random from an explicit RandomConfig.

        Args:
            config: Seed and generator choice.
            entropy_fallback_rounds: Rounds for the weak entropy fallback,
                used only when config.seed is None.
        """
        seed = config.seed
        if seed is None:
            seed = system_seed(entropy_fallback_rounds)
        return cls(seed=seed, generator=create_generator(config.generator))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> Random:
        """Create a Random from environment settings (DETRAND_*).

        Raises:
            pydantic.ValidationError: If the settings hold an invalid seed or generator.
        """
        settings = settings or get_settings()
        return cls.from_config(settings.to_random_config(), settings.entropy_fallback_rounds)

    def __repr__(self) -> str:
        return f"Random(seed={self.seed}, generator={type(self._generator).__name__})"

    # =========================================================================
    # Generator Delegation
    # =========================================================================

    @property
    def generator(self) -> Generator:
        """The owned generator."""
        return self._generator

    @property
    def seed(self) -> int:
        """The generator's current seed."""
        return self._generator.seed

    @seed.setter
    def seed(self, value: int) -> None:
        logger.debug(f"Seeding {type(self._generator).__name__} with {value}")
        self._generator.seed = value

    @property
    def state(self) -> bytes:
        """The generator's opaque state. Restoring it replays the sequence."""
        return self._generator.state

    @state.setter
    def state(self, value: bytes) -> None:
        self._generator.state = value

    @property
    def uses_all_bits(self) -> bool:
        return self._generator.uses_all_bits

    # =========================================================================
    # Seeding
    # =========================================================================

    def set_string_seed(self, text: str) -> None:
        """Seed from text (UTF-8 encoded, then hashed)."""
        self.set_bytes_seed(text.encode(SEED_TEXT_ENCODING))

    def set_bytes_seed(self, data: bytes) -> None:
        """Seed from arbitrary bytes.

        The SHA-1 digest is used purely as a mixing function: its first
        8 bytes, read little-endian, become the 64-bit seed.
        """
        digest = hashlib.sha1(data).digest()
        self.seed = int.from_bytes(digest[:SEED_DIGEST_BYTES_COUNT], "little")

    # =========================================================================
    # Integers
    # =========================================================================

    def next_int(self) -> int:
        """Raw signed 32-bit output of the generator."""
        return self._generator.next_int()

    def next_full_int(self) -> int:
        """Signed 32-bit integer with every bit uniform.

        Generators that don't use all bits are sampled twice; the second
        draw has its halves swapped and is XORed into the first.
        """
        if self._generator.uses_all_bits:
            return self._generator.next_int()

        a = self._generator.next_int() & WORD32_MASK
        b = self._generator.next_int() & WORD32_MASK
        rotated = ((b << FULL_INT_ROTATE_BITS_COUNT) | (b >> (32 - FULL_INT_ROTATE_BITS_COUNT))) & WORD32_MASK
        return to_int32(a ^ rotated)

    def random_int(self, lower: int, upper: int) -> int:
        """Random integer in [lower, upper], both inclusive.

        Raises:
            RangeError: If lower > upper.
        """
        if lower > upper:
            raise RangeError(f"lower ({lower}) must be <= upper ({upper})")

        value = math.floor(self.random() * (upper - lower + 1)) + lower

        # Rounding can only overshoot for spans wider than a double's mantissa
        return min(value, upper)

    # =========================================================================
    # Floats
    # =========================================================================

    def random(self) -> float:
        """Random float in [0, 1) with 53 bits of resolution."""
        high = self.next_full_int() & FLOAT_HIGH_BITS_MASK
        low = self.next_full_int() & WORD32_MASK
        return ((high << 32) | low) * FLOAT_SCALE

    def uniform(self, lower: float, upper: float) -> float:
        """Random float in [lower, upper).

        Floating-point rounding can, rarely, return exactly upper.
        """
        return self.random() * (upper - lower) + lower

    def random_bool(self, probability: float = 0.5) -> bool:
        """Random boolean, True with the given probability.

        Raises:
            RangeError: If probability is outside [0, 1].
        """
        if not 0.0 <= probability <= 1.0:
            raise RangeError(f"probability ({probability}) must be in [0, 1]")
        return self.random() < probability

    # =========================================================================
    # Sequences
    # =========================================================================

    def choice(self, seq: Sequence[Any]) -> Any:
        """Choose a random element from a non-empty sequence.

        Raises:
            EmptyInputError: If the sequence is empty.
        """
        if len(seq) == 0:
            raise EmptyInputError("cannot choose from an empty sequence")
        return seq[self.random_int(0, len(seq) - 1)]

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffle a sequence in place (Fisher-Yates).

        TigerStyle: Mutates in place, returns None.
        """
        last = len(seq) - 1
        for i in range(last):
            j = self.random_int(i, last)
            seq[i], seq[j] = seq[j], seq[i]
