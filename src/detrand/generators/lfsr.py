"""
GaloisLfsr - Linear-Feedback Shift Register Generator

Fast but weak: each output is the previous register shifted by one bit, so
neighbouring outputs share almost all their bits. Random routes its draws
through next_full_int() to compensate.
"""

from __future__ import annotations

import logging

from detrand.constants import (
    LFSR_SEED_FALLBACK,
    LFSR_STATE_BYTES_COUNT,
    LFSR_TAPS_MASK,
    SEED_VALUE_MAX,
    SEED_VALUE_MIN,
    WORD32_MASK,
)
from detrand.errors import InvalidStateError
from detrand.generators.base import Generator, to_int32

logger = logging.getLogger(__name__)


class GaloisLfsr(Generator):
    """32-bit right-shifting Galois LFSR over x^32 + x^22 + x^2 + x + 1."""

    name = "lfsr"

    def __init__(self, seed: int = 0):
        self._seed = 0
        self._register = LFSR_SEED_FALLBACK
        self.seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        assert SEED_VALUE_MIN <= value <= SEED_VALUE_MAX, \
            f"seed ({value}) must be in [{SEED_VALUE_MIN}, {SEED_VALUE_MAX}]"

        register = (value ^ (value >> 32)) & WORD32_MASK
        if register == 0:
            logger.debug(f"Seed {value} folds to a zero register, using fallback")
            register = LFSR_SEED_FALLBACK

        self._seed = value
        self._register = register

    @property
    def state(self) -> bytes:
        return self._register.to_bytes(LFSR_STATE_BYTES_COUNT, "little")

    @state.setter
    def state(self, value: bytes) -> None:
        if len(value) != LFSR_STATE_BYTES_COUNT:
            raise InvalidStateError(
                f"LFSR state must be {LFSR_STATE_BYTES_COUNT} bytes, got {len(value)}"
            )
        register = int.from_bytes(value, "little")
        if register == 0:
            raise InvalidStateError("LFSR register must not be zero")
        self._register = register

    @property
    def uses_all_bits(self) -> bool:
        return False

    def next_int(self) -> int:
        lsb = self._register & 1
        self._register >>= 1
        if lsb:
            self._register ^= LFSR_TAPS_MASK
        return to_int32(self._register)
