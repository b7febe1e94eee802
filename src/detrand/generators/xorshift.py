"""
XorShift128Plus - Default Bit Generator

Vigna's xorshift128+ with the 23/17/26 shift triple. The algorithm is fixed:
saved seeds and states must replay identically everywhere, so any change to
the shifts or the output step is a breaking change.
"""

from __future__ import annotations

import logging

from detrand.constants import (
    SEED_VALUE_MAX,
    SEED_VALUE_MIN,
    SPLITMIX_INCREMENT,
    SPLITMIX_MULTIPLIER_A,
    SPLITMIX_MULTIPLIER_B,
    WORD64_MASK,
    XORSHIFT_SHIFT_A,
    XORSHIFT_SHIFT_B,
    XORSHIFT_SHIFT_C,
    XORSHIFT_STATE_BYTES_COUNT,
    XORSHIFT_STATE_FALLBACK,
)
from detrand.errors import InvalidStateError
from detrand.generators.base import Generator, to_int32

logger = logging.getLogger(__name__)


def _splitmix64(value: int) -> tuple[int, int]:
    """One SplitMix64 step.

    Returns:
        (next_value, output) where next_value feeds the following step.
    """
    value = (value + SPLITMIX_INCREMENT) & WORD64_MASK
    z = value
    z = ((z ^ (z >> 30)) * SPLITMIX_MULTIPLIER_A) & WORD64_MASK
    z = ((z ^ (z >> 27)) * SPLITMIX_MULTIPLIER_B) & WORD64_MASK
    return value, z ^ (z >> 31)


def _expand_seed(seed: int) -> tuple[int, int]:
    """Expand a 64-bit seed into the two 64-bit state words."""
    value, s0 = _splitmix64(seed)
    _, s1 = _splitmix64(value)
    return s0, s1


class XorShift128Plus(Generator):
    """xorshift128+ generator: two 64-bit words of state, additive output.

    TigerStyle:
    - State is never all zero (a fixed point of the recurrence)
    - Output is the low 32 bits of s1 + s0, signed
    """

    name = "xorshift128+"

    def __init__(self, seed: int = 0):
        self._seed = 0
        self._s0 = 0
        self._s1 = 0
        self.seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        assert SEED_VALUE_MIN <= value <= SEED_VALUE_MAX, \
            f"seed ({value}) must be in [{SEED_VALUE_MIN}, {SEED_VALUE_MAX}]"

        s0, s1 = _expand_seed(value)
        if s0 == 0 and s1 == 0:
            logger.debug(f"Seed {value} expanded to zero state, using fallback word")
            s1 = XORSHIFT_STATE_FALLBACK

        self._seed = value
        self._s0 = s0
        self._s1 = s1

    @property
    def state(self) -> bytes:
        return self._s0.to_bytes(8, "little") + self._s1.to_bytes(8, "little")

    @state.setter
    def state(self, value: bytes) -> None:
        if len(value) != XORSHIFT_STATE_BYTES_COUNT:
            raise InvalidStateError(
                f"xorshift128+ state must be {XORSHIFT_STATE_BYTES_COUNT} bytes, got {len(value)}"
            )

        s0 = int.from_bytes(value[:8], "little")
        s1 = int.from_bytes(value[8:], "little")
        if s0 == 0 and s1 == 0:
            raise InvalidStateError("xorshift128+ state must not be all zero")

        self._s0 = s0
        self._s1 = s1

    @property
    def uses_all_bits(self) -> bool:
        return True

    def next_int(self) -> int:
        x = self._s0
        y = self._s1
        self._s0 = y
        x ^= (x << XORSHIFT_SHIFT_A) & WORD64_MASK
        self._s1 = x ^ y ^ (x >> XORSHIFT_SHIFT_B) ^ (y >> XORSHIFT_SHIFT_C)

        # Postcondition
        assert self._s1 <= WORD64_MASK, "state word overflow"

        return to_int32(self._s1 + y)
