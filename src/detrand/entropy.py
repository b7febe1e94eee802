"""
Best-effort System Entropy

Supplies a seed when the caller does not give one. This is NOT a secure
source: callers that need unpredictability must pass their own seed.
"""

from __future__ import annotations

import hashlib
import logging
import os
import random
import struct
import time

from detrand.constants import (
    ENTROPY_FALLBACK_ROUNDS_DEFAULT,
    ENTROPY_FALLBACK_ROUNDS_MAX,
    ENTROPY_FALLBACK_SLEEP_SECS,
    SEED_DIGEST_BYTES_COUNT,
)

logger = logging.getLogger(__name__)


def system_seed(fallback_rounds: int = ENTROPY_FALLBACK_ROUNDS_DEFAULT) -> int:
    """Get a 64-bit seed from the platform random source.

    Falls back to harvesting clock jitter when the platform source is
    unavailable. Never raises for lack of entropy.

    Args:
        fallback_rounds: Rounds to harvest on the fallback path.

    Returns:
        An integer in [0, 2**64 - 1].
    """
    try:
        data = os.urandom(SEED_DIGEST_BYTES_COUNT)
    except (NotImplementedError, OSError) as e:
        logger.warning(f"Platform random source unavailable ({e}), using weak clock entropy")
        return weak_seed(fallback_rounds)

    return int.from_bytes(data, "little")


def weak_seed(rounds: int = ENTROPY_FALLBACK_ROUNDS_DEFAULT) -> int:
    """Harvest a seed from clock readings and a weak PRNG.

    Each round packs one weak random byte, the wall clock and the
    monotonic counter, then sleeps briefly so the counters drift. The
    buffer is hashed and the digest prefix read little-endian. Total delay
    is bounded by rounds * ENTROPY_FALLBACK_SLEEP_SECS.
    """
    assert 0 < rounds <= ENTROPY_FALLBACK_ROUNDS_MAX, \
        f"rounds ({rounds}) must be in [1, {ENTROPY_FALLBACK_ROUNDS_MAX}]"

    weak = random.Random()
    buffer = bytearray()
    for _ in range(rounds):
        buffer += struct.pack(
            "<Bdd",
            weak.getrandbits(8),
            time.time(),
            time.perf_counter(),
        )
        time.sleep(ENTROPY_FALLBACK_SLEEP_SECS)

    digest = hashlib.sha1(buffer).digest()
    return int.from_bytes(digest[:SEED_DIGEST_BYTES_COUNT], "little")
