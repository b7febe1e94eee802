"""
detrand - Deterministic Random Numbers

Reproducible pseudorandom sequences for procedural content, simulations and
test fixtures. Trades cryptographic strength for speed and exact replay:

- Random: façade with floats, bounded integers, choice and shuffle
- Generators: swappable bit generators (xorshift128+ by default)
- Seeds: 64-bit integers, or any text/bytes hashed down to one

Usage:
    from detrand import Random

    rng = Random(42)
    rng.random()          # float in [0, 1)
    rng.random_int(1, 6)  # inclusive
"""

from .errors import RandomError, InvalidStateError, RangeError, EmptyInputError
from .core.models import GeneratorKind, RandomConfig
from .generators import (
    Generator,
    XorShift128Plus,
    GaloisLfsr,
    available_generators,
    create_generator,
)
from .entropy import system_seed
from .random import Random

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Facade
    "Random",
    # Generators
    "Generator",
    "XorShift128Plus",
    "GaloisLfsr",
    "GeneratorKind",
    "available_generators",
    "create_generator",
    # Config
    "RandomConfig",
    "system_seed",
    # Errors
    "RandomError",
    "InvalidStateError",
    "RangeError",
    "EmptyInputError",
]
