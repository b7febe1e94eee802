"""
detrand Generators

Bit generators implementing the Generator contract:
- XorShift128Plus: default, all output bits usable directly
- GaloisLfsr: fast 32-bit LFSR, output needs mixing
"""

from detrand.core.models import GeneratorKind
from detrand.generators.base import Generator
from detrand.generators.lfsr import GaloisLfsr
from detrand.generators.xorshift import XorShift128Plus

_GENERATORS: dict[GeneratorKind, type[Generator]] = {
    GeneratorKind.XORSHIFT128_PLUS: XorShift128Plus,
    GeneratorKind.LFSR: GaloisLfsr,
}


def available_generators() -> list[GeneratorKind]:
    """List the registered generator kinds."""
    return list(_GENERATORS)


def create_generator(kind: GeneratorKind | str) -> Generator:
    """Create a fresh generator of the given kind.

    Args:
        kind: A GeneratorKind or its string value (e.g. "xorshift128+").

    Raises:
        ValueError: If the kind is unknown.
    """
    try:
        kind = GeneratorKind(kind)
    except ValueError:
        names = ", ".join(k.value for k in _GENERATORS)
        raise ValueError(f"Unknown generator '{kind}' (available: {names})") from None
    return _GENERATORS[kind]()


__all__ = [
    "Generator",
    "XorShift128Plus",
    "GaloisLfsr",
    "available_generators",
    "create_generator",
]
