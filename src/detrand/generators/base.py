"""
Abstract Base Class for Bit Generators

Defines the contract every generator behind the Random façade must satisfy.
"""

from abc import ABC, abstractmethod

from detrand.constants import WORD32_MASK, WORD32_SIGN_BIT


class Generator(ABC):
    """
    Abstract base class for deterministic bit generators.

    Implementations:
    - XorShift128Plus: 128-bit xorshift with additive output (default)
    - GaloisLfsr: 32-bit Galois linear-feedback shift register

    The façade only ever touches these five surface points: seed get/set,
    state get/set, uses_all_bits and next_int().
    """

    #: Registry name, also used by the CLI.
    name: str = ""

    @property
    @abstractmethod
    def seed(self) -> int:
        """The current 64-bit seed."""
        pass

    @seed.setter
    @abstractmethod
    def seed(self, value: int) -> None:
        """
        Re-key the generator.

        Two generators of the same class given the same seed produce
        identical output from this point forward.
        """
        pass

    @property
    @abstractmethod
    def state(self) -> bytes:
        """Full internal state as an opaque byte string."""
        pass

    @state.setter
    @abstractmethod
    def state(self, value: bytes) -> None:
        """
        Restore state captured from the same generator class.

        Raises:
            InvalidStateError: If the length or content is invalid.
        """
        pass

    @property
    @abstractmethod
    def uses_all_bits(self) -> bool:
        """True if every bit of next_int() output is independently uniform."""
        pass

    @abstractmethod
    def next_int(self) -> int:
        """Advance one step and return a signed 32-bit integer."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"


def to_int32(value: int) -> int:
    """Truncate to 32 bits and reinterpret as signed."""
    value &= WORD32_MASK
    if value & WORD32_SIGN_BIT:
        return value - (WORD32_MASK + 1)
    return value
