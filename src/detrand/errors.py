"""
detrand Errors

TigerStyle: Explicit error types. Caller-facing contract violations raise one of
these; internal invariants are asserted.
"""


class RandomError(Exception):
    """Base error for detrand operations."""

    pass


class InvalidStateError(RandomError, ValueError):
    """Generator state bytes have the wrong length or invalid content."""

    pass


class RangeError(RandomError, ValueError):
    """A range-taking operation got lower > upper (or an out-of-range probability)."""

    pass


class EmptyInputError(RandomError, IndexError):
    """An element was requested from an empty sequence."""

    pass
