"""
samplekit Error Types

Every helper in this package fails by raising; none of these errors is
meant to be caught by the test that triggered it.

- InvalidBounds: generator misuse (min > max, negative length, empty charset)
- SizeCeilingExceeded: requested size above MAX_SAMPLE_SIZE
- StructuralMismatch: compared values differ

The first two also derive from ValueError and the last from AssertionError,
so pytest and unittest report them the way they report their builtin
counterparts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from samplekit.compare.result import Mismatch

__all__ = [
    "SampleKitError",
    "InvalidBounds",
    "SizeCeilingExceeded",
    "StructuralMismatch",
]


class SampleKitError(Exception):
    """Base class for all samplekit errors."""


class InvalidBounds(SampleKitError, ValueError):
    """Raised when a generator is called with bounds that cannot be satisfied."""


class SizeCeilingExceeded(SampleKitError, ValueError):
    """Raised when a requested length exceeds the safety ceiling."""

    def __init__(self, requested: int, ceiling: int) -> None:
        self.requested = requested
        self.ceiling = ceiling
        super().__init__(f"Requested length {requested} exceeds ceiling of {ceiling}")


class StructuralMismatch(SampleKitError, AssertionError):
    """
    Raised when two values are not structurally equal.

    Attributes:
        result: The Mismatch describing the first divergence.
    """

    def __init__(self, message: str, result: Optional[Mismatch] = None) -> None:
        self.result = result
        super().__init__(message)
