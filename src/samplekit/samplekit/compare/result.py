"""
samplekit Comparison Results

A comparison yields either EQUAL or a Mismatch pinpointing the first
divergence between an expected and an actual value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

__all__ = [
    "Equal",
    "EQUAL",
    "Mismatch",
    "ComparisonResult",
    "MISMATCH_REASONS",
]

# Recognised Mismatch.reason values
MISMATCH_REASONS: frozenset[str] = frozenset(
    {
        "length",  # sequences/buffers of different length
        "shape",  # numpy arrays of different shape
        "type",  # values of incompatible kinds
        "value",  # first differing element or scalar
        "missing-field",  # key present in expected only
        "unexpected-field",  # key present in actual only
    }
)


@dataclass(frozen=True)
class Equal:
    """Result of comparing two structurally equal values."""

    def __bool__(self) -> bool:
        return True


EQUAL = Equal()


@dataclass(frozen=True)
class Mismatch:
    """
    First point where two values diverge.

    Attributes:
        reason: One of MISMATCH_REASONS.
        path: Indices and field names leading from the root to the divergence.
            Empty when the roots themselves differ.
        expected: Expected side. A length for "length", a type name for
            "type", a context fragment for buffers and strings, otherwise the
            differing element.
        actual: Actual side, same conventions as expected.
        window_start: Offset of the expected/actual fragments inside their
            buffers, or None when expected/actual are not fragments.
    """

    reason: str
    path: tuple[Any, ...] = ()
    expected: Any = None
    actual: Any = None
    window_start: Optional[int] = None

    def __post_init__(self) -> None:
        if self.reason not in MISMATCH_REASONS:
            raise ValueError(f"Unknown mismatch reason: {self.reason!r}")

    def __bool__(self) -> bool:
        return False

    @property
    def position(self) -> Any:
        """Innermost index or field name, or None for a root mismatch."""
        return self.path[-1] if self.path else None

    @property
    def expected_item(self) -> Any:
        """Differing expected element, unwrapped from its fragment."""
        return self._item(self.expected)

    @property
    def actual_item(self) -> Any:
        """Differing actual element, unwrapped from its fragment."""
        return self._item(self.actual)

    def _item(self, fragment: Any) -> Any:
        if self.window_start is None:
            return fragment
        offset = self.position - self.window_start
        if offset >= len(fragment):
            return None
        return fragment[offset]


ComparisonResult = Union[Equal, Mismatch]
