"""
samplekit Fill Helpers

Deterministic in-place fills for mutable sequences (list, bytearray,
array.array, numpy arrays). Useful when a test needs recognisable
patterns rather than random data.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, TypeVar

__all__ = [
    "fill_with_value",
    "fill_with_seq",
    "fill_with_seq_gen",
    "fill_with_generator",
]

T = TypeVar("T")
G = TypeVar("G")


def fill_with_value(target: MutableSequence[T], value: T) -> None:
    """
    Set every slot of target to value.

    Examples:
        >>> buf = bytearray(4)
        >>> fill_with_value(buf, 0xFF)
        >>> bytes(buf)
        b'\\xff\\xff\\xff\\xff'
    """
    for i in range(len(target)):
        target[i] = value


def fill_with_seq(target: MutableSequence[Any], initial: Any, inc: Any) -> None:
    """
    Fill target with the arithmetic sequence initial, initial + inc, ...

    Examples:
        >>> v = [0] * 6
        >>> fill_with_seq(v, 0, 3)
        >>> v
        [0, 3, 6, 9, 12, 15]
    """
    curr = initial
    for i in range(len(target)):
        target[i] = curr
        curr += inc


def fill_with_seq_gen(target: MutableSequence[T], initial: T, gen: Callable[[T], T]) -> None:
    """
    Fill target with initial, gen(initial), gen(gen(initial)), ...

    gen receives the current value and returns the next one.

    Examples:
        >>> v = [0] * 6
        >>> fill_with_seq_gen(v, 5, lambda x: x // 2 if x % 2 == 0 else 3 * x + 1)
        >>> v
        [5, 16, 8, 4, 2, 1]
    """
    curr = initial
    for i in range(len(target)):
        target[i] = curr
        curr = gen(curr)


def fill_with_generator(
    target: MutableSequence[T], generator: G, next_fn: Callable[[G], T]
) -> None:
    """
    Fill target with values pulled from a stateful generator object.

    next_fn is called once per slot with generator and may mutate it.

    Args:
        target: Sequence to fill.
        generator: State object handed to next_fn.
        next_fn: Returns the next value, advancing generator.
    """
    for i in range(len(target)):
        target[i] = next_fn(generator)
