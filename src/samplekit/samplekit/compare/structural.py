"""
samplekit Structural Assertions

Exact, structure-aware comparison of test artifacts:

- Byte buffers and strings: length first, then the first differing offset,
  reported with CONTEXT_WINDOW elements of context on each side
- numpy arrays: shape first, then the first differing element
- Lists and tuples: length first, then element by element
- Records (dataclasses, named tuples, mappings): field by field in
  declaration order
- Anything else: ==, with NaN equal to NaN

Self-referential containers are supported: a pair of containers met again
while it is still being compared is treated as equal at that point.

Comparison stops at the first divergence. assert_equal() and
assert_round_trip() turn a Mismatch into a StructuralMismatch, which the
test runner reports as a failure.
"""

from __future__ import annotations

import dataclasses
import logging
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional

import numpy as np

from samplekit.compare.report import format_mismatch
from samplekit.compare.result import EQUAL, ComparisonResult, Mismatch
from samplekit.core.constants import CONTEXT_WINDOW
from samplekit.core.errors import StructuralMismatch

__all__ = [
    "compare",
    "assert_equal",
    "assert_round_trip",
]

logger = logging.getLogger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)

# numpy dtype kinds that compare with each other by value
_NUMERIC_KINDS = frozenset("biufc")


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _both_nan(expected: Any, actual: Any) -> bool:
    return (
        isinstance(expected, numbers.Real)
        and isinstance(actual, numbers.Real)
        and expected != expected
        and actual != actual
    )


def _window(index: int, length: int) -> tuple[int, int]:
    return max(0, index - CONTEXT_WINDOW), min(length, index + CONTEXT_WINDOW + 1)


def _compare_flat(expected: Any, actual: Any, path: tuple[Any, ...], first_diff: int) -> Mismatch:
    start, end = _window(first_diff, max(len(expected), len(actual)))
    return Mismatch(
        reason="value",
        path=path + (first_diff,),
        expected=expected[start:end],
        actual=actual[start:end],
        window_start=start,
    )


def _compare_buffers(expected: Any, actual: Any, path: tuple[Any, ...]) -> ComparisonResult:
    expected = bytes(expected)
    actual = bytes(actual)
    if expected == actual:
        return EQUAL
    if len(expected) != len(actual):
        return Mismatch("length", path, len(expected), len(actual))
    diff = np.flatnonzero(
        np.frombuffer(expected, dtype=np.uint8) != np.frombuffer(actual, dtype=np.uint8)
    )
    return _compare_flat(expected, actual, path, int(diff[0]))


def _compare_strings(expected: str, actual: str, path: tuple[Any, ...]) -> ComparisonResult:
    if expected == actual:
        return EQUAL
    if len(expected) != len(actual):
        return Mismatch("length", path, len(expected), len(actual))
    first_diff = next(i for i, (e, a) in enumerate(zip(expected, actual)) if e != a)
    return _compare_flat(expected, actual, path, first_diff)


def _compare_arrays(expected: np.ndarray, actual: np.ndarray, path: tuple[Any, ...]) -> ComparisonResult:
    if expected.shape != actual.shape:
        return Mismatch("shape", path, expected.shape, actual.shape)
    kinds = (expected.dtype.kind, actual.dtype.kind)
    if kinds[0] != kinds[1] and not (kinds[0] in _NUMERIC_KINDS and kinds[1] in _NUMERIC_KINDS):
        return Mismatch("type", path, str(expected.dtype), str(actual.dtype))

    differs = np.asarray(expected != actual)
    if expected.dtype.kind in "fc" and actual.dtype.kind in "fc":
        differs &= ~(np.isnan(expected) & np.isnan(actual))

    flat = np.flatnonzero(differs)
    if flat.size == 0:
        return EQUAL
    if expected.ndim == 0:
        return Mismatch("value", path, expected.item(), actual.item())
    index = tuple(int(i) for i in np.unravel_index(flat[0], expected.shape))
    position = index[0] if expected.ndim == 1 else index
    return Mismatch("value", path + (position,), expected.item(index), actual.item(index))


def _compare_fields(
    expected: Any, actual: Any, names: Sequence[str], path: tuple[Any, ...], active: set
) -> ComparisonResult:
    for name in names:
        result = _compare(getattr(expected, name), getattr(actual, name), path + (name,), active)
        if not result:
            return result
    return EQUAL


def _compare_mappings(
    expected: Mapping, actual: Mapping, path: tuple[Any, ...], active: set
) -> ComparisonResult:
    for key, value in expected.items():
        if key not in actual:
            return Mismatch("missing-field", path + (key,), value, None)
        result = _compare(value, actual[key], path + (key,), active)
        if not result:
            return result
    for key, value in actual.items():
        if key not in expected:
            return Mismatch("unexpected-field", path + (key,), None, value)
    return EQUAL


def _compare_sequences(
    expected: Sequence, actual: Sequence, path: tuple[Any, ...], active: set
) -> ComparisonResult:
    if len(expected) != len(actual):
        return Mismatch("length", path, len(expected), len(actual))
    for i, (e, a) in enumerate(zip(expected, actual)):
        result = _compare(e, a, path + (i,), active)
        if not result:
            return result
    return EQUAL


def _compare_containers(
    expected: Any, actual: Any, path: tuple[Any, ...], active: set
) -> Optional[ComparisonResult]:
    """Compare records, mappings and sequences; None if neither side is one."""
    if _is_record(expected) or _is_record(actual):
        if type(expected) is not type(actual):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        names = [f.name for f in dataclasses.fields(expected) if f.compare]
        return _compare_fields(expected, actual, names, path, active)

    if _is_named_tuple(expected) or _is_named_tuple(actual):
        if type(expected) is not type(actual):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_fields(expected, actual, type(expected)._fields, path, active)

    if isinstance(expected, Mapping) or isinstance(actual, Mapping):
        if not (isinstance(expected, Mapping) and isinstance(actual, Mapping)):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_mappings(expected, actual, path, active)

    if isinstance(expected, Sequence) or isinstance(actual, Sequence):
        if type(expected) is not type(actual):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_sequences(expected, actual, path, active)

    return None


def _compare(expected: Any, actual: Any, path: tuple[Any, ...], active: set) -> ComparisonResult:
    if expected is actual:
        return EQUAL

    if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
        if not (isinstance(expected, np.ndarray) and isinstance(actual, np.ndarray)):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_arrays(expected, actual, path)

    if isinstance(expected, _BUFFER_TYPES) or isinstance(actual, _BUFFER_TYPES):
        if not (isinstance(expected, _BUFFER_TYPES) and isinstance(actual, _BUFFER_TYPES)):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_buffers(expected, actual, path)

    if isinstance(expected, str) or isinstance(actual, str):
        if not (isinstance(expected, str) and isinstance(actual, str)):
            return Mismatch("type", path, _type_name(expected), _type_name(actual))
        return _compare_strings(expected, actual, path)

    # A pair already being compared further up is a cycle; it cannot
    # diverge on its own, so it counts as equal here.
    pair = (id(expected), id(actual))
    if pair in active:
        return EQUAL
    active.add(pair)
    try:
        result = _compare_containers(expected, actual, path, active)
    finally:
        active.discard(pair)
    if result is not None:
        return result

    if _both_nan(expected, actual) or bool(expected == actual):
        return EQUAL
    return Mismatch("value", path, expected, actual)


def compare(expected: Any, actual: Any) -> ComparisonResult:
    """
    Compare two values structurally.

    Args:
        expected: Reference value.
        actual: Value under test.

    Returns:
        EQUAL, or a Mismatch describing the first divergence.

    Examples:
        >>> compare([1, 2, 3], [1, 2, 3])
        Equal()
        >>> compare([1, 2, 3], [1, 9, 3])
        Mismatch(reason='value', path=(1,), expected=2, actual=9, window_start=None)
    """
    return _compare(expected, actual, (), set())


def assert_equal(expected: Any, actual: Any, msg: Optional[str] = None) -> None:
    """
    Assert two values are structurally equal.

    Args:
        expected: Reference value.
        actual: Value under test.
        msg: Optional label prefixed to the failure message.

    Raises:
        StructuralMismatch: At the first divergence, with a diagnostic message.
    """
    result = compare(expected, actual)
    if isinstance(result, Mismatch):
        message = format_mismatch(result, label=msg)
        logger.debug(f"assert_equal failed: {message}")
        raise StructuralMismatch(message, result)


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def assert_round_trip(
    value: Any,
    encode_fn: Callable[[Any], Any],
    decode_fn: Callable[[Any], Any],
) -> None:
    """
    Assert that decode_fn(encode_fn(value)) reproduces value.

    Errors raised by encode_fn or decode_fn propagate unchanged.

    Args:
        value: Original value.
        encode_fn: Serializer under test.
        decode_fn: Matching deserializer.

    Raises:
        StructuralMismatch: The decoded value differs from value.

    Examples:
        >>> assert_round_trip(b"abc", bytes.hex, bytes.fromhex)
    """
    decoded = decode_fn(encode_fn(value))
    result = compare(value, decoded)
    if isinstance(result, Mismatch):
        label = f"round trip through {_callable_name(encode_fn)}/{_callable_name(decode_fn)}"
        message = format_mismatch(result, label=label)
        logger.debug(f"assert_round_trip failed: {message}")
        raise StructuralMismatch(message, result)
