"""
samplekit Mismatch Reports

Renders a Mismatch into the multi-line message carried by
StructuralMismatch. Buffer fragments are shown as grouped hex with a
caret under the first differing byte.
"""

from __future__ import annotations

from typing import Any, Optional

from samplekit.compare.result import Mismatch
from samplekit.core.constants import HEX_GROUP_SIZE

__all__ = ["format_hex", "format_path", "format_mismatch"]


def format_hex(data: bytes | bytearray, group: int = HEX_GROUP_SIZE) -> str:
    """
    Render bytes as lowercase hex, space-separated every `group` bytes.

    Examples:
        >>> format_hex(b"\\xde\\xad\\xbe\\xef\\x01")
        'deadbeef 01'
        >>> format_hex(bytes(4), group=2)
        '0000 0000'
    """
    if group <= 0:
        raise ValueError(f"Group size must be positive, got {group}")
    return bytes(data).hex(" ", -group)


def _hex_column(offset: int, group: int) -> int:
    return 2 * offset + offset // group


def format_path(path: tuple[Any, ...], root: str = "value") -> str:
    """
    Render a mismatch path as an accessor expression.

    Examples:
        >>> format_path((1, "name"))
        'value[1].name'
        >>> format_path(((0, 2),))
        'value[0, 2]'
    """
    out = root
    for step in path:
        if isinstance(step, int):
            out += f"[{step}]"
        elif isinstance(step, tuple):
            out += "[" + ", ".join(str(i) for i in step) + "]"
        elif isinstance(step, str) and step.isidentifier():
            out += f".{step}"
        else:
            out += f"[{step!r}]"
    return out


def _format_fragments(mismatch: Mismatch) -> list[str]:
    start = mismatch.window_start
    offset = mismatch.position - start
    exp_label = f"expected[{start}:{start + len(mismatch.expected)}]"
    act_label = f"actual[{start}:{start + len(mismatch.actual)}]"
    width = max(len(exp_label), len(act_label))

    if isinstance(mismatch.expected, bytes):
        exp_text = format_hex(mismatch.expected)
        act_text = format_hex(mismatch.actual)
        caret = " " * _hex_column(offset, HEX_GROUP_SIZE) + "^^"
        return [
            f"  {exp_label:<{width}}: {exp_text}",
            f"  {act_label:<{width}}: {act_text}",
            f"  {'':<{width}}  {caret}",
        ]
    return [
        f"  {exp_label:<{width}}: {mismatch.expected!r}",
        f"  {act_label:<{width}}: {mismatch.actual!r}",
    ]


def _describe_item(item: Any) -> str:
    if isinstance(item, int) and not isinstance(item, bool):
        return f"{item} (0x{item:02x})" if item >= 0 else str(item)
    return repr(item)


def format_mismatch(mismatch: Mismatch, label: Optional[str] = None) -> str:
    """
    Build the diagnostic message for a mismatch.

    Args:
        mismatch: The divergence to describe.
        label: Optional context prefixed to the first line.

    Returns:
        Human-readable, possibly multi-line, message.

    Examples:
        >>> format_mismatch(Mismatch("value", (1,), 2, 9))
        'mismatch at value[1]: expected 2, actual 9'
    """
    where = format_path(mismatch.path)
    reason = mismatch.reason

    if reason == "length":
        line = f"length differs at {where}: expected {mismatch.expected}, actual {mismatch.actual}"
    elif reason == "shape":
        line = f"shape differs at {where}: expected {mismatch.expected}, actual {mismatch.actual}"
    elif reason == "type":
        line = f"type differs at {where}: expected {mismatch.expected}, actual {mismatch.actual}"
    elif reason == "missing-field":
        line = f"missing field {where}: expected {mismatch.expected!r}"
    elif reason == "unexpected-field":
        line = f"unexpected field {where}: actual {mismatch.actual!r}"
    elif mismatch.window_start is not None:
        line = (
            f"mismatch at {where}: expected {_describe_item(mismatch.expected_item)}, "
            f"actual {_describe_item(mismatch.actual_item)}"
        )
    else:
        line = f"mismatch at {where}: expected {mismatch.expected!r}, actual {mismatch.actual!r}"

    if label:
        line = f"{label}: {line}"
    if mismatch.window_start is None:
        return line
    return "\n".join([line] + _format_fragments(mismatch))
