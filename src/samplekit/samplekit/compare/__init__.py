"""samplekit Comparison Layer

Structural equality for test artifacts:
- compare() returning EQUAL or the first Mismatch
- assert_equal() / assert_round_trip() raising StructuralMismatch
- Diagnostic rendering of mismatches
"""

from samplekit.compare.report import format_hex, format_mismatch, format_path
from samplekit.compare.result import (
    EQUAL,
    MISMATCH_REASONS,
    ComparisonResult,
    Equal,
    Mismatch,
)
from samplekit.compare.structural import assert_equal, assert_round_trip, compare

__all__ = [
    # Comparison
    "compare",
    "assert_equal",
    "assert_round_trip",
    # Results
    "ComparisonResult",
    "Equal",
    "EQUAL",
    "Mismatch",
    "MISMATCH_REASONS",
    # Reports
    "format_hex",
    "format_path",
    "format_mismatch",
]
