"""samplekit Core Components

Shared building blocks:
- Tunable constants (size ceiling, charsets, diagnostic widths)
- Error taxonomy raised by generators and assertions
"""

from samplekit.core.constants import (
    ALPHANUMERIC,
    CONTEXT_WINDOW,
    DEFAULT_TEST_DIR,
    HEX_DIGITS,
    HEX_GROUP_SIZE,
    MAX_SAMPLE_SIZE,
    PRINTABLE_ASCII,
    SEED_BITS,
    SEED_ENV_VAR,
)
from samplekit.core.errors import (
    InvalidBounds,
    SampleKitError,
    SizeCeilingExceeded,
    StructuralMismatch,
)

__all__ = [
    # Errors
    "SampleKitError",
    "InvalidBounds",
    "SizeCeilingExceeded",
    "StructuralMismatch",
    # Constants
    "MAX_SAMPLE_SIZE",
    "PRINTABLE_ASCII",
    "ALPHANUMERIC",
    "HEX_DIGITS",
    "CONTEXT_WINDOW",
    "HEX_GROUP_SIZE",
    "SEED_ENV_VAR",
    "SEED_BITS",
    "DEFAULT_TEST_DIR",
]
