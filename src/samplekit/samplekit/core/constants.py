"""
samplekit Constants

Size ceilings, character sets, diagnostic widths and other tunables
shared by the generator and the assertion engine.
"""

from __future__ import annotations

import string

__all__ = [
    # Size limits
    "MAX_SAMPLE_SIZE",
    # Character sets
    "PRINTABLE_ASCII",
    "ALPHANUMERIC",
    "HEX_DIGITS",
    # Diagnostics
    "CONTEXT_WINDOW",
    "HEX_GROUP_SIZE",
    # Seeding
    "SEED_ENV_VAR",
    "SEED_BITS",
    # Test directory
    "DEFAULT_TEST_DIR",
]

# ============================================================================
# Size Limits
# ============================================================================

# Largest buffer/string length a generator call may request (16 MiB).
# Catches typos such as an extra zero turning a test into a memory hog.
MAX_SAMPLE_SIZE: int = 16 * 1024 * 1024

# ============================================================================
# Character Sets
# ============================================================================

# Printable ASCII without the vertical whitespace that string.printable carries
PRINTABLE_ASCII: str = string.digits + string.ascii_letters + string.punctuation + " "

ALPHANUMERIC: str = string.digits + string.ascii_letters

HEX_DIGITS: str = "0123456789abcdef"

# ============================================================================
# Diagnostics
# ============================================================================

# Elements shown on each side of the first differing offset
CONTEXT_WINDOW: int = 16

# Bytes per space-separated group in hex fragments
HEX_GROUP_SIZE: int = 4

# ============================================================================
# Seeding
# ============================================================================

# Environment variable read by the pytest plugin to pin the session seed
SEED_ENV_VAR: str = "SAMPLEKIT_SEED"

# Width of seeds drawn when the caller does not supply one
SEED_BITS: int = 63

# ============================================================================
# Test Directory
# ============================================================================

# Root for per-test scratch directories. Add it to your VCS ignore list.
DEFAULT_TEST_DIR: str = "test_dir.tmp"
