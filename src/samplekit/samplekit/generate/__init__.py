"""samplekit Generation Layer

Test input producers:
- Bounded pseudo-random bytes, strings, integers and booleans
- Seeded FixtureGenerator for reproducible call sequences
- Deterministic in-place fills (constant, arithmetic, generated)
"""

from samplekit.generate.fill import (
    fill_with_generator,
    fill_with_seq,
    fill_with_seq_gen,
    fill_with_value,
)
from samplekit.generate.values import (
    FixtureGenerator,
    GeneratedValue,
    ValueKind,
    draw_seed,
    random_bool,
    random_bytes,
    random_int,
    random_string,
)

__all__ = [
    # Random values
    "random_bytes",
    "random_string",
    "random_int",
    "random_bool",
    "draw_seed",
    "FixtureGenerator",
    "GeneratedValue",
    "ValueKind",
    # Fills
    "fill_with_value",
    "fill_with_seq",
    "fill_with_seq_gen",
    "fill_with_generator",
]
