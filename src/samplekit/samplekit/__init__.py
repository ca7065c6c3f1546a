from samplekit.compare import (
    EQUAL,
    ComparisonResult,
    Equal,
    Mismatch,
    assert_equal,
    assert_round_trip,
    compare,
)
from samplekit.core import (
    InvalidBounds,
    SampleKitError,
    SizeCeilingExceeded,
    StructuralMismatch,
)
from samplekit.generate import (
    FixtureGenerator,
    GeneratedValue,
    ValueKind,
    fill_with_generator,
    fill_with_seq,
    fill_with_seq_gen,
    fill_with_value,
    random_bool,
    random_bytes,
    random_int,
    random_string,
)
from samplekit.testdir import TestDir

__all__ = [
    'random_bytes',
    'random_string',
    'random_int',
    'random_bool',
    'FixtureGenerator',
    'GeneratedValue',
    'ValueKind',
    'fill_with_value',
    'fill_with_seq',
    'fill_with_seq_gen',
    'fill_with_generator',
    'compare',
    'assert_equal',
    'assert_round_trip',
    'ComparisonResult',
    'Equal',
    'EQUAL',
    'Mismatch',
    'SampleKitError',
    'InvalidBounds',
    'SizeCeilingExceeded',
    'StructuralMismatch',
    'TestDir',
]
