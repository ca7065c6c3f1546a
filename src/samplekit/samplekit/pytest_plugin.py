"""pytest integration for samplekit.

Enable it from a top-level conftest.py:

    pytest_plugins = ["samplekit.pytest_plugin"]

The session seed comes from --samplekit-seed, then the SAMPLEKIT_SEED
environment variable, and is otherwise drawn fresh. It is printed in the
report header so a failing run can be replayed.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Optional

import pytest

from samplekit.core.constants import SEED_ENV_VAR
from samplekit.generate.values import FixtureGenerator, draw_seed
from samplekit.testdir import TestDir

__all__ = ["samplekit_seed", "fixture_generator", "test_dir"]

logger = logging.getLogger(__name__)

_SEED_OPTION = "--samplekit-seed"
_seed_key = pytest.StashKey[int]()


def _parse_seed(raw: str, source: str) -> int:
    try:
        seed = int(raw, 0)
    except ValueError:
        raise pytest.UsageError(f"{source} must be an integer, got {raw!r}") from None
    if seed < 0:
        raise pytest.UsageError(f"{source} must be non-negative, got {seed}")
    return seed


def _resolve_seed(config: pytest.Config) -> int:
    raw: Optional[str] = config.getoption(_SEED_OPTION)
    if raw is not None:
        return _parse_seed(raw, _SEED_OPTION)
    env = os.environ.get(SEED_ENV_VAR)
    if env:
        return _parse_seed(env, SEED_ENV_VAR)
    return draw_seed()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("samplekit")
    group.addoption(
        _SEED_OPTION,
        action="store",
        default=None,
        help=f"seed for samplekit fixture generators (default: ${SEED_ENV_VAR} or random)",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.stash[_seed_key] = _resolve_seed(config)
    logger.info(f"samplekit session seed {config.stash[_seed_key]}")


def pytest_report_header(config: pytest.Config) -> str:
    return f"samplekit seed: {config.stash[_seed_key]}"


@pytest.fixture(scope="session")
def samplekit_seed(pytestconfig: pytest.Config) -> int:
    """Session seed for samplekit generators."""
    return pytestconfig.stash[_seed_key]


@pytest.fixture
def fixture_generator(samplekit_seed: int) -> FixtureGenerator:
    """A FixtureGenerator seeded with the session seed, fresh for each test."""
    return FixtureGenerator(seed=samplekit_seed)


@pytest.fixture
def test_dir(request: pytest.FixtureRequest, tmp_path_factory: pytest.TempPathFactory) -> Iterator[TestDir]:
    """A TestDir named after the requesting test, removed afterwards."""
    root = tmp_path_factory.getbasetemp() / "samplekit"
    with TestDir(request.node.name, root=root) as td:
        yield td
