"""Global test configuration and lightweight fixtures.

Seeds RNGs for deterministic behavior, restores the global precision
setting after each test and auto-marks property tests.
"""

import logging
import os
import random
from pathlib import Path

import numpy as np
import pytest

from bigrat import PrecisionConfig
from bigrat.utils.logging import PACKAGE_LOGGER


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("BIGRAT_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


@pytest.fixture(autouse=True)
def _reset_precision():
    """Keep precision changes from leaking between tests."""
    yield
    PrecisionConfig.reset()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the package logger."""
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)
    return caplog


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
