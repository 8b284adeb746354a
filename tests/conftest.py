"""Top-level pytest configuration for the weather dapp tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _reset_robonomics_singleton():
    """Every test starts and ends with an uninitialized default context."""

    from server.services.robonomics import reset_robonomics_for_tests

    reset_robonomics_for_tests()
    yield
    reset_robonomics_for_tests()
