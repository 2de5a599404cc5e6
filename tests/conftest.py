"""Pytest configuration for imgsharp tests.

Puts the project root on sys.path so ``import imgsharp`` works without an
install, and resets cached settings around every test so environment
overrides made with ``monkeypatch`` never leak between tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from imgsharp.config.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_image(rng):
    """7x9 float64 array of uniform samples in [0, 1)."""
    return rng.random((7, 9))
