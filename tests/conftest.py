"""Pytest configuration shared by every suite.

What:
  Put the in-repo source tree on ``sys.path`` and pin the runtime configuration
  to the canned fixture for every test.

Why:
  The tests must exercise the ``postbayes/src`` tree rather than an installed
  wheel, and the configuration cache is global state that would otherwise
  leak between tests.

How:
  Prepend ``postbayes/src`` at import time, then use an autouse fixture that
  sets ``POSTBAYES_CONFIG_PATH`` and resets the loader cache around each test.

Interfaces:
  :func:`runtime_config`, :func:`data_dir`, :func:`train_csv`,
  :func:`test_csv` (pytest fixtures).
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "postbayes" / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

import pytest

from postbayes.config.loader import reset_runtime_config

DATA_DIR = Path(__file__).resolve().parent / "data"
CONFIG_PATH = DATA_DIR / "config.yaml"


@pytest.fixture(autouse=True)
def runtime_config(monkeypatch: pytest.MonkeyPatch):
    """Apply the canned configuration file for every test.

    What:
      Sets ``POSTBAYES_CONFIG_PATH`` to the repository fixture and clears the
      loader cache before and after each test.

    Args:
      monkeypatch: Pytest helper injected automatically for environment control.
    """

    monkeypatch.setenv("POSTBAYES_CONFIG_PATH", str(CONFIG_PATH))
    reset_runtime_config()
    try:
        yield
    finally:
        reset_runtime_config()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def train_csv() -> Path:
    """Three-post corpus: two ``spam`` posts and one ``ham`` post."""

    return DATA_DIR / "train_small.csv"


@pytest.fixture
def test_csv() -> Path:
    return DATA_DIR / "test_small.csv"
