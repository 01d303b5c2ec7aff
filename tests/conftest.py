"""Shared pytest fixtures for the calculator tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path so `calculator` and `scicalc` import without install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from scicalc import CalculatorEngine, HistoryStore, Settings


@pytest.fixture
def history():
    return HistoryStore(limit=10)


@pytest.fixture
def engine(history):
    return CalculatorEngine(Settings(), history)
