"""Pytest configuration and shared fixtures."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

SCENARIO = """CSCI101, Intro to Programming
CSCI200, Data Structures, CSCI101
CSCI300, Algorithms, CSCI200, CSCI101
"""


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog text to a temporary file and return its path as a string."""
    def _write(text, name="courses.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def scenario_file(write_catalog):
    return write_catalog(SCENARIO)
