"""Shared fixtures for binary_search tests."""

from __future__ import annotations

import os
import sys

import pytest

from binary_search import (
    UniformBinarySearch,
    binary_search,
    exponential_search,
    linear_interpolation_search,
)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)


@pytest.fixture(
    params=["binary", "exponential", "linear_interpolation", "uniform"],
)
def search(request):
    """Every index search, each taking (target, sequence)."""
    if request.param == "binary":
        return binary_search
    if request.param == "exponential":
        return exponential_search
    if request.param == "linear_interpolation":
        return linear_interpolation_search
    return UniformBinarySearch().search
