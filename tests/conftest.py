"""
Pytest configuration and fixtures for gpu-blas-test test suite.

This module provides common fixtures, test data, and configuration
for testing the tester itself.
"""

import io
import os
import sys

import pytest

# Add the package to the path for testing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gpu_blas_test import Precision, Tester

ALL_PRECISIONS = [Precision.REAL32, Precision.REAL64, Precision.COMPLEX32, Precision.COMPLEX64]
REAL_PRECISIONS = [Precision.REAL32, Precision.REAL64]
COMPLEX_PRECISIONS = [Precision.COMPLEX32, Precision.COMPLEX64]

TEST_VECTOR_SIZES = [7, 64, 93]


@pytest.fixture(params=ALL_PRECISIONS, ids=lambda p: p.value)
def precision(request):
    """Fixture providing all supported precisions."""
    return request.param


@pytest.fixture(params=REAL_PRECISIONS, ids=lambda p: p.value)
def precision_real(request):
    """Fixture providing real precisions."""
    return request.param


@pytest.fixture(params=COMPLEX_PRECISIONS, ids=lambda p: p.value)
def precision_complex(request):
    """Fixture providing complex precisions."""
    return request.param


@pytest.fixture
def output():
    """Captures everything a tester prints."""
    return io.StringIO()


@pytest.fixture
def make_tester(output):
    """Build testers that print to the captured output without colours."""
    testers = []

    def _make(**kwargs):
        kwargs.setdefault("stream", output)
        kwargs.setdefault("color", False)
        tester = Tester(**kwargs)
        testers.append(tester)
        return tester

    yield _make

    for tester in testers:
        tester.close()


@pytest.fixture
def tester(make_tester):
    """A tester in the idle state."""
    return make_tester(name="AXPY")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
