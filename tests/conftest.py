"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from roi_calculator.main import app
from roi_calculator.calculations.roi import Inputs


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def default_inputs():
    """The inputs the page loads with."""
    return Inputs()


@pytest.fixture
def large_employer_inputs():
    """A larger workforce where the per-employee cost exceeds the floor."""
    return Inputs(
        employees=1000,
        avg_salary=60000,
        turnover_rate=15,
        managers=80,
        avg_manager_salary=100000,
        absenteeism_rate=3,
    )
