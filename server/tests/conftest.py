"""
Pytest configuration for server tests.

This file adds the server directory to Python path so tests can import from
'polydivisible', and provides an API test client.
"""
import sys
from pathlib import Path

import pytest

# Add server directory to Python path
server_dir = Path(__file__).parent.parent
sys.path.insert(0, str(server_dir))


@pytest.fixture
def client():
    """TestClient for the API with fresh dependency overrides."""
    from fastapi.testclient import TestClient
    from polydivisible.main import app

    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
