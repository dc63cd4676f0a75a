# This project was developed with assistance from AI tools.
"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from claimdesk.main import app


@pytest.fixture
def client():
    """TestClient against the real app with all routers mounted."""
    with TestClient(app) as c:
        yield c
