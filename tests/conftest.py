"""
Shared fixtures for the Intake Service tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_record():
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "age": 30,
        "phone": "1234567890",
    }
