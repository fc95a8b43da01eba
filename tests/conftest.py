"""Pytest fixtures and configuration for postplanner tests."""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient


# Monday, January 15, 2024, 10:00 UTC
REFERENCE_NOW = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def reference_now():
    """Fixed reference instant used by interpreter tests."""
    return REFERENCE_NOW


@pytest.fixture
def test_user_id():
    """Test user ID for authenticated requests."""
    return "test-user-123"


@pytest.fixture
def auth_headers(test_user_id):
    """Bearer header carrying a freshly issued access token."""
    from postplanner.auth.jwt import create_access_token
    token = create_access_token(test_user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Give every test an empty rate-limit budget."""
    from postplanner.api.rate_limit import API_LIMITER
    API_LIMITER.reset()
    yield
    API_LIMITER.reset()


@pytest.fixture
def api_client(reference_now):
    """FastAPI test client with the reference clock pinned (real authentication)."""
    from postplanner.api.app import app, get_reference_now

    app.dependency_overrides[get_reference_now] = lambda: reference_now

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def test_client(api_client, test_user_id):
    """Test client with the reference clock pinned and authentication overridden."""
    from postplanner.api.app import app
    from postplanner.auth.dependencies import AuthenticatedUser, get_current_user

    app.dependency_overrides[get_current_user] = lambda: AuthenticatedUser(id=test_user_id)
    yield api_client
