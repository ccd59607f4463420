"""
Pytest configuration and shared fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# launchpad.main builds a module-level app from the environment on import
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:5173")

from fastapi.testclient import TestClient  # noqa: E402

from launchpad.core.config import Settings  # noqa: E402
from launchpad.core.security import get_token_verifier  # noqa: E402
from launchpad.main import create_app  # noqa: E402

ADMIN = "admin-alice"
AGENT = "agent-bob"
OTHER_AGENT = "agent-carol"

TOKEN_PREFIX = "token-"


def fake_verify_token(token):
    """Stand-in for Firebase: "token-<principal>" verifies as <principal>."""
    if not token.startswith(TOKEN_PREFIX):
        raise ValueError("Malformed token")
    uid = token[len(TOKEN_PREFIX):]
    return {"uid": uid, "email": f"{uid}@example.com"}


def auth(principal):
    """Authorization headers for a principal."""
    return {"Authorization": f"Bearer {TOKEN_PREFIX}{principal}"}


@pytest.fixture
def settings(tmp_path):
    """Fixture providing test configuration backed by a temporary SQLite file"""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'launchpad.db'}",
        auto_create_tables=True,
        debug=True,
        admin_principals=ADMIN,
        allowed_origins="http://localhost:5173",
    )


@pytest.fixture
def app(settings):
    """Create application for testing."""
    app = create_app(settings)
    app.dependency_overrides[get_token_verifier] = lambda: fake_verify_token
    return app


@pytest.fixture
def client(app):
    """Test client; entering it runs the lifespan (tables, admin bootstrap)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin(client):
    """Headers of the bootstrapped admin, after first-login profile setup."""
    response = client.put("/v1/profiles/me", json={"name": "Alice Admin"}, headers=auth(ADMIN))
    assert response.status_code == 200
    return auth(ADMIN)


@pytest.fixture
def agent(client):
    """Headers of an onboarded agent."""
    response = client.put("/v1/profiles/me", json={"name": "Bob Agent"}, headers=auth(AGENT))
    assert response.status_code == 200
    return auth(AGENT)


@pytest.fixture
def other_agent(client):
    response = client.put("/v1/profiles/me", json={"name": "Carol Agent"}, headers=auth(OTHER_AGENT))
    assert response.status_code == 200
    return auth(OTHER_AGENT)


@pytest.fixture
def sample_property():
    """Fixture providing property form data"""
    return {
        "id": "p1",
        "address": "1 Main St",
        "city": "Plano",
        "state": "TX",
        "zip": "75074",
    }


@pytest.fixture
def listed_property(client, agent, sample_property):
    """A property registered by the agent."""
    response = client.post("/v1/properties", json=sample_property, headers=agent)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def service_request_id(client, agent, listed_property):
    """Id of a Medium-urgency request filed by the agent on the listed property."""
    response = client.post(
        "/v1/service-requests",
        json={
            "property_id": listed_property["id"],
            "title": "Leaky faucet",
            "description": "Kitchen sink drips",
            "urgency": "Medium",
        },
        headers=agent,
    )
    assert response.status_code == 201
    return response.json()["id"]
