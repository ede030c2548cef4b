"""
Fixtures for the sandbox application tests.

Each test gets a freshly seeded application backed by a temporary SQLite
file, plus a test client that is already logged in as the admin.
"""

import pytest

from sandbox import create_app


@pytest.fixture
def app(tmp_path):
    """Create a sandbox application with its own database."""
    return create_app(
        "testing",
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'sandbox.db'}"},
    )


@pytest.fixture
def client(app):
    """Anonymous test client."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def admin_client(app):
    """Test client with an admin session."""
    with app.test_client() as test_client:
        response = test_client.post(
            "/login",
            data={"username": app.config["ADMIN_USERNAME"], "password": app.config["ADMIN_PASSWORD"]},
        )
        assert response.status_code == 302
        yield test_client


@pytest.fixture
def category_payload():
    return {
        "name": "Country Chicken",
        "slug": "country-chicken",
        "image": "catalog-media/poultry/whole-chicken.svg",
        "level": 1,
        "order": "",
    }
