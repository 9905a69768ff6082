"""
Pytest configuration and shared fixtures.

Provides a test application, database session, and test client that
all test modules can use. Uses the ``testing`` configuration, which
points at an in-memory SQLite database unless TEST_DATABASE_URL is set.
"""

import pytest

from empresa import create_app
from empresa.extensions import db as _db


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    The app is created once per test session with an application
    context held open for the whole session.
    """
    app = create_app("testing")

    with app.app_context():
        yield app


@pytest.fixture(scope="function")
def db_session(app):  # pylint: disable=redefined-outer-name,unused-argument
    """
    Provide a database session backed by a freshly created schema.

    Services commit their own transactions, so instead of rolling back
    a wrapping transaction every table is dropped after the test.
    """
    _db.create_all()

    yield _db.session

    _db.session.remove()
    _db.drop_all()


@pytest.fixture(scope="function")
def client(app, db_session):  # pylint: disable=redefined-outer-name,unused-argument
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_list_jefes(client):
            response = client.get("/api/jefes")
            assert response.status_code == 404
    """
    with app.test_client() as test_client:
        yield test_client
