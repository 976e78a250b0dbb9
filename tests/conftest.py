import pytest


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing (session-scoped)."""
    from lectionary import create_app

    _app = create_app("testing")
    yield _app


@pytest.fixture()
def client(app):
    """Test client for the public endpoints."""
    return app.test_client()


@pytest.fixture()
def runner(app):
    """CLI runner for the flask commands."""
    return app.test_cli_runner()
