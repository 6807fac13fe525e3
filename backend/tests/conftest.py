"""
Shared test fixtures for the color conversion backend tests.
"""
import os
import sys
import pytest

# ── Python path setup ──────────────────────────────────────────────────────────
_BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

# Keep test runs out of the shared log file
os.environ.setdefault("COLORS_LOG_FILE", "")


@pytest.fixture(scope="session")
def app():
    """Return the FastAPI app."""
    from api.main import app as _app
    return _app


@pytest.fixture(scope="session")
def sync_client(app):
    """Session-scoped synchronous TestClient."""
    from starlette.testclient import TestClient
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


@pytest.fixture
def fresh_limiter():
    """Reset the rate limiter storage before and after a test."""
    from api.dependencies import limiter
    limiter.reset()
    yield limiter
    limiter.reset()


@pytest.fixture
def lenient_client(app):
    """Function-scoped TestClient that turns server exceptions into 500 responses."""
    from starlette.testclient import TestClient
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
