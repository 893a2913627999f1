import os
import tempfile

import pytest

# Settings are read at import time, so the store must be configured before the app loads
_TEST_DIR = tempfile.mkdtemp(prefix="concessionaria-tests-")
_FRONTEND_DIR = os.path.join(_TEST_DIR, "frontend")
os.makedirs(_FRONTEND_DIR, exist_ok=True)
with open(os.path.join(_FRONTEND_DIR, "index.html"), "w", encoding="utf-8") as f:
    f.write("<!doctype html><title>Concessionária</title>")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.sqlite3"
os.environ["FRONTEND_DIR"] = _FRONTEND_DIR
os.environ["CREATE_TABLES"] = "true"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from concessionaria.database import create_tables

    asyncio.run(create_tables())


@pytest.fixture
def override_store():
    """Swap the injected record store for a test double."""
    from concessionaria.dependencies import get_vehicle_store
    from concessionaria.main import app

    def _override(store):
        app.dependency_overrides[get_vehicle_store] = lambda: store
        return store

    yield _override
    app.dependency_overrides.pop(get_vehicle_store, None)
