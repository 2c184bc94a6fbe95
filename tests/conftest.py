"""Pytest configuration and fixtures."""

import os
from contextlib import contextmanager

# Configure the app for tests before anything imports tracker.config
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ["RESET_TICKER_ENABLED"] = "false"
os.environ["SEED_DEFAULT_DATA"] = "false"
os.environ.pop("VAPID_PUBLIC_KEY", None)
os.environ.pop("VAPID_PRIVATE_KEY", None)
os.environ.pop("VAPID_EMAIL", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from tracker.database import Base, engine, get_db  # noqa: E402
from tracker.main import app  # noqa: E402
from tracker.services.consistency import CategoryManager  # noqa: E402
from tracker.services.store import TrackerStore  # noqa: E402

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def store(db):
    """Persistence store bound to the test session."""
    return TrackerStore(db)


@pytest.fixture
def manager(store):
    """Category/item consistency manager."""
    return CategoryManager(store)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def other_store(db):
    """A second store on its own session, standing in for a concurrent writer."""
    session = TestingSessionLocal()
    yield TrackerStore(session)
    session.close()


@pytest.fixture
def interleave(store, monkeypatch):
    """Run a callback once, right before the store's next transaction takes the lock.

    Models another writer winning the race for the write lock.
    """

    def install(callback):
        real_transaction = store.transaction
        pending = [callback]

        @contextmanager
        def transaction():
            if pending:
                pending.pop()()
            with real_transaction() as session:
                yield session

        monkeypatch.setattr(store, "transaction", transaction)

    return install
