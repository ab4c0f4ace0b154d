import os

# Keep the application engine off MySQL while the app module is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db, get_engine
from main import app
import models.users  # noqa: F401  (registers the users table)
import models.task  # noqa: F401  (registers the maintenance_logs table)


def _override(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: engine


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine(tmp_path):
    # The parent directory does not exist, so every connect attempt fails
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'app.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    _override(engine)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_engine):
    _override(broken_engine)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(client):
    res = client.post("/api/users", json={"name": "Alice", "email": "alice@example.com", "password": "secret"})
    assert res.status_code == 201
    return res.json()["data"]
