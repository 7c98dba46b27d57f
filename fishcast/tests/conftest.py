# fishcast/tests/conftest.py
import os
import random

# Must be set before anything imports fishcast.app.core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENABLE_SCHEDULER"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4" # bcrypt's minimum, keeps hashing fast
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from fishcast.app.api.dependencies import get_rng
from fishcast.app.db.init_db import create_tables, seed_hotspots
from fishcast.app.db.session import build_engine, get_db
from fishcast.app.main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    seed_hotspots(session)
    yield session
    session.close()


@pytest.fixture
def client(session_factory, db_session):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """Registers an angler through the API and returns the response body."""
    def register(email="alice@example.com", password="hunter22", name="Alice"):
        response = client.post("/api/register", json={"email": email, "password": password, "name": name})
        assert response.status_code == 201, response.text
        return response.json()
    return register


@pytest.fixture
def alice(register_user):
    data = register_user()
    return {"user": data["user"], "headers": {"Authorization": f"Bearer {data['token']}"}}


@pytest.fixture
def bob(register_user):
    data = register_user(email="bob@example.com", password="s3cret!", name="Bob")
    return {"user": data["user"], "headers": {"Authorization": f"Bearer {data['token']}"}}
