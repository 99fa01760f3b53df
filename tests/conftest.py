# tests/conftest.py
import os

# settings are read at import time, so the environment has to be ready first
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["HUGGINGFACE_API_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from healthsync.core.models import clear_model_cache
from healthsync.db.base import Base, get_session_factory
import healthsync.db.models  # noqa: F401
from healthsync.main import app

PASSWORD = "Sup3rSecret!"


@pytest.fixture
async def engine():
    # one shared in-memory database per test
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return await get_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(engine, session_factory):
    # ASGITransport does not run the lifespan
    app.state.engine = engine
    app.state.session_factory = session_factory
    clear_model_cache()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
    clear_model_cache()


def registration(user_type: str = "patient", email: str = None, **extra) -> dict:
    payload = {
        "email": email or f"{user_type}@example.com",
        "password": PASSWORD,
        "firstName": user_type.capitalize(),
        "lastName": "Tester",
        "userType": user_type,
    }
    if user_type == "doctor":
        payload["doctorProfile"] = {
            "specialization": "Cardiology",
            "licenseNumber": f"LIC-{payload['email']}",
        }
    elif user_type == "caretaker":
        payload["caretakerProfile"] = {"relationship": "family"}
    payload.update(extra)
    return payload


async def signup(client: AsyncClient, user_type: str = "patient", email: str = None) -> dict:
    """Register and log in; returns the login body plus ready-made auth headers."""
    payload = registration(user_type, email)
    response = await client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text

    response = await client.post(
        "/api/auth/login", json={"email": payload["email"], "password": PASSWORD}
    )
    assert response.status_code == 200, response.text
    body = response.json()
    body["headers"] = {"Authorization": f"Bearer {body['token']}"}
    return body
