"""Shared fixtures: in-memory MongoDB, users and API clients."""

import uuid
from typing import List, Optional

import pytest
from beanie import init_beanie
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.core.security import get_password_hash
from app.database import get_document_models
from app.features.auth.dependencies import get_current_user
from app.features.auth.models import User
from app.features.notes.dependencies import get_generation_service
from app.main import app
from app.shared.enums import Clinic, UserRole


TEST_PASSWORD = "Secret123"


class FakeGenerator:
    """Stands in for GenerationService and records every prompt it receives."""

    def __init__(self, reply: str = "Generated clinical note", error: Optional[Exception] = None,
                 configured: bool = True):
        self.reply = reply
        self.error = error
        self.configured = configured
        self.prompts: List[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
async def db():
    """Fresh Beanie database per test."""
    client = AsyncMongoMockClient()
    await init_beanie(
        database=client[f"test_{uuid.uuid4().hex}"],
        document_models=get_document_models(),
    )
    yield client


async def make_user(email: str, display_name: str = "Dr. Test") -> User:
    user = User(
        email=email,
        password_hash=get_password_hash(TEST_PASSWORD),
        display_name=display_name,
        clinic=Clinic.HMHI_DOWNTOWN,
        role=UserRole.RESIDENT,
    )
    await user.insert()
    return user


@pytest.fixture
async def user(db) -> User:
    return await make_user("resident@example.com")


@pytest.fixture
async def other_user(db) -> User:
    return await make_user("attending@example.com", display_name="Dr. Other")


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
async def client(db):
    """API client with real bearer authentication."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def authed_client(db, user, generator):
    """API client signed in as `user`, with the fake generator wired in."""
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_generation_service] = lambda: generator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
