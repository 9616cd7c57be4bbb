"""
Pytest configuration and fixtures for API tests.
"""

import os

os.environ.setdefault("APP_SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("APP_SUPABASE_ANON_KEY", "eyJhbGciOiJIUzI1NiJ9.e30.dGVzdA")
os.environ.setdefault("APP_OPENAI_API_KEY", "test-openai-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from smartwork.core.schemas.auth import AuthUser  # noqa: E402
from smartwork.core.services.note_service import NoteService  # noqa: E402
from smartwork.core.services.settings_service import SettingsService  # noqa: E402
from smartwork.dependencies import (  # noqa: E402
    get_current_user,
    get_inventory_repository,
    get_note_repository,
    get_settings_repository,
)
from smartwork.main import app  # noqa: E402
from tests.fakes import (  # noqa: E402
    InMemoryInventoryRepository,
    InMemoryNoteRepository,
    InMemorySettingsRepository,
)

USER_A = AuthUser(id="user-a", email="a@example.com")
USER_B = AuthUser(id="user-b", email="b@example.com")


@pytest.fixture
def note_repo() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def settings_repo() -> InMemorySettingsRepository:
    return InMemorySettingsRepository()


@pytest.fixture
def inventory_repo() -> InMemoryInventoryRepository:
    return InMemoryInventoryRepository()


@pytest.fixture
def settings_service(settings_repo) -> SettingsService:
    return SettingsService(settings_repo)


@pytest.fixture
def note_service(note_repo, settings_service) -> NoteService:
    return NoteService(note_repo, settings_service)


@pytest.fixture
def session():
    """Mutable holder for the user the fake auth dependency returns."""
    return {"user": USER_A}


@pytest.fixture
def client(note_repo, settings_repo, inventory_repo, session):
    app.dependency_overrides[get_current_user] = lambda: session["user"]
    app.dependency_overrides[get_note_repository] = lambda: note_repo
    app.dependency_overrides[get_settings_repository] = lambda: settings_repo
    app.dependency_overrides[get_inventory_repository] = lambda: inventory_repo

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    with TestClient(app) as test_client:
        yield test_client
