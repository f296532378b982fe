"""Shared fixtures: an in-memory SQLite database behind the real app."""

from __future__ import annotations

import os

# Settings are read at import time; point them at SQLite before kennel loads.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from typing import TYPE_CHECKING, Any, AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from kennel.api.main import create_application
from kennel.config.settings import Settings
from kennel.shared.db import Database

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncSession


SQLITE_URL = "sqlite+aiosqlite://"


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        APP_ENV="test",
        DATABASE_URL=SQLITE_URL,
        DATABASE_CREATE_TABLES=True,
    )


@pytest.fixture()
def kennel_app(test_settings: Settings) -> FastAPI:
    """A fresh app with its own empty database for each test."""
    return create_application(test_settings, Database(SQLITE_URL))


@pytest.fixture()
def client(kennel_app: FastAPI) -> Iterator[TestClient]:
    """TestClient for the app (lifespan hooks executed)."""
    with TestClient(kennel_app) as c:
        yield c


@pytest.fixture()
def rex() -> dict[str, Any]:
    return {"name": "Rex", "breed": "Lab", "description": "Friendly", "age": 3}


@pytest_asyncio.fixture()
async def session() -> AsyncIterator[AsyncSession]:
    """A session on a fresh in-memory database, for service/repository tests."""
    database = Database(SQLITE_URL)
    await database.create_all()
    async with database.session() as db_session:
        yield db_session
    await database.close()
