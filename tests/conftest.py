"""Shared fixtures: an application and a store backed by a temporary SQLite file."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.main import create_app
from user_directory_api.app.services.user_store import UserStore


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "users.db")


@pytest.fixture
def settings(db_path) -> Settings:
    return Settings(database_url=db_path, api_prefix="", log_level="DEBUG", log_file="")


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    # Entering the client runs the lifespan, which creates the table.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(db_path) -> UserStore:
    user_store = UserStore(db_path)
    user_store.init_schema()
    return user_store
