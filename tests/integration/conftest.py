import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from salesboard.config.settings import Settings
from salesboard.database.connection import close_pool, get_connection, init_pool
from salesboard.database.repositories.snapshot_repository import SnapshotRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "salesboard_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        SnapshotRepository().ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def clean_snapshots(db_conn: psycopg.Connection[Any]) -> Generator[None, None, None]:
    db_conn.execute("DELETE FROM dashboard_snapshots")
    db_conn.commit()
    yield
    db_conn.execute("DELETE FROM dashboard_snapshots")
    db_conn.commit()
