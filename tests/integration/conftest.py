"""
Shared fixtures for integration tests.

Requires PostgreSQL reachable at get_settings().database_url (via
docker-compose or DATABASE_URL). Tests are skipped when it is not.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.models import Company

pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool and apply migrations once per session."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=5,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean customers and companies tables before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM customers")
        conn.execute("DELETE FROM companies")
        conn.commit()
    yield


def insert_company(pool: ConnectionPool, company: Company) -> None:
    """Helper to provision a company row."""
    with pool.connection() as conn:
        conn.execute(
            "INSERT INTO companies (id, name, classification) VALUES (%s, %s, %s)",
            (company.id, company.name, company.classification.value),
        )
        conn.commit()


@pytest.fixture
def seed_companies(pool: ConnectionPool, vip_company: Company, regular_company: Company) -> None:
    insert_company(pool, vip_company)
    insert_company(pool, regular_company)
