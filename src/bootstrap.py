"""
Service wiring - Builds a CustomerService backed by PostgreSQL.

This module is the composition root for services that embed the
registration core: it configures logging, owns the connection pool
lifecycle and injects the infrastructure adapters into the domain service.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import (
    PostgresCompanyRepository,
    PostgresCustomerDataAccess,
    run_migrations,
)
from src.config.settings import Settings, get_settings
from src.domain.registration import CustomerService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level and format to the root logger."""
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)


def build_customer_service(pool: ConnectionPool) -> CustomerService:
    """
    Create customer service with injected dependencies.

    Wires together the company repository and customer data access.
    """
    return CustomerService(
        company_repository=PostgresCompanyRepository(pool),
        customer_data_access=PostgresCustomerDataAccess(pool),
    )


@contextmanager
def customer_service(settings: Settings | None = None) -> Generator[CustomerService, None, None]:
    """
    Provide a wired CustomerService for the duration of the block.

    Manages startup and shutdown:
    - Creates database connection pool on entry
    - Runs migrations on entry
    - Closes connection pool on exit
    """
    settings = settings or get_settings()

    logger.info("Connecting to database...")
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=True,
    )

    try:
        logger.info("Running database migrations...")
        run_migrations(pool)
        yield build_customer_service(pool)
    finally:
        pool.close()
        logger.info("Database connection pool closed")
