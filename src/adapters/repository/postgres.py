"""
PostgreSQL repository adapters - Implement the domain's collaborator ports.

This module provides the PostgreSQL implementations of CompanyRepository
and CustomerDataAccess using psycopg3 with raw SQL.

Companies are read-only from the registration core's point of view: rows in
the companies table are provisioned elsewhere. Customers are appended to the
customers table with the company embedded by reference to its id.

Persistence is fire-and-forget for the domain: psycopg errors propagate
unchanged, no generated id is returned and no uniqueness constraint is
placed on customer rows.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.models import Classification, Company, Customer

logger = logging.getLogger(__name__)


class PostgresCompanyRepository:
    """
    Implements CompanyRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def get_by_id(self, company_id: str) -> Company | None:
        """
        Fetch a company by id.

        Args:
            company_id: Company identifier

        Returns:
            Company if a row exists, None otherwise
        """
        sql = """
            SELECT id, name, classification
            FROM companies
            WHERE id = %s
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (company_id,))
            row = cursor.fetchone()

        if row is None:
            return None

        return Company(id=row[0], name=row[1], classification=Classification(row[2]))


class PostgresCustomerDataAccess:
    """
    Implements CustomerDataAccess protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def add_customer(self, customer: Customer) -> None:
        """
        Insert a customer row.

        Args:
            customer: Validated customer from the domain layer
        """
        sql = """
            INSERT INTO customers (
                first_name, last_name, date_of_birth, email_address,
                company_id, has_credit_limit, credit_limit, created_at
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, NOW())
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    customer.first_name,
                    customer.last_name,
                    customer.date_of_birth,
                    customer.email_address,
                    customer.company.id,
                    customer.has_credit_limit,
                    customer.credit_limit,
                ),
            )
            conn.commit()


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
