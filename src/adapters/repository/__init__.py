"""Repository adapters - In-memory and database implementations."""

from .memory import InMemoryCompanyRepository, InMemoryCustomerDataAccess
from .postgres import PostgresCompanyRepository, PostgresCustomerDataAccess, run_migrations

__all__ = [
    "InMemoryCompanyRepository",
    "InMemoryCustomerDataAccess",
    "PostgresCompanyRepository",
    "PostgresCustomerDataAccess",
    "run_migrations",
]
