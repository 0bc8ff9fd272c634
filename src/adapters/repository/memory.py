"""
In-memory repository adapters - Implement the domain ports without a database.

Useful for local experiments and tests that exercise the real
CustomerService without PostgreSQL.
"""

import logging
from collections.abc import Iterable

from src.domain.models import Company, Customer

logger = logging.getLogger(__name__)


class InMemoryCompanyRepository:
    """
    Implements CompanyRepository protocol over a dictionary.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, companies: Iterable[Company] = ()) -> None:
        self._companies: dict[str, Company] = {company.id: company for company in companies}

    def get_by_id(self, company_id: str) -> Company | None:
        return self._companies.get(company_id)


class InMemoryCustomerDataAccess:
    """
    Implements CustomerDataAccess protocol over a list.

    Customers are kept in insertion order. Duplicates are stored as given.
    """

    def __init__(self) -> None:
        self.customers: list[Customer] = []

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)
        logger.info(
            "[CUSTOMER] Stored customer for company '%s' (%d total)",
            customer.company.id,
            len(self.customers),
        )
