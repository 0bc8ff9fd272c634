"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the collaborators the registration core consumes.
Adapters implement these protocols structurally, without inheriting them.
"""

from typing import Protocol

from .models import Company, Customer


class CompanyRepository(Protocol):
    """Port interface for company lookup."""

    def get_by_id(self, company_id: str) -> Company | None:
        """
        Fetch a company by its identifier.

        Args:
            company_id: Company identifier as supplied by the caller

        Returns:
            The Company, or None if no company exists for the id
        """
        ...


class CustomerDataAccess(Protocol):
    """Port interface for customer persistence."""

    def add_customer(self, customer: Customer) -> None:
        """
        Persist a newly registered customer.

        Fire-and-forget: no identifier is returned and duplicates are not
        detected. Storage errors are not translated by the domain.

        Args:
            customer: Fully validated customer value
        """
        ...
