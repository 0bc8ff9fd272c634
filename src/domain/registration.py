"""
Customer registration domain service.

Registration Pipeline
=====================

1. Look up the company (exactly once, even if other input is invalid)
2. Derive the credit limit from the (possibly missing) company
3. Run every verification, in this order:
       company -> full name -> email -> age -> credit limit
4. Any errors: return Failure with all of them, persist nothing
5. Otherwise: build the Customer, hand it to CustomerDataAccess,
   return Success with the customer

Verifications are not short-circuited, so a single call reports every
violated rule. Persistence is fire-and-forget: storage errors are not
translated, no identifier is assigned and duplicates are not detected.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from .credit import find_credit_limit
from .models import Customer
from .ports import CompanyRepository, CustomerDataAccess
from .result import Failure, Result, Success
from .verifications import (
    Errors,
    verify_age,
    verify_company,
    verify_credit_limit,
    verify_email,
    verify_full_name,
)

logger = logging.getLogger(__name__)


@dataclass
class CustomerService:
    """
    Domain service for customer registration.

    Orchestrates company lookup, credit-limit derivation, rule
    verification and customer persistence.
    """

    company_repository: CompanyRepository
    customer_data_access: CustomerDataAccess
    today: Callable[[], date] = date.today

    def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: date,
        company_id: str,
    ) -> Result[Customer, Errors]:
        """
        Validate and register a new customer.

        Args:
            first_name: Customer's first name
            last_name: Customer's last name
            email: Customer's email address
            date_of_birth: Customer's date of birth
            company_id: Identifier of the customer's company

        Returns:
            Success with the persisted Customer, or Failure with every
            ValidationError in pipeline order
        """
        company = self.company_repository.get_by_id(company_id)
        credit_limit = find_credit_limit(company)

        errors = (
            verify_company(company_id, company)
            + verify_full_name(first_name, last_name)
            + verify_email(email)
            + verify_age(date_of_birth, self.today())
            + verify_credit_limit(credit_limit)
        )

        if errors:
            logger.info(
                "Customer registration rejected for company '%s': %d error(s)",
                company_id,
                len(errors),
            )
            return Failure(errors)

        customer = Customer(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            email_address=email,
            company=company,
            has_credit_limit=credit_limit is not None,
            credit_limit=credit_limit,
        )

        self.customer_data_access.add_customer(customer)
        logger.info("Customer registered for company '%s'", company.id)
        return Success(customer)
