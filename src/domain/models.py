"""
Domain models - Immutable values handled by the registration core.

Companies are read-only records sourced from a CompanyRepository.
Customers are built once per successful registration and handed to the
CustomerDataAccess; nothing in the domain mutates them afterwards.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Classification(str, Enum):
    """
    Company tier.

    Carried on every Company but not consulted by any business rule yet.
    """

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


@dataclass(frozen=True)
class Company:
    """Company a customer is affiliated with."""

    id: str
    name: str
    classification: Classification


@dataclass(frozen=True)
class Customer:
    """
    Registered customer.

    The company is embedded by value. credit_limit is None whenever
    has_credit_limit is False.
    """

    first_name: str
    last_name: str
    date_of_birth: date
    email_address: str
    company: Company
    has_credit_limit: bool
    credit_limit: int | None = None
