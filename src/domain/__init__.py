"""
Domain layer - Pure business logic with zero framework imports.

This package contains the customer registration core: the Result type,
business rule verifications, the credit-limit policy and the orchestrating
CustomerService. It defines its own port interfaces for infrastructure
abstraction.
"""

from .exceptions import IllegalResultAccess, InvariantViolation
from .models import Classification, Company, Customer
from .ports import CompanyRepository, CustomerDataAccess
from .registration import CustomerService
from .result import Failure, Result, Success
from .verifications import ValidationError

__all__ = [
    "Classification",
    "Company",
    "CompanyRepository",
    "Customer",
    "CustomerDataAccess",
    "CustomerService",
    "Failure",
    "IllegalResultAccess",
    "InvariantViolation",
    "Result",
    "Success",
    "ValidationError",
]
