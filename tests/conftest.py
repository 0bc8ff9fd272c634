"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A pinned "today" so age checks do not depend on the wall clock
- Company factories for the very important client and ordinary companies
"""

from datetime import date

import pytest

from src.domain.models import Classification, Company

TODAY = date(2026, 6, 15)


@pytest.fixture
def today() -> date:
    """Fixed current date used by every CustomerService under test."""
    return TODAY


@pytest.fixture
def adult_birth_date() -> date:
    """Date of birth 22 years before TODAY."""
    return date(TODAY.year - 22, 2, 1)


@pytest.fixture
def vip_company() -> Company:
    """Company exempt from the credit check."""
    return Company(id="important", name="VeryImportantClient", classification=Classification.BRONZE)


@pytest.fixture
def regular_company() -> Company:
    """Company that receives the placeholder credit limit."""
    return Company(id="insufficient", name="insufficient", classification=Classification.BRONZE)
