"""
Registration verifications - One business rule per function.

Every verification returns a tuple of ValidationError values: an empty
tuple means the rule passed. Verifications never raise, never mutate their
inputs and never depend on each other, so the orchestrator can run all of
them and report every violation at once.
"""

import re
from dataclasses import dataclass
from datetime import date

from .credit import MIN_AGE, MIN_CREDIT_LIMIT
from .models import Company


@dataclass(frozen=True)
class ValidationError:
    """Human-readable business rule violation."""

    message: str

    def __str__(self) -> str:
        return self.message


Errors = tuple[ValidationError, ...]

NO_ERRORS: Errors = ()

# Deliberately loose: something@something.something, no whitespace anywhere
EMAIL_PATTERN = re.compile(r"\S+?@\S+\.\S+")


def verify_company(company_id: str, company: Company | None) -> Errors:
    if company is not None:
        return NO_ERRORS
    return (ValidationError(f"No company found for id '{company_id}'"),)


def verify_full_name(first_name: str | None, last_name: str | None) -> Errors:
    if is_not_empty(first_name) and is_not_empty(last_name):
        return NO_ERRORS
    return (ValidationError("Both 'firstName' and 'lastName' must be provided"),)


def verify_email(email: str | None) -> Errors:
    if email is not None and EMAIL_PATTERN.fullmatch(email):
        return NO_ERRORS
    return (ValidationError("Given email address is invalid"),)


def verify_age(date_of_birth: date, today: date) -> Errors:
    if find_age(date_of_birth, today) >= MIN_AGE:
        return NO_ERRORS
    return (ValidationError("Not old enough"),)


def verify_credit_limit(credit_limit: int | None) -> Errors:
    """No limit means no credit check is required."""
    if credit_limit is None or credit_limit >= MIN_CREDIT_LIMIT:
        return NO_ERRORS
    return (ValidationError("Insufficient credit limit"),)


def is_not_empty(value: str | None) -> bool:
    return value is not None and value != ""


def find_age(date_of_birth: date, today: date) -> int:
    """
    Compute age in whole years as of today.

    Positions within the year use a uniform 31-day month, so the result can
    be off by one around short months and leap days.
    """
    today_offset = today.month * 31 + today.day
    birth_offset = date_of_birth.month * 31 + date_of_birth.day
    before_birthday = 1 if today_offset < birth_offset else 0
    return today.year - date_of_birth.year - before_birthday
