"""
Credit-limit policy and the business constants it shares with verification.

The thresholds below are provisional and have not been derived from any
customer or company context yet. Only a company literally named
VERY_IMPORTANT_CLIENT skips the credit check; every other company gets
PLACEHOLDER_CREDIT_LIMIT, which is below MIN_CREDIT_LIMIT. This coupling is
kept as-is until the credit rules are defined.
"""

from .models import Company

MIN_AGE = 21
MIN_CREDIT_LIMIT = 500
VERY_IMPORTANT_CLIENT = "VeryImportantClient"
PLACEHOLDER_CREDIT_LIMIT = 10


def find_credit_limit(company: Company | None) -> int | None:
    """
    Derive the credit limit for customers of the given company.

    Returns:
        None when no credit check applies (unknown company or the very
        important client), otherwise the placeholder limit.
    """
    if company is None or company.name == VERY_IMPORTANT_CLIENT:
        return None
    return PLACEHOLDER_CREDIT_LIMIT
