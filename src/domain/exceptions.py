"""
Domain exceptions - Programming-error types for the registration core.

Business rule violations are never raised: they travel as ValidationError
values inside a Failure result. The exceptions defined here signal misuse
of domain types by calling code and are meant to propagate.
"""


class InvariantViolation(Exception):
    """A domain invariant was broken by the caller."""

    pass


class IllegalResultAccess(InvariantViolation):
    """Value read from a Failure, or errors read from a Success."""

    pass
