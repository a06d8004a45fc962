# src/quinzena/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions. The earnings computations
themselves are total over well-typed input and raise none of these; they
come from constructing configuration values and decoding raw data.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateTableError(DomainError):
    """Raised when a rate table is missing a (tier, category) rate or has a negative one."""
    pass


class InvalidRecordError(DomainError):
    """Raised when a raw daily record cannot be decoded."""
    pass


class InvalidPeriodError(DomainError):
    """Raised for malformed month keys, expense keys or quinzena indexes."""
    pass
