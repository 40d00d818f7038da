"""Shared domain building blocks."""

from folio.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ErrorCode",
    "ValidationError",
]
