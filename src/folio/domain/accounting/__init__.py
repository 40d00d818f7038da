"""Accounting domain layer exports."""

# Entities
from folio.domain.accounting.entities.account import Account
from folio.domain.accounting.entities.security import Security

# Value Objects
from folio.domain.accounting.value_objects.account_transaction import (
    AccountTransaction,
)
from folio.domain.accounting.value_objects.account_transaction_type import (
    AccountTransactionType,
)

__all__ = [
    # Entities
    "Account",
    "Security",
    # Value Objects
    "AccountTransaction",
    "AccountTransactionType",
]
