"""Value objects for the accounting bounded context."""

from folio.domain.accounting.value_objects.account_transaction import (
    AccountTransaction,
)
from folio.domain.accounting.value_objects.account_transaction_type import (
    AccountTransactionType,
)

__all__ = ["AccountTransaction", "AccountTransactionType"]
