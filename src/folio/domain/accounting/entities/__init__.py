"""Domain entities for the accounting bounded context."""

from folio.domain.accounting.entities.account import Account
from folio.domain.accounting.entities.security import Security

__all__ = ["Account", "Security"]
