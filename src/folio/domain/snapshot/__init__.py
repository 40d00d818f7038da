"""Point-in-time snapshots derived from transaction histories."""

from folio.domain.snapshot.account_snapshot import AccountSnapshot
from folio.domain.snapshot.exceptions import UnknownTransactionTypeError

__all__ = ["AccountSnapshot", "UnknownTransactionTypeError"]
