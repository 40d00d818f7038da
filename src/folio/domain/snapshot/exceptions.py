"""Snapshot domain exceptions."""

from typing import Any

from folio.domain.shared.exceptions import DomainException, ErrorCode


class UnknownTransactionTypeError(DomainException):
    """Raised when a transaction type is neither a credit nor a debit.

    This points at a programming error (a new type nobody taught the
    snapshot about), not at bad user input.
    """

    def __init__(self, transaction_type: Any) -> None:
        type_name = getattr(transaction_type, "name", str(transaction_type))
        super().__init__(
            message=f"Unknown Account Transaction type: {type_name}",
            code=ErrorCode.UNKNOWN_TRANSACTION_TYPE,
            details={"transaction_type": type_name},
        )
        self.transaction_type = transaction_type
