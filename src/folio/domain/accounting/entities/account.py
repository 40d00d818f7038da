"""Account entity."""

from typing import List, Optional
from uuid import UUID, uuid4

from folio.domain.accounting.value_objects import AccountTransaction
from folio.domain.shared.exceptions import ValidationError


class Account:
    """
    A cash account holding an ordered log of transactions.

    Accounts are investment vehicles and can be assigned to classifications.
    """

    def __init__(
        self,
        name: str,
        id: Optional[UUID] = None,
        note: Optional[str] = None,
        transactions: Optional[List[AccountTransaction]] = None,
    ):
        """
        Initialize a new account.

        Parameters
        ----------
        name
            Human-readable account name
        id
            Account ID (generated if not provided, used for reconstitution)
        note
            Optional free-text note
        transactions
            Initial transactions in booking order
        """
        if not name or not name.strip():
            msg = "Account name cannot be empty"
            raise ValidationError(msg)

        self._id = id if id is not None else uuid4()
        self._name = name.strip()
        self._note = note
        self._transactions: List[AccountTransaction] = list(transactions or [])

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def note(self) -> Optional[str]:
        return self._note

    @property
    def transactions(self) -> List[AccountTransaction]:
        return self._transactions

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            msg = "Account name cannot be empty"
            raise ValidationError(msg)
        self._name = new_name.strip()

    def set_note(self, note: Optional[str]) -> None:
        self._note = note.strip() if note else None

    def add_transaction(self, transaction: AccountTransaction) -> None:
        self._transactions.append(transaction)

    def remove_transaction(self, transaction: AccountTransaction) -> None:
        if transaction not in self._transactions:
            msg = f"Transaction {transaction.id} is not booked on account '{self._name}'"
            raise ValidationError(msg, details={"transaction_id": str(transaction.id)})
        self._transactions.remove(transaction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._name
