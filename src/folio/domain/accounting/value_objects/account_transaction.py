"""Account transaction value object."""

from datetime import datetime
from typing import Annotated, Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folio.domain.accounting.value_objects.account_transaction_type import (
    AccountTransactionType,
)
from folio.domain.shared.time import ensure_tz_aware


class AccountTransaction(BaseModel):
    """A single cash movement on an account.

    Amounts are non-negative integers in minor currency units (cents); the
    direction of the movement is given by ``type``.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(description="Booking instant (naive values are UTC)")
    type: AccountTransactionType
    amount: Annotated[int, Field(ge=0, description="Amount in minor units")]
    note: Optional[str] = None
    id: UUID = Field(default_factory=uuid4)

    @field_validator("date")
    @classmethod
    def _validate_date(cls, v: Any) -> datetime:
        return ensure_tz_aware(v)

    def __str__(self) -> str:
        return f"{self.date:%Y-%m-%d} {self.type.name} {self.amount}"
