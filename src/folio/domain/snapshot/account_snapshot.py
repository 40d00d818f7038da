"""Point-in-time cash balance of an account."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from folio.domain.accounting.value_objects.account_transaction_type import (
    CREDIT_TYPES,
    DEBIT_TYPES,
)
from folio.domain.shared.exceptions import ErrorCode, ValidationError
from folio.domain.shared.time import end_of_day_utc, ensure_tz_aware
from folio.domain.snapshot.exceptions import UnknownTransactionTypeError

if TYPE_CHECKING:
    from folio.domain.accounting.entities import Account

logger = logging.getLogger(__name__)

REPORT_RULE = "-" * 53
REPORT_INDENT = " " * 43

CutoffTime = Union[datetime, date, str]


@dataclass(frozen=True)
class AccountSnapshot:
    """Cash balance of ``account`` as of ``time``.

    ``funds`` is the signed balance in minor currency units (cents).
    Build instances with :meth:`create`.
    """

    account: Account
    time: datetime
    funds: int

    @classmethod
    def create(cls, account: Account, time: CutoffTime) -> AccountSnapshot:
        """Replay the account's transactions booked on or before ``time``.

        Transactions after the cutoff are skipped wherever they appear in
        the log, so the result does not depend on the booking order.

        Raises
        ------
        UnknownTransactionTypeError
            If a transaction within the cutoff has a type that is neither a
            credit nor a debit.
        """
        cutoff = _coerce_to_instant(time)

        funds = 0
        included = 0
        for transaction in account.transactions:
            if ensure_tz_aware(transaction.date) > cutoff:
                continue

            if transaction.type in CREDIT_TYPES:
                funds += transaction.amount
            elif transaction.type in DEBIT_TYPES:
                funds -= transaction.amount
            else:
                raise UnknownTransactionTypeError(transaction.type)
            included += 1

        logger.debug(
            "Snapshot of '%s' at %s: %d of %d transactions, funds=%d",
            account.name,
            cutoff.isoformat(),
            included,
            len(account.transactions),
            funds,
        )
        return cls(account=account, time=cutoff, funds=funds)

    @property
    def funds_as_decimal(self) -> Decimal:
        return Decimal(self.funds) / Decimal(100)

    def __str__(self) -> str:
        return (
            f"{REPORT_RULE}\n"
            f"{self.account.name}\n"
            f"Date: {self.time:%Y-%m-%d}\n"
            f"{REPORT_RULE}\n"
            f"{REPORT_INDENT}{self.funds_as_decimal:10,.2f}\n"
            f"{REPORT_RULE}\n"
        )


def _coerce_to_instant(raw_value: object) -> datetime:
    """Turn the cutoff into a timezone-aware instant.

    A bare date means "at the end of that day" so that everything booked on
    that day is included.
    """
    if isinstance(raw_value, datetime):
        return ensure_tz_aware(raw_value)

    if isinstance(raw_value, date):
        return end_of_day_utc(raw_value)

    if isinstance(raw_value, str):
        try:
            return end_of_day_utc(date.fromisoformat(raw_value))
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(raw_value)
        except ValueError as exc:
            msg = f"Invalid date value '{raw_value}'"
            raise ValidationError(msg, code=ErrorCode.INVALID_DATE) from exc
        return ensure_tz_aware(parsed)

    msg = f"Unsupported date type: {type(raw_value).__name__}"
    raise TypeError(msg)
