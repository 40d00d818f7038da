"""Account transaction type enumeration."""

from enum import Enum


class AccountTransactionType(Enum):
    """Kinds of cash movements booked on an account."""

    DEPOSIT = "deposit"
    REMOVAL = "removal"
    INTEREST = "interest"
    DIVIDENDS = "dividends"
    FEES = "fees"
    TAXES = "taxes"
    BUY = "buy"
    SELL = "sell"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"

    def is_credit(self) -> bool:
        return self in CREDIT_TYPES

    def is_debit(self) -> bool:
        return self in DEBIT_TYPES


CREDIT_TYPES = frozenset(
    {
        AccountTransactionType.DEPOSIT,
        AccountTransactionType.DIVIDENDS,
        AccountTransactionType.INTEREST,
        AccountTransactionType.SELL,
        AccountTransactionType.TRANSFER_IN,
    },
)

DEBIT_TYPES = frozenset(
    {
        AccountTransactionType.FEES,
        AccountTransactionType.TAXES,
        AccountTransactionType.REMOVAL,
        AccountTransactionType.BUY,
        AccountTransactionType.TRANSFER_OUT,
    },
)
