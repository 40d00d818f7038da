"""Tests for account transactions and their types."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from folio.domain.accounting import AccountTransaction, AccountTransactionType


class TestAccountTransactionType:
    """Test cases for AccountTransactionType."""

    @pytest.mark.parametrize(
        "transaction_type",
        [
            AccountTransactionType.DEPOSIT,
            AccountTransactionType.DIVIDENDS,
            AccountTransactionType.INTEREST,
            AccountTransactionType.SELL,
            AccountTransactionType.TRANSFER_IN,
        ],
    )
    def test_credits(self, transaction_type):
        assert transaction_type.is_credit()
        assert not transaction_type.is_debit()

    @pytest.mark.parametrize(
        "transaction_type",
        [
            AccountTransactionType.FEES,
            AccountTransactionType.TAXES,
            AccountTransactionType.REMOVAL,
            AccountTransactionType.BUY,
            AccountTransactionType.TRANSFER_OUT,
        ],
    )
    def test_debits(self, transaction_type):
        assert transaction_type.is_debit()
        assert not transaction_type.is_credit()

    def test_every_type_has_a_direction(self):
        for transaction_type in AccountTransactionType:
            assert transaction_type.is_credit() != transaction_type.is_debit()


class TestAccountTransaction:
    """Test cases for AccountTransaction."""

    def test_creation(self):
        date = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        transaction = AccountTransaction(
            date=date,
            type=AccountTransactionType.DIVIDENDS,
            amount=1234,
            note="Q1 dividend",
        )

        assert transaction.date == date
        assert transaction.type == AccountTransactionType.DIVIDENDS
        assert transaction.amount == 1234
        assert transaction.note == "Q1 dividend"
        assert transaction.id is not None
        assert str(transaction) == "2024-05-01 DIVIDENDS 1234"

    def test_naive_date_is_read_as_utc(self):
        transaction = AccountTransaction(
            date=datetime(2024, 5, 1, 9, 30),
            type=AccountTransactionType.DEPOSIT,
            amount=1,
        )

        assert transaction.date.tzinfo == timezone.utc

    def test_aware_date_keeps_offset(self):
        cet = timezone(timedelta(hours=1))
        transaction = AccountTransaction(
            date=datetime(2024, 5, 1, 9, 30, tzinfo=cet),
            type=AccountTransactionType.DEPOSIT,
            amount=1,
        )

        assert transaction.date.utcoffset() == timedelta(hours=1)

    def test_type_from_value(self):
        transaction = AccountTransaction(
            date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            type="transfer_in",
            amount=1,
        )

        assert transaction.type is AccountTransactionType.TRANSFER_IN

    def test_negative_amount_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            AccountTransaction(
                date=datetime(2024, 5, 1, tzinfo=timezone.utc),
                type=AccountTransactionType.FEES,
                amount=-1,
            )

    def test_transaction_is_immutable(self):
        transaction = AccountTransaction(
            date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            type=AccountTransactionType.FEES,
            amount=1,
        )

        with pytest.raises(PydanticValidationError):
            transaction.amount = 2
