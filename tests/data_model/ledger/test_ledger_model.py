# tests/data_model/ledger/test_ledger_model.py
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from qif_ledger.data_model.interfaces import EnumClearedStatus, ITransaction
from qif_ledger.data_model.ledger import (
    UNKNOWN_ACCOUNT,
    LedgerAccount,
    LedgerTransaction,
    Posting,
)
from qif_ledger.errors import QifCategoryError

D1 = datetime(2017, 1, 12, tzinfo=timezone.utc)


def test_account_from_colon_delimited_category():
    # Act
    account = LedgerAccount.from_category("assets:bank:smile:current")

    # Assert
    assert account.segments == ("assets", "bank", "smile", "current")
    assert account.name() == "assets:bank:smile:current"


def test_empty_category_is_unknown_account():
    assert LedgerAccount.from_category("").segments == (UNKNOWN_ACCOUNT,)
    assert LedgerAccount.from_category("", "misc").segments == ("misc",)


@pytest.mark.parametrize("category", ["a::b", ":a", "a:"])
def test_empty_segments_are_rejected(category):
    with pytest.raises(QifCategoryError):
        LedgerAccount.from_category(category)


def test_accounts_sort_by_segments():
    accounts = [LedgerAccount(("b",)), LedgerAccount(("a", "z")), LedgerAccount(("a",))]
    assert [a.name() for a in sorted(accounts)] == ["a", "a:z", "b"]


def test_transaction_balance_and_to_dict():
    # Arrange
    txn = LedgerTransaction(
        date=D1,
        status=EnumClearedStatus.CLEARED,
        payee="Dave",
        postings=(
            Posting(LedgerAccount(("expenses", "food")), Decimal("12.34")),
            Posting(LedgerAccount(("assets", "bank")), Decimal("-12.34")),
        ),
    )

    # Act
    d = txn.to_dict()

    # Assert
    assert isinstance(txn, ITransaction)
    assert txn.is_balanced()
    assert txn.balance() == 0
    assert d == {
        "date": "2017-01-12",
        "status": "cleared",
        "payee": "Dave",
        "postings": [
            {"account": "expenses:food", "amount": "12.34"},
            {"account": "assets:bank", "amount": "-12.34"},
        ],
    }


def test_unbalanced_transaction_is_rejected():
    with pytest.raises(ValueError, match="do not balance"):
        LedgerTransaction(
            date=D1,
            postings=(
                Posting(LedgerAccount(("a",)), Decimal("1")),
                Posting(LedgerAccount(("b",)), Decimal("0")),
            ),
        )


def test_transaction_needs_two_postings():
    with pytest.raises(ValueError, match="at least two postings"):
        LedgerTransaction(date=D1, postings=(Posting(LedgerAccount(("a",))),))
