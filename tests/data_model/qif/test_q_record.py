# tests/data_model/qif/test_q_record.py
from __future__ import annotations

import dataclasses

import pytest

from qif_ledger.data_model.interfaces import IRecord, ISplit, QifAccountType
from qif_ledger.data_model.qif import QRecord, QRecordSet, QSplit


def test_record_is_immutable():
    r = QRecord(payee="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.payee = "y"  # type: ignore[misc]


def test_record_and_split_satisfy_protocols():
    assert isinstance(QRecord(), IRecord)
    assert isinstance(QSplit(), ISplit)


def test_record_str_lists_fields():
    s = str(QRecord(type="Type:Bank", payee="Shop", amount="-1.00"))
    assert "type 'Type:Bank'" in s
    assert "payee 'Shop'" in s
    assert "amount '-1.00'" in s


def test_record_to_dict_omits_empty_fields():
    # Arrange
    r = QRecord(
        date="01/02'2003",
        label="Savings",
        transfer=True,
        splits=(QSplit(category="A", amount="1", memo="m"),),
    )

    # Act
    d = r.to_dict()

    # Assert
    assert d == {
        "date": "01/02'2003",
        "label": "Savings",
        "transfer": "true",
        "splits": [{"category": "A", "amount": "1", "memo": "m"}],
    }


def test_record_set_account_type_unknown_header():
    rs = QRecordSet(opening=QRecord(type="Type:Invst"))
    assert rs.account_type is None
    assert QifAccountType.from_header("Type:CCard") is QifAccountType.CCARD
