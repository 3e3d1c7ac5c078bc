# tests/test_cli.py
from __future__ import annotations

import logging

import pytest

from qif_ledger import cli

CARD_QIF = """\
!Type:CCard
D01/01'2011
T0.00
L[Paul - Cahoot Credit Card]
^
D24/11'2011
C*
T-3.99
PBookshop
LLeisure:Books
^
"""


@pytest.fixture(autouse=True)
def restore_root_logger():
    """``main`` reconfigures logging; put the root logger back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def test_main_writes_hledger_journal(write_qif, bank_qif_text, tmp_path):
    # Arrange
    bank = write_qif("bank.qif", bank_qif_text)
    out = tmp_path / "out" / "all.journal"

    # Act
    rc = cli.main([str(bank), "-o", str(out), "--log-level", "WARNING"])

    # Assert
    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith("1999/03/15 ! Homebase | Paint\n"), text
    assert "  housing:improvements  1026.07\n" in text
    assert text.count("\n\n") == 2, "Three transactions are separated by blank lines."


def test_main_csv_to_stdout_with_category_map(write_qif, bank_qif_text, tmp_path, capsys):
    # Arrange
    bank = write_qif("bank.qif", bank_qif_text)
    card = write_qif("card.qif", CARD_QIF)
    cmap = tmp_path / "map.csv"
    cmap.write_text(
        "category,account\n"
        "Paul - smile Current,assets:bank:smile\n"
        "Paul - Cahoot Credit Card,liabilities:cahoot\n",
        encoding="utf-8",
    )

    # Act
    rc = cli.main([str(bank), str(card), "--format", "csv", "--category-map", str(cmap),
                   "--workers", "2", "--log-level", "ERROR"])

    # Assert
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "date,status,payee,description,comment,account,amount"
    assert len(lines) == 1 + 2 + 3 + 2 + 2
    assert lines[-1] == "2011-11-28,cleared,Us,Monthly allowance in from joint ac," \
        "\"transfer-from:\"\"Joint - smile Current\"\"\",assets:bank:smile,800.00"
    assert any(",liabilities:cahoot,-3.99" in line for line in lines)


def test_main_max_limits_transactions(write_qif, bank_qif_text, tmp_path):
    # Arrange
    bank = write_qif("bank.qif", bank_qif_text)
    out = tmp_path / "one.journal"

    # Act
    cli.main([str(bank), "-o", str(out), "--max", "1", "--log-level", "ERROR"])

    # Assert
    text = out.read_text(encoding="utf-8")
    assert text.count("Homebase") == 1
    assert "Bridge Bar" not in text


def test_main_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit, match="qif-ledger: No QIF input matches"):
        cli.main([str(tmp_path / "nothing-*.qif"), "--log-level", "ERROR"])


def test_main_bad_qif_exits_with_message(write_qif):
    bad = write_qif("bad.qif", "!Type:Invst\n^\n")
    with pytest.raises(SystemExit, match="qif-ledger: .*Invst"):
        cli.main([str(bad), "--log-level", "CRITICAL"])


@pytest.mark.parametrize("flag, value", [("--max", "-1"), ("--workers", "0")])
def test_main_rejects_bad_numbers(write_qif, bank_qif_text, flag, value):
    bank = write_qif("bank.qif", bank_qif_text)
    with pytest.raises(SystemExit):
        cli.main([str(bank), flag, value, "--log-level", "ERROR"])


def test_main_log_file(write_qif, bank_qif_text, tmp_path):
    # Arrange
    bank = write_qif("bank.qif", bank_qif_text)
    log_file = tmp_path / "logs" / "run.log"

    # Act
    cli.main([str(bank), "-o", str(tmp_path / "x.journal"), "--log-level", "ERROR",
              "--log-file", str(log_file)])
    for h in logging.getLogger().handlers:
        h.flush()

    # Assert
    assert "Wrote 3 transactions" in log_file.read_text(encoding="utf-8")


def test_arg_parser_defaults():
    args = cli.build_arg_parser().parse_args(["a.qif"])
    assert args.format == "hledger"
    assert args.encoding == "utf-8"
    assert args.max == 0
    assert args.workers == 1
    assert args.out is None
