# tests/data_model/q_wrapper/test_qif_split.py
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from qif_ledger.data_model.q_wrapper.q_split import QSplit, QSplitBuilder


def test_emit_qif_formats_record_exactly():
    # Arrange
    s = QSplit.new().with_amount(-1000).with_category("testcat").with_memo("testmemo").build()

    # Act
    out = s.emit_qif()

    # Assert
    assert out == "Stestcat\nEtestmemo\n$-10.00\n"


def test_emit_qif_keeps_empty_memo_line():
    # Arrange
    s = QSplit.new().with_amount(-1000).with_category("testcat").with_memo("").build()

    # Act / Assert
    assert s.emit_qif() == "Stestcat\nE\n$-10.00\n"


def test_defaults_emit_empty_fields_and_zero_amount():
    assert QSplit.new().build().emit_qif() == "S\nE\n$0.00\n"


def test_str_matches_emit_qif():
    s = QSplit(category="Food", memo="Lunch", amount=5)
    assert str(s) == s.emit_qif() == "SFood\nELunch\n$0.05\n"


def test_builder_chaining_does_not_mutate_previous_builder():
    # Arrange
    base = QSplit.new().with_category("A")

    # Act
    changed = base.with_category("B").with_amount(250)

    # Assert
    assert base == QSplitBuilder(category="A")
    assert changed.build() == QSplit(category="B", amount=250)


def test_built_split_is_immutable():
    s = QSplit.new().with_amount(100).build()
    with pytest.raises(FrozenInstanceError):
        s.amount = 200  # type: ignore[misc]


def test_with_amount_accepts_exact_decimal_major_units():
    s = QSplit.new().with_amount(Decimal("-12.34")).build()
    assert s.amount == -1234


def test_with_amount_rejects_float():
    with pytest.raises(TypeError):
        QSplit.new().with_amount(-10.0)  # type: ignore[arg-type]


def test_equality_and_hash_are_consistent():
    # Arrange
    a1 = QSplit(category="Food:Coffee", memo="Latte", amount=-1000)
    a2 = QSplit(category="Food:Coffee", memo="Latte", amount=-1000)
    b = QSplit(category="Food:Coffee", memo="Latte!", amount=-1000)

    # Act / Assert
    assert a1 == a2
    assert hash(a1) == hash(a2)
    assert a1 != b
    assert len({a1, a2, b}) == 2


def test_to_dict_omits_empty_memo():
    # Act
    with_memo = QSplit(category="Cat", memo="m", amount=-250).to_dict()
    without_memo = QSplit(category="Cat", amount=-250).to_dict()

    # Assert
    assert with_memo == {"category": "Cat", "amount": "-2.50", "memo": "m"}
    assert without_memo == {"category": "Cat", "amount": "-2.50"}
