# qif_ledger/data_model/q_wrapper/qif_codes.py
"""
Line codes of the QIF records this package emits.
"""

from __future__ import annotations

from typing import Final

from .qif_code import QifCode

DATE_FORMAT: Final[str] = "%m/%d/%Y"
RECORD_END: Final[str] = "^"

_ACCOUNT_HEADER = QifCode("!Account", "Account list or which account follows", "Header", "!Account")
_TYPE_HEADER = QifCode("!Type:", "Type of account the transactions belong to", "Header", "!Type:Bank")
_NAME = QifCode("N", "Name", "Account", "NChecking")
_ACCOUNT_TYPE = QifCode("T", "Type of account", "Account", "TBank")
_DATE = QifCode("D", "Date", "Transaction", "D11/28/2020")
_PAYEE = QifCode("P", "Payee", "Transaction", "PCoffee Shop")
_MEMO = QifCode("M", "Memo", "Transaction", "MLatte")
_CATEGORY = QifCode("L", "Category (Category/Subcategory/Transfer/Class)", "Transaction", "LFood:Coffee")
_CLEARED = QifCode("C", "Cleared status", "Transaction", "C*")
_AMOUNT = QifCode("T", "Amount", "Transaction", "T-30.00")
_CATEGORY_SPLIT = QifCode("S", "Category in split", "Split", "SFood:Coffee")
_MEMO_SPLIT = QifCode("E", "Memo in split", "Split", "ELatte")
_AMOUNT_SPLIT = QifCode("$", "Dollar amount of split", "Split", "$-10.00")
_END = QifCode(RECORD_END, "End of the entry", "All", RECORD_END)


def account_header() -> QifCode:
    return _ACCOUNT_HEADER


def type_header() -> QifCode:
    return _TYPE_HEADER


def name() -> QifCode:
    return _NAME


def account_type() -> QifCode:
    return _ACCOUNT_TYPE


def date() -> QifCode:
    return _DATE


def payee() -> QifCode:
    return _PAYEE


def memo() -> QifCode:
    return _MEMO


def category() -> QifCode:
    return _CATEGORY


def cleared_status() -> QifCode:
    return _CLEARED


def amount_transaction() -> QifCode:
    return _AMOUNT


def category_split() -> QifCode:
    return _CATEGORY_SPLIT


def memo_split() -> QifCode:
    return _MEMO_SPLIT


def amount_split() -> QifCode:
    return _AMOUNT_SPLIT


def end_of_entry() -> QifCode:
    return _END
