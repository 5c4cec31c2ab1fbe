from enum import Enum

from qif_ledger.utilities.core_util import is_null_or_whitespace


class EnumClearedStatus(Enum):
    """
    Enum representing the cleared status of a transaction.

    The value is the flag written after ``C`` in a transaction record.
    """

    NOT_CLEARED = ""  # Not cleared
    CLEARED = "*"  # Cleared
    RECONCILED = "R"  # Reconciled

    @classmethod
    def from_char(cls, char: str) -> "EnumClearedStatus":
        """
        Convert a single character to a cleared status.
        """
        if is_null_or_whitespace(char):
            return cls.NOT_CLEARED
        for status in cls:
            if status.value == char:
                return status
        if char.lower() == "c":
            return cls.CLEARED
        if char.lower() == "x":
            return cls.RECONCILED
        raise ValueError(f"Unknown cleared status character: {char}")

    def __str__(self) -> str:
        return self.value
