from enum import Enum

from model.errors import InvalidKeyError


class FilingStatus(Enum):
    SINGLE = "SINGLE"
    MARRIED_FILING_JOINTLY = "MFJ"
    HEAD_OF_HOUSEHOLD = "HOH"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value) -> "FilingStatus":
        """Resolve a filing status from its code ("MFJ") or member name.

        Raises:
            InvalidKeyError: if the value names no filing status.
        """
        if isinstance(value, FilingStatus):
            return value
        text = str(value).strip().upper()
        for status in cls:
            if text in (status.value, status.name):
                return status
        raise InvalidKeyError(
            f"Unknown filing status '{value}'. Expected one of: {[s.value for s in cls]}"
        )


_DISPLAY_NAMES = {
    FilingStatus.SINGLE: "Single",
    FilingStatus.MARRIED_FILING_JOINTLY: "Married filing jointly",
    FilingStatus.HEAD_OF_HOUSEHOLD: "Head of household",
}
