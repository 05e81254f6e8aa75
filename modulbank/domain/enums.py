"""Closed vocabularies of the bank API and their string codecs.

Each enum's values are the canonical wire names. Parsing is
case-insensitive and strict; rendering never fails. A member with an empty
value is a sentinel with no wire form: it never parses and renders as
``unknown``.
"""

import re
from enum import Enum
from typing import Any

from modulbank.domain.exceptions import InvalidEnumValue

UNKNOWN = "unknown"


class WireEnum(str, Enum):
    """String enum whose values double as the wire vocabulary"""

    def __str__(self) -> str:
        return type(self).render(self)

    @property
    def is_sentinel(self) -> bool:
        return self.value == ""

    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            wanted = value.lower()
            for member in cls:
                if not member.is_sentinel and member.value.lower() == wanted:
                    return member
        return None

    @classmethod
    def domain(cls) -> str:
        """Human readable enum name, e.g. ``bank account category``"""
        return re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()

    @classmethod
    def parse(cls, text: str):
        """
        Parse a wire string into a member of this enum.

        Raises:
            InvalidEnumValue: If text matches none of the canonical names
        """
        try:
            member = cls(text)
        except ValueError:
            raise InvalidEnumValue(cls.domain(), text) from None
        if member.is_sentinel:
            raise InvalidEnumValue(cls.domain(), text)
        return member

    @classmethod
    def render(cls, value: Any) -> str:
        """Canonical wire name of value, or ``unknown`` for non-members and sentinels"""
        if isinstance(value, cls) and not value.is_sentinel:
            return value.value
        return UNKNOWN


class BankAccountCategory(WireEnum):
    CHECKING_ACCOUNT = "CheckingAccount"
    DEPOSIT_ACCOUNT = "DepositAccount"
    TRANSIT_ACCOUNT = "TransitAccount"
    CARD_ACCOUNT = "CardAccount"
    DEPOSIT_RATE_ACCOUNT = "DepositRateAccount"
    RESERVATION_ACCOUNTING = "ReservationAccounting"


class Currency(WireEnum):
    RUR = "RUR"
    USD = "USD"
    EUR = "EUR"
    CNY = "CNY"


class BankAccountStatus(WireEnum):
    NEW = "New"
    DELETED = "Deleted"
    CLOSED = "Closed"
    FREEZED = "Freezed"
    TO_CLOSED = "ToClosed"
    TO_OPEN = "ToOpen"


class OperationCategory(WireEnum):
    NONE = ""  # no filter
    DEBET = "Debet"
    CREDIT = "Credit"


class OperationStatus(WireEnum):
    SEND_TO_BANK = "SendToBank"
    EXECUTED = "Executed"
    REJECT_BY_BANK = "RejectByBank"
    CANCELED = "Canceled"
    RECEIVED = "Received"
