"""Domain models - pure Python dataclasses representing bank entities"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from modulbank.domain.enums import (
    BankAccountCategory,
    BankAccountStatus,
    Currency,
    OperationCategory,
    OperationStatus,
)


@dataclass(frozen=True)
class BankAccount:
    """Company bank account as reported by account-info"""

    id: str
    account_name: str
    balance: float
    bank_bic: str
    bank_inn: str
    bank_kpp: str
    bank_correspondent_account: str
    bank_name: str
    begin_date: datetime
    category: BankAccountCategory
    currency: Currency
    number: str
    status: BankAccountStatus


@dataclass(frozen=True)
class AccountInfo:
    """Company and the accounts it owns"""

    company_id: str
    company_name: str
    bank_accounts: Tuple[BankAccount, ...] = ()


@dataclass(frozen=True)
class Operation:
    """Single entry of an account's operation history"""

    id: str
    company_id: str
    status: OperationStatus
    category: OperationCategory
    contragent_name: str
    contragent_inn: str
    contragent_kpp: str
    contragent_bank_account_number: str
    contragent_bank_name: str
    contragent_bank_bic: str
    currency: Currency
    amount: float
    amount_with_commission: float
    bank_account_number: str
    payment_purpose: str
    executed: datetime
    created: datetime
    doc_number: str = ""
    # Budget payment details, numbers are payment order field codes
    kbk: str = ""  # (104)
    oktmo: str = ""  # (105)
    payment_basis: str = ""  # (106)
    tax_code: str = ""
    tax_doc_num: str = ""  # (108)
    tax_doc_date: str = ""  # (109)
    payer_status: str = ""  # (101)
    uin: str = ""


@dataclass
class OperationHistorySearch:
    """Filter for operation-history; zero values are left out of the request"""

    category: OperationCategory = OperationCategory.NONE
    from_time: Optional[datetime] = None
    till_time: Optional[datetime] = None
    skip: int = 0  # offset
    records: int = 0  # limit
