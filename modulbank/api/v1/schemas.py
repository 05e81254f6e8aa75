"""Pydantic schemas mirroring the bank API v1 JSON bodies"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional


class WireModel(BaseModel):
    """Wire record: camelCase keys, enums and dates kept as raw strings"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null keeps the zero value, like an absent key
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class BankAccountSchema(WireModel):
    """Element of AccountInfo.bankAccounts"""

    id: str = ""
    account_name: str = ""
    balance: float = Field(default=0.0, strict=True)
    bank_bic: str = ""
    bank_inn: str = ""
    bank_kpp: str = ""
    bank_correspondent_account: str = ""
    bank_name: str = ""
    begin_date: str = ""
    category: str = ""
    currency: str = ""
    number: str = ""
    status: str = ""


class AccountInfoSchema(WireModel):
    """Element of the POST /v1/account-info response"""

    company_id: str = ""
    company_name: str = ""
    bank_accounts: Optional[List[BankAccountSchema]] = None


class OperationSchema(WireModel):
    """Element of the POST /v1/operation-history/{id} response"""

    id: str = ""
    company_id: str = ""
    status: str = ""
    category: str = ""
    contragent_name: str = ""
    contragent_inn: str = ""
    contragent_kpp: str = ""
    contragent_bank_account_number: str = ""
    contragent_bank_name: str = ""
    contragent_bank_bic: str = ""
    currency: str = ""
    amount: float = Field(default=0.0, strict=True)
    amount_with_commission: float = Field(default=0.0, strict=True)
    bank_account_number: str = ""
    payment_purpose: str = ""
    executed: str = ""
    created: str = ""
    doc_number: str = ""
    kbk: str = ""
    oktmo: str = ""
    payment_basis: str = ""
    tax_code: str = ""
    tax_doc_num: str = ""
    tax_doc_date: str = ""
    payer_status: str = ""
    uin: str = ""


class OperationHistorySearchSchema(WireModel):
    """Request body for POST /v1/operation-history/{id}; unset keys are omitted"""

    category: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    till: Optional[str] = None
    skip: Optional[int] = None
    records: Optional[int] = None


# A null body is treated as an empty list
AccountInfoList = TypeAdapter(Optional[List[AccountInfoSchema]])
OperationList = TypeAdapter(Optional[List[OperationSchema]])
