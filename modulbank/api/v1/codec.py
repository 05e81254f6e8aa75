"""Translation between wire schemas and domain models.

Decoders convert field by field and stop at the first field that fails,
letting its error propagate as is. Encoders only render values the library
built itself, so they do not fail.
"""

from typing import Any, Dict

from modulbank.api.v1.schemas import (
    AccountInfoSchema,
    BankAccountSchema,
    OperationHistorySearchSchema,
    OperationSchema,
)
from modulbank.domain.enums import (
    BankAccountCategory,
    BankAccountStatus,
    Currency,
    OperationCategory,
    OperationStatus,
)
from modulbank.domain.models import AccountInfo, BankAccount, Operation, OperationHistorySearch
from modulbank.utils.date_utils import TimestampCodec


def decode_bank_account(wire: BankAccountSchema, timestamps: TimestampCodec) -> BankAccount:
    return BankAccount(
        id=wire.id,
        account_name=wire.account_name,
        balance=wire.balance,
        bank_bic=wire.bank_bic,
        bank_inn=wire.bank_inn,
        bank_kpp=wire.bank_kpp,
        bank_correspondent_account=wire.bank_correspondent_account,
        bank_name=wire.bank_name,
        begin_date=timestamps.decode(wire.begin_date),
        category=BankAccountCategory.parse(wire.category),
        currency=Currency.parse(wire.currency),
        number=wire.number,
        status=BankAccountStatus.parse(wire.status),
    )


def encode_bank_account(account: BankAccount, timestamps: TimestampCodec) -> Dict[str, Any]:
    wire = BankAccountSchema(
        id=account.id,
        account_name=account.account_name,
        balance=account.balance,
        bank_bic=account.bank_bic,
        bank_inn=account.bank_inn,
        bank_kpp=account.bank_kpp,
        bank_correspondent_account=account.bank_correspondent_account,
        bank_name=account.bank_name,
        begin_date=timestamps.encode(account.begin_date),
        category=BankAccountCategory.render(account.category),
        currency=Currency.render(account.currency),
        number=account.number,
        status=BankAccountStatus.render(account.status),
    )
    return wire.model_dump(by_alias=True)


def decode_account_info(wire: AccountInfoSchema, timestamps: TimestampCodec) -> AccountInfo:
    return AccountInfo(
        company_id=wire.company_id,
        company_name=wire.company_name,
        bank_accounts=tuple(decode_bank_account(acc, timestamps) for acc in wire.bank_accounts or ()),
    )


def encode_account_info(info: AccountInfo, timestamps: TimestampCodec) -> Dict[str, Any]:
    return {
        "companyId": info.company_id,
        "companyName": info.company_name,
        "bankAccounts": [encode_bank_account(acc, timestamps) for acc in info.bank_accounts],
    }


def decode_operation(wire: OperationSchema, timestamps: TimestampCodec) -> Operation:
    return Operation(
        id=wire.id,
        company_id=wire.company_id,
        status=OperationStatus.parse(wire.status),
        category=OperationCategory.parse(wire.category),
        contragent_name=wire.contragent_name,
        contragent_inn=wire.contragent_inn,
        contragent_kpp=wire.contragent_kpp,
        contragent_bank_account_number=wire.contragent_bank_account_number,
        contragent_bank_name=wire.contragent_bank_name,
        contragent_bank_bic=wire.contragent_bank_bic,
        currency=Currency.parse(wire.currency),
        amount=wire.amount,
        amount_with_commission=wire.amount_with_commission,
        bank_account_number=wire.bank_account_number,
        payment_purpose=wire.payment_purpose,
        executed=timestamps.decode(wire.executed),
        created=timestamps.decode(wire.created),
        doc_number=wire.doc_number,
        kbk=wire.kbk,
        oktmo=wire.oktmo,
        payment_basis=wire.payment_basis,
        tax_code=wire.tax_code,
        tax_doc_num=wire.tax_doc_num,
        tax_doc_date=wire.tax_doc_date,
        payer_status=wire.payer_status,
        uin=wire.uin,
    )


def encode_operation(operation: Operation, timestamps: TimestampCodec) -> Dict[str, Any]:
    wire = OperationSchema(
        id=operation.id,
        company_id=operation.company_id,
        status=OperationStatus.render(operation.status),
        category=OperationCategory.render(operation.category),
        contragent_name=operation.contragent_name,
        contragent_inn=operation.contragent_inn,
        contragent_kpp=operation.contragent_kpp,
        contragent_bank_account_number=operation.contragent_bank_account_number,
        contragent_bank_name=operation.contragent_bank_name,
        contragent_bank_bic=operation.contragent_bank_bic,
        currency=Currency.render(operation.currency),
        amount=operation.amount,
        amount_with_commission=operation.amount_with_commission,
        bank_account_number=operation.bank_account_number,
        payment_purpose=operation.payment_purpose,
        executed=timestamps.encode(operation.executed),
        created=timestamps.encode(operation.created),
        doc_number=operation.doc_number,
        kbk=operation.kbk,
        oktmo=operation.oktmo,
        payment_basis=operation.payment_basis,
        tax_code=operation.tax_code,
        tax_doc_num=operation.tax_doc_num,
        tax_doc_date=operation.tax_doc_date,
        payer_status=operation.payer_status,
        uin=operation.uin,
    )
    return wire.model_dump(by_alias=True)


def encode_operation_history_search(search: OperationHistorySearch, timestamps: TimestampCodec) -> Dict[str, Any]:
    """Build the search body, leaving out every field still at its zero value"""
    wire = OperationHistorySearchSchema()

    if search.category != OperationCategory.NONE:
        wire.category = OperationCategory.render(search.category)
    if search.from_time is not None:
        wire.from_ = timestamps.encode(search.from_time)
    if search.till_time is not None:
        wire.till = timestamps.encode(search.till_time)
    if search.skip:
        wire.skip = search.skip
    if search.records:
        wire.records = search.records

    return wire.model_dump(by_alias=True, exclude_none=True)
