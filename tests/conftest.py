"""Pytest fixtures for testing"""

import pytest
import httpx
from typing import Callable, Generator, List
from zoneinfo import ZoneInfo
from modulbank.infrastructure.clients.bank import ModulbankClient
from modulbank.utils.date_utils import TimestampCodec


MSK = ZoneInfo("Europe/Moscow")


@pytest.fixture
def timestamps() -> TimestampCodec:
    """Codec bound to bank local time"""
    return TimestampCodec(MSK)


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests captured by the mock transport, in send order"""
    return []


@pytest.fixture
def make_client(sent_requests: List[httpx.Request]) -> Generator[Callable[..., ModulbankClient], None, None]:
    """Build a ModulbankClient whose HTTP calls are answered by handler"""
    http_clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> ModulbankClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        http_client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        http_clients.append(http_client)
        kwargs.setdefault("token", "secret-token")
        kwargs.setdefault("sandbox", False)
        return ModulbankClient(http_client=http_client, **kwargs)

    yield factory

    for http_client in http_clients:
        http_client.close()


@pytest.fixture
def bank_account_wire() -> dict:
    """Bank account as returned inside account-info"""
    return {
        "id": "acc-1",
        "accountName": "Main",
        "balance": 1500.75,
        "bankBic": "044525092",
        "bankInn": "2204000595",
        "bankKpp": "771543001",
        "bankCorrespondentAccount": "30101810645250000092",
        "bankName": "MODULBANK",
        "beginDate": "2019-04-01T09:30:00",
        "category": "CheckingAccount",
        "currency": "RUR",
        "number": "40702810070010113722",
        "status": "New",
    }


@pytest.fixture
def operation_wire() -> dict:
    """Tax payment from operation-history"""
    return {
        "id": "op-1",
        "companyId": "c1",
        "status": "Executed",
        "category": "Debet",
        "contragentName": "UFK po g. Moskve",
        "contragentInn": "7727406020",
        "contragentKpp": "770801001",
        "contragentBankAccountNumber": "40101810045250010041",
        "contragentBankName": "GU Banka Rossii po CFO",
        "contragentBankBic": "044525000",
        "currency": "RUR",
        "amount": 1000.0,
        "amountWithCommission": 1019.0,
        "bankAccountNumber": "40702810070010113722",
        "paymentPurpose": "Tax payment",
        "executed": "2024-03-01T12:00:00",
        "created": "2024-03-01T11:45:30",
        "docNumber": "17",
        "kbk": "18210501011011000110",
        "oktmo": "45382000",
        "paymentBasis": "TP",
        "taxCode": "KV.01.2024",
        "taxDocNum": "0",
        "taxDocDate": "0",
        "payerStatus": "01",
        "uin": "0",
    }
