"""Modulbank API HTTP client for accounts, balances and operation history"""

import functools
import json
import logging
import math
import re
import time
from typing import Any, Callable, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from modulbank.api.v1.codec import decode_account_info, decode_operation, encode_operation_history_search
from modulbank.api.v1.schemas import AccountInfoList, OperationList
from modulbank.config import settings
from modulbank.domain.exceptions import (
    DecodeError,
    MalformatedNumber,
    ModulbankError,
    RequestBuildError,
    TransportError,
    UnexpectedStatus,
)
from modulbank.domain.models import AccountInfo, Operation, OperationHistorySearch
from modulbank.infrastructure.observability.logging import LOGGER_NAME, BoundLogger, dump_request, dump_response
from modulbank.infrastructure.observability.metrics import record_request
from modulbank.utils.date_utils import TimestampCodec

SANDBOX_TOKEN = "sandboxtoken"

# Plain decimal literal with optional exponent: no whitespace, underscores, nan or inf
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _instrumented(func: Callable) -> Callable:
    """Record latency and outcome of a public API call"""

    @functools.wraps(func)
    def wrapper(self: "ModulbankClient", *args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            result = func(self, *args, **kwargs)
        except ModulbankError as e:
            record_request(func.__name__, time.perf_counter() - start, e)
            raise
        record_request(func.__name__, time.perf_counter() - start)
        return result

    return wrapper


class ModulbankClient:
    """
    Client for the Modulbank business API.

    Every call is a single POST with no retries. The client keeps no per-call
    state, so it is as thread safe as the httpx.Client it wraps. A client
    created here is owned and closed by close(); one passed in is left to the
    caller.
    """

    def __init__(
        self,
        token: str | None = None,
        sandbox: bool | None = None,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        base_url: str | None = None,
        timezone: str | None = None,
    ):
        self.token = settings.token if token is None else token
        self.sandbox = settings.sandbox if sandbox is None else sandbox
        self.base_url = (base_url or settings.api_base).rstrip("/")
        self.timestamps = TimestampCodec.for_zone(timezone or settings.timezone)

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.http_timeout_seconds)

        self.logger = BoundLogger(logger or logging.getLogger(LOGGER_NAME), {"context": LOGGER_NAME})

    def __enter__(self) -> "ModulbankClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    @_instrumented
    def account_info(self) -> List[AccountInfo]:
        """
        Fetch the authenticated company and its bank accounts.

        Raises:
            BankAPIError: On build, network or status failures
            DecodeError: On invalid JSON or unparseable fields
        """
        logger = self.logger.bind(method="account_info")
        return self._handle_request(
            logger, "POST", "/v1/account-info", None, AccountInfoList, decode_account_info
        )

    @_instrumented
    def operation_history(self, account_id: str, search: Optional[OperationHistorySearch] = None) -> List[Operation]:
        """
        Fetch operations of one bank account matching search.

        A missing search means no filter, sent as an empty JSON object.

        Raises:
            BankAPIError: On build, network or status failures
            DecodeError: On invalid JSON or unparseable fields
        """
        logger = self.logger.bind(method="operation_history")

        if search is None:
            search = OperationHistorySearch()
        payload = encode_operation_history_search(search, self.timestamps)

        path = f"/v1/operation-history/{quote(account_id, safe='')}"
        return self._handle_request(logger, "POST", path, payload, OperationList, decode_operation)

    @_instrumented
    def account_balance(self, account_id: str) -> float:
        """
        Fetch the current balance of one bank account.

        The endpoint answers with a bare decimal literal instead of JSON.

        Raises:
            BankAPIError: On build, network or status failures
            MalformatedNumber: If the body is not a number
        """
        logger = self.logger.bind(method="account_balance")

        path = f"/v1/account-info/balance/{quote(account_id, safe='')}"
        request = self._build_request(logger, "POST", path, None)
        response = self._do_request(logger, request, 200)

        body = response.text
        value = float(body) if _DECIMAL_RE.fullmatch(body) else math.nan
        if not math.isfinite(value):
            logger.error("failed to parse value from body", extra={"error": f"not a finite decimal literal: {body!r}"})
            raise MalformatedNumber(body)
        return value

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.sandbox:
            headers["Authorization"] = f"Bearer {SANDBOX_TOKEN}"
            headers["sandbox"] = "on"
        else:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _build_request(self, logger: BoundLogger, method: str, path: str, data: Any) -> httpx.Request:
        try:
            content = None
            if data is not None:
                content = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error("failed to marshal json", extra={"error": str(e)})
            raise RequestBuildError(f"failed to marshal json: {e}") from e

        try:
            return self.http_client.build_request(method, self.base_url + path, content=content, headers=self._headers())
        except httpx.InvalidURL as e:
            logger.error("failed to build request", extra={"error": str(e)})
            raise RequestBuildError(f"failed to build request: {e}") from e

    def _do_request(self, logger: BoundLogger, request: httpx.Request, expect_code: int) -> httpx.Response:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("raw request", extra={"contents": dump_request(request)})

        try:
            response = self.http_client.send(request)
        except httpx.RequestError as e:
            logger.error("failed to do request", extra={"error": str(e)})
            raise TransportError(f"failed to do request: {e}") from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("raw response", extra={"contents": dump_response(response)})

        if response.status_code != expect_code:
            logger.error("unexpected response", extra={"status_code": response.status_code})
            raise UnexpectedStatus(response.status_code)

        return response

    def _handle_request(
        self,
        logger: BoundLogger,
        method: str,
        path: str,
        data: Any,
        schema: TypeAdapter,
        translate: Callable,
    ) -> list:
        request = self._build_request(logger, method, path, data)
        response = self._do_request(logger, request, 200)

        try:
            records = schema.validate_json(response.content)
        except ValidationError as e:
            logger.error("failed to decode body", extra={"error": str(e)})
            raise DecodeError(f"failed to decode body: {e}") from e

        # No partial results: the first bad record fails the whole response
        try:
            return [translate(record, self.timestamps) for record in records or ()]
        except DecodeError as e:
            logger.error("failed to decode body", extra={"error": str(e)})
            raise
