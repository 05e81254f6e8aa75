"""Structured JSON logging and raw HTTP dumps for debugging"""

import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, MutableMapping, Tuple

import httpx
from pythonjsonlogger.json import JsonFormatter

from modulbank.config import settings


LOGGER_NAME = "modulbank"


class BankJsonFormatter(JsonFormatter):
    """JSON lines with UTC time, level and the configured service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None, stream: IO[str] | None = None) -> logging.Logger:
    """
    Opt-in JSON output for the client's own logger.

    The library never calls this itself; applications that do not configure
    logging can call it once to get one JSON line per client log record. Only
    the ``modulbank`` logger is touched, and it stops propagating so records
    are not printed twice.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.log_level).upper())
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(BankJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger


class BoundLogger(logging.LoggerAdapter):
    """Logger adapter that merges its bound fields with per-call extra"""

    def bind(self, **fields: Any) -> "BoundLogger":
        return BoundLogger(self.logger, {**self.extra, **fields})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def dump_request(request: httpx.Request) -> str:
    """Render a request the way it goes on the wire: request line, headers, body"""
    target = request.url.raw_path.decode("ascii")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(f"{name.decode('latin-1')}: {value.decode('latin-1')}" for name, value in request.headers.raw)
    return "\r\n".join(lines) + "\r\n\r\n" + request.content.decode("utf-8", errors="replace")


def dump_response(response: httpx.Response) -> str:
    """Render a read response: status line, headers, body"""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name.decode('latin-1')}: {value.decode('latin-1')}" for name, value in response.headers.raw)
    return "\r\n".join(lines) + "\r\n\r\n" + response.content.decode("utf-8", errors="replace")
