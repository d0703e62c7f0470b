# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Logging configuration for the API client.

Configuration is done via environment variables:
- BCD_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, default: WARNING)
- BCD_LOG_FORMAT: Output format (json or text, default: text)
"""

import contextvars
import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

# Operation and cancellation group of the request being processed
_request_context: contextvars.ContextVar[dict[str, str] | None] = (
    contextvars.ContextVar("request_context", default=None)
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(operation)s] %(message)s"


class LogConfig:
    """Logging configuration read from the environment."""

    def __init__(self) -> None:
        log_level_str = os.environ.get("BCD_LOG_LEVEL", "WARNING").upper()
        self.log_level = getattr(logging, log_level_str, logging.WARNING)
        self.log_format = os.environ.get("BCD_LOG_FORMAT", "text").lower()

    def __repr__(self) -> str:
        return (
            f"LogConfig(log_level={logging.getLevelName(self.log_level)}, "
            f"log_format={self.log_format})"
        )


@contextmanager
def request_context(operation: str, cancel_key: str | None = None) -> Iterator[None]:
    """Attach the current operation to log records emitted inside the block."""
    token = _request_context.set(
        {"operation": operation, "cancel_key": cancel_key or ""}
    )
    try:
        yield
    finally:
        _request_context.reset(token)


def get_request_context() -> dict[str, str]:
    return dict(_request_context.get() or {})


class RequestContextFilter(logging.Filter):
    """Filter that injects the request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get() or {}
        record.operation = context.get("operation", "")
        record.cancel_key = context.get("cancel_key", "")
        return True


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter with request context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if getattr(record, "operation", ""):
            log_entry["operation"] = record.operation
        if getattr(record, "cancel_key", ""):
            log_entry["cancel_key"] = record.cancel_key

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(config: LogConfig | None = None) -> None:
    """Configure the ``bcd_client`` logger hierarchy.

    Args:
        config: Logging configuration. If None, reads from environment.
    """
    if config is None:
        config = LogConfig()

    package_logger = logging.getLogger("bcd_client")
    package_logger.setLevel(config.log_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.log_level)
    handler.addFilter(RequestContextFilter())
    if config.log_format == "json":
        handler.setFormatter(StructuredJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    package_logger.addHandler(handler)

    logger.debug(f"Logging initialized: {config!r}")
