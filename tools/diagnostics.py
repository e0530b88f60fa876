# =============================================================================
# tools/diagnostics.py  —  Diagnostic Logging (stderr only)
# =============================================================================
#
# We log to STDERR because the MCP server talks to its client over STDOUT
# (stdin/stdout is the MCP transport).  A single stray log line on stdout
# would corrupt the JSON-RPC stream.
#
# LINE FORMAT:
#   2026-10-18 14:03:07.123456 [TOOL] roman_numeral called with: number=1994
#   ^ timestamp (microseconds)  ^ tag
#
#   Tags:  [MAIN]  lifecycle (startup, registration, shutdown)
#          [TOOL]  tool invocations, intermediate status and results
#          [ERROR] user-input failures returned to the caller
#
# ANSI COLOURS (optional, UTILITY_LOG_COLOR):
#   CYAN requests, GREEN responses, YELLOW status, RED errors.
#
# CONCURRENCY:
#   logging.Handler.emit() runs under the handler's lock, so concurrent tool
#   calls never interleave inside a line.
# =============================================================================

import json
import logging
import sys
from datetime import datetime
from typing import Any, Mapping


LOGGER_NAME = "utility_server"

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logger = logging.getLogger(LOGGER_NAME)

_use_color = True


class _MicrosecondFormatter(logging.Formatter):
    """logging's default asctime has millisecond precision; we want microseconds."""

    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")


def configure_logging(level: str = "INFO", color: bool = True) -> logging.Logger:
    """Attach a single stderr handler to the server logger.

    Safe to call more than once; later calls replace the handler.
    """
    global _use_color
    _use_color = color

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_MicrosecondFormatter("%(asctime)s %(message)s"))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def _paint(color: str, message: str) -> str:
    return f"{color}{message}{_RESET}" if _use_color else message


def log_main(message: str) -> None:
    logger.info(f"[MAIN] {message}")


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(_paint(_CYAN, f"[TOOL] {tool_name} called with: {param_str}"))


def log_status(message: str) -> None:
    logger.info(_paint(_YELLOW, f"[TOOL]   → {message}"))


def log_response(tool_name: str, payload: Mapping[str, Any]) -> None:
    """Log the structured payload as compact JSON in GREEN."""
    body = json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=False)
    logger.info(_paint(_GREEN, f"[TOOL]   ← {tool_name} response: {body}"))


def log_error(tool_name: str, message: str) -> None:
    logger.warning(_paint(_RED, f"[ERROR] {tool_name}: {message}"))
