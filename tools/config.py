# =============================================================================
# tools/config.py  —  Server Settings from the Environment
# =============================================================================
#
# All knobs are environment variables (a .env file works too; the entry
# points call python-dotenv's load_dotenv() before reading them):
#
#   UTILITY_SERVER_NAME     MCP server identity      (text-utility-tools)
#   UTILITY_SERVER_VERSION  reported version         (1.0.0)
#   UTILITY_TRANSPORT       stdio | http | sse       (stdio)
#   UTILITY_LOG_LEVEL       DEBUG | INFO | ...       (INFO)
#   UTILITY_LOG_COLOR       true | false             (true)
#
# Settings are read once into a frozen dataclass; nothing else in the
# project touches os.environ.
# =============================================================================

import os
from dataclasses import dataclass


_TRANSPORTS = ("stdio", "http", "sse")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    server_name: str = "text-utility-tools"
    server_version: str = "1.0.0"
    transport: str = "stdio"
    log_level: str = "INFO"
    log_color: bool = True


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Raises:
        ValueError: If UTILITY_TRANSPORT names a transport FastMCP can't run,
            or UTILITY_LOG_LEVEL is not a standard logging level name.
    """
    transport = os.environ.get("UTILITY_TRANSPORT", "stdio").strip().lower()
    if transport not in _TRANSPORTS:
        raise ValueError(
            f"UTILITY_TRANSPORT must be one of {', '.join(_TRANSPORTS)}, got {transport!r}"
        )

    log_level = os.environ.get("UTILITY_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"UTILITY_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(
        server_name=os.environ.get("UTILITY_SERVER_NAME", "text-utility-tools"),
        server_version=os.environ.get("UTILITY_SERVER_VERSION", "1.0.0"),
        transport=transport,
        log_level=log_level,
        log_color=_env_flag("UTILITY_LOG_COLOR", True),
    )
