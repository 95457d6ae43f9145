"""Core module exports."""

from cobolassist.core.errors import (
    CobolAssistError,
    ConfigError,
    ErrorCode,
    ExpansionError,
)
from cobolassist.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "CobolAssistError",
    "ConfigError",
    "ErrorCode",
    "ExpansionError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
