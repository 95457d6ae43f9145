"""cobol-assist error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Expansion
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Expansion (3xxx)
    EXPANSION_FAILED = 3001
    EXPANSION_TIMEOUT = 3002
    EXPANSION_NOT_CONFIGURED = 3003


@dataclass(frozen=True, slots=True)
class CobolAssistError(Exception):
    """Base error with structured context for editor responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'EXPANSION_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CobolAssistError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ExpansionError(CobolAssistError):
    """The external copy expansion could not produce a buffer.

    Raised to the caller of a completion request; the declaration cache is
    left untouched when this is raised.
    """

    @classmethod
    def failed(cls, uri: str, reason: str) -> "ExpansionError":
        return cls(
            code=ErrorCode.EXPANSION_FAILED,
            message=f"Source expansion failed for {uri}: {reason}",
            retryable=True,
            details={"uri": uri, "reason": reason},
        )

    @classmethod
    def timeout(cls, uri: str, timeout_sec: float) -> "ExpansionError":
        return cls(
            code=ErrorCode.EXPANSION_TIMEOUT,
            message=f"Source expansion timed out after {timeout_sec}s for {uri}",
            retryable=True,
            details={"uri": uri, "timeout_sec": timeout_sec},
        )

    @classmethod
    def not_configured(cls) -> "ExpansionError":
        return cls(
            code=ErrorCode.EXPANSION_NOT_CONFIGURED,
            message="No expansion command configured (expansion.command is empty)",
        )
