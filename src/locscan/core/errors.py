"""locscan error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Scan
- 4xxx: Resource
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Scan (3xxx)
    SCAN_INVALID_ARGUMENT = 3001
    SCAN_UNKNOWN_DIALECT = 3002

    # Resource (4xxx)
    RESOURCE_PARSE_ERROR = 4001
    RESOURCE_FILE_NOT_FOUND = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class LocScanError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LocScanError):
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


class ScanError(LocScanError):
    """Bad input handed to a scanner entry point."""

    @classmethod
    def invalid_argument(cls, name: str, reason: str = "must not be None") -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_INVALID_ARGUMENT,
            message=f"Invalid argument '{name}': {reason}",
            details={"argument": name, "reason": reason},
        )

    @classmethod
    def unknown_dialect(cls, name: str, known: list[str]) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_UNKNOWN_DIALECT,
            message=f"Unknown dialect '{name}' (known: {', '.join(known)})",
            details={"dialect": name, "known": known},
        )


class ResourceError(LocScanError):
    """Resource file loading errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ResourceError":
        return cls(
            code=ErrorCode.RESOURCE_PARSE_ERROR,
            message=f"Failed to parse resources at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ResourceError":
        return cls(
            code=ErrorCode.RESOURCE_FILE_NOT_FOUND,
            message=f"Resource file not found: {path}",
            details={"path": path},
        )


class InternalError(LocScanError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
