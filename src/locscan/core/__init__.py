"""Core module exports."""

from locscan.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    LocScanError,
    ResourceError,
    ScanError,
)
from locscan.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)

__all__ = [
    # Errors
    "LocScanError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ResourceError",
    "ScanError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
]
