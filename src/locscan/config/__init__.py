"""Config module exports."""

from locscan.config.loader import LocScanSettings, load_config
from locscan.config.models import (
    BatchConfig,
    LocScanConfig,
    LoggingConfig,
    LogOutputConfig,
    ScanConfig,
)

__all__ = [
    "load_config",
    "LocScanConfig",
    "LocScanSettings",
    "BatchConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ScanConfig",
]
