"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LOCSCAN__SECTION__KEY)
3. Repo YAML (.locscan/config.yaml)
4. Global YAML (~/.config/locscan/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    LOCSCAN__<SECTION>__<KEY>=<VALUE>

Examples:
    LOCSCAN__LOGGING__LEVEL=DEBUG
    LOCSCAN__SCAN__DEFAULT_DIALECT=vb
    LOCSCAN__BATCH__MAX_WORKERS=8
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DialectName = Literal["csharp", "vb"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LOCSCAN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every unresolved reference.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ScanConfig(BaseModel):
    """Scanner defaults.

    Env vars:
        LOCSCAN__SCAN__DEFAULT_DIALECT: Dialect used when the file extension is unknown
        LOCSCAN__SCAN__MAX_FILE_SIZE_MB: Skip files larger than this
        LOCSCAN__SCAN__INCLUDE_UNLOCALIZABLE: Report literals marked with the no-localize comment
    """

    default_dialect: DialectName = Field(
        default="csharp",
        description="Dialect for files whose extension is not registered.",
    )
    max_file_size_mb: int = Field(
        default=10,
        description="Skip files larger than this (MB).",
    )
    include_unlocalizable: bool = Field(
        default=False,
        description="Keep literals marked with the no-localize comment in CLI output. "
        "The scanner always reports them; this only affects filtering.",
    )

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {v}")
        return v


class BatchConfig(BaseModel):
    """Batch scanning configuration.

    Env vars:
        LOCSCAN__BATCH__MAX_WORKERS: Parallel scan workers
    """

    max_workers: int = Field(
        default=4,
        description="Parallel scan workers. Scans share no mutable state, "
        "so this only bounds CPU usage.",
    )

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v


class LocScanConfig(BaseModel):
    """Root configuration for locscan.

    All settings can be configured via:
    1. Environment variables: LOCSCAN__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
