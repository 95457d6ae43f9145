"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COBOLASSIST__SECTION__KEY)
3. Project YAML (.cobolassist/config.yaml)
4. Global YAML (~/.config/cobolassist/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    COBOLASSIST__<SECTION>__<KEY>=<VALUE>

Examples:
    COBOLASSIST__LOGGING__LEVEL=DEBUG
    COBOLASSIST__COMPLETION__CACHE_CAPACITY=4
    COBOLASSIST__EXPANSION__TIMEOUT_SEC=60
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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
        COBOLASSIST__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every scanned declaration.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CompletionConfig(BaseModel):
    """Completion engine configuration.

    Env vars:
        COBOLASSIST__COMPLETION__CACHE_CAPACITY: Declaration indexes kept in memory
        COBOLASSIST__COMPLETION__MAX_CANDIDATES: Cap on returned declaration items
    """

    cache_capacity: int = Field(
        default=1,
        description="Number of file identities whose declaration index is cached. "
        "The editor normally works on one file at a time, so one slot is enough.",
    )
    max_candidates: int = Field(
        default=0,
        description="Maximum declaration items per completion response (0 = unlimited).",
    )

    @field_validator("cache_capacity")
    @classmethod
    def validate_cache_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"cache_capacity must be >= 1, got {v}")
        return v

    @field_validator("max_candidates")
    @classmethod
    def validate_max_candidates(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_candidates must be >= 0, got {v}")
        return v


class ExpansionConfig(BaseModel):
    """External copy-expansion (preprocessor) configuration.

    The command is an argv template. ``{source}`` is replaced with the source
    path and ``{target}`` with the expanded output path. Without ``{target}``
    the expanded source is read from the command's stdout.

    Env vars:
        COBOLASSIST__EXPANSION__CACHE_DIR: Directory for expanded sources
        COBOLASSIST__EXPANSION__TIMEOUT_SEC: Preprocessor timeout
        COBOLASSIST__EXPANSION__ENCODING: Encoding of expanded sources
    """

    command: list[str] = Field(
        default_factory=list,
        description="Preprocessor argv template. Empty disables external expansion.",
    )
    cache_dir: str = Field(
        default_factory=lambda: str(Path("~/.cache/cobolassist/preproc").expanduser()),
        description="Root directory of expanded sources, one subdirectory per user.",
    )
    timeout_sec: float = Field(
        default=30.0,
        description="Max wait for the preprocessor. Expansion of large copy "
        "hierarchies can be slow.",
    )
    encoding: str = Field(
        default="latin-1",
        description="Encoding of the expanded source files.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_sec must be positive, got {v}")
        return v


class CobolAssistConfig(BaseModel):
    """Root configuration for cobol-assist.

    All settings can be configured via:
    1. Environment variables: COBOLASSIST__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    completion: CompletionConfig = Field(default_factory=CompletionConfig)
    expansion: ExpansionConfig = Field(default_factory=ExpansionConfig)
