"""Config module exports."""

from cobolassist.config.loader import load_config
from cobolassist.config.models import (
    CobolAssistConfig,
    CompletionConfig,
    ExpansionConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "CobolAssistConfig",
    "CompletionConfig",
    "ExpansionConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
