"""External copy expansion: modes, typed results, and the subprocess provider."""

from cobolassist.expansion.models import (
    Expanded,
    ExpansionFailed,
    ExpansionMode,
    ExpansionProvider,
    ExpansionResult,
)
from cobolassist.expansion.naming import (
    build_cache_file_name,
    file_name_from_uri,
    source_path_from_uri,
)
from cobolassist.expansion.provider import SubprocessExpansionProvider

__all__ = [
    "Expanded",
    "ExpansionFailed",
    "ExpansionMode",
    "ExpansionProvider",
    "ExpansionResult",
    "build_cache_file_name",
    "file_name_from_uri",
    "source_path_from_uri",
    "SubprocessExpansionProvider",
]
