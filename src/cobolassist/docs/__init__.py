"""Declaration documentation: records and the two-dialect parser."""

from cobolassist.docs.models import EMPTY_DOCUMENTATION, DocElement, DocumentationRecord
from cobolassist.docs.parser import (
    DocState,
    StructuredDocParser,
    is_structured,
    parse_documentation,
)

__all__ = [
    "EMPTY_DOCUMENTATION",
    "DocElement",
    "DocumentationRecord",
    "DocState",
    "StructuredDocParser",
    "is_structured",
    "parse_documentation",
]
