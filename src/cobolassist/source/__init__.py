"""Source text access: buffers, declaration scanning, comment blocks."""

from cobolassist.source.buffer import SourceBuffer, as_buffer, split_lines
from cobolassist.source.comments import CommentBlock, extract_comment_block, is_comment_line
from cobolassist.source.scanner import (
    DATA_ITEM,
    PARAGRAPH,
    DeclarationKind,
    DeclarationPattern,
    Occurrence,
    scan,
)

__all__ = [
    "SourceBuffer",
    "as_buffer",
    "split_lines",
    "CommentBlock",
    "extract_comment_block",
    "is_comment_line",
    "DATA_ITEM",
    "PARAGRAPH",
    "DeclarationKind",
    "DeclarationPattern",
    "Occurrence",
    "scan",
]
