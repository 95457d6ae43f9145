"""Column arithmetic for fixed-format insertion text.

All ``*_column`` arguments are 1-based source columns. ``character``
arguments are 0-based offsets into a line, as sent by editors, so the
character at offset ``c`` sits in column ``c + 1``.

Nothing here raises: a pad that would be empty or negative is clamped to a
single space so adjacent fixed-format fields never run together.
"""

from __future__ import annotations

from cobolassist.config.constants import AREA_B_COLUMN
from cobolassist.source.scanner import NAME_CHARS

MIN_PADDING = 1


def fill_missing_spaces(target_column: int, reference_column: int) -> str:
    """Padding that moves text starting at ``reference_column`` to ``target_column``.

    Examples:
        fill_missing_spaces(35, 19) -> 16 spaces
        fill_missing_spaces(35, 38) -> " " (already past the target)
    """
    return " " * max(target_column - reference_column, MIN_PADDING)


def render_insertion(target_column: int, reference_column: int, content: str) -> str:
    """Insertion text that places ``content`` at ``target_column``.

    ``reference_column`` is the column where the inserted text begins.
    """
    return fill_missing_spaces(target_column, reference_column) + content


def separator_for_column(column: int) -> str:
    """Statement terminator for a statement starting at ``column``.

    First-level statements (starting at or before Area B) end the sentence with
    a period; nested statements are separated by commas.
    """
    return "." if column <= AREA_B_COLUMN else ","


def find_word_start(line: str, character: int) -> int:
    """Offset where the word ending at ``character`` starts.

    Returns ``character`` itself when no word precedes the cursor.
    """
    start = min(max(character, 0), len(line))
    while start > 0 and line[start - 1] in NAME_CHARS:
        start -= 1
    return start


def find_word_end(line: str, character: int) -> int:
    """Offset just past the word that contains or ends at ``character``."""
    end = min(max(character, 0), len(line))
    if end < len(line) and line[end] in NAME_CHARS:
        while end < len(line) and line[end] in NAME_CHARS:
            end += 1
    return end


def fill_spaces_from_word_end(target_column: int, character: int, line: str) -> str:
    """Like ``fill_missing_spaces`` but measured from the end of the word at ``character``.

    Used when a completed keyword replaces the word being typed: the padding
    starts right after that word, not at the cursor.
    """
    next_column = find_word_end(line, character) + 1
    return fill_missing_spaces(target_column, next_column)


def replace_last_word(line: str, word: str) -> str:
    """Replace the trailing word of ``line`` (if any) with ``word``."""
    start = find_word_start(line, len(line))
    return line[:start] + word
