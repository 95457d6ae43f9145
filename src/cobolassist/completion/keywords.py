"""Statement snippets whose operands land on fixed columns.

Each snippet replaces the word being typed (from its start to the cursor) and
pads after the keyword so the operand starts on the house-style column:
paragraph targets of PERFORM and EXIT on column 35, MOVE/SET operands on
column 20.
"""

from __future__ import annotations

from collections.abc import Callable

from cobolassist.completion.columns import (
    fill_missing_spaces,
    fill_spaces_from_word_end,
    find_word_start,
    replace_last_word,
    separator_for_column,
)
from cobolassist.completion.items import (
    CompletionItem,
    CompletionItemKind,
    InsertTextFormat,
    Range,
    TextEdit,
)
from cobolassist.config.constants import OPERAND_COLUMN, PERFORM_TARGET_COLUMN

SnippetFactory = Callable[[int, int, str], CompletionItem]


def _snippet(
    line_index: int,
    character: int,
    line: str,
    *,
    label: str,
    detail: str,
    text: str,
    filter_text: str,
) -> CompletionItem:
    start = find_word_start(line, character)
    return CompletionItem(
        label=label,
        kind=CompletionItemKind.KEYWORD,
        detail=detail,
        text_edit=TextEdit(Range.on_line(line_index, start, character), text),
        insert_text_format=InsertTextFormat.SNIPPET,
        filter_text=filter_text,
        preselect=True,
    )


def perform_completion(line_index: int, character: int, line: str) -> CompletionItem:
    column = find_word_start(line, character) + 1
    keyword = "perform"
    text = (
        keyword
        + fill_missing_spaces(PERFORM_TARGET_COLUMN, column + len(keyword))
        + "${0}"
        + separator_for_column(column)
    )
    return _snippet(
        line_index,
        character,
        line,
        label="PERFORM command",
        detail="Generates PERFORM with the cursor on the paragraph name",
        text=text,
        filter_text="pe perform",
    )


def _exit_text(column: int, target: str) -> str:
    keyword = "EXIT"
    return (
        keyword
        + fill_missing_spaces(PERFORM_TARGET_COLUMN, column + len(keyword))
        + target
        + separator_for_column(column)
    )


def exit_paragraph_completion(line_index: int, character: int, line: str) -> CompletionItem:
    column = find_word_start(line, character) + 1
    return _snippet(
        line_index,
        character,
        line,
        label="EXIT PARAGRAPH command",
        detail="Generates EXIT PARAGRAPH to leave the current paragraph",
        text=_exit_text(column, "PARAGRAPH"),
        filter_text="EXIT PARAGRAPH XH",
    )


def exit_perform_completion(line_index: int, character: int, line: str) -> CompletionItem:
    column = find_word_start(line, character) + 1
    return _snippet(
        line_index,
        character,
        line,
        label="EXIT PERFORM command",
        detail="Generates EXIT PERFORM to leave the current loop",
        text=_exit_text(column, "PERFORM"),
        filter_text="EXIT PERFORM XP",
    )


def set_completion(line_index: int, character: int, line: str) -> CompletionItem:
    column = find_word_start(line, character) + 1
    keyword = "set"
    text = keyword + fill_missing_spaces(OPERAND_COLUMN, column + len(keyword)) + "${0}"
    return _snippet(
        line_index,
        character,
        line,
        label="SET command",
        detail="Generates SET with the cursor on the first variable",
        text=text,
        filter_text="set",
    )


def move_completion(line_index: int, character: int, line: str) -> CompletionItem:
    keyword = "move"
    future_line = replace_last_word(line[:character], keyword)
    text = keyword + fill_spaces_from_word_end(OPERAND_COLUMN, len(future_line) - 1, future_line) + "${0}"
    return _snippet(
        line_index,
        character,
        line,
        label="MOVE command",
        detail="Generates MOVE with the cursor on the first variable",
        text=text,
        filter_text="move mv",
    )


KEYWORD_SNIPPETS: tuple[SnippetFactory, ...] = (
    perform_completion,
    exit_paragraph_completion,
    exit_perform_completion,
    move_completion,
    set_completion,
)


def keyword_completions(line_index: int, character: int, line: str) -> list[CompletionItem]:
    """All statement snippets for the cursor position."""
    return [factory(line_index, character, line) for factory in KEYWORD_SNIPPETS]
